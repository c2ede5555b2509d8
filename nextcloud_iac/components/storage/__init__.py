"""
Storage components for the shared Nextcloud data.

Components:
- StorageComponent: Storage account, SMB file share and primary key
"""

from nextcloud_iac.components.storage.file_share import StorageComponent, StorageOutputs

__all__ = [
    "StorageComponent",
    "StorageOutputs",
]
