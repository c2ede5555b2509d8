"""
Instance provisioning for the scale set.

Components:
- render_boot_script: first-boot script (Docker, SMB mount, app container)
- encode_custom_data: base64 payload for custom data / CustomScript
"""

from nextcloud_iac.provisioning.boot_script import (
    ContainerSpec,
    FileShareMount,
    encode_custom_data,
    render_boot_script,
)

__all__ = [
    "ContainerSpec",
    "FileShareMount",
    "encode_custom_data",
    "render_boot_script",
]
