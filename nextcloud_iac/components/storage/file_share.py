"""
Storage Component for the Nextcloud data share.

Steps:
1. Storage Account: Standard_LRS, StorageV2. Pulumi auto-names it from a
   compact logical name (lowercase alphanumerics only, max 24 chars).
2. File Share: SMB share mounted by every scale set instance at boot, so all
   instances serve the same Nextcloud data/config.
3. Primary Key: Fetched with listStorageAccountKeys once BOTH the resource
   group name and account name resolve. Instances use it in their SMB
   credentials file. Marked secret so it never shows in plain text in state
   or CLI output.

Production stacks protect the account from deletion.
"""

from dataclasses import dataclass

import pulumi
from pulumi_azure_native import storage

from nextcloud_iac.configs.constants import SHARE_NAME
from nextcloud_iac.utils.tags import create_tags


@dataclass
class StorageOutputs:
    """Output values from storage component."""
    account_name: pulumi.Output[str]
    share_name: pulumi.Output[str]
    primary_key: pulumi.Output[str]


class StorageComponent(pulumi.ComponentResource):
    """
    Storage account with an SMB file share for shared application data.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        account_name: str,
        resource_group_name: pulumi.Input[str],
        location: pulumi.Input[str],
        share_quota_gb: int | None = None,
        protect: bool = False,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:FileShare", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.account = storage.StorageAccount(
            account_name,
            resource_group_name=resource_group_name,
            location=location,
            sku=storage.SkuArgs(name=storage.SkuName.STANDARD_LRS),
            kind=storage.Kind.STORAGE_V2,
            tags=create_tags(environment, f"{name}-storage"),
            opts=pulumi.ResourceOptions(parent=self, protect=protect),
        )

        self.share = storage.FileShare(
            f"{name}-share",
            resource_group_name=resource_group_name,
            account_name=self.account.name,
            share_name=SHARE_NAME,
            enabled_protocols=storage.EnabledProtocols.SMB,
            share_quota=share_quota_gb,
            opts=child_opts,
        )

        self.primary_key = pulumi.Output.secret(
            pulumi.Output.all(resource_group_name, self.account.name)
            .apply(lambda args: storage.list_storage_account_keys(
                resource_group_name=args[0],
                account_name=args[1],
            ))
            .apply(lambda account_keys: account_keys.keys[0].value)
        )

        self.register_outputs({
            "account_name": self.account.name,
            "share_name": self.share.name,
        })

    def get_outputs(self) -> StorageOutputs:
        """Get storage output values."""
        return StorageOutputs(
            account_name=self.account.name,
            share_name=self.share.name,
            primary_key=self.primary_key,
        )
