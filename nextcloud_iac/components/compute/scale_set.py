"""
VM Scale Set Component running the Nextcloud container.

Key Components:
1. SKU: VM size + initial capacity. Autoscale takes over the instance count
   after creation.
2. Upgrade Policy (Automatic): Model changes roll out to existing instances.
3. OS Profile: Admin credentials and, in custom_data mode, the base64 boot
   script that cloud-init runs ONCE at first boot.
4. Storage Profile: Ubuntu 24.04 LTS image, Standard_LRS OS disk and an
   empty data disk at LUN 0.
5. Network Profile: One primary NIC per instance in the NSG-protected subnet,
   registered in the load balancer backend pool.
6. Extension Profile (extension mode only): CustomScript extension carrying
   the same base64 script in protected settings instead of custom data.

The boot script embeds the storage account name, primary key and the public
IP, so it is rendered inside Output.all(...).apply once all three resolve.
"""

from dataclasses import dataclass

import pulumi
from pulumi_azure_native import compute

from nextcloud_iac.configs.base import EnvironmentConfig
from nextcloud_iac.configs.constants import (
    CUSTOM_SCRIPT_EXTENSION,
    VM_DEFAULTS,
    VM_IMAGE,
)
from nextcloud_iac.provisioning.boot_script import (
    ContainerSpec,
    FileShareMount,
    encode_custom_data,
    render_boot_script,
)
from nextcloud_iac.utils.tags import create_tags


@dataclass
class ScaleSetOutputs:
    """Output values from scale set component."""
    scale_set_id: pulumi.Output[str]
    scale_set_name: pulumi.Output[str]


def build_boot_script(
    account_name: pulumi.Input[str],
    account_key: pulumi.Input[str],
    share_name: pulumi.Input[str],
    public_ip_address: pulumi.Input[str],
    container_image: str,
) -> pulumi.Output[str]:
    """
    Render the boot script from resolved storage and network values.

    Returns:
        Output of the base64-encoded script (secret, since it holds the key)
    """
    def _render(args: list[str]) -> str:
        name, key, share, ip_address = args
        script = render_boot_script(
            FileShareMount(account_name=name, account_key=key, share_name=share),
            ContainerSpec(
                image=container_image,
                environment={"TRUSTED_PROXIES": ip_address},
            ),
        )
        return encode_custom_data(script)

    return pulumi.Output.secret(
        pulumi.Output.all(account_name, account_key, share_name, public_ip_address).apply(_render)
    )


class ScaleSetComponent(pulumi.ComponentResource):
    """
    Virtual machine scale set behind the public load balancer.
    """

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        resource_group_name: pulumi.Input[str],
        location: pulumi.Input[str],
        subnet_id: pulumi.Input[str],
        nsg_id: pulumi.Input[str],
        backend_pool_id: pulumi.Input[str],
        custom_data: pulumi.Input[str],
        computer_name_prefix: str = str(VM_DEFAULTS["computer_name_prefix"]),
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:ScaleSet", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        disk_type = str(VM_DEFAULTS["disk_storage_type"])

        extension_profile = None
        if config.uses_custom_script_extension:
            pulumi.log.info("Delivering boot script through the CustomScript extension")
            extension_profile = compute.VirtualMachineScaleSetExtensionProfileArgs(
                extensions=[
                    compute.VirtualMachineScaleSetExtensionArgs(
                        name=CUSTOM_SCRIPT_EXTENSION["name"],
                        publisher=CUSTOM_SCRIPT_EXTENSION["publisher"],
                        type=CUSTOM_SCRIPT_EXTENSION["type"],
                        type_handler_version=CUSTOM_SCRIPT_EXTENSION["type_handler_version"],
                        auto_upgrade_minor_version=True,
                        protected_settings=pulumi.Output.from_input(custom_data).apply(
                            lambda script: {"script": script}
                        ),
                    ),
                ],
            )

        self.scale_set = compute.VirtualMachineScaleSet(
            f"{name}-vmss",
            resource_group_name=resource_group_name,
            location=location,
            sku=compute.SkuArgs(
                name=config.vm_sku,
                tier=str(VM_DEFAULTS["tier"]),
                capacity=config.vm_capacity,
            ),
            upgrade_policy=compute.UpgradePolicyArgs(mode="Automatic"),
            virtual_machine_profile=compute.VirtualMachineScaleSetVMProfileArgs(
                os_profile=compute.VirtualMachineScaleSetOSProfileArgs(
                    computer_name_prefix=computer_name_prefix,
                    admin_username=config.admin_username,
                    admin_password=config.admin_password,
                    custom_data=None if config.uses_custom_script_extension else custom_data,
                ),
                storage_profile=compute.VirtualMachineScaleSetStorageProfileArgs(
                    image_reference=compute.ImageReferenceArgs(**VM_IMAGE),
                    os_disk=compute.VirtualMachineScaleSetOSDiskArgs(
                        create_option="FromImage",
                        managed_disk=compute.VirtualMachineScaleSetManagedDiskParametersArgs(
                            storage_account_type=disk_type,
                        ),
                    ),
                    data_disks=[
                        compute.VirtualMachineScaleSetDataDiskArgs(
                            lun=0,
                            create_option="Empty",
                            disk_size_gb=config.data_disk_size_gb,
                            managed_disk=compute.VirtualMachineScaleSetManagedDiskParametersArgs(
                                storage_account_type=disk_type,
                            ),
                        ),
                    ],
                ),
                network_profile=compute.VirtualMachineScaleSetNetworkProfileArgs(
                    network_interface_configurations=[
                        compute.VirtualMachineScaleSetNetworkConfigurationArgs(
                            name=f"{name}-nic",
                            primary=True,
                            ip_configurations=[
                                compute.VirtualMachineScaleSetIPConfigurationArgs(
                                    name=f"{name}-ipconfig",
                                    subnet=compute.ApiEntityReferenceArgs(id=subnet_id),
                                    load_balancer_backend_address_pools=[
                                        compute.SubResourceArgs(id=backend_pool_id),
                                    ],
                                ),
                            ],
                            network_security_group=compute.SubResourceArgs(id=nsg_id),
                        ),
                    ],
                ),
                extension_profile=extension_profile,
            ),
            tags=create_tags(config.environment, f"{name}-vmss"),
            opts=child_opts,
        )

        self.register_outputs({
            "scale_set_id": self.scale_set.id,
            "scale_set_name": self.scale_set.name,
        })

    def get_outputs(self) -> ScaleSetOutputs:
        """Get scale set output values."""
        return ScaleSetOutputs(
            scale_set_id=self.scale_set.id,
            scale_set_name=self.scale_set.name,
        )
