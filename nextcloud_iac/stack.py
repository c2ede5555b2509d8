"""
Stack assembly for the Nextcloud scale set.

Instantiates all component resources in dependency order:
1. Resource Group
2. Storage Account + File Share (+ primary key)
3. VNet / Subnet / NSG
4. Public IP + Load Balancer
5. Boot script → VM Scale Set
6. Autoscale Setting

Kept apart from __main__ so it can run under Pulumi mocks.
"""

from dataclasses import dataclass

import pulumi
from pulumi_azure_native import resources

from nextcloud_iac.configs.base import EnvironmentConfig
from nextcloud_iac.utils.naming import ResourceNamer
from nextcloud_iac.utils.tags import create_tags

# Storage
from nextcloud_iac.components.storage.file_share import StorageComponent

# Networking
from nextcloud_iac.components.networking.vnet import NetworkComponent
from nextcloud_iac.components.networking.load_balancer import LoadBalancerComponent

# Compute
from nextcloud_iac.components.compute.scale_set import ScaleSetComponent, build_boot_script
from nextcloud_iac.components.compute.autoscale import AutoscaleComponent


@dataclass
class NextcloudStack:
    """Resources declared by deploy_stack."""
    resource_group: resources.ResourceGroup
    storage: StorageComponent
    network: NetworkComponent
    load_balancer: LoadBalancerComponent
    scale_set: ScaleSetComponent
    autoscale: AutoscaleComponent
    custom_data: pulumi.Output[str]

    def outputs(self) -> dict[str, pulumi.Output[str]]:
        """Values exported from the stack."""
        storage_outputs = self.storage.get_outputs()
        lb_outputs = self.load_balancer.get_outputs()
        return {
            "public_ip_address": lb_outputs.public_ip_address,
            "resource_group_name": self.resource_group.name,
            "storage_account_name": storage_outputs.account_name,
            "file_share_name": storage_outputs.share_name,
            "load_balancer_name": lb_outputs.load_balancer_name,
            "scale_set_name": self.scale_set.get_outputs().scale_set_name,
        }


def deploy_stack(config: EnvironmentConfig, project: str = "nextcloud") -> NextcloudStack:
    """
    Declare every resource of the Nextcloud scale set.

    Args:
        config: Validated environment configuration
        project: Project prefix for resource names

    Returns:
        NextcloudStack holding the declared resources
    """
    namer = ResourceNamer(project=project, environment=config.environment)
    base_name = namer.name("").rstrip("-")

    pulumi.log.info(
        f"Scale set: {config.vm_sku} x{config.vm_capacity}, "
        f"autoscale {config.autoscale_minimum}-{config.autoscale_maximum}, "
        f"ports {list(config.allowed_ports)}"
    )

    # --- Layer 1: Resource Group ---
    resource_group = resources.ResourceGroup(
        namer.name("rg"),
        location=config.location,
        tags=create_tags(config.environment, namer.name("rg")),
    )

    # --- Layer 2: Storage ---
    storage = StorageComponent(
        name=base_name,
        environment=config.environment,
        account_name=namer.storage_account_name(),
        resource_group_name=resource_group.name,
        location=resource_group.location,
        share_quota_gb=config.share_quota_gb,
        protect=config.is_production,
    )
    storage_outputs = storage.get_outputs()

    # --- Layer 3: Networking ---
    network = NetworkComponent(
        name=base_name,
        environment=config.environment,
        resource_group_name=resource_group.name,
        location=resource_group.location,
        allowed_ports=config.allowed_ports,
    )
    network_outputs = network.get_outputs()

    load_balancer = LoadBalancerComponent(
        name=base_name,
        environment=config.environment,
        subscription_id=config.subscription_id,
        resource_group_name=resource_group.name,
        location=resource_group.location,
    )
    lb_outputs = load_balancer.get_outputs()

    # --- Layer 4: Compute ---
    # Storage key and public IP are resolved before the script is rendered
    custom_data = build_boot_script(
        account_name=storage_outputs.account_name,
        account_key=storage_outputs.primary_key,
        share_name=storage_outputs.share_name,
        public_ip_address=lb_outputs.public_ip_address,
        container_image=config.container_image,
    )

    scale_set = ScaleSetComponent(
        name=base_name,
        config=config,
        resource_group_name=resource_group.name,
        location=resource_group.location,
        subnet_id=network_outputs.subnet_id,
        nsg_id=network_outputs.nsg_id,
        backend_pool_id=lb_outputs.backend_pool_id,
        custom_data=custom_data,
        computer_name_prefix=namer.computer_name_prefix(),
    )

    autoscale = AutoscaleComponent(
        name=base_name,
        config=config,
        resource_group_name=resource_group.name,
        location=resource_group.location,
        scale_set_id=scale_set.get_outputs().scale_set_id,
    )

    return NextcloudStack(
        resource_group=resource_group,
        storage=storage,
        network=network,
        load_balancer=load_balancer,
        scale_set=scale_set,
        autoscale=autoscale,
        custom_data=custom_data,
    )
