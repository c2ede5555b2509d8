"""
Virtual Network Component with a single NSG-protected subnet.

Steps & Architecture:
1. VNet (10.0.0.0/16): Isolated address space for the scale set.
2. Network Security Group: Created BEFORE the subnet so the subnet can be
   bound to it at creation time (no window where the subnet is unprotected).
3. Subnet (10.0.1.0/24): Hosts every scale set NIC.
4. Rules (standalone SecurityRule resources, inbound only):
   - allow (priority 100): configured destination ports from anywhere.
   - deny-all (priority 200): everything else. Lower priority number wins,
     so the allow rule is evaluated first.
"""

from dataclasses import dataclass

import pulumi
from pulumi_azure_native import network

from nextcloud_iac.configs.constants import NSG_PRIORITIES, SUBNET_CIDR, VNET_CIDR
from nextcloud_iac.utils.tags import create_tags


@dataclass
class NetworkOutputs:
    """Output values from network component."""
    vnet_name: pulumi.Output[str]
    subnet_id: pulumi.Output[str]
    nsg_id: pulumi.Output[str]


class NetworkComponent(pulumi.ComponentResource):
    """
    Virtual network, subnet and network security group for the scale set.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        resource_group_name: pulumi.Input[str],
        location: pulumi.Input[str],
        allowed_ports: tuple[int, ...],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:Network", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.vnet = network.VirtualNetwork(
            f"{name}-vnet",
            resource_group_name=resource_group_name,
            location=location,
            address_space=network.AddressSpaceArgs(address_prefixes=[VNET_CIDR]),
            tags=create_tags(environment, f"{name}-vnet"),
            opts=child_opts,
        )

        self.nsg = network.NetworkSecurityGroup(
            f"{name}-nsg",
            resource_group_name=resource_group_name,
            location=location,
            tags=create_tags(environment, f"{name}-nsg"),
            opts=child_opts,
        )

        self.subnet = network.Subnet(
            f"{name}-subnet",
            resource_group_name=resource_group_name,
            virtual_network_name=self.vnet.name,
            address_prefix=SUBNET_CIDR,
            network_security_group=network.NetworkSecurityGroupArgs(id=self.nsg.id),
            opts=child_opts,
        )

        self._create_rules(name, resource_group_name, allowed_ports, child_opts)

        self.register_outputs({
            "vnet_name": self.vnet.name,
            "subnet_id": self.subnet.id,
            "nsg_id": self.nsg.id,
        })

    def _create_rules(
        self,
        name: str,
        resource_group_name: pulumi.Input[str],
        allowed_ports: tuple[int, ...],
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create inbound allow and deny-all rules."""
        self.allow_rule = network.SecurityRule(
            f"{name}-allow-inbound",
            resource_group_name=resource_group_name,
            network_security_group_name=self.nsg.name,
            priority=NSG_PRIORITIES["allow"],
            direction="Inbound",
            access="Allow",
            protocol="*",
            source_port_range="*",
            destination_port_ranges=[str(port) for port in allowed_ports],
            source_address_prefix="*",
            destination_address_prefix="*",
            opts=opts,
        )

        self.deny_all_rule = network.SecurityRule(
            f"{name}-deny-all",
            resource_group_name=resource_group_name,
            network_security_group_name=self.nsg.name,
            priority=NSG_PRIORITIES["deny_all"],
            direction="Inbound",
            access="Deny",
            protocol="*",
            source_port_range="*",
            destination_port_range="*",
            source_address_prefix="*",
            destination_address_prefix="*",
            opts=opts,
        )

    def get_outputs(self) -> NetworkOutputs:
        """Get network output values."""
        return NetworkOutputs(
            vnet_name=self.vnet.name,
            subnet_id=self.subnet.id,
            nsg_id=self.nsg.id,
        )
