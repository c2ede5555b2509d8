"""
Networking components for the scale set.

Components:
- NetworkComponent: VNet, subnet, NSG and its inbound rules
- LoadBalancerComponent: Public IP and Standard load balancer
"""

from nextcloud_iac.components.networking.vnet import NetworkComponent, NetworkOutputs
from nextcloud_iac.components.networking.load_balancer import (
    LoadBalancerComponent,
    LoadBalancerOutputs,
)

__all__ = [
    "NetworkComponent",
    "NetworkOutputs",
    "LoadBalancerComponent",
    "LoadBalancerOutputs",
]
