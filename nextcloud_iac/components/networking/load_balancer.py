"""
Public Load Balancer Component for the scale set.

The 4 Children (declared inline on the LoadBalancer resource):
1. Frontend IP Configuration: Binds the static Standard public IP.
2. Backend Address Pool: Scale set NICs join it, so new instances start
   receiving traffic as soon as the probe marks them healthy.
3. Health Probe: HTTP GET / on port 80 every 15s. An instance leaves the
   pool after failing the probe.
4. Load Balancing Rule: TCP 80 -> 80. Refers to the three children above by
   ARM id. Those ids are built from the subscription, the resource group name
   and the EXPLICIT load balancer name, because the load balancer's own id is
   not known until the resource exists.

Standard SKU is required on both the public IP and the load balancer (they
must match), and Standard public IPs must be statically allocated.
"""

from dataclasses import dataclass

import pulumi
from pulumi_azure_native import network

from nextcloud_iac.configs.constants import (
    HEALTH_PROBE,
    LOAD_BALANCER_NAMES,
    LOAD_BALANCING_RULE,
)
from nextcloud_iac.utils.resource_ids import load_balancer_child_id_output
from nextcloud_iac.utils.tags import create_tags


@dataclass
class LoadBalancerOutputs:
    """Output values from load balancer component."""
    load_balancer_name: pulumi.Output[str]
    backend_pool_id: pulumi.Output[str]
    public_ip_address: pulumi.Output[str]


class LoadBalancerComponent(pulumi.ComponentResource):
    """
    Internet-facing Standard load balancer in front of the scale set.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        subscription_id: pulumi.Input[str],
        resource_group_name: pulumi.Input[str],
        location: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:LoadBalancer", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        lb_name = f"{name}-lb"

        self.public_ip = network.PublicIPAddress(
            f"{name}-pip",
            resource_group_name=resource_group_name,
            location=location,
            public_ip_allocation_method="Static",
            sku=network.PublicIPAddressSkuArgs(name="Standard"),
            tags=create_tags(environment, f"{name}-pip"),
            opts=child_opts,
        )

        def child_id(child_type: str, key: str) -> pulumi.Output[str]:
            return load_balancer_child_id_output(
                subscription_id,
                resource_group_name,
                lb_name,
                child_type,
                LOAD_BALANCER_NAMES[key],
            )

        self.load_balancer = network.LoadBalancer(
            lb_name,
            load_balancer_name=lb_name,
            resource_group_name=resource_group_name,
            location=location,
            sku=network.LoadBalancerSkuArgs(name="Standard"),
            frontend_ip_configurations=[
                network.FrontendIPConfigurationArgs(
                    name=LOAD_BALANCER_NAMES["frontend"],
                    public_ip_address=network.PublicIPAddressArgs(id=self.public_ip.id),
                ),
            ],
            backend_address_pools=[
                network.BackendAddressPoolArgs(name=LOAD_BALANCER_NAMES["backend_pool"]),
            ],
            probes=[
                network.ProbeArgs(
                    name=LOAD_BALANCER_NAMES["probe"],
                    protocol=HEALTH_PROBE["protocol"],
                    port=HEALTH_PROBE["port"],
                    request_path=HEALTH_PROBE["request_path"],
                    interval_in_seconds=HEALTH_PROBE["interval_in_seconds"],
                    number_of_probes=HEALTH_PROBE["number_of_probes"],
                    probe_threshold=HEALTH_PROBE["probe_threshold"],
                ),
            ],
            load_balancing_rules=[
                network.LoadBalancingRuleArgs(
                    name=LOAD_BALANCER_NAMES["rule"],
                    protocol=LOAD_BALANCING_RULE["protocol"],
                    frontend_port=LOAD_BALANCING_RULE["frontend_port"],
                    backend_port=LOAD_BALANCING_RULE["backend_port"],
                    idle_timeout_in_minutes=LOAD_BALANCING_RULE["idle_timeout_in_minutes"],
                    enable_floating_ip=LOAD_BALANCING_RULE["enable_floating_ip"],
                    load_distribution=LOAD_BALANCING_RULE["load_distribution"],
                    frontend_ip_configuration=network.SubResourceArgs(
                        id=child_id("frontendIPConfigurations", "frontend"),
                    ),
                    backend_address_pool=network.SubResourceArgs(
                        id=child_id("backendAddressPools", "backend_pool"),
                    ),
                    probe=network.SubResourceArgs(
                        id=child_id("probes", "probe"),
                    ),
                ),
            ],
            tags=create_tags(environment, lb_name),
            opts=child_opts,
        )

        # The scale set joins the pool through the created LB's id
        self.backend_pool_id = pulumi.Output.concat(
            self.load_balancer.id,
            "/backendAddressPools/",
            LOAD_BALANCER_NAMES["backend_pool"],
        )

        self.register_outputs({
            "load_balancer_name": self.load_balancer.name,
            "backend_pool_id": self.backend_pool_id,
            "public_ip_address": self.public_ip.ip_address,
        })

    def get_outputs(self) -> LoadBalancerOutputs:
        """Get load balancer output values."""
        return LoadBalancerOutputs(
            load_balancer_name=self.load_balancer.name,
            backend_pool_id=self.backend_pool_id,
            public_ip_address=self.public_ip.ip_address,
        )
