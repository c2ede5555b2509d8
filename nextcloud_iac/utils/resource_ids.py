"""
ARM resource id builders.

Load balancing rules must reference the frontend, backend pool and probe of
the load balancer being created, so their ids are assembled from the
subscription, resource group and the explicit load balancer name.
"""

import pulumi

LOAD_BALANCER_CHILD_TYPES = (
    "frontendIPConfigurations",
    "backendAddressPools",
    "probes",
    "loadBalancingRules",
)


def load_balancer_id(
    subscription_id: str,
    resource_group_name: str,
    load_balancer_name: str,
) -> str:
    """Build the ARM id of a load balancer."""
    return (
        f"/subscriptions/{subscription_id}"
        f"/resourceGroups/{resource_group_name}"
        f"/providers/Microsoft.Network/loadBalancers/{load_balancer_name}"
    )


def load_balancer_child_id(
    subscription_id: str,
    resource_group_name: str,
    load_balancer_name: str,
    child_type: str,
    child_name: str,
) -> str:
    """
    Build the ARM id of a load balancer child resource.

    Args:
        subscription_id: Azure subscription id
        resource_group_name: Resolved resource group name
        load_balancer_name: Load balancer name
        child_type: One of LOAD_BALANCER_CHILD_TYPES
        child_name: Name of the child (e.g., 'BackEndPools')

    Returns:
        Fully-qualified ARM id

    Raises:
        ValueError: If child_type is not a load balancer child collection
    """
    if child_type not in LOAD_BALANCER_CHILD_TYPES:
        raise ValueError(f"Unknown load balancer child type: {child_type}")
    parent = load_balancer_id(subscription_id, resource_group_name, load_balancer_name)
    return f"{parent}/{child_type}/{child_name}"


def load_balancer_child_id_output(
    subscription_id: pulumi.Input[str],
    resource_group_name: pulumi.Input[str],
    load_balancer_name: str,
    child_type: str,
    child_name: str,
) -> pulumi.Output[str]:
    """Output variant of load_balancer_child_id for unresolved inputs."""
    return pulumi.Output.all(subscription_id, resource_group_name).apply(
        lambda args: load_balancer_child_id(
            args[0], args[1], load_balancer_name, child_type, child_name
        )
    )
