"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, tag factories, ARM id builders and output utilities.
"""

from nextcloud_iac.utils.naming import ResourceNamer
from nextcloud_iac.utils.tags import create_tags
from nextcloud_iac.utils.resource_ids import load_balancer_child_id, load_balancer_child_id_output
from nextcloud_iac.utils.outputs import write_outputs_to_env

__all__ = [
    "ResourceNamer",
    "create_tags",
    "load_balancer_child_id",
    "load_balancer_child_id_output",
    "write_outputs_to_env",
]
