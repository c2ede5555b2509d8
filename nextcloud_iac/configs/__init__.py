"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from nextcloud_iac.configs.base import EnvironmentConfig
from nextcloud_iac.configs.environment import get_config
from nextcloud_iac.configs.constants import (
    VNET_CIDR,
    SUBNET_CIDR,
    DEFAULT_TAGS,
    LOAD_BALANCER_NAMES,
)

__all__ = [
    "EnvironmentConfig",
    "get_config",
    "VNET_CIDR",
    "SUBNET_CIDR",
    "DEFAULT_TAGS",
    "LOAD_BALANCER_NAMES",
]
