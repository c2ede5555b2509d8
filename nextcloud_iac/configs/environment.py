"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from nextcloud_iac.configs.base import EnvironmentConfig
from nextcloud_iac.configs.constants import (
    AUTOSCALE_DEFAULTS,
    CONTAINER_IMAGE,
    DEFAULT_ALLOWED_PORTS,
    DEFAULT_LOCATION,
    VM_DEFAULTS,
)
from nextcloud_iac.exceptions import ConfigurationError


def _get_int(config: pulumi.Config, key: str, default: int) -> int:
    value = config.get_int(key)
    return default if value is None else value


def _get_ports(config: pulumi.Config) -> tuple[int, ...]:
    """Read allowed_ports as a list of integers (strings like "80" accepted)."""
    raw = config.get_object("allowed_ports")
    if raw is None:
        return DEFAULT_ALLOWED_PORTS
    if not isinstance(raw, list):
        raise ConfigurationError(
            "allowed_ports must be a list of port numbers",
            key="allowed_ports",
            details={"value": raw},
        )
    try:
        return tuple(int(port) for port in raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            "allowed_ports must contain only integers",
            key="allowed_ports",
            details={"value": raw},
        ) from e


def get_config() -> EnvironmentConfig:
    """
    Load environment configuration from Pulumi stack config.

    Returns:
        EnvironmentConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
        ConfigurationError: If values are present but inconsistent
    """
    config = pulumi.Config()
    azure_config = pulumi.Config("azure-native")

    return EnvironmentConfig(
        environment=config.require("environment"),
        subscription_id=azure_config.require("subscriptionId"),
        admin_password=config.require_secret("admin_password"),
        location=config.get("location") or azure_config.get("location") or DEFAULT_LOCATION,
        vm_sku=config.get("vm_sku") or str(VM_DEFAULTS["sku"]),
        vm_capacity=_get_int(config, "vm_capacity", int(VM_DEFAULTS["capacity"])),
        admin_username=config.get("admin_username") or str(VM_DEFAULTS["admin_username"]),
        allowed_ports=_get_ports(config),
        data_disk_size_gb=_get_int(
            config, "data_disk_size_gb", int(VM_DEFAULTS["data_disk_size_gb"])
        ),
        share_quota_gb=config.get_int("share_quota_gb"),
        container_image=config.get("container_image") or CONTAINER_IMAGE,
        autoscale_minimum=_get_int(config, "autoscale_minimum", AUTOSCALE_DEFAULTS["minimum"]),
        autoscale_maximum=_get_int(config, "autoscale_maximum", AUTOSCALE_DEFAULTS["maximum"]),
        autoscale_default=_get_int(config, "autoscale_default", AUTOSCALE_DEFAULTS["default"]),
        scale_out_cpu_threshold=_get_int(
            config, "scale_out_cpu_threshold", AUTOSCALE_DEFAULTS["scale_out_cpu_threshold"]
        ),
        scale_in_cpu_threshold=_get_int(
            config, "scale_in_cpu_threshold", AUTOSCALE_DEFAULTS["scale_in_cpu_threshold"]
        ),
        boot_script_delivery=config.get("boot_script_delivery") or "custom_data",
    )
