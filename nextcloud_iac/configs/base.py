"""
Base configuration dataclass for environment settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

from dataclasses import dataclass

import pulumi

from nextcloud_iac.configs.constants import (
    AUTOSCALE_DEFAULTS,
    BOOT_SCRIPT_DELIVERY_MODES,
    CONTAINER_IMAGE,
    DEFAULT_ALLOWED_PORTS,
    DEFAULT_LOCATION,
    VM_DEFAULTS,
)
from nextcloud_iac.exceptions import ConfigurationError


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Environment-specific configuration for infrastructure deployment.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        subscription_id: Azure subscription that owns the resource group
        admin_password: Scale set admin password (usually a secret Output)
        location: Azure region for every resource
        vm_sku: Scale set VM size
        vm_capacity: Initial scale set instance count
        admin_username: Scale set admin user
        allowed_ports: Inbound destination ports opened by the NSG allow rule
        data_disk_size_gb: Size of the empty data disk attached at LUN 0
        share_quota_gb: File share quota, None for the service default
        container_image: Application container image
        autoscale_minimum: Lowest instance count autoscale may reach
        autoscale_maximum: Highest instance count autoscale may reach
        autoscale_default: Instance count used when metrics are unavailable
        scale_out_cpu_threshold: Average CPU percent above which to add an instance
        scale_in_cpu_threshold: Average CPU percent below which to remove an instance
        boot_script_delivery: "custom_data" or "extension"
    """
    environment: str
    subscription_id: str
    admin_password: pulumi.Input[str]
    location: str = DEFAULT_LOCATION
    vm_sku: str = str(VM_DEFAULTS["sku"])
    vm_capacity: int = int(VM_DEFAULTS["capacity"])
    admin_username: str = str(VM_DEFAULTS["admin_username"])
    allowed_ports: tuple[int, ...] = DEFAULT_ALLOWED_PORTS
    data_disk_size_gb: int = int(VM_DEFAULTS["data_disk_size_gb"])
    share_quota_gb: int | None = None
    container_image: str = CONTAINER_IMAGE
    autoscale_minimum: int = AUTOSCALE_DEFAULTS["minimum"]
    autoscale_maximum: int = AUTOSCALE_DEFAULTS["maximum"]
    autoscale_default: int = AUTOSCALE_DEFAULTS["default"]
    scale_out_cpu_threshold: int = AUTOSCALE_DEFAULTS["scale_out_cpu_threshold"]
    scale_in_cpu_threshold: int = AUTOSCALE_DEFAULTS["scale_in_cpu_threshold"]
    boot_script_delivery: str = "custom_data"

    def __post_init__(self) -> None:
        self._validate_autoscale()
        self._validate_ports()

        if self.boot_script_delivery not in BOOT_SCRIPT_DELIVERY_MODES:
            raise ConfigurationError(
                f"Unknown boot script delivery mode '{self.boot_script_delivery}'",
                key="boot_script_delivery",
                details={"allowed": list(BOOT_SCRIPT_DELIVERY_MODES)},
            )

        if self.data_disk_size_gb < 1:
            raise ConfigurationError(
                "Data disk size must be at least 1 GB",
                key="data_disk_size_gb",
            )

        if self.share_quota_gb is not None and self.share_quota_gb < 1:
            raise ConfigurationError(
                "File share quota must be at least 1 GB",
                key="share_quota_gb",
            )

    def _validate_autoscale(self) -> None:
        """Check capacity ordering and CPU thresholds."""
        capacities = {
            "minimum": self.autoscale_minimum,
            "default": self.autoscale_default,
            "maximum": self.autoscale_maximum,
        }
        if not 1 <= self.autoscale_minimum <= self.autoscale_default <= self.autoscale_maximum:
            raise ConfigurationError(
                "Autoscale capacities must satisfy 1 <= minimum <= default <= maximum",
                key="autoscale_default",
                details=capacities,
            )

        if not self.autoscale_minimum <= self.vm_capacity <= self.autoscale_maximum:
            raise ConfigurationError(
                "Initial scale set capacity must lie within the autoscale range",
                key="vm_capacity",
                details={**capacities, "vm_capacity": self.vm_capacity},
            )

        thresholds = {
            "scale_in": self.scale_in_cpu_threshold,
            "scale_out": self.scale_out_cpu_threshold,
        }
        for name, value in thresholds.items():
            if not 0 <= value <= 100:
                raise ConfigurationError(
                    "CPU thresholds are percentages between 0 and 100",
                    key=f"{name}_cpu_threshold",
                    details=thresholds,
                )

        if self.scale_in_cpu_threshold >= self.scale_out_cpu_threshold:
            raise ConfigurationError(
                "Scale-in threshold must be below scale-out threshold",
                key="scale_in_cpu_threshold",
                details=thresholds,
            )

    def _validate_ports(self) -> None:
        if not self.allowed_ports:
            raise ConfigurationError(
                "At least one inbound port must be allowed",
                key="allowed_ports",
            )
        invalid = [port for port in self.allowed_ports if not 1 <= port <= 65535]
        if invalid:
            raise ConfigurationError(
                "Allowed ports must be between 1 and 65535",
                key="allowed_ports",
                details={"invalid": invalid},
            )

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    @property
    def uses_custom_script_extension(self) -> bool:
        """Check if the boot script is delivered through the CustomScript extension."""
        return self.boot_script_delivery == "extension"
