"""
Infrastructure constants for the Nextcloud scale set.

Contains CIDR blocks, load balancer child names, probe/rule settings,
VM image, mount and container defaults.
"""

from typing import Final

# Virtual network
VNET_CIDR: Final[str] = "10.0.0.0/16"
SUBNET_CIDR: Final[str] = "10.0.1.0/24"

DEFAULT_LOCATION: Final[str] = "northeurope"

# Load balancer children are referenced by ARM id, so their names are fixed
LOAD_BALANCER_NAMES: Final[dict[str, str]] = {
    "frontend": "FrontendIPConfig",
    "backend_pool": "BackEndPools",
    "probe": "probe-lb",
    "rule": "rulelb",
}

HEALTH_PROBE: Final[dict[str, int | str]] = {
    "protocol": "Http",
    "port": 80,
    "request_path": "/",
    "interval_in_seconds": 15,
    "number_of_probes": 2,
    "probe_threshold": 1,
}

LOAD_BALANCING_RULE: Final[dict[str, int | str | bool]] = {
    "protocol": "Tcp",
    "frontend_port": 80,
    "backend_port": 80,
    "idle_timeout_in_minutes": 15,
    "enable_floating_ip": False,
    "load_distribution": "Default",
}

# NSG rule priorities (lower wins)
NSG_PRIORITIES: Final[dict[str, int]] = {
    "allow": 100,
    "deny_all": 200,
}

DEFAULT_ALLOWED_PORTS: Final[tuple[int, ...]] = (80, 22, 3389)

# Scale set defaults
VM_DEFAULTS: Final[dict[str, str | int]] = {
    "sku": "Standard_DS2_v2",
    "tier": "Standard",
    "capacity": 1,
    "admin_username": "adminuser",
    "computer_name_prefix": "nextcloudvm-",
    "data_disk_size_gb": 1024,
    "disk_storage_type": "Standard_LRS",
}

VM_IMAGE: Final[dict[str, str]] = {
    "publisher": "Canonical",
    "offer": "ubuntu-24_04-lts",
    "sku": "server",
    "version": "latest",
}

# Autoscale defaults
AUTOSCALE_DEFAULTS: Final[dict[str, int]] = {
    "minimum": 1,
    "maximum": 5,
    "default": 2,
    "scale_out_cpu_threshold": 75,
    "scale_in_cpu_threshold": 25,
}

AUTOSCALE_METRIC: Final[dict[str, str]] = {
    "metric_name": "Percentage CPU",
    "time_grain": "PT1M",
    "statistic": "Average",
    "time_window": "PT5M",
    "time_aggregation": "Average",
    "cooldown": "PT5M",
}

# File share and mount
SHARE_NAME: Final[str] = "nextcloud"
MOUNT_POINT: Final[str] = "/mnt/nextcloud"
SMB_CREDENTIALS_DIR: Final[str] = "/etc/smbcredentials"
MOUNT_OPTIONS: Final[tuple[str, ...]] = (
    "dir_mode=0777",
    "file_mode=0777",
    "serverino",
    "nosharesock",
    "actimeo=30",
)
FILE_ENDPOINT_SUFFIX: Final[str] = "file.core.windows.net"

# Application container
CONTAINER_IMAGE: Final[str] = "nextcloud:30.0.4-apache"
CONTAINER_PORT: Final[int] = 80
CONTAINER_VOLUMES: Final[dict[str, str]] = {
    "nextcloud": "/var/www/html",
    "custom_apps": "/var/www/html/custom_apps",
    "config": "/var/www/html/config",
    "data": "/var/www/html/data",
}

# Boot script delivery
BOOT_SCRIPT_DELIVERY_MODES: Final[tuple[str, ...]] = ("custom_data", "extension")
CUSTOM_DATA_MAX_BYTES: Final[int] = 65535
CUSTOM_SCRIPT_EXTENSION: Final[dict[str, str]] = {
    "name": "nextcloud-init",
    "publisher": "Microsoft.Azure.Extensions",
    "type": "CustomScript",
    "type_handler_version": "2.1",
}

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": "nextcloud",
    "ManagedBy": "pulumi",
}
