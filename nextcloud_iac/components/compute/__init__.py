"""
Compute components for the scale set.

Components:
- ScaleSetComponent: VM scale set running the Nextcloud container
- AutoscaleComponent: CPU-threshold autoscale setting
"""

from nextcloud_iac.components.compute.scale_set import (
    ScaleSetComponent,
    ScaleSetOutputs,
    build_boot_script,
)
from nextcloud_iac.components.compute.autoscale import AutoscaleComponent, AutoscaleOutputs

__all__ = [
    "ScaleSetComponent",
    "ScaleSetOutputs",
    "build_boot_script",
    "AutoscaleComponent",
    "AutoscaleOutputs",
]
