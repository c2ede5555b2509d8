"""
Autoscale Setting Component for the scale set.

One profile, two CPU rules evaluated on the scale set's own
"Percentage CPU" metric (1 minute grain, averaged over 5 minutes):
- Scale out: average CPU above the out-threshold -> add 1 instance.
- Scale in: average CPU below the in-threshold -> remove 1 instance.
Both rules share a 5 minute cooldown so one scale action settles before the
next is considered. The gap between the thresholds keeps the set from
flapping.
"""

from dataclasses import dataclass

import pulumi
from pulumi_azure_native import insights

from nextcloud_iac.configs.base import EnvironmentConfig
from nextcloud_iac.configs.constants import AUTOSCALE_METRIC
from nextcloud_iac.utils.tags import create_tags


@dataclass
class AutoscaleOutputs:
    """Output values from autoscale component."""
    autoscale_setting_id: pulumi.Output[str]


def _cpu_rule(
    scale_set_id: pulumi.Input[str],
    operator: str,
    threshold: int,
    direction: str,
) -> insights.ScaleRuleArgs:
    return insights.ScaleRuleArgs(
        metric_trigger=insights.MetricTriggerArgs(
            metric_name=AUTOSCALE_METRIC["metric_name"],
            metric_resource_uri=scale_set_id,
            time_grain=AUTOSCALE_METRIC["time_grain"],
            statistic=AUTOSCALE_METRIC["statistic"],
            time_window=AUTOSCALE_METRIC["time_window"],
            time_aggregation=AUTOSCALE_METRIC["time_aggregation"],
            operator=operator,
            threshold=threshold,
        ),
        scale_action=insights.ScaleActionArgs(
            direction=direction,
            type="ChangeCount",
            value="1",
            cooldown=AUTOSCALE_METRIC["cooldown"],
        ),
    )


class AutoscaleComponent(pulumi.ComponentResource):
    """
    CPU-driven autoscale setting targeting a scale set.
    """

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        resource_group_name: pulumi.Input[str],
        location: pulumi.Input[str],
        scale_set_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:Autoscale", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.autoscale_setting = insights.AutoscaleSetting(
            f"{name}-autoscale",
            resource_group_name=resource_group_name,
            location=location,
            target_resource_uri=scale_set_id,
            enabled=True,
            profiles=[
                insights.AutoscaleProfileArgs(
                    name="autoscale-cpu",
                    capacity=insights.ScaleCapacityArgs(
                        minimum=str(config.autoscale_minimum),
                        maximum=str(config.autoscale_maximum),
                        default=str(config.autoscale_default),
                    ),
                    rules=[
                        _cpu_rule(
                            scale_set_id, "GreaterThan", config.scale_out_cpu_threshold, "Increase"
                        ),
                        _cpu_rule(
                            scale_set_id, "LessThan", config.scale_in_cpu_threshold, "Decrease"
                        ),
                    ],
                ),
            ],
            tags=create_tags(config.environment, f"{name}-autoscale"),
            opts=child_opts,
        )

        self.register_outputs({
            "autoscale_setting_id": self.autoscale_setting.id,
        })

    def get_outputs(self) -> AutoscaleOutputs:
        """Get autoscale output values."""
        return AutoscaleOutputs(
            autoscale_setting_id=self.autoscale_setting.id,
        )
