"""
Pulumi program entry point for the Nextcloud scale set.

Loads stack configuration, declares the stack (see nextcloud_iac.stack),
then exports the public IP and resource names and mirrors them into
infrastructure.env for local tooling.
"""

import pulumi

from nextcloud_iac.configs.environment import get_config
from nextcloud_iac.stack import deploy_stack
from nextcloud_iac.utils.outputs import write_outputs_to_env


def main() -> None:
    """Deploy the Nextcloud scale set infrastructure."""
    # Load configuration
    config = get_config()
    pulumi.log.info(f"Loaded subscription ID: {config.subscription_id}")

    stack = deploy_stack(config)
    outputs = stack.outputs()

    # Write outputs to .env file for local development
    write_outputs_to_env(outputs, "infrastructure.env")

    # Export to Pulumi stack
    for key, value in outputs.items():
        pulumi.export(key, value)


# Execute
main()
