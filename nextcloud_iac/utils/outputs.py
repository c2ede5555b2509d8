"""
Stack output helpers.

Writes resolved stack outputs to a dotenv file so local tooling can reach the
deployed load balancer without calling `pulumi stack output`.
"""

from pathlib import Path
from typing import Any

import pulumi


def format_env(values: dict[str, Any]) -> str:
    """
    Render output values as dotenv lines.

    Args:
        values: Resolved output values keyed by export name

    Returns:
        Dotenv file content with upper-cased keys, sorted for stable diffs
    """
    lines = []
    for key in sorted(values):
        value = values[key]
        lines.append(f"{key.upper()}={'' if value is None else value}")
    return "\n".join(lines) + "\n"


def write_outputs_to_env(
    outputs: dict[str, pulumi.Input[Any]],
    filename: str,
    directory: Path | None = None,
) -> pulumi.Output[str] | None:
    """
    Write stack outputs to a dotenv file once they resolve.

    Skipped during previews, where most outputs are still unknown.

    Args:
        outputs: Export name to value/Output mapping
        filename: Target file name (e.g., 'infrastructure.env')
        directory: Target directory, defaults to the working directory

    Returns:
        Output resolving to the written path, or None during preview
    """
    if pulumi.runtime.is_dry_run():
        return None

    path = (directory or Path.cwd()) / filename

    def _write(values: dict[str, Any]) -> str:
        path.write_text(format_env(values), encoding="utf-8")
        pulumi.log.info(f"Wrote {len(values)} outputs to {path}")
        return str(path)

    return pulumi.Output.all(**outputs).apply(_write)
