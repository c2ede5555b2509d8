"""
Resource naming conventions for consistent Azure resource names.

Follows pattern: {project}-{environment}-{resource}
"""

import re
from dataclasses import dataclass

# Pulumi appends an 8 character random suffix to auto-named resources and
# storage account names are capped at 24 characters.
_AUTONAME_SUFFIX_LENGTH = 8
_STORAGE_ACCOUNT_MAX_LENGTH = 24


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for Azure resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'vnet', 'lb')

        Returns:
            Formatted resource name
        """
        return f"{self.project}-{self.environment}-{resource}"

    def storage_account_name(self, suffix: str = "storage") -> str:
        """
        Generate a storage account logical name.

        Storage account names allow only lowercase letters and digits, and the
        auto-naming suffix must still fit in 24 characters.

        Args:
            suffix: Name suffix (e.g., 'storage')

        Returns:
            Compact lowercase alphanumeric name
        """
        raw = f"{self.project}{self.environment}{suffix}".lower()
        compact = re.sub(r"[^a-z0-9]", "", raw)
        return compact[: _STORAGE_ACCOUNT_MAX_LENGTH - _AUTONAME_SUFFIX_LENGTH]

    def computer_name_prefix(self) -> str:
        """Generate the scale set computer name prefix (e.g., 'nextcloudvm-')."""
        return f"{self.project}vm-"
