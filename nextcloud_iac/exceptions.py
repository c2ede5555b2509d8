"""
Exception hierarchy for the Nextcloud infrastructure program.

Errors raised here surface before any resource is declared, so a bad stack
config never produces a half-built resource graph.
"""

from typing import Any


class NextcloudInfraError(Exception):
    """Base exception for all infrastructure program errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(NextcloudInfraError):
    """Raised when stack configuration values are inconsistent."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            key: Stack config key that failed validation
            details: Additional context
        """
        details = details or {}
        if key:
            details["key"] = key
        super().__init__(message, details)


class BootScriptError(NextcloudInfraError):
    """Raised when the instance boot script cannot be rendered or delivered."""
