"""Exceptions for malformed access-control input.

These are programming or configuration errors, not access denials.
Denials are ordinary ``Decision`` values; anything raised from here must
propagate to the caller unchanged.
"""

from typing import Any, Optional


class PolicyConfigurationError(ValueError):
    """Base class for malformed actors, requirements and catalogs."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidActorError(PolicyConfigurationError):
    """Raised when an Actor is built with an unknown role or permission."""


class InvalidRequirementError(PolicyConfigurationError):
    """Raised when a Requirement or TargetScope is malformed."""


class CatalogError(PolicyConfigurationError):
    """Raised when a navigation catalog or route rule file is malformed."""
