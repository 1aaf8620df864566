"""
Exceptions raised by the hydrator.

Structural mismatches in API responses are never errors; these cover
misconfiguration and malformed input only.
"""


class HydrationError(Exception):
    """Base class for hydrator errors."""


class InvalidTargetError(HydrationError, TypeError):
    """Raised when a hydration target cannot be resolved to an API node."""


class HydrationDepthError(HydrationError, ValueError):
    """Raised when a response nests deeper than the configured limit."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Response nesting exceeds maximum depth of {max_depth}")


class XMLConversionError(HydrationError, ValueError):
    """Raised when an API response is not well-formed XML."""
