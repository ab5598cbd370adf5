"""Exceptions raised by hypermodel collaborators.

The builders themselves never raise; errors come from the model and wrapper
types they compose and propagate to the caller untouched.
"""

from __future__ import annotations


class HypermodelError(Exception):
    """Base class for hypermodel errors."""


class MissingLinkError(HypermodelError, LookupError):
    """A link required by the caller is not present on a representation."""

    def __init__(self, rel: object, available: list[str] | None = None):
        self.rel = rel
        self.available = available or []
        message = f"No link with relation '{rel}' found"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class EmptyCollectionError(HypermodelError, ValueError):
    """An empty collection was wrapped without a relation to embed it under."""
