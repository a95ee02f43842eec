from __future__ import annotations

"""
Domain Exceptions.

Errors that abort a whole generation run. Per-directory read failures
are not represented here: they are logged and absorbed by the tree builder.
"""


class StructureGeneratorError(Exception):
    """Base class for fatal generation errors."""


class InvalidRootError(StructureGeneratorError):
    """The scan root does not exist or is not a directory."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason
