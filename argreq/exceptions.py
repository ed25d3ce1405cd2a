"""Exceptions for argreq."""

from __future__ import annotations


class RequirementError(Exception):
    """An argument did not meet its requirement."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(RequirementError, ValueError):
    """Argument does not meet its requirement."""


class IndexOutOfRangeError(RequirementError, IndexError):
    """Index does not meet its requirement."""
