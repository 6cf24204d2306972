# errors.py
from __future__ import annotations


class EnigmaError(Exception):
    """Base class for every error raised by the machine."""


class ConfigurationError(EnigmaError, ValueError):
    """Bad machine settings: unknown wheel, malformed wiring, bad key."""


class InvariantViolation(EnigmaError, RuntimeError):
    """A table or code that can only be wrong through a programming error."""
