"""Exceptions raised for programming errors in handler and registry setup.

Lookups never raise for missing or unknown input; these only signal broken
initialization code.
"""


class RegistryError(Exception):
    """Base class for pattern registry errors."""


class InvalidRegistrationError(RegistryError, ValueError):
    """A matcher was registered with a missing type, a non-callable, or a bad regex."""


class RegistryFrozenError(RegistryError, RuntimeError):
    """A matcher was registered after the registry was frozen for queries."""
