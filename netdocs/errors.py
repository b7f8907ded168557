"""Exception hierarchy shared across netdocs components."""

from __future__ import annotations


class NetDocsError(RuntimeError):
    """Base class for errors raised by netdocs."""


class SetupError(NetDocsError):
    """Raised when the corpus checkouts required for a run are missing."""


class ConfigError(NetDocsError):
    """Raised when the configuration file cannot be parsed."""


class MalformedDocument(NetDocsError):
    """Raised when a corpus document cannot be matched or parsed.

    Callers treat this as recoverable: the page is skipped with a warning.
    """


class ContractViolation(NetDocsError):
    """Raised when ingestion order is broken or an identifier was never indexed.

    These indicate a caller bug and must not be swallowed, since continuing
    would leave the entity table inconsistent.
    """


__all__ = [
    "ConfigError",
    "ContractViolation",
    "MalformedDocument",
    "NetDocsError",
    "SetupError",
]
