# dotrepl.errors - Exception hierarchy
"""
Exceptions raised by dotrepl itself.

Faults raised by user code are not wrapped; the read-loop reports them
as they are.
"""


class DotReplError(Exception):
    """Base class for dotrepl errors."""


class CompletionError(DotReplError):
    """
    A completion attempt hit an internal invariant violation.

    Raised when member introspection does not produce a list. Resolution
    misses are not errors and never raise this.
    """


class ConfigError(DotReplError):
    """A configuration value has the wrong shape."""
