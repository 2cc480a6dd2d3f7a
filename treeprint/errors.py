"""Exceptions raised by treeprint.

Building a tree never fails and searches report "not found" with ``None``,
so the only error condition is an invalid rendering configuration.
"""


class TreePrintError(Exception):
    """Base class for all treeprint errors."""
    pass


class InvalidConfigError(TreePrintError, ValueError):
    """Raised when a RenderConfig (or a global setting) cannot be used."""

    def __init__(self, errors):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__(f"Invalid configuration: {'; '.join(self.errors)}")
