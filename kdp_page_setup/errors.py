"""Exceptions raised by page setup resolution and application."""


class PageSetupError(Exception):
    """Base class for all page setup failures."""


class PresetLookupError(PageSetupError, LookupError):
    """Requested size preset does not exist."""

    def __init__(self, name: str, available=None):
        self.name = name
        msg = f"Unknown page size '{name}'."
        if available:
            msg += f" Available: {list(available)}"
        super().__init__(msg)


class PageValidationError(PageSetupError, ValueError):
    """Input is missing, non-numeric or outside the KDP bounds.

    ``field`` names the offending input (e.g. ``width``), ``bound`` is one of
    ``min``, ``max``, ``type`` or ``choice``.
    """

    def __init__(self, message: str, field: str | None = None, bound: str | None = None):
        self.field = field
        self.bound = bound
        super().__init__(message)


class ApplyError(PageSetupError):
    """Wraps a failure raised by a document target while applying settings."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Error: {cause}")


class SettingsStoreError(PageSetupError):
    """The settings store holds something other than a valid settings record."""
