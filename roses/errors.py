class InputError(ValueError):
    """Raised when the input file is missing, unreadable, or structurally malformed."""


class DataQualityWarning(UserWarning):
    """Non-fatal issue in otherwise parseable rows (unknown codes, no terminal status)."""
