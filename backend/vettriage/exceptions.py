"""
Error kinds raised by the triage core.

Every error is raised synchronously by the operation that detected it and
leaves the state it was called on unchanged.
"""


class TriageError(Exception):
    """Base class for recoverable triage errors."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(TriageError, ValueError):
    """A required field is missing or holds a value outside its domain."""

    def __init__(self, detail: str, issues=None):
        super().__init__(detail)
        self.issues = list(issues) if issues else [detail]


class NotFoundError(TriageError, LookupError):
    """An operation referenced an id that does not exist."""
