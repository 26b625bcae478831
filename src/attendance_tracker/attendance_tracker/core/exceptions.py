class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class TimeConflictError(ValidationError):
    """Raised when a timetable slot overlaps another slot on the same day."""


class DuplicateAttendanceError(ValidationError):
    """Raised when a subject already has an attendance entry for the date."""


class NotFoundError(DomainError):
    """Raised when a subject or entry id does not exist for the owner."""


class StorageError(DomainError):
    """Raised when the local storage file cannot be read."""


class BulkAttendanceError(DomainError):
    """Raised when a bulk attendance write stops part way through.

    Entries written before the failure stay written.
    """
