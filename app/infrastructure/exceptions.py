"""
Custom exceptions for the Infrastructure layer.
"""


class InfrastructureError(Exception):
    """Base class for exceptions in the infrastructure layer."""
    pass


class ClassRecordError(InfrastructureError):
    """
    Base class for errors raised by class record operations.

    ``status_code`` is the HTTP status the error is reported with.
    """
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ClassRecordError):
    """A required field is missing or empty."""
    status_code = 400
    default_message = "Missing required fields"


class NotFoundError(ClassRecordError):
    """An update or delete matched zero rows."""
    status_code = 404
    default_message = "Class not found"


class FormatError(ClassRecordError):
    """A date or time value could not be parsed."""
    default_message = "Invalid date or time format"


class StorageError(ClassRecordError):
    """The database rejected or failed to run a statement."""
    default_message = "Database error"
