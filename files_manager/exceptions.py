"""Errors raised by the services and translated to HTTP responses by the API layer."""


class FilesManagerError(Exception):
    """Base class for every user-visible failure.

    Attributes:
        status_code: HTTP status the API layer answers with.
        message: Text placed in the ``error`` field of the response body.
    """

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingField(FilesManagerError):
    status_code = 400
    default_message = "Missing field"


class InvalidField(FilesManagerError):
    status_code = 400
    default_message = "Invalid field"


class AlreadyExists(FilesManagerError):
    status_code = 400
    default_message = "Already exist"


class Unauthorized(FilesManagerError):
    status_code = 401
    default_message = "Unauthorized"


class NotFound(FilesManagerError):
    """Raised for absent records and for records owned by another user alike."""

    status_code = 404
    default_message = "Not found"


class ParentNotFound(FilesManagerError):
    status_code = 400
    default_message = "Parent not found"


class ParentNotFolder(FilesManagerError):
    status_code = 400
    default_message = "Parent is not a folder"


class InternalError(FilesManagerError):
    status_code = 500
    default_message = "Internal server error"
