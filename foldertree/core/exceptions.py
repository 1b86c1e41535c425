from typing import List, Optional
from starlette import status

class AppError(Exception):
    def __init__(
        self,
        message: str,
        *,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        code: str = "bad_request",
        field: Optional[str] = None,
        errors: Optional[List[dict]] = None,  # [{'code':..., 'message':..., 'field':...}]
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.field = field
        self.errors = errors


class ValidationError(AppError):
    """Bad or missing input, rejected before any mutation"""

    default_message = "Invalid request"
    default_code = "validation_error"
    default_field: Optional[str] = None

    def __init__(self, message: Optional[str] = None, **kwargs):
        kwargs.setdefault("status_code", status.HTTP_400_BAD_REQUEST)
        kwargs.setdefault("code", self.default_code)
        kwargs.setdefault("field", self.default_field)
        super().__init__(message or self.default_message, **kwargs)


class MissingNameError(ValidationError):
    default_message = "Resource name is required."
    default_code = "missing_name"
    default_field = "name"


class InvalidLevelError(ValidationError):
    default_message = "level can only be root or child"
    default_code = "invalid_level"
    default_field = "level"


class MissingParentError(ValidationError):
    default_message = "Parent ID must be provided"
    default_code = "missing_parent"
    default_field = "parent"


class ParentNotFoundError(ValidationError):
    default_message = "Invalid parent ID provided."
    default_code = "parent_not_found"
    default_field = "parent"


class DuplicateNameError(ValidationError):
    default_message = "A record with this name already exists in this directory"
    default_code = "duplicate_name"
    default_field = "name"


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found", **kwargs):
        kwargs.setdefault("status_code", status.HTTP_404_NOT_FOUND)
        kwargs.setdefault("code", "not_found")
        super().__init__(message, **kwargs)


class StorageError(AppError):
    """Store failure; the message is safe to show to clients, the cause is only logged"""

    def __init__(self, message: str = "Something went wrong. Please try again later.", **kwargs):
        kwargs.setdefault("status_code", status.HTTP_500_INTERNAL_SERVER_ERROR)
        kwargs.setdefault("code", "storage_error")
        super().__init__(message, **kwargs)
