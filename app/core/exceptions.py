from typing import Any, Optional

from fastapi import status


class ServiceError(Exception):
    """Base exception for service layer errors."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error = error if error is not None else message


class NotFoundError(ServiceError):
    """Requested student id is not in the document."""

    def __init__(self, student_id: str) -> None:
        super().__init__(
            "Student not found",
            status.HTTP_404_NOT_FOUND,
            error=f"No student with id {student_id}",
        )
        self.student_id = student_id


class StorageError(ServiceError):
    """The students document could not be read or written."""


class StorageReadError(StorageError):
    pass


class StorageWriteError(StorageError):
    pass


class RecordValidationError(ServiceError):
    def __init__(self, errors: list) -> None:
        super().__init__(
            "Student record validation failed",
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            error=errors,
        )
