from fastapi import APIRouter, Depends, HTTPException, status

from app.core.config import Settings, get_settings
from app.core.exceptions import ServiceError, StorageError
from app.db.session import get_store
from app.db.store import StudentStore

from .schemas import StudentDetailResponse, StudentListResponse, StudentPayload
from . import service

router = APIRouter(prefix="/api/students", tags=["students"])


def _http_error(e: ServiceError, failure_message: str) -> HTTPException:
    """Storage failures are reported under the operation message; other errors keep their own."""
    message = failure_message if isinstance(e, StorageError) else e.message
    return HTTPException(status_code=e.status_code, detail={"message": message, "error": e.error})


@router.get(
    "",
    response_model=StudentListResponse,
    response_model_exclude_unset=True,
)
async def list_students(
    store: StudentStore = Depends(get_store),
) -> StudentListResponse:
    try:
        students = await service.list_students(store)
    except ServiceError as e:
        raise _http_error(e, "Failed to fetch students")
    return StudentListResponse(success=True, data=students, total=len(students))


@router.get(
    "/{student_id}",
    response_model=StudentDetailResponse,
    response_model_exclude_unset=True,
)
async def get_student(
    student_id: str,
    store: StudentStore = Depends(get_store),
) -> StudentDetailResponse:
    try:
        student = await service.get_student(store, student_id)
    except ServiceError as e:
        raise _http_error(e, "Failed to fetch student")
    return StudentDetailResponse(success=True, data=student)


@router.post(
    "",
    response_model=StudentDetailResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_student(
    payload: StudentPayload,
    store: StudentStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> StudentDetailResponse:
    try:
        student = await service.create_student(store, payload, strict=settings.strict_validation)
    except ServiceError as e:
        raise _http_error(e, "Failed to create student")
    return StudentDetailResponse(success=True, data=student, message="Student created successfully")


@router.put(
    "/{student_id}",
    response_model=StudentDetailResponse,
    response_model_exclude_unset=True,
)
async def update_student(
    student_id: str,
    payload: StudentPayload,
    store: StudentStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> StudentDetailResponse:
    try:
        student = await service.update_student(
            store, student_id, payload, strict=settings.strict_validation
        )
    except ServiceError as e:
        raise _http_error(e, "Failed to update student")
    return StudentDetailResponse(success=True, data=student, message="Student updated successfully")


@router.delete(
    "/{student_id}",
    response_model=StudentDetailResponse,
    response_model_exclude_unset=True,
)
async def delete_student(
    student_id: str,
    store: StudentStore = Depends(get_store),
) -> StudentDetailResponse:
    try:
        student = await service.delete_student(store, student_id)
    except ServiceError as e:
        raise _http_error(e, "Failed to delete student")
    return StudentDetailResponse(success=True, data=student, message="Student deleted successfully")
