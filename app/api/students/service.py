import asyncio
import uuid
from datetime import datetime, timezone
from typing import List

from app.core.exceptions import NotFoundError
from app.core.logging import get_logger
from app.db.store import StudentRecord, StudentStore

from .schemas import StudentPayload
from .validation import validate_student

logger = get_logger()

# Assigned by the server; caller-supplied values are dropped.
SERVER_FIELDS = ("id", "enrollmentDate", "createdAt", "updatedAt")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _timestamp(moment: datetime) -> str:
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _client_fields(payload: StudentPayload) -> dict:
    return {k: v for k, v in payload.to_fields().items() if k not in SERVER_FIELDS}


async def list_students(store: StudentStore) -> List[StudentRecord]:
    return await asyncio.to_thread(store.load_all)


async def get_student(store: StudentStore, student_id: str) -> StudentRecord:
    records = await asyncio.to_thread(store.load_all)
    student = store.find_by_id(records, student_id)
    if student is None:
        logger.warning(f"Student {student_id} not found")
        raise NotFoundError(student_id)
    return student


async def create_student(
    store: StudentStore,
    payload: StudentPayload,
    strict: bool = False,
) -> StudentRecord:
    records = await asyncio.to_thread(store.load_all)
    now = _now()
    student = {
        "id": str(uuid.uuid4()),
        **_client_fields(payload),
        "enrollmentDate": now.date().isoformat(),
        "createdAt": _timestamp(now),
        "updatedAt": _timestamp(now),
    }
    if strict:
        validate_student(student)
    records.append(student)
    await asyncio.to_thread(store.save_all, records)
    logger.info(f"Created student {student['id']}")
    return student


async def update_student(
    store: StudentStore,
    student_id: str,
    payload: StudentPayload,
    strict: bool = False,
) -> StudentRecord:
    """
    Overwrite the supplied fields of an existing student.

    Fields absent from the payload keep their stored values. ``id`` stays the
    path id, ``createdAt`` and ``enrollmentDate`` are kept from the stored
    record and ``updatedAt`` is refreshed.
    """
    records = await asyncio.to_thread(store.load_all)
    index = store.index_of(records, student_id)
    if index is None:
        logger.warning(f"Student {student_id} not found for update")
        raise NotFoundError(student_id)
    existing = records[index]
    student = {
        **existing,
        **_client_fields(payload),
        "id": student_id,
        "updatedAt": _timestamp(_now()),
    }
    for preserved in ("enrollmentDate", "createdAt"):
        if preserved in existing:
            student[preserved] = existing[preserved]
    if strict:
        validate_student(student)
    records[index] = student
    await asyncio.to_thread(store.save_all, records)
    logger.info(f"Updated student {student_id}")
    return student


async def delete_student(store: StudentStore, student_id: str) -> StudentRecord:
    records = await asyncio.to_thread(store.load_all)
    index = store.index_of(records, student_id)
    if index is None:
        logger.warning(f"Student {student_id} not found for delete")
        raise NotFoundError(student_id)
    removed = records.pop(index)
    await asyncio.to_thread(store.save_all, records)
    logger.info(f"Deleted student {student_id}")
    return removed
