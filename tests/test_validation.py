"""Field rules enforced when STRICT_VALIDATION is enabled."""

from pathlib import Path
from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.api.students.validation import validate_student
from app.core.exceptions import RecordValidationError

VALID = {
    "firstName": "Jo",
    "lastName": "Lee",
    "email": "jo@x.com",
    "class": "Class 3",
    "phone": "+1 (555) 010-0100",
    "parentPhone": "",
}


@pytest_asyncio.fixture()
async def strict_client(make_app: Callable[..., FastAPI]) -> AsyncGenerator[AsyncClient, None]:
    app = make_app(STRICT_VALIDATION=True)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


def test_valid_record_passes() -> None:
    validate_student(VALID)


@pytest.mark.parametrize(
    "field, value",
    [
        ("firstName", "J"),
        ("lastName", "L" * 51),
        ("email", "not-an-email"),
        ("phone", "call me"),
        ("class", "Class 11"),
    ],
)
def test_invalid_field_is_reported(field: str, value: str) -> None:
    with pytest.raises(RecordValidationError) as exc_info:
        validate_student({**VALID, field: value})

    assert exc_info.value.status_code == 422
    assert [err["field"] for err in exc_info.value.error] == [field]


def test_missing_required_fields_are_reported() -> None:
    with pytest.raises(RecordValidationError) as exc_info:
        validate_student({"phone": "+1 555 0100"})

    fields = {err["field"] for err in exc_info.value.error}
    assert fields == {"firstName", "lastName", "email", "class"}


@pytest.mark.asyncio
async def test_strict_create_rejects_invalid_record(strict_client: AsyncClient, students_file: Path) -> None:
    response = await strict_client.post("/api/students", json={**VALID, "email": "nope"})
    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Student record validation failed"
    assert body["error"][0]["field"] == "email"

    listing = (await strict_client.get("/api/students")).json()
    assert listing["total"] == 0


@pytest.mark.asyncio
async def test_strict_update_validates_merged_record(strict_client: AsyncClient) -> None:
    response = await strict_client.post("/api/students", json=VALID)
    assert response.status_code == 201
    student_id = response.json()["data"]["id"]

    response = await strict_client.put(f"/api/students/{student_id}", json={"class": "Class 5"})
    assert response.status_code == 200
    assert response.json()["data"]["class"] == "Class 5"

    response = await strict_client.put(f"/api/students/{student_id}", json={"class": "Grade 5"})
    assert response.status_code == 422

    fetched = (await strict_client.get(f"/api/students/{student_id}")).json()["data"]
    assert fetched["class"] == "Class 5"


@pytest.mark.asyncio
async def test_lenient_mode_accepts_partial_record(client: AsyncClient) -> None:
    response = await client.post("/api/students", json={"firstName": "J"})
    assert response.status_code == 201
