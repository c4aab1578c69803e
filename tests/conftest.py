from pathlib import Path
from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings
from app.db.store import StudentStore
from app.main import create_app


@pytest.fixture()
def students_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "students.json"


@pytest.fixture()
def store(students_file: Path) -> StudentStore:
    """Store over an empty document in a temporary directory."""
    return StudentStore(students_file, seed_sample_data=False)


def make_settings(students_file: Path, **overrides) -> Settings:
    values = {
        "DATA_DIR": str(students_file.parent),
        "STUDENTS_FILE_NAME": students_file.name,
        "SEED_SAMPLE_DATA": False,
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture()
def make_app(students_file: Path) -> Callable[..., FastAPI]:
    """Build an app over the temporary document; keyword arguments override settings."""

    def _make(**overrides) -> FastAPI:
        return create_app(make_settings(students_file, **overrides))

    return _make


@pytest.fixture()
def app(make_app: Callable[..., FastAPI]) -> FastAPI:
    return make_app()


@pytest_asyncio.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to a FastAPI app backed by a temporary document."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
