"""
File-backed store for student records.

The whole record sequence lives in one JSON array on disk. Every mutation is
a read-modify-write of the entire document: load it, change the list in
memory, save it back. There is no locking, so of two concurrent writers the
one that saves last wins.
"""
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from app.core.exceptions import StorageReadError, StorageWriteError
from app.core.logging import get_logger
from app.db.seed_students import build_seed_students

logger = get_logger()

StudentRecord = Dict[str, Any]


class StudentStore:
    def __init__(self, path: Union[str, Path], seed_sample_data: bool = True) -> None:
        self.path = Path(path)
        self.seed_sample_data = seed_sample_data

    def load_all(self) -> List[StudentRecord]:
        """Read the document, creating it first if it does not exist."""
        if not self.path.exists():
            return self._initialize()
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            logger.error(f"Error reading students from {self.path}: {e}")
            raise StorageReadError("Failed to read students document", error=str(e)) from e
        try:
            records = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(f"Students document {self.path} is not valid JSON: {e}")
            raise StorageReadError("Students document is corrupt", error=str(e)) from e
        if not isinstance(records, list):
            logger.error(f"Students document {self.path} does not hold a JSON array")
            raise StorageReadError(
                "Students document is corrupt",
                error=f"expected a JSON array, got {type(records).__name__}",
            )
        if not all(isinstance(record, dict) for record in records):
            raise StorageReadError(
                "Students document is corrupt",
                error="every entry must be a JSON object",
            )
        return records

    def save_all(self, records: List[StudentRecord]) -> None:
        """
        Overwrite the document with ``records``.

        The data is written to a temporary file next to the target and moved
        over it with ``os.replace``, so a failed or interrupted write leaves
        the previous document untouched.
        """
        try:
            payload = json.dumps(records, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageWriteError("Failed to serialize students", error=str(e)) from e

        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with open(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
            tmp_path = None
        except (OSError, ValueError) as e:
            logger.error(f"Error writing students to {self.path}: {e}")
            raise StorageWriteError("Failed to write students document", error=str(e)) from e
        finally:
            if tmp_path is not None:
                Path(tmp_path).unlink(missing_ok=True)

    @staticmethod
    def index_of(records: List[StudentRecord], student_id: str) -> Optional[int]:
        for i, record in enumerate(records):
            if record.get("id") == student_id:
                return i
        return None

    @classmethod
    def find_by_id(cls, records: List[StudentRecord], student_id: str) -> Optional[StudentRecord]:
        index = cls.index_of(records, student_id)
        return records[index] if index is not None else None

    def _initialize(self) -> List[StudentRecord]:
        records = build_seed_students() if self.seed_sample_data else []
        self.save_all(records)
        if records:
            logger.info(f"Sample data created in {self.path}")
        else:
            logger.info(f"Empty students document created in {self.path}")
        return records
