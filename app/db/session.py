from fastapi import Request

from app.db.store import StudentStore


def get_store(request: Request) -> StudentStore:
    """The store owned by the running application."""
    return request.app.state.student_store
