from pydantic import ValidationError

from app.core.exceptions import RecordValidationError

from .schemas import StudentValidation


def validate_student(record: dict) -> None:
    """Raise RecordValidationError if ``record`` breaks the student field rules."""
    try:
        StudentValidation.model_validate(record)
    except ValidationError as e:
        raise RecordValidationError(
            [
                {
                    "field": ".".join(str(loc) for loc in err["loc"]),
                    "message": err["msg"],
                }
                for err in e.errors()
            ]
        ) from e
