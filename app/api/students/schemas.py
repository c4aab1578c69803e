from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, EmailStr, Field, field_validator

from app.core.enums import StudentClass
from app.core.schemas import CamelCaseBaseModel

PHONE_PATTERN = r"^\+?[\d\s()-]{7,20}$"


class StudentPayload(CamelCaseBaseModel):
    """
    Body of POST and PUT. Every field is optional, values of any JSON type are accepted
    and unknown keys are kept.

    ``id``, ``enrollmentDate``, ``createdAt`` and ``updatedAt`` are assigned
    by the server; values sent for them are discarded.
    """

    model_config = ConfigDict(extra="allow")

    first_name: Any = None
    last_name: Any = None
    email: Any = None
    phone: Any = None
    address: Any = None
    parent_name: Any = None
    parent_phone: Any = None
    student_class: Any = Field(None, alias="class")

    def to_fields(self) -> dict:
        """Supplied keys only, camelCase, as they are stored in the document."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class StudentListResponse(CamelCaseBaseModel):
    success: bool = True
    data: List[Dict[str, Any]]
    total: int


class StudentDetailResponse(CamelCaseBaseModel):
    success: bool = True
    data: Dict[str, Any]
    message: Optional[str] = None


class StudentValidation(CamelCaseBaseModel):
    """Field rules applied to a full record when strict validation is on."""

    model_config = ConfigDict(extra="ignore")

    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    parent_phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    student_class: StudentClass = Field(..., alias="class")

    @field_validator("phone", "parent_phone", mode="before")
    def blank_phone_is_absent(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v
