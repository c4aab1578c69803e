from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelCaseBaseModel(BaseModel):
    """
    Base model with camelCase field aliases.

    Clients send and receive camelCase keys (``firstName``, ``createdAt``);
    Python code uses the snake_case attribute names.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ErrorResponse(BaseModel):
    """Uniform failure envelope."""

    success: bool = False
    message: str
    error: Optional[Any] = None


class HealthResponse(BaseModel):
    success: bool = True
    message: str
    timestamp: str
    version: str
