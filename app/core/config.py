from pathlib import Path
from typing import List, Optional, Union

from fastapi import Request
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = Field("School Dashboard API", alias="APP_NAME")
    app_version: str = Field("1.0.0", alias="APP_VERSION")
    environment: str = Field("development", alias="ENVIRONMENT")

    host: str = Field("localhost", alias="HOST")
    port: int = Field(3001, alias="PORT")

    data_dir: Path = Field(Path("data"), alias="DATA_DIR")
    students_file_name: str = Field("students.json", alias="STUDENTS_FILE_NAME")
    seed_sample_data: bool = Field(True, alias="SEED_SAMPLE_DATA")
    strict_validation: bool = Field(False, alias="STRICT_VALIDATION")

    # Vite dev server, alternative React dev port, Vite preview port
    allowed_origins: Union[str, List[str]] = Field(
        ["http://localhost:5173", "http://localhost:3000", "http://localhost:4173"],
        alias="ALLOWED_ORIGINS",
    )

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Optional[Path] = Field(None, alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("allowed_origins", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if not v:
            return []
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        return v

    @property
    def students_file(self) -> Path:
        return self.data_dir / self.students_file_name


settings = Settings()


def get_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings
