from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LoggerLevels = Literal["critical", "error", "warning", "info", "debug"]


class LoggerConfig(BaseModel):
    default: LoggerLevels | None = None
    logs: dict[str, LoggerLevels] = Field(default_factory=dict)

    @field_validator("default", mode="before")
    @classmethod
    def validate_default(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v

    @field_validator("logs", mode="before")
    @classmethod
    def validate_logs(cls, v: Any) -> Any:
        if not isinstance(v, dict):
            return v
        return {
            key: level.lower() if isinstance(level, str) else level
            for key, level in v.items()
        }


class Config(BaseModel):
    model_config = ConfigDict(extra="forbid")

    logger: LoggerConfig | None = None
