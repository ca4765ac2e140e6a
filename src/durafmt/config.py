"""Configuration management for durafmt."""

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from durafmt.units import Unit


class Settings(BaseSettings):
    """Defaults for the durafmt command, read from DURAFMT_* variables."""

    limit_first_n: int = Field(default=0, ge=0)
    limit_to_unit: str = ""
    output_format: Literal["raw", "json"] = "raw"
    log_level: str = "WARNING"

    model_config = {
        "env_prefix": "DURAFMT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "forbid",
    }

    @field_validator("limit_to_unit")
    @classmethod
    def validate_unit(cls, value: str) -> str:
        # Raises UnknownUnit (a ValueError) for names that are not units.
        unit = Unit.resolve(value)
        return unit.value if unit else ""

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level {value!r}")
        return level
