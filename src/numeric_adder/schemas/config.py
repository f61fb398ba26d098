"""Pydantic models for .numeric-adder.yaml configuration."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_PATH = ".numeric-adder.yaml"


class CoercionMode(str, Enum):
    """How text that is not a number is treated."""

    STRICT = "strict"
    LENIENT = "lenient"


class CoercionSettings(BaseModel):
    """Input coercion settings."""

    mode: CoercionMode = Field(
        default=CoercionMode.STRICT,
        description="strict raises on invalid text, lenient reads it as 0",
    )


class OutputSettings(BaseModel):
    """Demo output settings."""

    separator: str = Field(default="", description="Text placed between results")


class LoggingSettings(BaseModel):
    """Logging settings."""

    level: str = Field(default="WARNING")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class AdderConfig(BaseModel):
    """Complete configuration for .numeric-adder.yaml."""

    coercion: CoercionSettings = Field(default_factory=CoercionSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, path: str | Path) -> "AdderConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.model_validate(data)
