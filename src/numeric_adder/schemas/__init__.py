"""Pydantic schemas for configuration."""

from numeric_adder.schemas.config import AdderConfig, CoercionMode

__all__ = ["AdderConfig", "CoercionMode"]
