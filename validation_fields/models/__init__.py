"""Pydantic models for validation-fields."""

from validation_fields.models.config import Settings

__all__ = [
    "Settings",
]
