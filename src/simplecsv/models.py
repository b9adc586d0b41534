"""
models.py – shared contract types
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Error slot, declarative field metadata and decode results exchanged between
converters and the row framework that calls them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ErrorType(str, Enum):
    """Kind of row-level problem recorded by a decode call."""

    NONE = "none"
    INVALID_FORMAT = "invalid format"
    INVALID_NULL = "null value is not allowed"
    INTERNAL_ERROR = "internal error"


# ---------------------------------------------------------------------------
# Error slot
# ---------------------------------------------------------------------------


class ParseError(BaseModel):
    """
    Caller-owned slot a decoder writes into instead of raising.

    One instance belongs to one decode call at a time. Converters only write
    into it; the row framework inspects it afterwards and decides whether to
    abort, skip or collect the problem.
    """

    error_type: ErrorType = Field(
        default=ErrorType.NONE, description="Kind of problem, NONE when clean."
    )
    message: str | None = Field(
        default=None, description="Human readable detail about the problem."
    )
    raw_value: str | None = Field(
        default=None, description="Field text that could not be decoded."
    )
    line: str | None = Field(default=None, description="Full source line.")
    line_number: NonNegativeInt | None = Field(
        default=None, description="1-based number of the source line."
    )
    line_position: NonNegativeInt | None = Field(
        default=None, description="Column offset of the field within the line."
    )

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    def is_error(self) -> bool:
        return self.error_type is not ErrorType.NONE

    def set_error(
        self,
        error_type: ErrorType,
        *,
        raw_value: str | None = None,
        message: str | None = None,
    ) -> None:
        """Record a problem, overwriting whatever the slot held before."""
        self.error_type = error_type
        self.raw_value = raw_value
        self.message = message

    def reset(self) -> None:
        """Clear the slot so it can be reused for the next call."""
        self.error_type = ErrorType.NONE
        self.message = None
        self.raw_value = None
        self.line = None
        self.line_number = None
        self.line_position = None


# ---------------------------------------------------------------------------
# Declarative field metadata
# ---------------------------------------------------------------------------


class FieldDefinition(BaseModel):
    """Declarative description of one field, as written in a schema file."""

    name: str = Field(..., description="Field (column) name.")
    type: str = Field(
        ..., description="Registered type name, e.g. 'bool' or 'decimal'."
    )
    format: str | None = Field(
        default=None, description="Converter-specific format string."
    )
    flags: NonNegativeInt = Field(
        default=0, description="Bitset of converter-specific toggles."
    )
    required: bool = Field(
        default=False, description="Blank text is reported as INVALID_NULL."
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("name", "type")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


# ---------------------------------------------------------------------------
# Return-based decode result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of one decode: a value, or the error recorded for it."""

    value: Any
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
