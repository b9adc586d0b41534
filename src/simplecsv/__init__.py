"""
Package façade – typed value converters for row-oriented text formats.

Design
------
* A field is bound once (converter + immutable config) and reused per row.
* Decoding never raises for bad text; problems land in a ParseError slot.
"""

from __future__ import annotations

from .core.field_binding import FieldBinding, bind_fields
from .core.registry import ConverterRegistry, get_global_registry
from .exceptions import (
    ConfigurationError,
    FieldDefinitionLoadError,
    SimpleCsvError,
    UnknownConverterError,
)
from .models import DecodeResult, ErrorType, FieldDefinition, ParseError

__all__ = [
    "ConfigurationError",
    "ConverterRegistry",
    "DecodeResult",
    "ErrorType",
    "FieldBinding",
    "FieldDefinition",
    "FieldDefinitionLoadError",
    "ParseError",
    "SimpleCsvError",
    "UnknownConverterError",
    "bind_fields",
    "get_global_registry",
]
