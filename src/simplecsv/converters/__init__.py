"""
Built-in converter family.

Each converter is stateless; one instance can serve any number of fields
and threads once its configs are built.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from .boolean import BooleanConfig, BooleanConverter, BooleanFlag
from .enumeration import EnumConfig, EnumConverter, EnumFlag
from .numeric import DecimalConverter, FloatConverter, IntegerConverter, NumberConfig
from .text import StringConfig, StringConverter, StringFlag

if TYPE_CHECKING:
    from simplecsv.core.registry import ConverterRegistry

__all__ = [
    "BooleanConfig",
    "BooleanConverter",
    "BooleanFlag",
    "DecimalConverter",
    "EnumConfig",
    "EnumConverter",
    "EnumFlag",
    "FloatConverter",
    "IntegerConverter",
    "NumberConfig",
    "StringConfig",
    "StringConverter",
    "StringFlag",
    "register_builtin_converters",
]


def register_builtin_converters(registry: ConverterRegistry) -> None:
    """Register the built-in scalar converters with registry."""
    registry.register_converter(bool, BooleanConverter(), aliases=("boolean",))
    registry.register_converter(str, StringConverter(), aliases=("string",))
    registry.register_converter(int, IntegerConverter(), aliases=("integer",))
    registry.register_converter(float, FloatConverter(), aliases=("double",))
    registry.register_converter(Decimal, DecimalConverter())
