"""
Per-field binding of a converter and its resolved configuration.

Binding happens once per field when a schema is set up; every row afterwards
reuses the cached converter and config. Bindings are immutable and can be
shared between threads once built. ParseError slots are not: each decode
call needs its own.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from simplecsv.exceptions import ConfigurationError
from simplecsv.models import DecodeResult, ErrorType, FieldDefinition, ParseError

from .base_converter import BaseConverter
from .protocols import TextSink
from .registry import ConverterRegistry, get_global_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldBinding:
    """A field's converter together with the config built for it."""

    name: str
    value_type: type
    converter: BaseConverter[Any, Any]
    config: Any
    required: bool = False

    @classmethod
    def for_type(
        cls,
        name: str,
        value_type: type,
        format_spec: str | None = None,
        flags: int = 0,
        *,
        required: bool = False,
        registry: ConverterRegistry | None = None,
    ) -> "FieldBinding":
        """
        Resolve the converter for value_type and configure it.

        Raises:
            UnknownConverterError: If no converter handles value_type
            ConfigurationError: If format_spec or flags are rejected
        """
        registry = registry or get_global_registry()
        converter = registry.get_converter(value_type)
        try:
            config = converter.configure(format_spec, flags)
        except ConfigurationError as e:
            raise ConfigurationError(f"Field '{name}': {e}") from e

        logger.debug(
            f"Bound field '{name}' to {converter.__class__.__name__} "
            f"(format={format_spec!r}, flags={flags:#x})"
        )
        return cls(
            name=name,
            value_type=value_type,
            converter=converter,
            config=config,
            required=required,
        )

    @classmethod
    def bind(
        cls, definition: FieldDefinition, registry: ConverterRegistry | None = None
    ) -> "FieldBinding":
        """Bind a declarative field definition, resolving its type name."""
        registry = registry or get_global_registry()
        return cls.for_type(
            definition.name,
            registry.resolve_type_name(definition.type),
            definition.format,
            definition.flags,
            required=definition.required,
            registry=registry,
        )

    # ------------------------------------------------------------------ #
    # Per-row operations
    # ------------------------------------------------------------------ #

    def encode(self, value: Any, sink: TextSink) -> None:
        self.converter.encode(self.config, value, sink)

    def to_text(self, value: Any) -> str:
        return self.converter.to_text(self.config, value)

    def decode(
        self,
        raw_text: str,
        parse_error: ParseError,
        *,
        line: str | None = None,
        line_number: int | None = None,
        line_position: int | None = None,
    ) -> Any:
        """
        Decode raw_text, recording problems into parse_error.

        The slot is cleared first so it only describes this call. Blank text
        for a required field is reported as INVALID_NULL. When a problem is
        recorded, the line context is copied into the slot.
        """
        parse_error.reset()
        value = self.converter.decode(self.config, raw_text, parse_error)
        if value is None and self.required and not parse_error.is_error():
            parse_error.set_error(
                ErrorType.INVALID_NULL,
                raw_value=raw_text,
                message=f"field '{self.name}' is required",
            )

        if parse_error.is_error():
            parse_error.line = line
            parse_error.line_number = line_number
            parse_error.line_position = line_position
        return value

    def parse(
        self,
        raw_text: str,
        *,
        line: str | None = None,
        line_number: int | None = None,
        line_position: int | None = None,
    ) -> DecodeResult:
        """Return-based variant of decode() using a private error slot."""
        parse_error = ParseError()
        value = self.decode(
            raw_text,
            parse_error,
            line=line,
            line_number=line_number,
            line_position=line_position,
        )
        if parse_error.is_error():
            return DecodeResult(value=None, error=parse_error)
        return DecodeResult(value=value)


def bind_fields(
    definitions: Iterable[FieldDefinition],
    registry: ConverterRegistry | None = None,
) -> dict[str, FieldBinding]:
    """
    Bind every definition of a schema, preserving declaration order.

    Raises:
        ConfigurationError: On duplicate names or an unusable definition
        UnknownConverterError: On an unknown type name
    """
    bindings: dict[str, FieldBinding] = {}
    for definition in definitions:
        if definition.name in bindings:
            raise ConfigurationError(f"Duplicate field name '{definition.name}'")
        bindings[definition.name] = FieldBinding.bind(definition, registry)

    logger.info(f"Bound {len(bindings)} field(s)")
    return bindings
