import io
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import ValidationError

from simplecsv.exceptions import ConfigurationError
from simplecsv.models import ErrorType, ParseError

from .protocols import ConfigT, Converter, TextSink, ValueT

logger = logging.getLogger(__name__)


class BaseConverter(Converter[ValueT, ConfigT], ABC):
    """
    Base class for converters, owning the parts every scalar type shares.

    Encode and decode follow the Template Method pattern: the null/empty
    convention lives here, so ``encode(config, None)`` always writes nothing
    and ``decode(config, "")`` always yields None, whatever the flags.

    Subclasses must implement:
    - configure(): Build the immutable config from format and flags
    - _encode_value(): Render a non-null value
    - _decode_text(): Parse non-empty text
    """

    #: Python type handled by the converter, used by the registry.
    value_type: type = object

    #: Flags making decode report every unrecognized text as INVALID_FORMAT.
    strict_flags: int = 0

    def __init__(self) -> None:
        self._logger = logger.getChild(self.__class__.__name__)

    # --- Abstract Methods (Type-Specific Logic) ---

    @abstractmethod
    def configure(self, format_spec: str | None, flags: int) -> ConfigT:
        pass

    @abstractmethod
    def _encode_value(self, config: ConfigT, value: ValueT) -> str:
        pass

    @abstractmethod
    def _decode_text(
        self, config: ConfigT, raw_text: str, parse_error: ParseError
    ) -> ValueT | None:
        pass

    # --- Protocol Implementation (Common Logic) ---

    def encode(self, config: ConfigT, value: ValueT | None, sink: TextSink) -> None:
        if value is None:
            return
        sink.write(self._encode_value(config, value))

    def decode(
        self, config: ConfigT, raw_text: str, parse_error: ParseError
    ) -> ValueT | None:
        if not raw_text:
            return None
        return self._decode_text(config, raw_text, parse_error)

    def to_text(self, config: ConfigT, value: ValueT | None) -> str:
        """Encode into a fresh string instead of an external sink."""
        buffer = io.StringIO()
        self.encode(config, value, buffer)
        return buffer.getvalue()

    def get_converter_info(self) -> dict[str, Any]:
        """
        Get information about this converter.

        Returns:
            Dictionary containing converter information
        """
        return {
            "class_name": self.__class__.__name__,
            "module": self.__class__.__module__,
            "value_type": getattr(self.value_type, "__name__", str(self.value_type)),
        }

    # --- Shared helpers ---

    def _invalid(
        self, parse_error: ParseError, raw_text: str, message: str
    ) -> None:
        """Record INVALID_FORMAT for raw_text; always returns None."""
        self._logger.debug(f"Invalid value {raw_text!r}: {message}")
        parse_error.set_error(
            ErrorType.INVALID_FORMAT, raw_value=raw_text, message=message
        )
        return None

    @contextmanager
    def _building_config(self, format_spec: str | None) -> Iterator[None]:
        """Re-raise pydantic validation failures as ConfigurationError."""
        try:
            yield
        except ValidationError as e:
            details = "; ".join(err["msg"] for err in e.errors())
            raise ConfigurationError(
                f"Invalid {self.__class__.__name__} configuration "
                f"for format {format_spec!r}: {details}"
            ) from e

    def _reject_format(self, format_spec: str | None) -> None:
        """For converters whose vocabulary is fixed."""
        if format_spec:
            raise ConfigurationError(
                f"{self.__class__.__name__} does not accept a format, "
                f"got {format_spec!r}"
            )
