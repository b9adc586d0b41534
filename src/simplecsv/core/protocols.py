from typing import Any, Protocol, TypeVar

from simplecsv.models import ParseError

ValueT = TypeVar("ValueT")
ConfigT = TypeVar("ConfigT")


class TextSink(Protocol):
    """Append-only text destination (e.g. ``io.StringIO``)."""

    def write(self, text: str, /) -> Any: ...


class Converter(Protocol[ValueT, ConfigT]):
    """Defines the contract for mapping one scalar type to and from text."""

    def configure(self, format_spec: str | None, flags: int) -> ConfigT:
        """
        Derive the immutable per-field configuration.

        Called once per field at schema-binding time; the caller caches the
        result and hands it back on every encode/decode.

        Raises:
            ConfigurationError: If the format or flags are malformed.
        """
        ...

    def encode(self, config: ConfigT, value: ValueT | None, sink: TextSink) -> None:
        """Append the textual form of value to sink; nothing for None."""
        ...

    def decode(
        self, config: ConfigT, raw_text: str, parse_error: ParseError
    ) -> ValueT | None:
        """
        Parse field text into a value.

        Never raises for malformed text; problems are written into
        parse_error and None is returned.
        """
        ...
