"""Converter for the Python ``str`` type."""

from enum import IntFlag

from pydantic import BaseModel, ConfigDict

from simplecsv.core.base_converter import BaseConverter
from simplecsv.models import ParseError


class StringFlag(IntFlag):
    """Flags understood by StringConverter. Other bits are ignored."""

    # Strip surrounding whitespace from decoded text.
    TRIM_INPUT = 1 << 1


class StringConfig(BaseModel):
    trim_input: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")


class StringConverter(BaseConverter[str, StringConfig]):
    value_type = str

    def configure(self, format_spec: str | None, flags: int) -> StringConfig:
        self._reject_format(format_spec)
        return StringConfig(trim_input=bool(flags & StringFlag.TRIM_INPUT))

    def _encode_value(self, config: StringConfig, value: str) -> str:
        return str(value)

    def _decode_text(
        self, config: StringConfig, raw_text: str, parse_error: ParseError
    ) -> str | None:
        if config.trim_input:
            # whitespace-only text is blank, same as empty
            return raw_text.strip() or None
        return raw_text
