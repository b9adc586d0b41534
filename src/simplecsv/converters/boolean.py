"""
Converter for the Python ``bool`` type.

The format can be set to a comma separated pair of strings. The string before
the comma is written for True and the one after it for False: "1,0" writes
and reads 1 for True and 0 for False. Without a format "true,false" is used.
"""

from enum import IntFlag

from pydantic import BaseModel, ConfigDict, Field, model_validator

from simplecsv.core.base_converter import BaseConverter
from simplecsv.exceptions import ConfigurationError
from simplecsv.models import ParseError

DEFAULT_TRUE_TEXT = "true"
DEFAULT_FALSE_TEXT = "false"


class BooleanFlag(IntFlag):
    """Flags understood by BooleanConverter. Other bits are ignored."""

    # Unrecognized text records INVALID_FORMAT instead of decoding to False.
    STRICT_ON_INVALID = 1 << 1


class BooleanConfig(BaseModel):
    """Resolved vocabulary for one boolean field."""

    true_text: str = Field(default=DEFAULT_TRUE_TEXT, min_length=1)
    false_text: str = Field(default=DEFAULT_FALSE_TEXT, min_length=1)
    strict_on_invalid: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _distinct_tokens(self) -> "BooleanConfig":
        if self.true_text == self.false_text:
            raise ValueError(
                f"true and false text must differ, both are {self.true_text!r}"
            )
        return self


class BooleanConverter(BaseConverter[bool, BooleanConfig]):
    value_type = bool
    strict_flags = BooleanFlag.STRICT_ON_INVALID

    def configure(self, format_spec: str | None, flags: int) -> BooleanConfig:
        if format_spec:
            parts = format_spec.split(",")
            if len(parts) != 2 or not parts[0] or not parts[1]:
                raise ConfigurationError(
                    "Invalid boolean format, should be in the form of T,F: "
                    f"{format_spec!r}"
                )
            true_text, false_text = parts
        else:
            true_text, false_text = DEFAULT_TRUE_TEXT, DEFAULT_FALSE_TEXT

        with self._building_config(format_spec):
            config = BooleanConfig(
                true_text=true_text,
                false_text=false_text,
                strict_on_invalid=bool(flags & BooleanFlag.STRICT_ON_INVALID),
            )
        self._logger.debug(f"Configured {config!r}")
        return config

    def _encode_value(self, config: BooleanConfig, value: bool) -> str:
        return config.true_text if value else config.false_text

    def _decode_text(
        self, config: BooleanConfig, raw_text: str, parse_error: ParseError
    ) -> bool | None:
        if raw_text == config.true_text:
            return True
        if raw_text == config.false_text:
            return False
        if config.strict_on_invalid:
            return self._invalid(
                parse_error,
                raw_text,
                f"expected {config.true_text!r} or {config.false_text!r}",
            )
        # lenient mode: anything unrecognized reads as False
        return False
