"""
Converters for numeric types: ``int``, ``float`` and ``decimal.Decimal``.

The format is a Python format-spec string (e.g. ",d" or ".2f") used when
writing values. When it asks for "," grouping, decoding drops the separators
again so written values read back. Formats whose output decode cannot read
(hex, binary, octal, percent, fixed point for integers) are rejected. Text that is not a number always records
INVALID_FORMAT; there is no lenient fallback for numbers.
"""

from decimal import Decimal, InvalidOperation
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from simplecsv.core.base_converter import BaseConverter
from simplecsv.exceptions import ConfigurationError
from simplecsv.models import ParseError

NumberT = TypeVar("NumberT", int, float, Decimal)


class NumberConfig(BaseModel):
    format_spec: str = ""
    grouping: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")


class _NumberConverter(BaseConverter[NumberT, NumberConfig], Generic[NumberT]):
    """Shared configure/encode/decode for the numeric converters."""

    sample_value: NumberT
    parse_failures: tuple[type[Exception], ...] = (ValueError,)

    def configure(self, format_spec: str | None, flags: int) -> NumberConfig:
        spec = format_spec or ""
        type_name = self.value_type.__name__
        try:
            sample_text = format(self.sample_value, spec)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {type_name} format {spec!r}: {e}") from e

        config = NumberConfig(format_spec=spec, grouping="," in spec)
        if not self._reads_back(config, sample_text):
            raise ConfigurationError(
                f"Invalid {type_name} format {spec!r}: written text "
                f"{sample_text!r} cannot be read back"
            )
        return config

    def _encode_value(self, config: NumberConfig, value: NumberT) -> str:
        return format(value, config.format_spec)

    def _decode_text(
        self, config: NumberConfig, raw_text: str, parse_error: ParseError
    ) -> NumberT | None:
        try:
            return self._parse_number(self._ungrouped(config, raw_text))
        except self.parse_failures:
            return self._invalid(
                parse_error, raw_text, f"not a valid {self.value_type.__name__}"
            )

    def _ungrouped(self, config: NumberConfig, raw_text: str) -> str:
        text = raw_text.replace(",", "") if config.grouping else raw_text
        return text.strip()

    def _parse_number(self, text: str) -> NumberT:
        return self.value_type(text)

    def _reads_back(self, config: NumberConfig, sample_text: str) -> bool:
        """Whether decode accepts what the format writes for sample_value."""
        try:
            self._parse_number(self._ungrouped(config, sample_text))
        except self.parse_failures:
            return False
        return True


class IntegerConverter(_NumberConverter[int]):
    value_type = int
    sample_value = 123456789

    def _encode_value(self, config: NumberConfig, value: int) -> str:
        if isinstance(value, bool):
            raise TypeError("IntegerConverter cannot encode bool values")
        return super()._encode_value(config, value)

    def _reads_back(self, config: NumberConfig, sample_text: str) -> bool:
        # binary/octal digits still parse as decimal, but to another number
        try:
            parsed = self._parse_number(self._ungrouped(config, sample_text))
        except self.parse_failures:
            return False
        return parsed == self.sample_value


class FloatConverter(_NumberConverter[float]):
    value_type = float
    sample_value = 1234.5


class DecimalConverter(_NumberConverter[Decimal]):
    value_type = Decimal
    sample_value = Decimal("1234.5")
    parse_failures = (InvalidOperation, ValueError)
