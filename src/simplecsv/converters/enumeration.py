"""
Converter for ``enum.Enum`` subclasses.

One instance serves one enum class. Members are written by name unless the
format is "value", in which case ``str(member.value)`` is written and read.
"""

from enum import Enum, IntFlag
from typing import Any

from pydantic import BaseModel, ConfigDict

from simplecsv.core.base_converter import BaseConverter
from simplecsv.exceptions import ConfigurationError
from simplecsv.models import ParseError

_FORMATS = ("name", "value")


class EnumFlag(IntFlag):
    """Flags understood by EnumConverter. Other bits are ignored."""

    # Match member text ignoring case when decoding.
    CASE_INSENSITIVE = 1 << 1


class EnumConfig(BaseModel):
    by_value: bool = False
    case_insensitive: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")


class EnumConverter(BaseConverter[Enum, EnumConfig]):
    def __init__(self, enum_class: type[Enum]) -> None:
        if not (isinstance(enum_class, type) and issubclass(enum_class, Enum)):
            raise TypeError(f"EnumConverter needs an Enum subclass, got {enum_class!r}")
        super().__init__()
        self.value_type = enum_class

    def configure(self, format_spec: str | None, flags: int) -> EnumConfig:
        spec = format_spec or "name"
        if spec not in _FORMATS:
            raise ConfigurationError(
                f"Invalid enum format {format_spec!r}, "
                f"expected one of: {', '.join(_FORMATS)}"
            )
        return EnumConfig(
            by_value=spec == "value",
            case_insensitive=bool(flags & EnumFlag.CASE_INSENSITIVE),
        )

    def _member_text(self, config: EnumConfig, member: Enum) -> str:
        return str(member.value) if config.by_value else member.name

    def _encode_value(self, config: EnumConfig, value: Enum) -> str:
        return self._member_text(config, value)

    def _decode_text(
        self, config: EnumConfig, raw_text: str, parse_error: ParseError
    ) -> Enum | None:
        wanted = raw_text.casefold() if config.case_insensitive else raw_text
        for member in self.value_type:
            text = self._member_text(config, member)
            if config.case_insensitive:
                text = text.casefold()
            if text == wanted:
                return member
        return self._invalid(
            parse_error, raw_text, f"not a member of {self.value_type.__name__}"
        )

    def get_converter_info(self) -> dict[str, Any]:
        info = super().get_converter_info()
        info["members"] = [member.name for member in self.value_type]
        return info
