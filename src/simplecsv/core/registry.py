"""Registry mapping value types to the converters that handle them."""

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any

from simplecsv.exceptions import UnknownConverterError

from .base_converter import BaseConverter

logger = logging.getLogger(__name__)


class ConverterRegistry:
    """
    Registry of available converters, keyed by Python type.

    Built once at startup and consulted while binding fields, so the converter
    for a field is resolved a single time and cached with the field, never
    looked up per row. Type names (e.g. 'bool', 'decimal') resolve to the
    registered types for declarative schemas.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._converters: dict[type, BaseConverter[Any, Any]] = {}
        self._type_names: dict[str, type] = {}
        self._logger = logger.getChild(self.__class__.__name__)

    def register_converter(
        self,
        value_type: type,
        converter: BaseConverter[Any, Any],
        aliases: Iterable[str] = (),
    ) -> None:
        """
        Register a converter for a value type.

        Args:
            value_type: The Python type the converter handles (e.g. bool)
            converter: The converter instance to use for that type
            aliases: Extra type names, besides the type's own name, that
                     resolve to value_type in field definitions

        Raises:
            ValueError: If value_type is not a type or converter is None
        """
        if not isinstance(value_type, type):
            raise ValueError(f"Value type must be a type, got {value_type!r}")

        if converter is None:
            raise ValueError("Converter cannot be None")

        if value_type in self._converters:
            self._logger.warning(
                f"Overwriting existing converter registration for type "
                f"'{value_type.__name__}'"
            )

        self._converters[value_type] = converter
        for name in (value_type.__name__, *aliases):
            self._type_names[name.strip().lower()] = value_type

        self._logger.info(
            f"Registered converter '{converter.__class__.__name__}' "
            f"for type '{value_type.__name__}'"
        )

    def get_converter(self, value_type: type) -> BaseConverter[Any, Any]:
        """
        Get the converter for a value type.

        Enum subclasses without an explicit registration get a dedicated
        EnumConverter.

        Raises:
            UnknownConverterError: If no converter handles value_type
        """
        converter = self._converters.get(value_type)
        if converter is not None:
            return converter

        if isinstance(value_type, type) and issubclass(value_type, Enum):
            # Import here to avoid circular imports
            from simplecsv.converters.enumeration import EnumConverter

            return EnumConverter(value_type)

        raise UnknownConverterError(
            f"No converter registered for type {value_type!r}. "
            f"Available types: {self._format_available_types()}"
        )

    def resolve_type_name(self, type_name: str) -> type:
        """
        Resolve a declarative type name to its registered type.

        Raises:
            UnknownConverterError: If the name is not registered
        """
        if not type_name or not type_name.strip():
            raise UnknownConverterError("Type name cannot be empty")

        key = type_name.strip().lower()
        if key not in self._type_names:
            raise UnknownConverterError(
                f"Unknown type name '{type_name}'. "
                f"Available types: {self._format_available_types()}"
            )
        return self._type_names[key]

    def get_available_types(self) -> list[str]:
        """Return all registered type names, aliases included, sorted."""
        return sorted(self._type_names)

    def is_type_available(self, value_type: type | str) -> bool:
        """Check whether a type, or a type name, is registered."""
        if isinstance(value_type, str):
            return value_type.strip().lower() in self._type_names
        return value_type in self._converters

    def clear(self) -> None:
        """Clear all registered converters."""
        self._converters.clear()
        self._type_names.clear()
        self._logger.info("Cleared all converter registrations")

    def _format_available_types(self) -> str:
        available_types = self.get_available_types()
        return ", ".join(available_types) if available_types else "none"

    def __len__(self) -> int:
        """Return the number of registered converters."""
        return len(self._converters)

    def __contains__(self, value_type: type | str) -> bool:
        """Check if a type is registered (supports 'in' operator)."""
        return self.is_type_available(value_type)


# Global converter registry instance, filled on first use
_global_registry: ConverterRegistry | None = None


def get_global_registry() -> ConverterRegistry:
    """Get the global registry, populated with the built-in converters."""
    global _global_registry
    if _global_registry is None:
        # Import here to avoid circular imports
        from simplecsv.converters import register_builtin_converters

        registry = ConverterRegistry()
        register_builtin_converters(registry)
        _global_registry = registry
    return _global_registry
