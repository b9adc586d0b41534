"""
exceptions.py

Typed exception hierarchy used across the converter family.

Only programming and schema mistakes are raised. Bad field text is data:
it is reported through a ParseError slot and never raised.
"""

from __future__ import annotations


class SimpleCsvError(Exception):
    """Root of all errors raised by this project."""


class ConfigurationError(SimpleCsvError, ValueError):
    """
    Raised at bind time when a field cannot be configured.

    Examples
    --------
    * Malformed format string (e.g. a boolean format that is not ``T,F``)
    * Format given to a converter that does not take one
    * Duplicate field names in one schema
    """


class UnknownConverterError(SimpleCsvError, ValueError):
    """Raised when no converter is registered for a value type or type name."""


class FieldDefinitionLoadError(SimpleCsvError):
    """
    Raised by the I/O layer when a field definition file cannot be used.

    This typically wraps:
        * Missing file / unsupported extension
        * YAML or JSON syntax errors
        * Entries failing FieldDefinition validation
    """
