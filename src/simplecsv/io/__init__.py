"""Reading declarative field definitions from disk."""

from .field_loader import FieldDefinitionLoader

__all__ = ["FieldDefinitionLoader"]
