"""Converter contract, registry and per-field binding."""
