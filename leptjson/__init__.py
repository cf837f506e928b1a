"""Strict JSON parsing and compact generation over an editable JsonValue tree."""

__version__ = "0.1.0"
__all__ = ["errors", "value", "parser", "stringify"]