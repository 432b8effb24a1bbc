"""
Form Specification Core Package

Shared data models and errors used by the parsers and renderers.

All models are frozen dataclasses: the parsers build new instances and
nothing downstream mutates them, so a FieldSpec or Item can be rendered
any number of times with identical output.
"""

from .errors import FormSpecError, MalformedSpecError
from .models import ElementKind, ElementMatch, FieldSpec, InputType, Item, Modifier

__all__ = [
    "FormSpecError",
    "MalformedSpecError",
    "ElementKind",
    "ElementMatch",
    "FieldSpec",
    "InputType",
    "Item",
    "Modifier",
]
