"""
Core Models Package

| Model | Purpose |
|-------|---------|
| `FieldSpec` | One parsed question header line |
| `ElementKind` | Classification of the right-hand side |
| `ElementMatch` | Dispatcher result: kind plus parsed parameters |
| `Item` | One selectable choice or option |
| `Modifier` | Resolved per-item state flags |
"""

from .fields import ElementKind, ElementMatch, FieldSpec
from .items import InputType, Item, Modifier

__all__ = [
    "ElementKind",
    "ElementMatch",
    "FieldSpec",
    "InputType",
    "Item",
    "Modifier",
]
