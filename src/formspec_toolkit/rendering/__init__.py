"""
Markup rendering.

- markup: pure (ElementMatch, FieldSpec) -> fragment
- document: wraps a slide in a form and substitutes fragments
"""

from .markup import render_markup

__all__ = ["render_markup"]
