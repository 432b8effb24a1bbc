"""
Specification parsing.

Leaves first: modifiers -> line_parser -> items -> grammar.
"""

from .grammar import RULES, GrammarRule, classify, classify_field
from .items import (
    parse_inline_choices,
    parse_inline_options,
    parse_multiline_choices,
    parse_multiline_options,
    split_value_label,
)
from .line_parser import parse_field_block, parse_field_line
from .modifiers import resolve_modifier

__all__ = [
    "RULES",
    "GrammarRule",
    "classify",
    "classify_field",
    "parse_inline_choices",
    "parse_inline_options",
    "parse_multiline_choices",
    "parse_multiline_options",
    "split_value_label",
    "parse_field_block",
    "parse_field_line",
    "resolve_modifier",
]
