"""
Module: fields

Purpose:
    Provides FieldSpec - one parsed question header - together with the
    ElementKind classification and the ElementMatch produced by the
    element dispatcher.

Key Classes:
    - FieldSpec: id, code, name, required flag and right-hand side
    - ElementKind: Which control a right-hand side describes
    - ElementMatch: Kind plus parsed parameters (items, width, rows)

Dependencies:
    - dataclasses (std)
    - .items.Item

Used By:
    - parsing.line_parser: Builds FieldSpec
    - parsing.grammar: Builds ElementMatch
    - rendering.markup: Consumes both
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .items import Item


class ElementKind(str, Enum):
    """Classification of a field's right-hand side."""
    TEXT = "text"
    TEXTAREA = "textarea"
    RADIO_SET = "radio_set"
    CHECKBOX_SET = "checkbox_set"
    SELECT_INLINE = "select_inline"
    SELECT_MULTILINE = "select_multiline"
    BARE_LIST = "bare_list"
    UNMATCHED = "unmatched"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """
    One parsed question definition.

    Attributes:
        id: DOM identifier, "<title>_<code>"
        code: Submission name of the control (non-empty, no whitespace)
        name: Question text shown to the user (defaults to code)
        required: Header used "*=" instead of "="
        rhs: Text after "=", trailing whitespace removed
        raw_text: Whole block the header came from, including body lines

    Invariants:
        - code is non-empty and whitespace-free

    Example:
        >>> spec = FieldSpec("quiz_q", "q", "Pick one", True, "(x) A", "q -> Pick one *= (x) A")
        >>> spec.body_lines
        ()
    """
    id: str
    code: str
    name: str
    required: bool
    rhs: str
    raw_text: str

    def __post_init__(self) -> None:
        if not self.code or any(ch.isspace() for ch in self.code):
            raise ValueError(f"Field code must be a non-empty token: {self.code!r}")

    @property
    def body_lines(self) -> Tuple[str, ...]:
        """Lines of the block after the header line."""
        return tuple(self.raw_text.splitlines()[1:])


@dataclass(frozen=True, slots=True)
class ElementMatch:
    """
    Result of classifying a right-hand side.

    Attributes:
        kind: Element kind
        rule: Name of the grammar rule that matched ("" for UNMATCHED)
        items: Parsed choices/options, in source order
        width: Text input size (TEXT only, None = unspecified)
        rows: Textarea rows (TEXTAREA only)
    """
    kind: ElementKind
    rule: str = ""
    items: Tuple[Item, ...] = ()
    width: Optional[int] = None
    rows: Optional[int] = None

    @property
    def matched(self) -> bool:
        return self.kind is not ElementKind.UNMATCHED
