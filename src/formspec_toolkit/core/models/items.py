"""
Module: items

Purpose:
    Provides the Item dataclass - one selectable choice of a radio,
    checkbox or select field - and the Modifier dataclass that holds
    the resolved per-item state flags.

Key Classes:
    - Item: Value/label pair with selected and correct flags
    - Modifier: Normalized modifier token
    - InputType: Control type of a choice (radio or checkbox)

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - parsing.modifiers: Builds Modifier instances
    - parsing.items: Builds Item instances
    - rendering.markup: Renders Item instances
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InputType(str, Enum):
    """Control type of a choice item."""
    RADIO = "radio"
    CHECKBOX = "checkbox"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Modifier:
    """
    Resolved modifier token.

    `raw` is the token exactly as written by the author; the flags are
    derived from a lower-cased copy of it.

    Attributes:
        raw: Token text, e.g. "", "x", "=", "X="
        selected: Token contains "x" (case-insensitive)
        correct: Token contains "="

    Example:
        >>> Modifier(raw="X=", selected=True, correct=True).correct
        True
    """
    raw: str = ""
    selected: bool = False
    correct: bool = False


@dataclass(frozen=True, slots=True)
class Item:
    """
    One choice within a radio/checkbox set or one option of a select.

    Attributes:
        value: Submission value; also suffixes the DOM id of choice inputs
        label: Display text
        selected: Preselected / checked by default
        correct: Marked as the correct answer (styling hook only)
        input_type: Control type for bare-list items, None elsewhere
    """
    value: str
    label: str
    selected: bool = False
    correct: bool = False
    input_type: Optional[InputType] = None

    @classmethod
    def plain(cls, value: str, label: Optional[str] = None) -> Item:
        """Unflagged item; label defaults to value."""
        return cls(value=value, label=value if label is None else label)

    @classmethod
    def from_modifier(
        cls,
        value: str,
        label: str,
        modifier: Modifier,
        input_type: Optional[InputType] = None,
    ) -> Item:
        """Item whose flags come from a resolved modifier."""
        return cls(
            value=value,
            label=label,
            selected=modifier.selected,
            correct=modifier.correct,
            input_type=input_type,
        )
