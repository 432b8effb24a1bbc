"""
Module: parsing.modifiers

Purpose:
    Resolve the short modifier token written inside `( )` / `[ ]` markers
    into selected/correct flags.

Key Functions:
    - resolve_modifier(): Token -> Modifier

Used By:
    - parsing.items: Inline choice sets and bare lists
"""

from __future__ import annotations

from formspec_toolkit.core.models.items import Modifier

SELECTED_MARK = "x"
CORRECT_MARK = "="


def resolve_modifier(token: str | None) -> Modifier:
    """
    Resolve a modifier token.

    Matching is case-insensitive and works on a lower-cased copy, so the
    caller's string is never altered. Both marks may appear together.

    Args:
        token: Modifier text, e.g. "", "x", "=", "X=". None is treated as "".

    Returns:
        Modifier with `raw` set to the original token.

    Example:
        >>> resolve_modifier("X=")
        Modifier(raw='X=', selected=True, correct=True)
    """
    raw = token or ""
    normalized = raw.lower()
    return Modifier(
        raw=raw,
        selected=SELECTED_MARK in normalized,
        correct=CORRECT_MARK in normalized,
    )
