"""
Module: parsing.items

Purpose:
    Extract Item tuples from the right-hand side of a header line
    (inline syntax) or from the body lines that follow it (multiline
    syntax).

Key Functions:
    - parse_inline_choices(): `(x) A (=) B -> Bee () C` radio/checkbox sets
    - parse_inline_options(): `{BOS, [SFO], (NYC)}` select shorthand
    - parse_multiline_options(): Indented option lines of a `{` select
    - parse_multiline_choices(): Body lines of a bare `code =` list
    - split_value_label(): `value -> label` splitting

Dependencies:
    - re (std)
    - parsing.modifiers: Modifier resolution

Used By:
    - parsing.grammar: Each grammar rule delegates item extraction here

Syntax Notes:
    Inline and bare-list choices carry a modifier token inside the marker
    (`(x)`, `[=]`, `(X=)`). Multiline select options instead use the
    wrapping bracket itself: `(NYC)` is preselected, `[SFO]` is the
    correct answer. Inline selects collapse both notations to
    "preselected".
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence, Tuple

from formspec_toolkit.core.errors import MalformedSpecError
from formspec_toolkit.core.models.items import InputType, Item
from formspec_toolkit.parsing.modifiers import resolve_modifier

logger = logging.getLogger(__name__)

# Zero to two characters, no brackets: "", " ", "x", "=", "X="
MODIFIER_PATTERN = r"[^()\[\]]{0,2}"

_INLINE_RADIO_RE = re.compile(r"\((" + MODIFIER_PATTERN + r")\)\s*([^()]+)")
_INLINE_CHECKBOX_RE = re.compile(r"\[(" + MODIFIER_PATTERN + r")\]\s*([^\[\]]+)")
_ARROW_RE = re.compile(r"^(.*?)\s*->\s*(.*)$")

# Multiline select options, in priority order
_OPTION_RULES: Tuple[Tuple[str, "re.Pattern[str]", bool, bool], ...] = (
    # name, pattern, selected, correct
    ("selected_pair", re.compile(r"^\((.+?)\s*->\s*(.+)\)$"), True, False),
    ("correct_pair", re.compile(r"^\[(.+?)\s*->\s*(.+)\]$"), False, True),
    ("plain_pair", re.compile(r"^([^()\[\]]+?)\s*->\s*(.+)$"), False, False),
    ("selected_value", re.compile(r"^\((.+)\)$"), True, False),
    ("correct_value", re.compile(r"^\[(.+)\]$"), False, True),
    ("plain_value", re.compile(r"^([^(].*)$"), False, False),
)

# Bare-list lines with an explicit modifier marker
_MARKED_CHOICE_RE = re.compile(
    r"^(?:\((?P<radio>" + MODIFIER_PATTERN + r")\)|\[(?P<checkbox>" + MODIFIER_PATTERN + r")\])"
    r"\s*(?P<text>\S.*)$"
)

_BLOCK_CLOSERS = ("}",)


def split_value_label(text: str) -> Tuple[str, str]:
    """
    Split `value -> label` text.

    Returns:
        (value, label); both equal the stripped text when there is no arrow.
        A blank label falls back to the value.

    Example:
        >>> split_value_label("C -> option 3")
        ('C', 'option 3')
        >>> split_value_label("opt2")
        ('opt2', 'opt2')
    """
    text = text.strip()
    match = _ARROW_RE.match(text)
    if match:
        value = match.group(1).strip()
        return value, match.group(2).strip() or value
    return text, text


def parse_inline_choices(rhs: str, input_type: InputType) -> Tuple[Item, ...]:
    """
    Parse the tuples of an inline radio or checkbox set.

    Args:
        rhs: Right-hand side, e.g. "(x) A (=) B () C -> See"
        input_type: RADIO scans `( )` markers, CHECKBOX scans `[ ]` markers

    Returns:
        Items in source order.

    Raises:
        MalformedSpecError: If a value is empty or repeated.
    """
    pattern = _INLINE_RADIO_RE if input_type is InputType.RADIO else _INLINE_CHECKBOX_RE
    items = []
    for token, text in pattern.findall(rhs):
        value, label = split_value_label(text)
        items.append(Item.from_modifier(value, label, resolve_modifier(token)))
    return check_unique_values(items)


def parse_inline_options(rhs: str) -> Tuple[Item, ...]:
    """
    Parse the comma-separated tokens of a `{...}` select shorthand.

    A token wrapped in `(...)` or `[...]` is preselected; a bare token is
    a plain option. Value and label are both the token content.

    Example:
        >>> [(i.value, i.selected) for i in parse_inline_options("{BOS, [SFO], (NYC)}")]
        [('BOS', False), ('SFO', True), ('NYC', True)]
    """
    body = rhs.strip()
    if body.startswith("{") and body.endswith("}"):
        body = body[1:-1]

    items = []
    for token in body.split(","):
        token = token.strip()
        selected = False
        if len(token) >= 2 and (token[0], token[-1]) in (("(", ")"), ("[", "]")):
            token = token[1:-1].strip()
            selected = True
        if not token:
            continue
        items.append(Item(value=token, label=token, selected=selected))
    return tuple(items)


def _clean_body_line(line: str) -> Optional[str]:
    """Strip a body line and one trailing comma; None for blank/closing lines."""
    line = line.strip()
    if line.endswith(","):
        line = line[:-1].rstrip()
    if not line or line in _BLOCK_CLOSERS:
        return None
    return line


def _match_option(line: str) -> Optional[Item]:
    for _name, pattern, selected, correct in _OPTION_RULES:
        match = pattern.match(line)
        if match is None:
            continue
        value = match.group(1).strip()
        label = match.group(2).strip() if match.lastindex and match.lastindex >= 2 else value
        if not value:
            continue
        return Item(value=value, label=label, selected=selected, correct=correct)
    return None


def parse_multiline_options(lines: Iterable[str]) -> Tuple[Item, ...]:
    """
    Parse the body lines of a multiline select.

    Lines are tried against, in order: `(value -> label)` selected,
    `[value -> label]` correct, `value -> label` plain, `(value)`
    selected, `[value]` correct, and a bare value not starting with `(`.
    Lines matching none of these are skipped.

    Args:
        lines: Lines after the header line

    Returns:
        Options in source order.
    """
    items = []
    for raw in lines:
        line = _clean_body_line(raw)
        if line is None:
            continue
        item = _match_option(line)
        if item is None:
            logger.debug(f"Skipping unrecognised select option line: {raw!r}")
            continue
        items.append(item)
    return tuple(items)


def parse_multiline_choices(lines: Iterable[str]) -> Tuple[Item, ...]:
    """
    Parse the body lines of a bare list (`code =` followed by choices).

    Each line picks its own control: `(` gives a radio button, `[` a
    checkbox. A marker holding a modifier (`(x) A -> Apple`,
    `[=] B`) resolves flags from the modifier; a wrapped value
    (`(A -> Apple)`, `[B]`) is selected for `(` and correct for `[`.
    Lines without either marker are skipped.

    Raises:
        MalformedSpecError: If a value is empty or repeated.
    """
    items = []
    for raw in lines:
        line = _clean_body_line(raw)
        if line is None:
            continue

        marked = _MARKED_CHOICE_RE.match(line)
        if marked:
            if marked.group("radio") is not None:
                input_type, token = InputType.RADIO, marked.group("radio")
            else:
                input_type, token = InputType.CHECKBOX, marked.group("checkbox")
            value, label = split_value_label(marked.group("text"))
            items.append(Item.from_modifier(value, label, resolve_modifier(token), input_type))
            continue

        option = _match_option(line) if line[0] in "([" else None
        if option is None or not (option.selected or option.correct):
            logger.debug(f"Skipping unrecognised list line: {raw!r}")
            continue
        input_type = InputType.RADIO if option.selected else InputType.CHECKBOX
        items.append(replace(option, input_type=input_type))

    return check_unique_values(items)


def check_unique_values(items: Sequence[Item]) -> Tuple[Item, ...]:
    """
    Enforce the per-field identifier invariant.

    Choice inputs derive their DOM id from `<field id>_<value>`, so values
    inside one set must be non-empty and distinct.

    Raises:
        MalformedSpecError: On an empty or duplicated value.
    """
    seen: List[str] = []
    for item in items:
        if not item.value:
            raise MalformedSpecError(f"Choice with empty value (label {item.label!r})")
        if item.value in seen:
            raise MalformedSpecError(f"Duplicate choice value: {item.value!r}")
        seen.append(item.value)
    return tuple(items)
