"""
Module: parsing.grammar

Purpose:
    Element dispatcher. Classifies a field's right-hand side against an
    ordered list of named grammar rules and builds the typed ElementMatch
    for the first rule that accepts it.

Key Functions:
    - classify(): rhs (+ body lines) -> ElementMatch
    - classify_field(): Same, taking a FieldSpec

Key Classes:
    - GrammarRule: Named pattern plus builder

Dependencies:
    - re (std)
    - parsing.items: Item extraction per rule

Used By:
    - pipeline: Dispatch step of field rendering

Rule Order:
    Several patterns are prefixes of others (`[  5]` vs `[x] A`, `{` vs
    `{A, B}`), so rules are tried strictly in this order:

        textarea, text, radio_set, checkbox_set,
        select_inline, select_multiline, bare_list

    Anything left over is UNMATCHED.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from formspec_toolkit.config import MarkupConfig
from formspec_toolkit.core.errors import MalformedSpecError
from formspec_toolkit.core.models.fields import ElementKind, ElementMatch, FieldSpec
from formspec_toolkit.core.models.items import InputType
from formspec_toolkit.parsing.items import (
    MODIFIER_PATTERN,
    parse_inline_choices,
    parse_inline_options,
    parse_multiline_choices,
    parse_multiline_options,
)

# Builder signature: (regex match, body lines, markup config) -> ElementMatch
RuleBuilder = Callable[["re.Match[str]", Sequence[str], MarkupConfig], ElementMatch]


@dataclass(frozen=True)
class GrammarRule:
    """
    One element grammar.

    Attributes:
        name: Rule name, recorded on the ElementMatch
        kind: Element kind produced on a match
        pattern: Regex tested with `match()` against the stripped rhs
        build: Turns the match into an ElementMatch
    """
    name: str
    kind: ElementKind
    pattern: "re.Pattern[str]"
    build: RuleBuilder

    def apply(self, rhs: str, body: Sequence[str], config: MarkupConfig) -> Optional[ElementMatch]:
        """Return an ElementMatch, or None if the rule does not accept rhs."""
        match = self.pattern.match(rhs)
        if match is None:
            return None
        return self.build(match, body, config)


# Longest digit run accepted for a row count or width
MAX_COUNT_DIGITS = 9


def _parse_count(digits: str, what: str) -> int:
    """Positive integer from a digit run; 0 and oversized runs are malformed."""
    significant = digits.lstrip("0")
    if len(significant) > MAX_COUNT_DIGITS:
        raise MalformedSpecError(f"Invalid {what}: {len(significant)} digits, at most {MAX_COUNT_DIGITS} allowed")
    count = int(significant or "0")
    if count <= 0:
        raise MalformedSpecError(f"{what.capitalize()} must be positive: {count}")
    return count


def _build_textarea(match, body, config):
    rows = match.group(1)
    return ElementMatch(
        ElementKind.TEXTAREA,
        rule="textarea",
        rows=_parse_count(rows, "textarea rows") if rows else config.default_textarea_rows,
    )


def _build_text(match, body, config):
    width = match.group(1)
    return ElementMatch(
        ElementKind.TEXT,
        rule="text",
        width=_parse_count(width, "text width") if width else config.default_text_width,
    )


def _build_radio_set(match, body, config):
    items = parse_inline_choices(match.string, InputType.RADIO)
    return ElementMatch(ElementKind.RADIO_SET, rule="radio_set", items=items)


def _build_checkbox_set(match, body, config):
    items = parse_inline_choices(match.string, InputType.CHECKBOX)
    return ElementMatch(ElementKind.CHECKBOX_SET, rule="checkbox_set", items=items)


def _build_select_inline(match, body, config):
    items = parse_inline_options(match.string)
    return ElementMatch(ElementKind.SELECT_INLINE, rule="select_inline", items=items)


def _build_select_multiline(match, body, config):
    items = parse_multiline_options(body)
    return ElementMatch(ElementKind.SELECT_MULTILINE, rule="select_multiline", items=items)


def _build_bare_list(match, body, config):
    items = parse_multiline_choices(body)
    return ElementMatch(ElementKind.BARE_LIST, rule="bare_list", items=items)


RULES: Tuple[GrammarRule, ...] = (
    # [    5]  /  [ ]
    GrammarRule("textarea", ElementKind.TEXTAREA, re.compile(r"^\[\s*(\d*)\s*\]$"), _build_textarea),
    # ___[50]  /  ___
    GrammarRule("text", ElementKind.TEXT, re.compile(r"^_{3,}(?:\[(\d+)\])?$"), _build_text),
    # (x) option one (=) opt2 () opt3 -> option 3
    GrammarRule(
        "radio_set",
        ElementKind.RADIO_SET,
        re.compile(r"^\(" + MODIFIER_PATTERN + r"\)"),
        _build_radio_set,
    ),
    # [x] option one [=] opt2 [] opt3 -> option 3
    GrammarRule(
        "checkbox_set",
        ElementKind.CHECKBOX_SET,
        re.compile(r"^\[" + MODIFIER_PATTERN + r"\]"),
        _build_checkbox_set,
    ),
    # {BOS, [SFO], (NYC)}
    GrammarRule("select_inline", ElementKind.SELECT_INLINE, re.compile(r"^\{(.+)\}$"), _build_select_inline),
    # {  followed by option lines
    GrammarRule("select_multiline", ElementKind.SELECT_MULTILINE, re.compile(r"^\{$"), _build_select_multiline),
    # empty rhs followed by (x)/[x] lines
    GrammarRule("bare_list", ElementKind.BARE_LIST, re.compile(r"^$"), _build_bare_list),
)


def classify(
    rhs: str,
    body: Sequence[str] = (),
    config: Optional[MarkupConfig] = None,
) -> ElementMatch:
    """
    Classify a right-hand side.

    Args:
        rhs: Text after "=" on the header line
        body: Lines after the header line (used by multiline kinds)
        config: Markup defaults (default MarkupConfig())

    Returns:
        ElementMatch from the first accepting rule, or an UNMATCHED match.

    Raises:
        MalformedSpecError: If the accepting rule finds inconsistent items
            or a row count / width that is zero or too large.

    Example:
        >>> classify("___[50]").width
        50
        >>> classify("???").kind
        <ElementKind.UNMATCHED: 'unmatched'>
    """
    config = config or MarkupConfig()
    rhs = rhs.strip()
    for rule in RULES:
        result = rule.apply(rhs, body, config)
        if result is not None:
            return result
    return ElementMatch(ElementKind.UNMATCHED)


def classify_field(field: FieldSpec, config: Optional[MarkupConfig] = None) -> ElementMatch:
    """Classify a parsed field using its rhs and body lines."""
    return classify(field.rhs, field.body_lines, config)
