"""
Module: parsing.line_parser

Purpose:
    Recognise question header lines of the form

        <code> [-> <name>] [*]= [<rhs>]

    and turn them into FieldSpec instances.

Key Functions:
    - parse_field_line(): Match a single line
    - parse_field_block(): Match the first line of a paragraph block

Used By:
    - pipeline: Decides whether a block is a field at all
"""

from __future__ import annotations

import re
from typing import Optional

from formspec_toolkit.core.models.fields import FieldSpec

# Whitespace is required between a name and the separator so that names
# may contain "=" (e.g. "What is 2+2=?").
HEADER_RE = re.compile(
    r"""
    ^(?P<code>\w+)
    (?:
        [ \t]*->[ \t]*(?P<name>.*?)[ \t]+
      | [ \t]*
    )
    (?P<required>\*?)=
    [ \t]?(?P<rhs>.*)$
    """,
    re.VERBOSE,
)


def make_field_id(title: str, code: str) -> str:
    """DOM identifier of a field: "<title>_<code>"."""
    return f"{title}_{code}"


def parse_field_line(line: str, title: str, *, raw_text: Optional[str] = None) -> Optional[FieldSpec]:
    """
    Parse one candidate header line.

    Args:
        line: Single line of text (no newline)
        title: Form title, used as the identifier namespace
        raw_text: Full block text to record on the spec (defaults to line)

    Returns:
        FieldSpec, or None if the line is not a field header.

    Example:
        >>> spec = parse_field_line("q -> Pick one *= (x) A", "quiz")
        >>> (spec.id, spec.name, spec.required, spec.rhs)
        ('quiz_q', 'Pick one', True, '(x) A')
    """
    match = HEADER_RE.match(line)
    if match is None:
        return None

    code = match.group("code")
    name = (match.group("name") or "").strip()
    return FieldSpec(
        id=make_field_id(title, code),
        code=code,
        name=name or code,
        required=bool(match.group("required")),
        rhs=match.group("rhs").rstrip(),
        raw_text=line if raw_text is None else raw_text,
    )


def parse_field_block(text: str, title: str) -> Optional[FieldSpec]:
    """
    Parse a paragraph block whose first line may be a field header.

    Body lines (multiline selects and bare lists) stay in `raw_text`
    and are never reinterpreted as headers of their own.
    """
    lines = text.strip("\r\n").splitlines()
    if not lines:
        return None
    return parse_field_line(lines[0], title, raw_text="\n".join(lines))
