"""
Module: pipeline

Purpose:
    Per-field orchestration: header parsing, element dispatch, item
    parsing and markup rendering for one text block, with the outcome
    reported as a FieldResult instead of an exception.

Key Functions:
    - render_block(): One text block -> FieldResult
    - render_blocks(): Ordered blocks -> ordered FieldResults, honouring
      the configured ErrorPolicy

Key Classes:
    - FieldResult: Markup or diagnostic for one block

Dependencies:
    - parsing.line_parser / parsing.grammar: Recognition
    - rendering.markup: Fragment construction
    - diagnostics: Diagnostic records

Used By:
    - rendering.document: Rewrites the paragraphs of a slide
    - Host code that manages its own document tree
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from formspec_toolkit.config import FormConfig
from formspec_toolkit.core.errors import MalformedSpecError
from formspec_toolkit.core.models.fields import ElementKind, ElementMatch, FieldSpec
from formspec_toolkit.diagnostics import (
    Diagnostic,
    DiagnosticsCollector,
    malformed_spec,
    unmatched_element,
)
from formspec_toolkit.parsing.grammar import classify_field
from formspec_toolkit.parsing.line_parser import parse_field_block
from formspec_toolkit.rendering.markup import render_markup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldResult:
    """
    Outcome of rendering one text block.

    Attributes:
        text: Original block text
        field: Parsed header, None when the block is not a field
        match: Dispatcher result, None when not a field or when rendering failed early
        markup: Replacement fragment, None when nothing should be substituted
        diagnostic: Warning (unmatched element) or error (malformed spec)
        error: The MalformedSpecError behind an error diagnostic
    """
    text: str
    field: Optional[FieldSpec] = None
    match: Optional[ElementMatch] = None
    markup: Optional[str] = None
    diagnostic: Optional[Diagnostic] = None
    error: Optional[MalformedSpecError] = None

    @property
    def is_field(self) -> bool:
        return self.field is not None

    @property
    def ok(self) -> bool:
        """True unless the block was a field that failed to render."""
        return self.error is None

    @property
    def kind(self) -> Optional[ElementKind]:
        return self.match.kind if self.match else None


def _report(
    diagnostic: Diagnostic,
    log: logging.Logger,
    diagnostics: Optional[DiagnosticsCollector],
    error: Optional[BaseException] = None,
) -> None:
    log.log(diagnostic.log_level, diagnostic.message)
    if error is not None:
        log.debug(f"Malformed field {diagnostic.field_id}: {diagnostic.rhs!r}", exc_info=error)
    if diagnostics is not None:
        diagnostics.add(diagnostic)


def render_block(
    text: str,
    title: str,
    config: Optional[FormConfig] = None,
    *,
    log: Optional[logging.Logger] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> FieldResult:
    """
    Render one paragraph-like block.

    Never raises for a field that fails to render, whether the
    specification is malformed or something unexpected goes wrong: the
    failure is returned on the result (and logged) so the caller picks
    the policy.

    Args:
        text: Block text; the first line is the candidate header
        title: Form title, prefix of every field id
        config: Form configuration (default FormConfig())
        log: Logger receiving diagnostics (default: this module's logger)
        diagnostics: Optional collector receiving diagnostics

    Returns:
        FieldResult. `markup` is None for non-field blocks and failures.

    Example:
        >>> render_block("q = ___[50]", "quiz").markup
        "<div class='form element' id='quiz_q' data-name='q'><label class='question' for='quiz_q'>q</label><input type='text' id='quiz_q_response' name='q' size='50' /></div>"
    """
    config = config or FormConfig()
    log = log or logger

    field = parse_field_block(text, title)
    if field is None:
        return FieldResult(text=text)

    match: Optional[ElementMatch] = None
    try:
        match = classify_field(field, config.markup)
        markup = render_markup(match, field, config.markup)
    except MalformedSpecError as e:
        error = e.with_context(field.id, field.rhs)
    except Exception as e:
        # Anything else escaping a field is still that field's failure
        error = MalformedSpecError(f"Unexpected {type(e).__name__}: {e}", field_id=field.id, rhs=field.rhs)
        error.__cause__ = e
    else:
        diagnostic = None
        if not match.matched:
            diagnostic = unmatched_element(field.id, field.rhs)
            _report(diagnostic, log, diagnostics)
        return FieldResult(text=text, field=field, match=match, markup=markup, diagnostic=diagnostic)

    diagnostic = malformed_spec(error.message, error.field_id, error.rhs)
    _report(diagnostic, log, diagnostics, error)
    return FieldResult(text=text, field=field, match=match, diagnostic=diagnostic, error=error)


def render_blocks(
    blocks: Iterable[str],
    title: str,
    config: Optional[FormConfig] = None,
    *,
    log: Optional[logging.Logger] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> List[FieldResult]:
    """
    Render blocks in document order.

    With ErrorPolicy.LENIENT every block gets a result and failed fields
    simply carry no markup. With ErrorPolicy.STRICT the first failure is
    raised, so no partial set of results escapes.

    Raises:
        MalformedSpecError: First failure, STRICT policy only.
    """
    config = config or FormConfig()
    results = []
    for text in blocks:
        result = render_block(text, title, config, log=log, diagnostics=diagnostics)
        if config.strict and result.error is not None:
            raise result.error
        results.append(result)
    return results
