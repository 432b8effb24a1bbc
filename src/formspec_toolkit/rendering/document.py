"""
Module: rendering.document

Purpose:
    Apply form rendering to a whole slide. Wraps the slide content in a
    `<form>`, adds the display/save tool buttons, and replaces every
    paragraph holding a field specification with its generated markup.

Key Functions:
    - render_forms(): Entry point; no-op for slides not marked as forms
    - render_form_document(): Wrap and render one slide
    - build_form_wrapper(): The tools div and form element

Dependencies:
    - bs4 (BeautifulSoup): HTML parsing and tree edits
    - pipeline: Per-field rendering

Used By:
    - Slide compilers that mark slides with a form title

Error Policy:
    LENIENT: a paragraph whose field fails stays as written; all other
    fields are rendered. STRICT: the first failure is logged and the
    slide is returned exactly as given, with no form markup applied.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from bs4 import BeautifulSoup, Tag

from formspec_toolkit.config import FormConfig
from formspec_toolkit.core.errors import MalformedSpecError
from formspec_toolkit.diagnostics import DiagnosticsCollector
from formspec_toolkit.pipeline import render_blocks

logger = logging.getLogger(__name__)

HTML_PARSER = "html.parser"


def build_form_wrapper(soup: BeautifulSoup, title: str, config: FormConfig) -> Tuple[Tag, Tag]:
    """
    Create the tools div and the form element for a slide.

    The tools div holds a "display" button and a disabled submit button;
    their values are label tokens left for the host to translate.

    Returns:
        (tools, form) tags, not yet attached to the tree.
    """
    doc_config = config.document

    tools = soup.new_tag("div", attrs={"class": "tools"})
    display = soup.new_tag(
        "input",
        attrs={"class": "display", "type": "button", "value": doc_config.display_label},
    )
    save = soup.new_tag(
        "input",
        attrs={
            "class": "save",
            "type": "submit",
            "value": doc_config.save_label,
            "disabled": "disabled",
        },
    )
    tools.append(display)
    tools.append(save)

    form = soup.new_tag(
        "form",
        attrs={
            "class": "tools",
            "id": title,
            "action": f"{doc_config.action_prefix}{title}",
            "method": doc_config.method,
        },
    )
    return tools, form


def render_form_document(
    html: str,
    title: str,
    config: Optional[FormConfig] = None,
    *,
    log: Optional[logging.Logger] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> str:
    """
    Render all form fields of a slide.

    Args:
        html: Slide HTML fragment
        title: Form title; becomes the form id and the field id prefix
        config: Form configuration (default FormConfig())
        log: Logger receiving diagnostics (default: this module's logger)
        diagnostics: Optional collector receiving diagnostics

    Returns:
        HTML with the slide content inside the form. Under the STRICT
        policy a malformed field makes this return `html` unchanged.
    """
    config = config or FormConfig()
    log = log or logger

    soup = BeautifulSoup(html, HTML_PARSER)
    tools, form = build_form_wrapper(soup, title, config)
    soup.append(tools)
    soup.append(form)

    for child in list(soup.contents):
        if child is form:
            continue
        form.append(child.extract())

    paragraphs = form.find_all("p")
    try:
        results = render_blocks(
            [p.get_text() for p in paragraphs],
            title,
            config,
            log=log,
            diagnostics=diagnostics,
        )
    except MalformedSpecError as e:
        log.warning(f"Form rendering aborted for {title}: {e}")
        return html

    for paragraph, result in zip(paragraphs, results):
        if result.markup is None:
            continue
        fragment = BeautifulSoup(result.markup, HTML_PARSER)
        paragraph.replace_with(*list(fragment.contents))

    return str(soup)


def render_forms(
    html: str,
    form: Optional[str] = None,
    config: Optional[FormConfig] = None,
    *,
    log: Optional[logging.Logger] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> str:
    """
    Render forms for a slide if it is marked as one.

    Args:
        html: Slide HTML fragment
        form: Form title from the slide options; falsy means "not a form"

    Returns:
        Rendered HTML, or `html` untouched when `form` is falsy.
    """
    if not form:
        return html
    return render_form_document(html, form, config, log=log, diagnostics=diagnostics)
