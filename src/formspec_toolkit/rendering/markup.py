"""
Module: rendering.markup

Purpose:
    Render a classified field into an HTML fragment. Pure string
    construction: the same FieldSpec and ElementMatch always produce
    byte-identical markup.

Key Functions:
    - render_markup(): (ElementMatch, FieldSpec) -> fragment
    - render_choice(): One radio/checkbox input and its label

Dependencies:
    - html (std): Escaping of attribute values and text

Used By:
    - pipeline: Final step of field rendering

Markup Conventions:
    - Single-control kinds use "<field id>_response" as the control id.
    - Choice inputs use "<field id>_<value>" so ids are unique per field.
    - Checkbox names carry the "[]" array suffix; radios never do.
"""

from __future__ import annotations

from html import escape
from typing import List, Optional

from formspec_toolkit.config import MarkupConfig
from formspec_toolkit.core.errors import MalformedSpecError
from formspec_toolkit.core.models.fields import ElementKind, ElementMatch, FieldSpec
from formspec_toolkit.core.models.items import InputType, Item


def _attr(value: object) -> str:
    return escape(str(value), quote=True)


def _classes(*names: str) -> str:
    return " ".join(name for name in names if name)


def _control_id(field: FieldSpec) -> str:
    return f"{field.id}_response"


def submission_name(code: str, input_type: InputType) -> str:
    """Form field name; checkboxes submit an array."""
    return f"{code}[]" if input_type is InputType.CHECKBOX else code


def render_text(field: FieldSpec, width: Optional[int]) -> str:
    size = f" size='{width}'" if width is not None else ""
    return f"<input type='text' id='{_attr(_control_id(field))}' name='{_attr(field.code)}'{size} />"


def render_textarea(field: FieldSpec, rows: int) -> str:
    return f"<textarea id='{_attr(_control_id(field))}' name='{_attr(field.code)}' rows='{rows}'></textarea>"


def render_choice(field: FieldSpec, item: Item, input_type: InputType, config: MarkupConfig) -> str:
    """
    Render one radio/checkbox input followed by its label.

    Args:
        field: Parent field (supplies id prefix and code)
        item: Choice to render
        input_type: RADIO or CHECKBOX
        config: CSS class names

    Returns:
        "<input .../><label ...>label</label>"
    """
    item_id = _attr(f"{field.id}_{item.value}")
    classes = _classes(config.response_class, config.correct_class if item.correct else "")
    checked = " checked='checked'" if item.selected else ""
    return (
        f"<input type='{input_type.value}' name='{_attr(submission_name(field.code, input_type))}' "
        f"id='{item_id}' value='{_attr(item.value)}' class='{classes}'{checked} />"
        f"<label for='{item_id}' class='{classes}'>{escape(item.label)}</label>"
    )


def render_choice_set(field: FieldSpec, match: ElementMatch, config: MarkupConfig) -> str:
    input_type = InputType.CHECKBOX if match.kind is ElementKind.CHECKBOX_SET else InputType.RADIO
    return "".join(render_choice(field, item, input_type, config) for item in match.items)


def render_bare_list(field: FieldSpec, match: ElementMatch, config: MarkupConfig) -> str:
    parts = ["<ul>"]
    for item in match.items:
        if item.input_type is None:
            raise MalformedSpecError(
                f"List item {item.value!r} has no control type", field_id=field.id, rhs=field.rhs
            )
        parts.append(f"<li>{render_choice(field, item, item.input_type, config)}</li>")
    parts.append("</ul>")
    return "".join(parts)


def render_select(field: FieldSpec, match: ElementMatch, config: MarkupConfig) -> str:
    """
    Render a select with a leading empty placeholder option.

    Inline selects only know "selected". Multiline selects distinguish a
    preselected option from the correct answer, which gets the marker
    class instead.
    """
    parts = [
        f"<select id='{_attr(_control_id(field))}' name='{_attr(field.code)}'>",
        f"<option value=''>{escape(config.placeholder_label)}</option>",
    ]
    for item in match.items:
        attrs = f" value='{_attr(item.value)}'"
        if item.correct:
            attrs += f" class='{_attr(config.correct_class)}'"
        if item.selected:
            attrs += " selected='selected'"
        parts.append(f"<option{attrs}>{escape(item.label)}</option>")
    parts.append("</select>")
    return "".join(parts)


def render_control(field: FieldSpec, match: ElementMatch, config: MarkupConfig) -> str:
    """Render only the control part of a field ("" for UNMATCHED)."""
    kind = match.kind
    if kind is ElementKind.TEXT:
        return render_text(field, match.width)
    if kind is ElementKind.TEXTAREA:
        rows = config.default_textarea_rows if match.rows is None else match.rows
        return render_textarea(field, rows)
    if kind in (ElementKind.RADIO_SET, ElementKind.CHECKBOX_SET):
        return render_choice_set(field, match, config)
    if kind is ElementKind.BARE_LIST:
        return render_bare_list(field, match, config)
    if kind in (ElementKind.SELECT_INLINE, ElementKind.SELECT_MULTILINE):
        return render_select(field, match, config)
    if kind is ElementKind.UNMATCHED:
        return ""
    raise MalformedSpecError(f"No renderer for element kind {kind}", field_id=field.id, rhs=field.rhs)


def render_markup(
    match: ElementMatch,
    field: FieldSpec,
    config: Optional[MarkupConfig] = None,
) -> str:
    """
    Render the full fragment for one field.

    The fragment is a wrapper div carrying the field id, a `data-name`
    attribute with the code and the required marker class, then the
    question label, then the control.

    Args:
        match: Classified right-hand side
        field: Parsed header
        config: Markup defaults (default MarkupConfig())

    Returns:
        HTML fragment string.

    Raises:
        MalformedSpecError: If the match cannot be rendered.

    Example:
        >>> field = FieldSpec("quiz_q", "q", "q", False, "___", "q = ___")
        >>> render_markup(ElementMatch(ElementKind.TEXT), field)
        "<div class='form element' id='quiz_q' data-name='q'><label class='question' for='quiz_q'>q</label><input type='text' id='quiz_q_response' name='q' /></div>"
    """
    config = config or MarkupConfig()
    classes: List[str] = ["form", "element"]
    if field.required:
        classes.append(config.required_class)

    return (
        f"<div class='{_attr(' '.join(classes))}' id='{_attr(field.id)}' data-name='{_attr(field.code)}'>"
        f"<label class='question' for='{_attr(field.id)}'>{escape(field.name)}</label>"
        f"{render_control(field, match, config)}"
        "</div>"
    )
