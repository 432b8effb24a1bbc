"""
Module: config

Purpose:
    Configuration dataclasses for form compilation. Provides immutable
    settings for markup defaults, the document wrapper, and the policy
    applied when a field specification turns out to be malformed.

Key Classes:
    - MarkupConfig: Defaults and CSS hooks used by the markup renderer
    - DocumentConfig: Labels and attributes of the form wrapper
    - FormConfig: Main configuration passed through the pipeline
    - ErrorPolicy: Strict (fail-fast) or lenient (per-field) error handling

Dependencies:
    - dataclasses: For frozen dataclass support

Used By:
    - parsing.grammar: Default textarea rows / text width
    - rendering.markup: Placeholder label and CSS classes
    - rendering.document: Form wrapper labels and action
    - pipeline: Error policy
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ErrorPolicy(str, Enum):
    """How a malformed field affects the rest of the document."""
    STRICT = "strict"    # First failure aborts form rendering for the document
    LENIENT = "lenient"  # Failed block is left as-is, other fields still render

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MarkupConfig:
    """
    Defaults and CSS hooks for generated markup.

    Attributes:
        default_textarea_rows: Rows used when `[ ]` gives no count (default 3)
        default_text_width: Size used when `___` gives no width (default None,
            meaning no size attribute is emitted)
        placeholder_label: Text of the empty first option of every select
        response_class: Class carried by every choice input and its label
        correct_class: Marker class for items flagged as the correct answer
        required_class: Marker class added to the wrapper of required fields
    """
    default_textarea_rows: int = 3
    default_text_width: Optional[int] = None
    placeholder_label: str = "----"
    response_class: str = "response"
    correct_class: str = "correct"
    required_class: str = "required"

    def __post_init__(self) -> None:
        if self.default_textarea_rows <= 0:
            raise ValueError(f"default_textarea_rows must be positive: {self.default_textarea_rows}")
        if self.default_text_width is not None and self.default_text_width <= 0:
            raise ValueError(f"default_text_width must be positive: {self.default_text_width}")


@dataclass(frozen=True)
class DocumentConfig:
    """
    Settings for the `<form>` wrapper built around a slide.

    The button labels are opaque tokens; translating them is up to the host.

    Attributes:
        display_label: Value of the "display responses" button
        save_label: Value of the (initially disabled) submit button
        action_prefix: Prefix of the form action, followed by the title
        method: HTTP method of the form
    """
    display_label: str = "forms.display"
    save_label: str = "forms.save"
    action_prefix: str = "form/"
    method: str = "POST"


@dataclass(frozen=True)
class FormConfig:
    """
    Configuration for form compilation.

    Attributes:
        markup: Markup defaults (default MarkupConfig())
        document: Form wrapper settings (default DocumentConfig())
        error_policy: Handling of malformed fields (default LENIENT)
    """
    markup: MarkupConfig = field(default_factory=MarkupConfig)
    document: DocumentConfig = field(default_factory=DocumentConfig)
    error_policy: ErrorPolicy = ErrorPolicy.LENIENT

    @property
    def strict(self) -> bool:
        return self.error_policy is ErrorPolicy.STRICT
