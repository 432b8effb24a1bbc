"""Top-level package for the form specification toolkit.

Provides subpackages:
- formspec_toolkit.core – immutable field/item models and errors
- formspec_toolkit.parsing – line grammar, element dispatch, item parsers
- formspec_toolkit.rendering – markup renderer and document adapter
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("formspec_toolkit")
except PackageNotFoundError:
    # Running from a source checkout without an install
    __version__ = "0.0.0"

from formspec_toolkit.config import ErrorPolicy, FormConfig
from formspec_toolkit.pipeline import FieldResult, render_block, render_blocks
from formspec_toolkit.rendering.document import render_form_document, render_forms

__all__: list[str] = [
    "__version__",
    "ErrorPolicy",
    "FormConfig",
    "FieldResult",
    "render_block",
    "render_blocks",
    "render_form_document",
    "render_forms",
]
