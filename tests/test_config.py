"""
Tests for config

Test Coverage:
- Defaults of MarkupConfig / DocumentConfig / FormConfig
- Validation of numeric defaults
- ErrorPolicy helpers
"""
import pytest

from formspec_toolkit.config import DocumentConfig, ErrorPolicy, FormConfig, MarkupConfig


def test_markup_config_defaults():
    """Defaults match the documented markup conventions."""
    config = MarkupConfig()

    assert config.default_textarea_rows == 3
    assert config.default_text_width is None
    assert config.placeholder_label == "----"
    assert config.correct_class == "correct"


def test_document_config_defaults():
    config = DocumentConfig()

    assert config.display_label == "forms.display"
    assert config.save_label == "forms.save"
    assert config.action_prefix == "form/"


@pytest.mark.parametrize("kwargs", [
    {"default_textarea_rows": 0},
    {"default_text_width": -5},
])
def test_markup_config_when_non_positive_then_raises(kwargs):
    with pytest.raises(ValueError, match="must be positive"):
        MarkupConfig(**kwargs)


def test_form_config_when_default_then_lenient():
    config = FormConfig()

    assert config.error_policy is ErrorPolicy.LENIENT
    assert not config.strict
    assert FormConfig(error_policy=ErrorPolicy.STRICT).strict


def test_form_config_when_frozen_then_immutable():
    config = FormConfig()
    with pytest.raises(AttributeError):
        config.error_policy = ErrorPolicy.STRICT  # type: ignore
