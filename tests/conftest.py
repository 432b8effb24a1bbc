import logging
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import formspec_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from formspec_toolkit.config import ErrorPolicy, FormConfig


# Common test fixtures
@pytest.fixture
def form_title():
    """Return a test form title."""
    return "quiz"


@pytest.fixture
def strict_config():
    """FormConfig that aborts on the first malformed field."""
    return FormConfig(error_policy=ErrorPolicy.STRICT)


@pytest.fixture
def test_logger():
    """Dedicated logger so caplog assertions ignore other modules."""
    return logging.getLogger("formspec_toolkit.tests")
