"""Shared fixtures for parser tests."""

import sys
from pathlib import Path

import pytest


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

from chinese_react_parser.config import get_settings
from chinese_react_parser.models import ExtractionOptions


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def strict_options() -> ExtractionOptions:
    return ExtractionOptions(relaxed_mode=False)


@pytest.fixture
def debug_options() -> ExtractionOptions:
    return ExtractionOptions(debug=True)
