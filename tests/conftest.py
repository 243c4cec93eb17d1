"""Test configuration for structured text processing.

Provides shared environments, a pseudo-rendering helper for directional
formatting characters and settings isolation.
"""

import os

import pytest

from structured_text.bidi import (
    LRE,
    LRM,
    PDF,
    RLE,
    RLM,
    Environment,
    Orientation,
    StructuredTextEngine,
)
from structured_text.config import get_settings

# Keep the test run independent of any developer environment
for _name in list(os.environ):
    if _name.startswith("STRUCTURED_TEXT_"):
        del os.environ[_name]

PSEUDO_MARKS = {LRM: "@", RLM: "&", LRE: ">", RLE: "<", PDF: "^"}


def to_pseudo(text: str) -> str:
    """Render directional formatting characters as visible symbols."""
    return "".join(PSEUDO_MARKS.get(char, char) for char in text)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def engine():
    """Engine with an explicit LTR default environment."""
    return StructuredTextEngine(
        default_environment=Environment("en_US", False, Orientation.LTR)
    )


@pytest.fixture
def env_ltr():
    """Non-bidi LTR environment."""
    return Environment("en_US", False, Orientation.LTR)


@pytest.fixture
def env_rtl():
    """Hebrew environment displayed in an RTL component."""
    return Environment("he", False, Orientation.RTL)


@pytest.fixture
def pseudo():
    """Pseudo-rendering helper."""
    return to_pseudo
