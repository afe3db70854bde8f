"""
Shared pytest fixtures for keyseq tests.
"""

from __future__ import annotations

from typing import Generator

import pytest

from keyseq.config import ENV_CUSTOM_KEY_NAMES
from keyseq.types import KeyEventType, ParseOptions


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clear_custom_key_names(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep a developer's KEYSEQ_CUSTOM_KEY_NAMES out of the tests."""
    monkeypatch.delenv(ENV_CUSTOM_KEY_NAMES, raising=False)
    yield


# =============================================================================
# Parse Options Fixtures
# =============================================================================


@pytest.fixture
def strict_options() -> ParseOptions:
    """Options that reject unknown key names."""
    return ParseOptions(ensure_valid_keys=True)


@pytest.fixture
def keyup_options() -> ParseOptions:
    """Options matching on keyup."""
    return ParseOptions(key_event_type=KeyEventType.KEYUP)


# =============================================================================
# Sequence Test Data Fixtures
# =============================================================================


@pytest.fixture(params=[
    "a",
    "ctrl+a",
    "shift+c",
    "+",
    "ctrl++",
    "*++",
    "shift+1",
    "shift+=",
    "alt+shift+a",
    "option+shift+1",
    "ctrl+alt+delete",
    "meta+ArrowUp",
    "f5",
])
def combination_string(request) -> str:
    """Provide single combinations whose ids can be parsed again."""
    return request.param


@pytest.fixture(params=[
    ("a", 1),
    ("a b", 2),
    ("ctrl+a b shift+c", 3),
    ("  a+b   c  ", 2),
    ("g g g g", 4),
    ("ctrl+k\tctrl+c", 2),
])
def sequence_with_size(request) -> tuple[str, int]:
    """Provide (sequence, number_of_combinations) samples."""
    return request.param
