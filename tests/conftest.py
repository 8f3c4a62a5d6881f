# tests/conftest.py
"""
Shared pytest fixtures for chat-tokens tests.
"""

from __future__ import annotations

import pytest

from chat_tokens import TokenEstimator
from chat_tokens.config import Overheads


def char_count(text: str) -> int:
    """Stub counter: one token per character."""
    return len(text)


STUB_DEFINITIONS_TEXT = "defs"


def stub_formatter(definitions) -> str:
    return STUB_DEFINITIONS_TEXT


@pytest.fixture
def count():
    return char_count


@pytest.fixture
def formatter():
    return stub_formatter


@pytest.fixture
def overheads():
    return Overheads()


@pytest.fixture(scope="session")
def estimator():
    return TokenEstimator()


@pytest.fixture
def empty_function():
    return {"name": "do_stuff", "parameters": {"type": "object", "properties": {}}}
