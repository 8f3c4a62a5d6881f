# tests/test_tokenizer.py
"""
Tests for the string tokenizer and its process-wide encoding cache.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from chat_tokens import count_string_tokens
from chat_tokens.engine import tokenizer
from chat_tokens.exceptions import EncodingUnavailable


class TestCountStringTokens:
    def test_empty_string_is_zero(self):
        assert count_string_tokens("") == 0

    def test_single_word(self):
        assert count_string_tokens("hello") == 1

    def test_two_words(self):
        assert count_string_tokens("hello world") == 2

    def test_special_token_text_is_counted_as_text(self):
        assert count_string_tokens("<|endoftext|>") > 1

    def test_encoding_is_reused(self):
        assert tokenizer.get_encoding() is tokenizer.get_encoding()


class TestEncodingCache:
    @pytest.fixture
    def fresh_cache(self, monkeypatch):
        cache: dict = {}
        monkeypatch.setattr(tokenizer, "_encodings", cache)
        return cache

    def test_concurrent_first_use_loads_once(self, monkeypatch, fresh_cache):
        loads = []
        lock = threading.Lock()
        sentinel = object()

        def slow_get_encoding(name):
            with lock:
                loads.append(name)
            time.sleep(0.05)
            return sentinel

        monkeypatch.setattr(tokenizer.tiktoken, "get_encoding", slow_get_encoding)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: tokenizer.get_encoding("fake_base"), range(16)))

        assert loads == ["fake_base"]
        assert all(r is sentinel for r in results)

    def test_load_failure_raises_encoding_unavailable(self, monkeypatch, fresh_cache):
        def broken_get_encoding(name):
            raise ValueError(f"Unknown encoding {name}")

        monkeypatch.setattr(tokenizer.tiktoken, "get_encoding", broken_get_encoding)

        with pytest.raises(EncodingUnavailable) as exc_info:
            tokenizer.get_encoding("missing_base")

        assert exc_info.value.encoding_name == "missing_base"
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert "missing_base" not in fresh_cache

    def test_empty_string_does_not_load_encoding(self, monkeypatch, fresh_cache):
        def fail(name):  # pragma: no cover
            raise AssertionError("encoding should not be loaded")

        monkeypatch.setattr(tokenizer.tiktoken, "get_encoding", fail)
        assert tokenizer.count_string_tokens("", "fake_base") == 0
