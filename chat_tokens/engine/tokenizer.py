# chat_tokens/engine/tokenizer.py
"""
String token counting on top of tiktoken.

Loading a BPE vocabulary is expensive (tiktoken may download and parse a
few megabytes on first use), so each encoding is loaded once per process
and shared by every caller. Loading happens under a lock with a second
check inside it, so threads racing on first use still load it only once.
"""

from __future__ import annotations

import logging
import threading

import tiktoken

from ..constants import DEFAULT_ENCODING_NAME
from ..exceptions import EncodingUnavailable

logger = logging.getLogger(__name__)

_encodings: dict[str, tiktoken.Encoding] = {}
_encodings_lock = threading.Lock()


def get_encoding(name: str = DEFAULT_ENCODING_NAME) -> tiktoken.Encoding:
    """
    Return the process-wide encoding for *name*, loading it on first use.

    Raises EncodingUnavailable if tiktoken cannot provide the vocabulary.
    A failed load is not cached; the next caller tries again.
    """
    encoding = _encodings.get(name)
    if encoding is not None:
        return encoding

    with _encodings_lock:
        encoding = _encodings.get(name)
        if encoding is None:
            logger.debug("Loading tiktoken encoding %s", name)
            try:
                encoding = tiktoken.get_encoding(name)
            except Exception as exc:
                raise EncodingUnavailable(name) from exc
            _encodings[name] = encoding
    return encoding


def count_string_tokens(text: str, encoding_name: str = DEFAULT_ENCODING_NAME) -> int:
    """Count the tokens *text* encodes to. The empty string is 0 tokens."""
    if not text:
        return 0
    # Special-token text such as "<|endoftext|>" counts as ordinary text.
    return len(get_encoding(encoding_name).encode(text, disallowed_special=()))
