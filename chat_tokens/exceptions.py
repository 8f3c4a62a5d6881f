# chat_tokens/exceptions.py
"""
Custom exceptions for chat-tokens.

All public exceptions inherit from ChatTokensError so callers can catch
the whole family with a single except clause if preferred.
"""

from __future__ import annotations


class ChatTokensError(Exception):
    """Base exception for all chat-tokens errors."""


class EncodingUnavailable(ChatTokensError):
    """
    Raised when the BPE vocabulary cannot be loaded.

    There is no fallback encoding: an estimate made with the wrong
    vocabulary is meaningless. The underlying error is chained.

    Attributes
    ----------
    encoding_name:
        Name of the vocabulary that failed to load.
    """

    def __init__(self, encoding_name: str) -> None:
        self.encoding_name = encoding_name
        super().__init__(f"Could not load tokenizer encoding '{encoding_name}'")


class UnsupportedSchemaType(ChatTokensError, ValueError):
    """
    Raised by the definitions formatter for a JSON-Schema type it cannot
    render.
    """

    def __init__(self, schema_type: object) -> None:
        self.schema_type = schema_type
        super().__init__(f"Unsupported type: {schema_type}")
