# chat_tokens/engine/__init__.py
from .formatter import format_function_definitions
from .messages import message_tokens, tool_calls_text
from .prompt import definitions_tokens, prompt_breakdown, prompt_tokens
from .tokenizer import count_string_tokens, get_encoding

__all__ = [
    "count_string_tokens",
    "definitions_tokens",
    "format_function_definitions",
    "get_encoding",
    "message_tokens",
    "prompt_breakdown",
    "prompt_tokens",
    "tool_calls_text",
]
