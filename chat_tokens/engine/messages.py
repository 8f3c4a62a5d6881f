# chat_tokens/engine/messages.py
"""
Token accounting for a single chat message.

A message costs the tokens of each textual field it carries, counted one
field at a time, plus fixed framing overheads:

  tokens = Σ count(field) for role, content, name,
                              function_call.name, function_call.arguments,
                              tool-call payload
         + message overhead
         + name offset              (if name)
         + function_call overhead   (if function_call)
         + 12 + n                   (if n ≥ 2 tool calls)
         + count(fn name) + 2       (if exactly 1 tool call)

The single-call and multi-call cases are deliberately not one formula:
that asymmetry is what the provider reports.

Nothing here applies prompt-level adjustments, so a message counted on its
own is a lower bound on its cost inside a prompt.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence

from ..config import Overheads
from ..constants import TOOL_USES_KEY, TOOL_USES_PARAMETERS_KEY, TOOL_USES_RECIPIENT_KEY
from ..models import ChatMessage, ToolCall

Counter = Callable[[str], int]


def tool_calls_text(tool_calls: Sequence[ToolCall] | None) -> str:
    """
    Text the provider bills for a message's tool calls.

    One call is its name and arguments run together. Several calls are
    wrapped in a compact JSON "tool_uses" object, in call order.
    """
    if not tool_calls:
        return ""
    if len(tool_calls) == 1:
        return tool_calls[0].function_name + tool_calls[0].arguments_text
    return json.dumps(
        {
            TOOL_USES_KEY: [
                {
                    TOOL_USES_RECIPIENT_KEY: call.function_name,
                    TOOL_USES_PARAMETERS_KEY: call.arguments_text,
                }
                for call in tool_calls
            ]
        },
        separators=(",", ":"),
        ensure_ascii=False,
    )


def message_components(message: ChatMessage) -> list[str]:
    """The message's non-empty textual fields, in billing order."""
    function_call = message.function_call
    components = [
        message.role,
        message.content,
        message.name,
        function_call.name if function_call else None,
        function_call.arguments if function_call else None,
        tool_calls_text(message.tool_calls),
    ]
    return [c for c in components if c]


def message_tokens(message: ChatMessage, count: Counter, overheads: Overheads | None = None) -> int:
    """Estimate the tokens *message* costs, using *count* for raw text."""
    overheads = overheads or Overheads()

    tokens = sum(count(component) for component in message_components(message))
    tokens += overheads.message
    if message.name:
        tokens += overheads.name
    if message.function_call:
        tokens += overheads.function_call

    tool_calls = message.tool_calls or ()
    if len(tool_calls) > 1:
        tokens += overheads.multi_tool_call + len(tool_calls)
    elif len(tool_calls) == 1:
        tokens += count(tool_calls[0].function_name) + overheads.single_tool_call
    return tokens
