# chat_tokens/engine/prompt.py
"""
Token accounting for a whole chat request.

Algorithm
---------
1. Resolve the definitions list (tools win over functions).
2. If definitions are present, pad a copy of the first system message
   with a trailing newline.
3. Sum per-message costs.
4. Add the per-completion overhead.
5. If definitions are present, add the rendered block and its framing.
6. If definitions are present and any message is a system message,
   apply the system/definitions offset.

Steps 2, 5 and 6 share one presence test. Steps 2 and 6 are fitted to the
provider's behaviour, not derived from it; keep their conditions exactly
as they are and let the calibration tests flag any provider-side change.

Nothing here does I/O. The counter and the formatter are passed in so the
rules can be exercised with stubs.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..config import Overheads
from ..constants import SYSTEM_PADDING
from ..models import ChatMessage, FunctionDef, PromptRequest, TokenBreakdown
from .messages import Counter, message_tokens

Formatter = Callable[[Sequence[FunctionDef]], str]


def definitions_tokens(
    definitions: Sequence[FunctionDef],
    count: Counter,
    formatter: Formatter,
    overheads: Overheads | None = None,
) -> int:
    """
    Estimate the tokens a definitions block costs.

    Errors raised by *formatter* (e.g. UnsupportedSchemaType) propagate
    unchanged.
    """
    overheads = overheads or Overheads()
    return count(formatter(definitions)) + overheads.definitions


def pad_first_system_message(messages: Sequence[ChatMessage]) -> list[ChatMessage]:
    """
    Return *messages* with a padded copy of the first system message.

    The caller's messages are never modified.
    """
    padded = list(messages)
    for i, message in enumerate(padded):
        if message.role == "system":
            content = (message.content or "") + SYSTEM_PADDING
            padded[i] = message.model_copy(update={"content": content})
            break
    return padded


def prompt_breakdown(
    request: PromptRequest,
    count: Counter,
    formatter: Formatter,
    overheads: Overheads | None = None,
) -> TokenBreakdown:
    """Estimate *request*, keeping each contribution separate."""
    overheads = overheads or Overheads()
    definitions = request.definitions()

    messages: Sequence[ChatMessage] = request.messages
    definitions_cost = 0
    system_offset = 0
    if definitions is not None:
        messages = pad_first_system_message(messages)
        definitions_cost = definitions_tokens(definitions, count, formatter, overheads)
        if any(m.role == "system" for m in request.messages):
            system_offset = overheads.system_with_definitions

    return TokenBreakdown(
        messages=[message_tokens(m, count, overheads) for m in messages],
        completion=overheads.completion,
        definitions=definitions_cost,
        system_offset=system_offset,
    )


def prompt_tokens(
    request: PromptRequest,
    count: Counter,
    formatter: Formatter,
    overheads: Overheads | None = None,
) -> int:
    """Estimate the total tokens *request* will be billed as prompt_tokens."""
    return prompt_breakdown(request, count, formatter, overheads).total
