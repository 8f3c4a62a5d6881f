# chat_tokens/constants.py
"""
Calibration constants for chat-tokens.

None of the offsets below follow from the tokenizer itself. They were found
by comparing estimates against the prompt_tokens reported by the provider
for many message/function combinations, and they are the one place to touch
if the provider changes how it serialises a chat request.
"""

# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------
DEFAULT_ENCODING_NAME: str = "cl100k_base"
"""BPE vocabulary used by the gpt-3.5-turbo / gpt-4 family."""

# ---------------------------------------------------------------------------
# Per-message overheads
# ---------------------------------------------------------------------------
MESSAGE_OVERHEAD: int = 3
"""Framing tokens around every message."""

NAME_OFFSET: int = -1
"""A message carrying a name field costs one token less than expected."""

FUNCTION_CALL_OVERHEAD: int = 3
"""Framing for a legacy function_call on an assistant message."""

MULTI_TOOL_CALL_OVERHEAD: int = 12
"""Framing for two or more tool calls; one more token is added per call."""

SINGLE_TOOL_CALL_OVERHEAD: int = 2
"""Framing for exactly one tool call, on top of the function name counted again."""

# ---------------------------------------------------------------------------
# Per-prompt overheads
# ---------------------------------------------------------------------------
COMPLETION_OVERHEAD: int = 3
"""Every completion request carries this many tokens regardless of content."""

DEFINITIONS_OVERHEAD: int = 9
"""Framing around the rendered function/tool definitions block."""

SYSTEM_WITH_DEFINITIONS_OFFSET: int = -4
"""
Applied when definitions and a system message are both present. Definitions
appear to inject their own system message, which is merged into an existing
one instead.
"""

SYSTEM_PADDING: str = "\n"
"""Appended to the first system message when definitions are present."""

# ---------------------------------------------------------------------------
# Multi tool-call payload
# ---------------------------------------------------------------------------
TOOL_USES_KEY: str = "tool_uses"
TOOL_USES_RECIPIENT_KEY: str = "recipient_name"
TOOL_USES_PARAMETERS_KEY: str = "parameters"

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------
ENV_ENCODING: str = "CHAT_TOKENS_ENCODING"
ENV_PREFIX: str = "CHAT_TOKENS_"
