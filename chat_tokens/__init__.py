# chat_tokens/__init__.py
"""
chat-tokens — Offline prompt token estimation for chat-completion requests.

Public API surface:
  estimate_prompt_tokens      — tokens a full request will be billed as prompt_tokens
  estimate_message_tokens     — tokens a single message uses (lower bound)
  estimate_definitions_tokens — tokens a function/tool definitions block uses
  count_string_tokens         — raw token count of a string
  TokenEstimator              — the same estimates with custom config / formatter
  EstimatorConfig             — encoding name and calibrated overheads
  Overheads                   — the calibrated overhead table
  ChatMessage, PromptRequest, FunctionDef, ToolDef, ToolCall, FunctionCall
                              — request models (plain dicts are accepted too)
  TokenBreakdown              — per-contribution view of a prompt estimate
  format_function_definitions — renders definitions to the billed text
  ChatTokensError             — base of EncodingUnavailable, UnsupportedSchemaType
"""

from .config import EstimatorConfig, Overheads
from .engine.formatter import format_function_definitions
from .engine.tokenizer import count_string_tokens
from .estimator import (
    TokenEstimator,
    estimate_definitions_tokens,
    estimate_message_tokens,
    estimate_prompt_tokens,
)
from .exceptions import ChatTokensError, EncodingUnavailable, UnsupportedSchemaType
from .models import (
    ChatMessage,
    FunctionCall,
    FunctionDef,
    PromptRequest,
    TokenBreakdown,
    ToolCall,
    ToolDef,
)

__all__ = [
    "estimate_prompt_tokens",
    "estimate_message_tokens",
    "estimate_definitions_tokens",
    "count_string_tokens",
    "TokenEstimator",
    "EstimatorConfig",
    "Overheads",
    "ChatMessage",
    "FunctionCall",
    "FunctionDef",
    "PromptRequest",
    "TokenBreakdown",
    "ToolCall",
    "ToolDef",
    "format_function_definitions",
    "ChatTokensError",
    "EncodingUnavailable",
    "UnsupportedSchemaType",
]

__version__ = "0.1.0"
