# chat_tokens/estimator.py
"""
TokenEstimator — the primary class callers interact with.

Binds a tokenizer encoding, the calibrated overheads and a definitions
formatter together, and exposes the four estimates:

  count_string_tokens(text)             raw text
  estimate_message_tokens(message)      one message, no prompt adjustments
  estimate_definitions_tokens(defs)     a function/tool definitions block
  estimate_prompt_tokens(request)       a full chat request

Messages, definitions and requests may be passed as models or as plain
dicts in the provider's request shape.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping, Sequence
from typing import Any

from .config import EstimatorConfig
from .engine.formatter import format_function_definitions
from .engine.messages import message_tokens
from .engine.prompt import Formatter, definitions_tokens, prompt_breakdown
from .engine.tokenizer import count_string_tokens
from .models import ChatMessage, FunctionDef, PromptRequest, TokenBreakdown


class TokenEstimator:
    """
    Offline prompt token estimator.

    Parameters
    ----------
    config:
        Encoding and overheads. Defaults to the calibrated values.
    formatter:
        Renders definitions to the text the provider tokenizes. Swap it
        out to test accounting without the real rendering rules.
    """

    def __init__(
        self,
        config: EstimatorConfig | None = None,
        formatter: Formatter = format_function_definitions,
    ) -> None:
        self._config = config or EstimatorConfig()
        self._formatter = formatter

    @property
    def config(self) -> EstimatorConfig:
        return self._config

    # ------------------------------------------------------------------
    # Factory methods
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any], **kwargs: Any) -> "TokenEstimator":
        """Construct from a plain Python dictionary."""
        formatter = kwargs.pop("formatter", format_function_definitions)
        return cls(EstimatorConfig.from_dict(data, **kwargs), formatter=formatter)

    @classmethod
    def from_yaml(cls, path: str, **kwargs: Any) -> "TokenEstimator":
        """Construct from a YAML config file."""
        formatter = kwargs.pop("formatter", format_function_definitions)
        return cls(EstimatorConfig.from_yaml(path, **kwargs), formatter=formatter)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "TokenEstimator":
        """Construct from environment variables."""
        formatter = kwargs.pop("formatter", format_function_definitions)
        return cls(EstimatorConfig.from_env(**kwargs), formatter=formatter)

    # ------------------------------------------------------------------
    # Estimates
    # ------------------------------------------------------------------

    def count_string_tokens(self, text: str) -> int:
        """Number of tokens *text* encodes to."""
        return count_string_tokens(text, self._config.encoding_name)

    def estimate_message_tokens(self, message: ChatMessage | Mapping[str, Any]) -> int:
        """
        Estimate the tokens one message uses.

        Using the message within a prompt adds extra tokens, so this is a
        lower bound; prefer estimate_prompt_tokens for budgeting.
        """
        return message_tokens(
            ChatMessage.model_validate(message),
            self.count_string_tokens,
            self._config.overheads,
        )

    def estimate_definitions_tokens(
        self, definitions: Sequence[FunctionDef | Mapping[str, Any]]
    ) -> int:
        """
        Estimate the tokens a list of function definitions uses.

        Inside a prompt the definitions interact with system messages, so
        prefer estimate_prompt_tokens for budgeting.
        """
        defs = [FunctionDef.model_validate(d) for d in definitions]
        return definitions_tokens(
            defs, self.count_string_tokens, self._formatter, self._config.overheads
        )

    def breakdown(self, request: PromptRequest | Mapping[str, Any]) -> TokenBreakdown:
        """Estimate a full request, reporting each contribution separately."""
        return prompt_breakdown(
            PromptRequest.model_validate(request),
            self.count_string_tokens,
            self._formatter,
            self._config.overheads,
        )

    def estimate_prompt_tokens(self, request: PromptRequest | Mapping[str, Any]) -> int:
        """Estimate the prompt_tokens the provider will report for *request*."""
        return self.breakdown(request).total


@functools.lru_cache(maxsize=1)
def default_estimator() -> TokenEstimator:
    """The shared estimator behind the module-level helpers."""
    return TokenEstimator()


def estimate_message_tokens(message: ChatMessage | Mapping[str, Any]) -> int:
    return default_estimator().estimate_message_tokens(message)


def estimate_definitions_tokens(definitions: Sequence[FunctionDef | Mapping[str, Any]]) -> int:
    return default_estimator().estimate_definitions_tokens(definitions)


def estimate_prompt_tokens(request: PromptRequest | Mapping[str, Any]) -> int:
    return default_estimator().estimate_prompt_tokens(request)
