# chat_tokens/config.py
"""
EstimatorConfig and the recalibration table.

Supports construction from:
  - Python dict   → EstimatorConfig.from_dict(data)
  - YAML file     → EstimatorConfig.from_yaml("chat_tokens.yaml")
  - Environment   → EstimatorConfig.from_env()
"""

from __future__ import annotations

import os
import re
from typing import Any

from pydantic import BaseModel, Field

from .constants import (
    COMPLETION_OVERHEAD,
    DEFAULT_ENCODING_NAME,
    DEFINITIONS_OVERHEAD,
    ENV_ENCODING,
    ENV_PREFIX,
    FUNCTION_CALL_OVERHEAD,
    MESSAGE_OVERHEAD,
    MULTI_TOOL_CALL_OVERHEAD,
    NAME_OFFSET,
    SINGLE_TOOL_CALL_OVERHEAD,
    SYSTEM_WITH_DEFINITIONS_OFFSET,
)


class Overheads(BaseModel):
    """
    Calibrated token offsets.

    The defaults reproduce the provider's reported prompt_tokens. Override
    individual values only when recalibrating against a changed backend.
    """

    model_config = {"frozen": True}

    message: int = MESSAGE_OVERHEAD
    name: int = NAME_OFFSET
    function_call: int = FUNCTION_CALL_OVERHEAD
    multi_tool_call: int = MULTI_TOOL_CALL_OVERHEAD
    single_tool_call: int = SINGLE_TOOL_CALL_OVERHEAD
    completion: int = COMPLETION_OVERHEAD
    definitions: int = DEFINITIONS_OVERHEAD
    system_with_definitions: int = SYSTEM_WITH_DEFINITIONS_OFFSET


class EstimatorConfig(BaseModel):
    """
    Top-level configuration for the TokenEstimator.

    Instantiate directly or use one of the factory class methods:
      EstimatorConfig.from_dict(data)
      EstimatorConfig.from_yaml(path)
      EstimatorConfig.from_env()
    """

    encoding_name: str = Field(
        default=DEFAULT_ENCODING_NAME,
        min_length=1,
        description="tiktoken encoding the provider's model family uses.",
    )
    overheads: Overheads = Field(default_factory=Overheads)

    # ------------------------------------------------------------------
    # Factory methods
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any], **kwargs: Any) -> "EstimatorConfig":
        """Build config from a plain Python dictionary."""
        merged = {**data, **kwargs}
        return cls.model_validate(merged)

    @classmethod
    def from_yaml(cls, path: str, **kwargs: Any) -> "EstimatorConfig":
        """
        Build config from a YAML file.

        Environment variable interpolation is supported:
          encoding_name: "${CHAT_TOKENS_ENCODING}"
        """
        import yaml

        with open(path) as f:
            raw = f.read()

        def _replace(match: re.Match) -> str:  # type: ignore[type-arg]
            var = match.group(1)
            value = os.environ.get(var)
            if value is None:
                raise EnvironmentError(
                    f"Environment variable '{var}' referenced in '{path}' is not set."
                )
            return value

        raw = re.sub(r"\$\{([^}]+)\}", _replace, raw)
        data = yaml.safe_load(raw) or {}
        return cls.from_dict(data, **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "EstimatorConfig":
        """
        Build config from environment variables.

        Reads:
          CHAT_TOKENS_ENCODING               → encoding_name
          CHAT_TOKENS_<OVERHEAD>_OVERHEAD    → overheads.<overhead>
            e.g. CHAT_TOKENS_COMPLETION_OVERHEAD=3
        """
        data: dict[str, Any] = {}

        encoding = os.environ.get(ENV_ENCODING)
        if encoding:
            data["encoding_name"] = encoding

        overheads: dict[str, int] = {}
        for field_name in Overheads.model_fields:
            value = os.environ.get(f"{ENV_PREFIX}{field_name.upper()}_OVERHEAD")
            if value:
                overheads[field_name] = int(value)
        if overheads:
            data["overheads"] = overheads

        data.update(kwargs)
        return cls.from_dict(data)
