# chat_tokens/models.py
"""
Pydantic v2 data models used throughout chat-tokens.

The models mirror the provider's chat-completions request shape, so plain
dicts taken straight from a request body validate into them. Every model is
frozen: an estimate never mutates what the caller handed in.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, computed_field

Role = Literal["system", "user", "assistant", "tool", "function"]


class FunctionCall(BaseModel):
    """A legacy function_call, or the function half of a tool call."""

    model_config = {"frozen": True}

    name: str
    arguments: str = ""


class ToolCall(BaseModel):
    """One model-emitted tool invocation on an assistant message."""

    model_config = {"frozen": True}

    id: str
    type: Literal["function"] = "function"
    function: FunctionCall

    @property
    def function_name(self) -> str:
        return self.function.name

    @property
    def arguments_text(self) -> str:
        return self.function.arguments


class ChatMessage(BaseModel):
    """
    A single role-tagged chat message.

    tool_calls and function_call are mutually exclusive in the provider's
    schema; this model does not enforce it and every present field is
    accounted for.
    """

    model_config = {"frozen": True}

    role: Role
    content: str | None = None
    name: str | None = None
    function_call: FunctionCall | None = None
    tool_calls: tuple[ToolCall, ...] | None = None
    tool_call_id: str | None = Field(
        default=None,
        description="Accepted for tool responses; not part of the token count.",
    )


class FunctionDef(BaseModel):
    """A function definition: name, optional description, JSON-Schema parameters."""

    model_config = {"frozen": True}

    name: str
    description: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)


class ToolDef(BaseModel):
    """A tool definition. Only function tools exist, wrapping a FunctionDef."""

    model_config = {"frozen": True}

    type: Literal["function"] = "function"
    function: FunctionDef


class PromptRequest(BaseModel):
    """
    A full chat request as far as prompt token accounting is concerned.

    Callers normally populate one of functions / tools. When both are given,
    tools win for the definitions contribution.
    """

    model_config = {"frozen": True}

    messages: tuple[ChatMessage, ...] = ()
    functions: tuple[FunctionDef, ...] | None = None
    tools: tuple[ToolDef, ...] | None = None

    def definitions(self) -> list[FunctionDef] | None:
        """
        Resolve the definitions list billed with this request.

        Returns None when no definitions are present. An empty list is
        treated the same as an absent one, so there is a single presence
        test for every definitions-dependent adjustment.
        """
        if self.tools is not None:
            defs = [tool.function for tool in self.tools]
        elif self.functions is not None:
            defs = list(self.functions)
        else:
            return None
        return defs or None


class TokenBreakdown(BaseModel):
    """Each contribution to a prompt estimate, in the order it is applied."""

    model_config = {"frozen": True}

    messages: list[int] = Field(default_factory=list, description="Per-message cost, request order.")
    completion: int = Field(..., description="Flat per-completion overhead.")
    definitions: int = Field(default=0, description="Rendered definitions block plus its framing.")
    system_offset: int = Field(
        default=0,
        description="Correction applied when definitions and a system message coexist.",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return sum(self.messages) + self.completion + self.definitions + self.system_offset
