"""Events produced by one streamed chat turn, independent of the wire encoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class StepStarted:
    message_id: str


@dataclass(frozen=True)
class TextDelta:
    text: str


@dataclass(frozen=True)
class ToolCall:
    tool_call_id: str
    tool_name: str
    args: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ToolResult:
    tool_call_id: str
    tool_name: str
    result: dict[str, Any]


@dataclass(frozen=True)
class Usage:
    prompt_tokens: int = 0
    completion_tokens: int = 0


@dataclass(frozen=True)
class StepFinished:
    finish_reason: str
    usage: Usage
    is_continued: bool = False


@dataclass(frozen=True)
class ChatFinished:
    finish_reason: str
    usage: Usage


ChatEvent = Union[StepStarted, TextDelta, ToolCall, ToolResult, StepFinished, ChatFinished]
