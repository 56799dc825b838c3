"""
Wire encodings for a streamed chat turn.

`data` is the line protocol read by the site's chat widget: every line is
`<code>:<json>\n`. `text` forwards the model's text only.
"""

from __future__ import annotations

import json
import logging
from typing import Any, AsyncIterator

from app.models.stream import (
    ChatEvent,
    ChatFinished,
    StepFinished,
    StepStarted,
    TextDelta,
    ToolCall,
    ToolResult,
    Usage,
)

logger = logging.getLogger(__name__)

MEDIA_TYPE = "text/plain; charset=utf-8"
DATA_STREAM_HEADERS = {"x-vercel-ai-data-stream": "v1"}


def _part(code: str, value: Any) -> str:
    return f"{code}:{json.dumps(value, ensure_ascii=False, separators=(',', ':'))}\n"


def _usage(usage: Usage) -> dict[str, int]:
    return {
        "promptTokens": usage.prompt_tokens,
        "completionTokens": usage.completion_tokens,
    }


def encode_data_event(event: ChatEvent) -> str:
    if isinstance(event, TextDelta):
        return _part("0", event.text)
    if isinstance(event, StepStarted):
        return _part("f", {"messageId": event.message_id})
    if isinstance(event, ToolCall):
        return _part(
            "9",
            {
                "toolCallId": event.tool_call_id,
                "toolName": event.tool_name,
                "args": event.args,
            },
        )
    if isinstance(event, ToolResult):
        return _part("a", {"toolCallId": event.tool_call_id, "result": event.result})
    if isinstance(event, StepFinished):
        return _part(
            "e",
            {
                "finishReason": event.finish_reason,
                "usage": _usage(event.usage),
                "isContinued": event.is_continued,
            },
        )
    if isinstance(event, ChatFinished):
        return _part(
            "d",
            {"finishReason": event.finish_reason, "usage": _usage(event.usage)},
        )
    raise TypeError(f"Unsupported chat event: {type(event).__name__}")


async def data_stream(events: AsyncIterator[ChatEvent]) -> AsyncIterator[str]:
    try:
        async for event in events:
            yield encode_data_event(event)
    except Exception as e:
        # Headers are already sent; report the failure in-band.
        logger.exception("Chat stream failed")
        yield _part("3", str(e) or "An error occurred.")


async def text_stream(events: AsyncIterator[ChatEvent]) -> AsyncIterator[str]:
    try:
        async for event in events:
            if isinstance(event, TextDelta):
                yield event.text
    except Exception:
        logger.exception("Chat stream failed")
        raise
