from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class MessagePart(BaseModel):
    """A UI message part as sent by the chat widget. Only text parts carry content."""

    type: str
    text: str | None = None


class ConversationMessage(BaseModel):
    role: Literal["user", "assistant", "system", "tool"]
    content: str = ""
    parts: list[MessagePart] | None = None

    @property
    def text(self) -> str:
        if self.content:
            return self.content
        if not self.parts:
            return ""
        return "".join(p.text or "" for p in self.parts if p.type == "text")


class ChatRequest(BaseModel):
    messages: list[ConversationMessage] = Field(min_length=1)


class ChatErrorResponse(BaseModel):
    error: str
