from __future__ import annotations

import logging
from typing import AsyncIterator
from uuid import uuid4

from google import genai
from google.genai import types

from app.core.settings import Settings, get_settings
from app.models.chat import ConversationMessage
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
from app.services.prompts import SYSTEM_PROMPT
from app.services.tool_runner import ToolRunner

logger = logging.getLogger(__name__)


def _add_usage(a: Usage, b: Usage) -> Usage:
    return Usage(
        prompt_tokens=a.prompt_tokens + b.prompt_tokens,
        completion_tokens=a.completion_tokens + b.completion_tokens,
    )


class GeminiService:
    def __init__(
        self,
        settings: Settings | None = None,
        *,
        client: genai.Client | None = None,
        system_prompt: str = SYSTEM_PROMPT,
    ):
        self._settings = settings or get_settings()
        self._client = client
        self._system_prompt = system_prompt

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self._settings.gemini_api_key:
                raise RuntimeError("GEMINI_API_KEY is not configured")
            self._client = genai.Client(api_key=self._settings.gemini_api_key)
        return self._client

    @staticmethod
    def to_contents(
        messages: list[ConversationMessage],
    ) -> tuple[list[types.Content], list[str]]:
        """Split caller history into model turns and extra system instructions."""
        contents: list[types.Content] = []
        system_notes: list[str] = []

        for msg in messages:
            text = msg.text
            if not text:
                continue
            if msg.role == "system":
                system_notes.append(text)
                continue
            role = "model" if msg.role == "assistant" else "user"
            contents.append(
                types.Content(role=role, parts=[types.Part.from_text(text=text)])
            )

        return contents, system_notes

    def _build_config(
        self, system_notes: list[str], tool_runner: ToolRunner
    ) -> types.GenerateContentConfig:
        system_instruction = "\n\n".join([self._system_prompt, *system_notes])
        return types.GenerateContentConfig(
            system_instruction=system_instruction,
            tools=tool_runner.registry.as_gemini_tools(),
            tool_config=types.ToolConfig(
                function_calling_config=types.FunctionCallingConfig(mode="AUTO")
            ),
        )

    async def stream_chat(
        self,
        *,
        messages: list[ConversationMessage],
        tool_runner: ToolRunner,
    ) -> AsyncIterator[ChatEvent]:
        """
        Stream one assistant turn.

        Each model step is streamed as text deltas. When the model calls a
        tool, the call is executed, its structured result is sent back as a
        function response and the model continues, up to
        `chat_max_tool_steps` steps.
        """
        client = self._get_client()
        contents, system_notes = self.to_contents(messages)
        config = self._build_config(system_notes, tool_runner)
        max_steps = self._settings.chat_max_tool_steps
        total = Usage()

        for step in range(max_steps):
            stream = await client.aio.models.generate_content_stream(
                model=self._settings.gemini_model,
                contents=contents,
                config=config,
            )
            yield StepStarted(message_id=f"msg-{uuid4().hex}")

            model_parts: list[types.Part] = []
            calls: list[types.FunctionCall] = []
            usage = Usage()
            finish_reason = "stop"

            async for chunk in stream:
                if chunk.usage_metadata is not None:
                    usage = Usage(
                        prompt_tokens=chunk.usage_metadata.prompt_token_count or 0,
                        completion_tokens=chunk.usage_metadata.candidates_token_count or 0,
                    )
                if not chunk.candidates:
                    continue
                candidate = chunk.candidates[0]
                if candidate.finish_reason == types.FinishReason.MAX_TOKENS:
                    finish_reason = "length"
                if candidate.content is None or not candidate.content.parts:
                    continue

                for part in candidate.content.parts:
                    model_parts.append(part)
                    if part.function_call is not None:
                        calls.append(part.function_call)
                    elif part.text and not part.thought:
                        yield TextDelta(text=part.text)

            total = _add_usage(total, usage)

            if not calls:
                yield StepFinished(finish_reason=finish_reason, usage=usage)
                yield ChatFinished(finish_reason=finish_reason, usage=total)
                return

            # Keep the model's own parts so thought signatures survive the round trip.
            contents.append(types.Content(role="model", parts=model_parts))

            responses: list[types.Part] = []
            for call in calls:
                call_id = call.id or f"call-{uuid4().hex}"
                name = call.name or ""
                args = dict(call.args or {})
                logger.info("Step %s: calling tool %s", step + 1, name)

                yield ToolCall(tool_call_id=call_id, tool_name=name, args=args)
                result = await tool_runner.run(name=name, args=args)
                yield ToolResult(tool_call_id=call_id, tool_name=name, result=result)

                responses.append(
                    types.Part.from_function_response(name=name, response=result)
                )

            contents.append(types.Content(role="user", parts=responses))
            yield StepFinished(finish_reason="tool-calls", usage=usage)

        logger.warning("Chat stopped after %s tool steps", max_steps)
        yield ChatFinished(finish_reason="tool-calls", usage=total)
