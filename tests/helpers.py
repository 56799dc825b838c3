from __future__ import annotations

import json
from datetime import datetime
from types import SimpleNamespace
from typing import Any

import httpx
from google.genai import types

from app.core.settings import Settings


SUBMITTED_AT = datetime(2026, 10, 19, 20, 32)


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "gemini_api_key": "test-key",
        "emailjs_service_id": "service_test",
        "emailjs_template_owner": "template_owner",
        "emailjs_template_customer": "template_customer",
        "emailjs_public_key": "public_test",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class EmailJsRecorder:
    """httpx transport handler that records EmailJS sends."""

    def __init__(self, responses: list[httpx.Response] | None = None):
        self._responses = list(responses or [])
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, text="OK")

    @property
    def payloads(self) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def text_chunk(text: str) -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=[types.Part(text=text)])
            )
        ]
    )


def call_chunk(
    name: str, args: dict[str, Any], call_id: str | None = None
) -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(
                    role="model",
                    parts=[
                        types.Part(
                            function_call=types.FunctionCall(
                                name=name, args=args, id=call_id
                            )
                        )
                    ],
                )
            )
        ]
    )


def usage_chunk(prompt: int, completion: int) -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[types.Candidate(finish_reason=types.FinishReason.STOP)],
        usage_metadata=types.GenerateContentResponseUsageMetadata(
            prompt_token_count=prompt,
            candidates_token_count=completion,
        ),
    )


class _FakeModels:
    def __init__(self, turns: list[list[Any]]):
        self._turns = list(turns)
        self.calls: list[dict[str, Any]] = []

    async def generate_content_stream(self, *, model, contents, config):
        self.calls.append(
            {"model": model, "contents": list(contents), "config": config}
        )
        chunks = self._turns.pop(0)

        async def _iter():
            for chunk in chunks:
                if isinstance(chunk, Exception):
                    raise chunk
                yield chunk

        return _iter()


class FakeGeminiClient:
    """Stands in for genai.Client; each turn is the list of chunks one request streams back."""

    def __init__(self, turns: list[list[Any]]):
        self.models = _FakeModels(turns)
        self.aio = SimpleNamespace(models=self.models)
