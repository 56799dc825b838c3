import logging
from typing import AsyncIterator

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response, StreamingResponse

from app.core.settings import Settings, get_settings
from app.dependencies import get_gemini_service, get_tool_runner
from app.models.chat import ChatErrorResponse, ChatRequest
from app.models.stream import ChatEvent
from app.services.gemini_service import GeminiService
from app.services.stream_protocol import (
    DATA_STREAM_HEADERS,
    MEDIA_TYPE,
    data_stream,
    text_stream,
)
from app.services.tool_runner import ToolRunner

logger = logging.getLogger(__name__)

router = APIRouter()


async def _resume(
    first: ChatEvent, events: AsyncIterator[ChatEvent]
) -> AsyncIterator[ChatEvent]:
    yield first
    async for event in events:
        yield event


@router.post("/chat")
async def chat_endpoint(
    request: Request,
    gemini_service: GeminiService = Depends(get_gemini_service),
    tool_runner: ToolRunner = Depends(get_tool_runner),
    settings: Settings = Depends(get_settings),
) -> Response:
    # The body is parsed by hand so that a malformed payload is a 500 with
    # an `error` field rather than FastAPI's 422.
    try:
        body = await request.json()
        chat_request = ChatRequest.model_validate(body)

        events = gemini_service.stream_chat(
            messages=chat_request.messages,
            tool_runner=tool_runner,
        )
        # Pull the first event before committing to a 200 so setup and
        # upstream connection failures still surface as a 500.
        first = await anext(events)
    except Exception as e:
        logger.exception("Chat API Error")
        return JSONResponse(
            status_code=500,
            content=ChatErrorResponse(error=str(e)).model_dump(),
        )

    stream = _resume(first, events)
    if settings.chat_stream_protocol == "text":
        return StreamingResponse(text_stream(stream), media_type=MEDIA_TYPE)
    return StreamingResponse(
        data_stream(stream),
        media_type=MEDIA_TYPE,
        headers=DATA_STREAM_HEADERS,
    )
