from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import chat, contact, health
from app.core.logging import configure_logging
from app.core.settings import get_settings


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == 405:
        return PlainTextResponse(
            "Method Not Allowed", status_code=405, headers=exc.headers
        )
    return await http_exception_handler(request, exc)


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.app_name)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)

    app.include_router(chat.router, prefix="/api")
    app.include_router(contact.router, prefix="/api")

    app.include_router(health.router)

    return app


app = create_app()
