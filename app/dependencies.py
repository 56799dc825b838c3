from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from app.core.settings import Settings, get_settings
from app.services.contact_service import ContactFormService
from app.services.gemini_service import GeminiService
from app.services.tool_runner import ToolRunner
from app.services.tooling import ToolRegistry
from app.services.tools_contact import make_submit_contact_form_tool


@lru_cache
def get_gemini_service() -> GeminiService:
    return GeminiService(settings=get_settings())


def get_contact_service(
    settings: Settings = Depends(get_settings),
) -> ContactFormService:
    return ContactFormService(settings=settings, email_config=settings.emailjs_config)


def get_tool_runner(
    settings: Settings = Depends(get_settings),
    contact_service: ContactFormService = Depends(get_contact_service),
) -> ToolRunner:
    registry = ToolRegistry(
        [
            make_submit_contact_form_tool(
                contact_service=contact_service,
                business_name=settings.business_name,
            )
        ]
    )
    return ToolRunner(registry=registry)
