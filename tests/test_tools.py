from __future__ import annotations

import pytest
from google.genai import types

from app.services.contact_service import ContactFormService
from app.services.tool_runner import ToolRunner
from app.services.tooling import ToolRegistry, ToolSpec
from app.services.tools_contact import make_submit_contact_form_tool


def _runner(settings, emailjs, fixed_clock) -> ToolRunner:
    service = ContactFormService(
        settings=settings,
        email_config=settings.emailjs_config,
        transport=emailjs.transport,
        clock=fixed_clock,
    )
    return ToolRunner(
        registry=ToolRegistry([make_submit_contact_form_tool(contact_service=service)])
    )


def test_registry_rejects_duplicate_names():
    async def handler(args):
        return {}

    spec = ToolSpec(
        name="dup",
        description="",
        parameters=types.Schema(type=types.Type.OBJECT),
        handler=handler,
    )
    with pytest.raises(ValueError):
        ToolRegistry([spec, spec])


def test_contact_tool_declaration(settings, emailjs, fixed_clock):
    registry = _runner(settings, emailjs, fixed_clock).registry

    [tool] = registry.as_gemini_tools()
    [declaration] = tool.function_declarations

    assert declaration.name == "submit_contact_form"
    assert sorted(declaration.parameters.properties) == [
        "email",
        "message",
        "name",
        "phone",
        "subject",
    ]
    assert declaration.parameters.required == ["name", "email", "message"]


@pytest.mark.asyncio
async def test_runner_unknown_tool(settings, emailjs, fixed_clock):
    result = await _runner(settings, emailjs, fixed_clock).run(
        name="book_meeting", args={}
    )

    assert result == {"success": False, "error": "Unknown tool: book_meeting"}


@pytest.mark.asyncio
async def test_runner_submits_contact_form(settings, emailjs, fixed_clock):
    result = await _runner(settings, emailjs, fixed_clock).run(
        name="submit_contact_form",
        args={"name": "Jane Doe", "email": "jane@example.com", "message": "Need a quote"},
    )

    assert result == {
        "success": True,
        "message": "Form successfully submitted to the Audentix team!",
    }
    assert len(emailjs.requests) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "args",
    [
        {"name": "Jane Doe", "email": "not-an-email", "message": "Need a quote"},
        {"name": "", "email": "jane@example.com", "message": "Need a quote"},
        {"name": "Jane Doe", "email": "jane@example.com"},
    ],
)
async def test_runner_rejects_invalid_arguments(args, settings, emailjs, fixed_clock):
    result = await _runner(settings, emailjs, fixed_clock).run(
        name="submit_contact_form", args=args
    )

    assert result["success"] is False
    assert result["error"]
    assert emailjs.requests == []
