from __future__ import annotations

from typing import Any

from google.genai import types

from app.models.contact import ContactFormArgs
from app.services.contact_service import ContactFormService
from app.services.tooling import ToolSpec

SUBMIT_CONTACT_FORM = "submit_contact_form"


def make_submit_contact_form_tool(
    *, contact_service: ContactFormService, business_name: str = "Audentix"
) -> ToolSpec:
    async def handler(args: dict[str, Any]) -> dict[str, Any]:
        form = ContactFormArgs.model_validate(args)
        result = await contact_service.submit(form)
        return result.as_payload()

    fields = ContactFormArgs.model_fields
    parameters = types.Schema(
        type=types.Type.OBJECT,
        required=["name", "email", "message"],
        properties={
            name: types.Schema(
                type=types.Type.STRING,
                description=fields[name].description,
            )
            for name in ("name", "email", "phone", "subject", "message")
        },
    )

    return ToolSpec(
        name=SUBMIT_CONTACT_FORM,
        description=(
            "Submits the user's contact information and project inquiry "
            f"to the {business_name} sales team."
        ),
        parameters=parameters,
        handler=handler,
    )
