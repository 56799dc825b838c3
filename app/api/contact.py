import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from app.dependencies import get_contact_service
from app.models.contact import ContactFormArgs, ToolInvocationResult
from app.services.contact_service import EMAIL_CONFIG_MISSING, ContactFormService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/contact",
    response_model=ToolInvocationResult,
    response_model_exclude_none=True,
)
async def contact_endpoint(
    form: ContactFormArgs,
    contact_service: ContactFormService = Depends(get_contact_service),
):
    """
    Submit the website contact form.

    Sends the same owner notification and customer thank-you emails as the
    chat assistant's submit_contact_form tool.
    """
    try:
        result = await contact_service.submit(form)
    except Exception as e:
        logger.exception("Contact endpoint failed")
        raise HTTPException(status_code=500, detail=f"Internal server error: {e}")

    if result.success:
        return result

    status_code = 503 if result.error == EMAIL_CONFIG_MISSING else 502
    return JSONResponse(status_code=status_code, content=result.as_payload())
