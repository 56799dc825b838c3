from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable
from zoneinfo import ZoneInfo

import httpx

from app.core.settings import EmailJsConfig, Settings, get_settings
from app.models.contact import ContactFormArgs, ToolInvocationResult
from app.services.emailjs_client import EmailJsClient, EmailJsError

logger = logging.getLogger(__name__)

NOT_PROVIDED = "Not provided"
DEFAULT_SERVICE = "General Inquiry (Via AI Agent)"
EMAIL_CONFIG_MISSING = "Email configuration missing."


def format_submission_time(moment: datetime) -> str:
    """Render like en-US `dateStyle: full, timeStyle: short`: Monday, October 19, 2026 at 8:32 PM."""
    hour = moment.hour % 12 or 12
    return (
        f"{moment:%A, %B} {moment.day}, {moment.year} "
        f"at {hour}:{moment:%M} {'AM' if moment.hour < 12 else 'PM'}"
    )


def build_template_params(args: ContactFormArgs, submitted_at: datetime) -> dict[str, str]:
    return {
        "from_name": args.name,
        "from_email": args.email,
        "email": args.email,
        "reply_to": args.email,
        "phone": args.phone or NOT_PROVIDED,
        "company": args.subject or NOT_PROVIDED,
        "service": args.subject or DEFAULT_SERVICE,
        "message": args.message,
        "submission_time": format_submission_time(submitted_at),
    }


class ContactFormService:
    """Delivers a lead as two emails: a notification to the business, then a thank-you to the prospect."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        email_config: EmailJsConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._settings = settings or get_settings()
        self._config = email_config
        self._transport = transport
        self._clock = clock or (
            lambda: datetime.now(ZoneInfo(self._settings.submission_timezone))
        )

    @property
    def success_message(self) -> str:
        return f"Form successfully submitted to the {self._settings.business_name} team!"

    async def submit(self, args: ContactFormArgs) -> ToolInvocationResult:
        if self._config is None:
            logger.error("Missing EmailJS credentials on the server.")
            return ToolInvocationResult.failed(EMAIL_CONFIG_MISSING)

        client = EmailJsClient(
            self._config,
            api_url=self._settings.emailjs_api_url,
            transport=self._transport,
        )
        inbox = self._settings.business_inbox
        common = build_template_params(args, self._clock())

        try:
            await client.send(
                self._config.owner_template_id,
                {**common, "to_email": inbox},
            )
            # Only thank the prospect once the business has the lead.
            await client.send(
                self._config.customer_template_id,
                {**common, "to_email": args.email, "reply_to": inbox},
            )
        except EmailJsError as e:
            return ToolInvocationResult.failed(str(e))
        except httpx.HTTPError as e:
            logger.exception("EmailJS request failed")
            return ToolInvocationResult.failed(str(e) or "Failed to submit form.")

        logger.info("Contact form submitted for %s", args.email)
        return ToolInvocationResult.ok(self.success_message)
