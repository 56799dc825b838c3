"""Client for the EmailJS REST API."""

from __future__ import annotations

import logging

import httpx

from app.core.settings import EmailJsConfig

logger = logging.getLogger(__name__)


class EmailJsError(Exception):
    """EmailJS rejected a send request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class EmailJsClient:
    def __init__(
        self,
        config: EmailJsConfig,
        *,
        api_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        self._api_url = api_url
        self._transport = transport

    async def send(self, template_id: str, template_params: dict[str, str]) -> None:
        """
        Send one templated email.

        Raises:
            EmailJsError: the API answered with a non-2xx status. The message
                carries the response body verbatim.
        """
        payload = {
            "service_id": self._config.service_id,
            "template_id": template_id,
            "user_id": self._config.public_key,
            "template_params": template_params,
        }

        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(self._api_url, json=payload)

        if not response.is_success:
            logger.error(
                "EmailJS send failed (%s) for template %s",
                response.status_code,
                template_id,
            )
            raise EmailJsError(
                f"EmailJS API Error: {response.text}",
                status_code=response.status_code,
            )
