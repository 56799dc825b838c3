from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class EmailJsConfig:
    service_id: str
    owner_template_id: str
    customer_template_id: str
    public_key: str


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="Audentix Assistant", alias="APP_NAME")
    environment: Literal["local", "dev", "staging", "prod"] = Field(
        default="local", alias="ENVIRONMENT"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "GEMINI_API_KEY", "GOOGLE_API_KEY", "GOOGLE_GENERATIVE_AI_API_KEY"
        ),
    )
    gemini_model: str = Field(default="gemini-2.5-flash", alias="GEMINI_MODEL")

    chat_stream_protocol: Literal["data", "text"] = Field(
        default="data", alias="CHAT_STREAM_PROTOCOL"
    )
    chat_max_tool_steps: int = Field(default=5, ge=1, alias="CHAT_MAX_TOOL_STEPS")

    business_name: str = Field(default="Audentix", alias="BUSINESS_NAME")
    business_inbox: str = Field(default="audentix@gmail.com", alias="BUSINESS_INBOX")
    submission_timezone: str = Field(default="UTC", alias="SUBMISSION_TIMEZONE")

    emailjs_api_url: str = Field(
        default="https://api.emailjs.com/api/v1.0/email/send",
        alias="EMAILJS_API_URL",
    )
    emailjs_service_id: str | None = Field(default=None, alias="EMAILJS_SERVICE_ID")
    emailjs_template_owner: str | None = Field(
        default=None, alias="EMAILJS_TEMPLATE_OWNER"
    )
    emailjs_template_customer: str | None = Field(
        default=None, alias="EMAILJS_TEMPLATE_CUSTOMER"
    )
    emailjs_public_key: str | None = Field(default=None, alias="EMAILJS_PUBLIC_KEY")

    @property
    def emailjs_config(self) -> EmailJsConfig | None:
        """All four EmailJS values, or None when any of them is unset."""
        values = (
            self.emailjs_service_id,
            self.emailjs_template_owner,
            self.emailjs_template_customer,
            self.emailjs_public_key,
        )
        if not all(values):
            return None
        return EmailJsConfig(*values)


@lru_cache
def get_settings() -> Settings:
    return Settings()
