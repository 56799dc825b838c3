from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ContactFormArgs(BaseModel):
    """Arguments of the submit_contact_form capability and the contact endpoint."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, description="The full name of the visitor.")
    email: EmailStr = Field(description="The email address of the visitor.")
    phone: str | None = Field(
        default=None,
        description="The phone number of the visitor, including country code if provided.",
    )
    subject: str | None = Field(
        default=None,
        description="A short subject line summarizing the inquiry.",
    )
    message: str = Field(
        min_length=1,
        description="The detailed message or project description from the visitor.",
    )


class ToolInvocationResult(BaseModel):
    success: bool
    message: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, message: str) -> ToolInvocationResult:
        return cls(success=True, message=message)

    @classmethod
    def failed(cls, error: str) -> ToolInvocationResult:
        return cls(success=False, error=error)

    def as_payload(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)
