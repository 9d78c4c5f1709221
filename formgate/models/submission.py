from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, StrictBool, field_validator
from pydantic_core import PydanticCustomError
from typing import Any, Dict

from formgate.core import messages

# The forms have named the consent checkbox differently over time
CONSENT_ALIASES = AliasChoices("consentGiven", "consent_given", "consent", "gdprConsent")


class SubmissionPayload(BaseModel):
    """Validated, immutable form data shared by both forms"""
    model_config = ConfigDict(frozen=True, extra="ignore")

    email: EmailStr
    organization: str
    consent_given: StrictBool = Field(
        ...,
        validation_alias=CONSENT_ALIASES,
        serialization_alias="consentGiven",
    )

    @field_validator("organization")
    @classmethod
    def organization_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError("required", messages.ORGANIZATION_REQUIRED)
        return value

    @field_validator("consent_given")
    @classmethod
    def consent_must_be_given(cls, value: bool) -> bool:
        if value is not True:
            raise PydanticCustomError("consent_required", messages.CONSENT_REQUIRED)
        return value

    def to_request_body(self) -> Dict[str, Any]:
        """JSON body sent to the first-party backend"""
        return self.model_dump(mode="json", by_alias=True)


class LeadPayload(SubmissionPayload):
    """Framework download request"""


class ContactPayload(SubmissionPayload):
    """Contact form message"""
    message: str

    @field_validator("message")
    @classmethod
    def message_long_enough(cls, value: str) -> str:
        if len(value) < 10:
            raise PydanticCustomError("too_short", messages.MESSAGE_TOO_SHORT)
        return value
