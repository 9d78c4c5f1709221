"""
The two form instances served by the gateway.

Both share one architecture; this is where they differ in schema, backend
endpoint and relay messages. Fallback behaviour lives in the controllers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Type, Union

from formgate.core import messages
from formgate.core.validation import ValidationResult, validate
from formgate.models.submission import ContactPayload, LeadPayload, SubmissionPayload


class FormKind(str, Enum):
    LEAD = "lead"
    CONTACT = "contact"


@dataclass(frozen=True)
class FormDefinition:
    """
    Static description of one form.

    Attributes:
        kind: Which form this is
        payload_model: Pydantic model the raw input is validated against
        endpoint_path: First-party backend path for the dynamic host
        form_type: Label put in the internal notification email
        confirmation_message: Copy shown when the relay accepted the message
        sends_confirmation: Whether the relay also emails the visitor
    """
    kind: FormKind
    payload_model: Type[SubmissionPayload]
    endpoint_path: str
    form_type: str
    confirmation_message: str
    sends_confirmation: bool = False

    def validate(self, raw: Optional[Mapping[str, Any]]) -> ValidationResult:
        return validate(raw, self.payload_model)


LEAD_FORM = FormDefinition(
    kind=FormKind.LEAD,
    payload_model=LeadPayload,
    endpoint_path="/api/leads",
    form_type="Framework Download Request",
    confirmation_message=messages.LEAD_CONFIRMATION,
    sends_confirmation=True,
)

CONTACT_FORM = FormDefinition(
    kind=FormKind.CONTACT,
    payload_model=ContactPayload,
    endpoint_path="/api/contact",
    form_type="Contact Form Submission",
    confirmation_message=messages.CONTACT_CONFIRMATION,
)

FORMS = {
    FormKind.LEAD: LEAD_FORM,
    FormKind.CONTACT: CONTACT_FORM,
}


def get_form(kind: Union[FormKind, str]) -> FormDefinition:
    """Look up a form definition by kind ("lead" or "contact")"""
    try:
        return FORMS[FormKind(kind)]
    except ValueError:
        raise ValueError(f"Unknown form '{kind}'. Expected one of: {', '.join(k.value for k in FormKind)}")
