"""
Schema validation for raw form input.

Pure and synchronous. Every invalid field is reported at once so the form can
annotate all of them in one pass; nothing here touches the network.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Type

from pydantic import ValidationError

from formgate.core import messages
from formgate.models.submission import ContactPayload, LeadPayload, SubmissionPayload


class FieldRule(str, Enum):
    INVALID_FORMAT = "InvalidFormat"
    REQUIRED = "Required"
    TOO_SHORT = "TooShort"
    CONSENT_REQUIRED = "ConsentRequired"


# Each field is guarded by exactly one rule, so any pydantic error on the
# field (missing, wrong type, custom check) reports that rule.
FIELD_RULES: Dict[str, FieldRule] = {
    "email": FieldRule.INVALID_FORMAT,
    "organization": FieldRule.REQUIRED,
    "message": FieldRule.TOO_SHORT,
    "consent": FieldRule.CONSENT_REQUIRED,
}

RULE_MESSAGES: Dict[FieldRule, str] = {
    FieldRule.INVALID_FORMAT: messages.INVALID_EMAIL,
    FieldRule.REQUIRED: messages.ORGANIZATION_REQUIRED,
    FieldRule.TOO_SHORT: messages.MESSAGE_TOO_SHORT,
    FieldRule.CONSENT_REQUIRED: messages.CONSENT_REQUIRED,
}

# pydantic reports errors under the attribute name or one of its aliases
_ERROR_KEYS = {
    "email": "email",
    "organization": "organization",
    "message": "message",
    "consent_given": "consent",
    "consentGiven": "consent",
    "consent": "consent",
    "gdprConsent": "consent",
}


@dataclass
class ValidationResult:
    """
    Outcome of validating one raw submission.

    Attributes:
        payload: Typed payload when every field passed, otherwise None
        errors: Field name -> violated rule, empty on success
    """
    payload: Optional[SubmissionPayload] = None
    errors: Dict[str, FieldRule] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.payload is not None

    def messages(self) -> Dict[str, str]:
        """Field name -> message to display under the input"""
        return {name: RULE_MESSAGES[rule] for name, rule in self.errors.items()}


def validate(raw: Optional[Mapping[str, Any]], model: Type[SubmissionPayload]) -> ValidationResult:
    """
    Validate raw form values against a payload model.

    Args:
        raw: Field values as typed by the visitor (unknown keys are ignored)
        model: LeadPayload or ContactPayload

    Returns:
        ValidationResult with either the payload or the per-field errors
    """
    # Anything that is not a mapping counts as an empty form
    values = dict(raw) if isinstance(raw, Mapping) else {}

    try:
        payload = model.model_validate(values)
    except ValidationError as exc:
        errors: Dict[str, FieldRule] = {}
        for error in exc.errors():
            loc = error.get("loc") or ()
            key = _ERROR_KEYS.get(str(loc[0])) if loc else None
            if key is not None:
                errors.setdefault(key, FIELD_RULES[key])
        return ValidationResult(errors=errors)

    return ValidationResult(payload=payload)


def validate_lead(raw: Optional[Mapping[str, Any]]) -> ValidationResult:
    return validate(raw, LeadPayload)


def validate_contact(raw: Optional[Mapping[str, Any]]) -> ValidationResult:
    return validate(raw, ContactPayload)
