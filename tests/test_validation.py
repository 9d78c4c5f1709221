"""
Tests for schema validation of raw form input.
"""

import pytest
from pydantic import ValidationError

from formgate.core.validation import FieldRule, validate_contact, validate_lead
from formgate.models.submission import ContactPayload, LeadPayload


class TestLeadValidation:
    """Tests for the framework download form schema"""

    def test_valid_input_returns_payload(self, lead_input):
        """Valid input produces a typed payload and no errors"""
        result = validate_lead(lead_input)

        assert result.ok
        assert result.errors == {}
        assert isinstance(result.payload, LeadPayload)
        assert result.payload.email == "x@y.org"
        assert result.payload.organization == "Acme"
        assert result.payload.consent_given is True

    def test_organization_is_trimmed(self, lead_input):
        result = validate_lead({**lead_input, "organization": "  Acme CDFI  "})

        assert result.payload.organization == "Acme CDFI"

    @pytest.mark.parametrize("email", ["not-an-email", "a@", "@b.com", "a b@c.com", "", None, 42])
    def test_invalid_email_reports_invalid_format(self, lead_input, email):
        """Any malformed email is reported as InvalidFormat"""
        result = validate_lead({**lead_input, "email": email})

        assert not result.ok
        assert result.payload is None
        assert result.errors == {"email": FieldRule.INVALID_FORMAT}

    def test_missing_email_reports_invalid_format(self, lead_input):
        raw = dict(lead_input)
        del raw["email"]

        assert validate_lead(raw).errors == {"email": FieldRule.INVALID_FORMAT}

    @pytest.mark.parametrize("organization", ["", "   ", "\t\n", None])
    def test_blank_organization_is_required(self, lead_input, organization):
        result = validate_lead({**lead_input, "organization": organization})

        assert result.errors == {"organization": FieldRule.REQUIRED}

    @pytest.mark.parametrize("consent", [False, None, "true", 1, "yes"])
    def test_consent_must_be_exactly_true(self, lead_input, consent):
        """Only the boolean True counts as consent"""
        result = validate_lead({**lead_input, "consentGiven": consent})

        assert result.errors == {"consent": FieldRule.CONSENT_REQUIRED}

    def test_consent_missing_is_reported(self):
        result = validate_lead({"email": "x@y.org", "organization": "Acme"})

        assert result.errors == {"consent": FieldRule.CONSENT_REQUIRED}

    def test_consent_false_fails_even_with_other_fields_invalid(self):
        result = validate_lead({"email": "bad", "organization": "", "consentGiven": False})

        assert result.errors["consent"] == FieldRule.CONSENT_REQUIRED

    def test_gdpr_consent_key_is_accepted(self):
        """The lead form historically named the checkbox gdprConsent"""
        result = validate_lead({"email": "x@y.org", "organization": "Acme", "gdprConsent": True})

        assert result.ok

    def test_unknown_keys_are_ignored(self, lead_input):
        result = validate_lead({**lead_input, "message": "short", "utm_source": "newsletter"})

        assert result.ok

    def test_none_input_reports_every_field(self):
        result = validate_lead(None)

        assert result.errors == {
            "email": FieldRule.INVALID_FORMAT,
            "organization": FieldRule.REQUIRED,
            "consent": FieldRule.CONSENT_REQUIRED,
        }

    @pytest.mark.parametrize("raw", ["x@y.org", ["email", "organization"], 42])
    def test_non_mapping_input_reports_every_field(self, raw):
        result = validate_lead(raw)

        assert not result.ok
        assert set(result.errors) == {"email", "organization", "consent"}

    def test_request_body_uses_wire_names(self, lead_input):
        body = validate_lead(lead_input).payload.to_request_body()

        assert body == {"email": "x@y.org", "organization": "Acme", "consentGiven": True}


class TestContactValidation:
    """Tests for the contact form schema"""

    def test_valid_input_returns_payload(self, contact_input):
        result = validate_contact(contact_input)

        assert result.ok
        assert isinstance(result.payload, ContactPayload)
        assert result.payload.message == "Please call me back"

    def test_message_shorter_than_ten_characters(self, contact_input):
        result = validate_contact({**contact_input, "message": "Too short"})

        assert result.errors == {"message": FieldRule.TOO_SHORT}

    def test_message_of_exactly_ten_characters_passes(self, contact_input):
        result = validate_contact({**contact_input, "message": "0123456789"})

        assert result.ok

    def test_every_invalid_field_is_reported_at_once(self):
        """All violations come back together so the form can mark every input"""
        result = validate_contact({"email": "nope", "organization": " ", "message": "hi", "consent": False})

        assert result.errors == {
            "email": FieldRule.INVALID_FORMAT,
            "organization": FieldRule.REQUIRED,
            "message": FieldRule.TOO_SHORT,
            "consent": FieldRule.CONSENT_REQUIRED,
        }

    def test_messages_for_display(self):
        result = validate_contact({"email": "nope", "organization": "Acme", "message": "hi", "consent": True})

        assert result.messages() == {
            "email": "Invalid email address",
            "message": "Message must be at least 10 characters",
        }

    def test_request_body_includes_message(self, contact_input):
        body = validate_contact(contact_input).payload.to_request_body()

        assert body == {
            "email": "a@b.com",
            "organization": "Acme CDFI",
            "consentGiven": True,
            "message": "Please call me back",
        }

    def test_payload_is_immutable(self, contact_input):
        payload = validate_contact(contact_input).payload

        with pytest.raises(ValidationError):
            payload.message = "changed after validation"
