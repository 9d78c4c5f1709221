"""
Pytest configuration and fixtures for all tests.
"""

import json
import os

import httpx
import pytest

os.environ.setdefault("LOG_LEVEL", "DEBUG")

from formgate.core.config import Settings  # noqa: E402


@pytest.fixture
def anyio_backend():
    # Only asyncio, no Trio
    return "asyncio"


@pytest.fixture
def settings():
    """Fully configured relay and default host suffixes"""
    # _env_file=None keeps a developer .env out of the tests
    return Settings(
        _env_file=None,
        emailjs_service_id="service_test",
        emailjs_public_key="public_test",
        emailjs_template_notification="template_notify",
        emailjs_template_confirmation="template_confirm",
        backend_base_url=None,
    )


@pytest.fixture
def unconfigured_settings():
    return Settings(
        _env_file=None,
        emailjs_service_id=None,
        emailjs_public_key=None,
        emailjs_template_notification=None,
        emailjs_template_confirmation=None,
    )


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served"""

    def __init__(self, handler):
        self.requests = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)

    def json_bodies(self):
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def recording_transport():
    """Factory: recording_transport(handler) -> RecordingTransport"""
    return RecordingTransport


@pytest.fixture
def lead_input():
    return {"email": "x@y.org", "organization": "Acme", "consentGiven": True}


@pytest.fixture
def contact_input():
    return {
        "email": "a@b.com",
        "organization": "Acme CDFI",
        "message": "Please call me back",
        "consent": True,
    }
