"""
First-party backend channel, used when the site runs on the dynamic host.

One POST per submission to /api/leads or /api/contact; no retry.
"""

import logging
from typing import Optional

import httpx

from formgate.channels.base import DeliveryChannel
from formgate.core import messages
from formgate.core.config import Settings
from formgate.core.errors import ChannelError
from formgate.core.forms import FormDefinition
from formgate.models.outcome import DeliveryOutcome
from formgate.models.submission import SubmissionPayload

logger = logging.getLogger(__name__)


class BackendChannel(DeliveryChannel):
    name = "Backend API"

    def __init__(
        self,
        form: FormDefinition,
        settings: Settings,
        host: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(form, settings, transport)

        base_url = settings.backend_base_url
        if not base_url:
            if not host:
                raise ValueError("BackendChannel needs BACKEND_BASE_URL or the page host")
            base_url = f"{settings.backend_scheme}://{host}"
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.form.endpoint_path}"

    async def _deliver(self, payload: SubmissionPayload) -> DeliveryOutcome:
        logger.info(f"POST {self.url} for {payload.email}")

        try:
            async with self._client(self.settings.backend_timeout) as client:
                response = await client.post(
                    self.url,
                    json=payload.to_request_body(),
                    headers={"Accept": "application/json"},
                )
        except httpx.HTTPError as e:
            raise ChannelError(f"Request to {self.url} failed: {str(e)}", user_message=messages.NETWORK_ERROR) from e

        if not response.is_success:
            raise ChannelError(f"{self.url} returned status {response.status_code}: {response.text}")

        try:
            data = response.json()
        except ValueError:
            raise ChannelError(f"{self.url} returned a non-JSON body")

        message = data.get("message") if isinstance(data, dict) else None
        if not isinstance(message, str) or not message:
            raise ChannelError(f"{self.url} response has no 'message' field: {data}")

        return DeliveryOutcome.success(message)
