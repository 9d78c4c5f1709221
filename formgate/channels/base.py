"""
Shared contract for delivery channels.

A channel takes a validated payload, performs the network operation and
returns a DeliveryOutcome. Subclasses implement _deliver() and raise
ChannelError / ConfigurationError; send() maps every failure into a failed
outcome with visitor-safe text and keeps the real error in the logs.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from formgate.core import messages
from formgate.core.config import Settings
from formgate.core.errors import ChannelError, ConfigurationError
from formgate.core.forms import FormDefinition
from formgate.models.outcome import DeliveryOutcome
from formgate.models.submission import SubmissionPayload

logger = logging.getLogger(__name__)


class DeliveryChannel(ABC):
    name = "channel"

    def __init__(
        self,
        form: FormDefinition,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.form = form
        self.settings = settings
        self.transport = transport

    async def send(self, payload: SubmissionPayload) -> DeliveryOutcome:
        """
        Deliver a payload and normalize the result.

        Never raises: provider, network and configuration errors all come back
        as DeliveryOutcome(delivered=False, ...).
        """
        form = self.form.kind.value

        try:
            outcome = await self._deliver(payload)
        except ConfigurationError as e:
            logger.error(f"❌ {self.name} not configured for {form} form: {e.detail}")
            return DeliveryOutcome.failure(e.user_message)
        except ChannelError as e:
            logger.error(f"❌ {self.name} delivery FAILED for {payload.email} ({form} form): {e.detail}")
            return DeliveryOutcome.failure(e.user_message)
        except Exception as e:
            logger.error(f"❌ {self.name} unexpected error for {payload.email} ({form} form): {str(e)}", exc_info=True)
            return DeliveryOutcome.failure(messages.GENERIC_ERROR)

        logger.info(f"✅ {self.name} delivery SUCCESS for {payload.email} ({form} form)")
        return outcome

    @abstractmethod
    async def _deliver(self, payload: SubmissionPayload) -> DeliveryOutcome:
        ...

    def _client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport, timeout=timeout)
