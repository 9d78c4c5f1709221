"""
Submission controllers for the lead and contact forms.

A controller owns the form's submission state. submit() runs
validate -> detect host -> select channel -> send, then returns the side
effects (toast, download, form reset) as events for the presentation layer.

The two forms deliberately resolve a failed delivery differently:
- Lead form: always succeeds and always hands over the framework PDF.
- Contact form: a failed delivery is an error the visitor has to retry.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

import httpx

from formgate.channels.base import DeliveryChannel
from formgate.channels.registry import select_channel
from formgate.core import messages
from formgate.core.config import Settings, get_settings
from formgate.core.environment import Environment, detect
from formgate.core.forms import CONTACT_FORM, LEAD_FORM, FormDefinition
from formgate.core.validation import FieldRule
from formgate.models.events import DownloadArtifact, GatewayEvent, ResetForm, ScrollToTop, ShowToast
from formgate.models.outcome import DeliveryOutcome
from formgate.models.submission import SubmissionPayload

logger = logging.getLogger(__name__)

ChannelFactory = Callable[..., DeliveryChannel]


class SubmissionState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"


class SubmissionController(ABC):
    form: FormDefinition

    def __init__(
        self,
        host_provider: Callable[[], Optional[str]],
        settings: Optional[Settings] = None,
        channel_factory: Optional[ChannelFactory] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            host_provider: Returns the current page host; called on every attempt
            settings: Gateway settings (defaults to get_settings())
            channel_factory: Replaces select_channel, same signature
            transport: httpx transport handed to the channels
        """
        self.host_provider = host_provider
        self.settings = settings or get_settings()
        self._channel_factory = channel_factory or select_channel
        self._transport = transport

        self._state = SubmissionState.IDLE
        self._message: Optional[str] = None
        self._field_errors: Dict[str, FieldRule] = {}
        self._error = False
        self._attempt = 0

    # Read-only view for the presentation layer

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def message(self) -> Optional[str]:
        return self._message

    @property
    def field_errors(self) -> Dict[str, FieldRule]:
        return dict(self._field_errors)

    @property
    def error(self) -> bool:
        return self._error

    @property
    def is_pending(self) -> bool:
        return self._state is SubmissionState.PENDING

    @property
    def is_submitted(self) -> bool:
        return self._state is SubmissionState.SUCCEEDED

    async def submit(self, raw: Optional[Mapping[str, Any]]) -> List[GatewayEvent]:
        """
        Validate and deliver one submission.

        Args:
            raw: Field values from the form

        Returns:
            list: Events the presentation layer should realise, in order
        """
        form = self.form.kind.value

        if self._state is SubmissionState.PENDING:
            logger.warning(f"⚠️ {form} form submit ignored: a submission is already in flight")
            return []

        if self._state is SubmissionState.SUCCEEDED:
            logger.warning(f"⚠️ {form} form submit ignored: already submitted, reset() first")
            return []

        result = self.form.validate(raw)
        if not result.ok:
            self._field_errors = dict(result.errors)
            # A stale delivery error no longer describes the form
            self._message = None
            self._error = False
            logger.info(f"{form} form validation failed: {', '.join(sorted(result.errors))}")
            return []

        self._field_errors = {}
        self._message = None
        self._error = False
        self._state = SubmissionState.PENDING
        self._attempt += 1
        attempt = self._attempt

        outcome = await self._send(result.payload)

        if attempt != self._attempt or self._state is not SubmissionState.PENDING:
            logger.info(f"{form} form was reset while sending, dropping result for {result.payload.email}")
            return []

        return self._resolve(outcome)

    def reset(self) -> None:
        """Return to IDLE from any state ("Send another message")"""
        self._state = SubmissionState.IDLE
        self._field_errors = {}
        self._message = None
        self._error = False
        # Invalidates a submission that is still in flight
        self._attempt += 1

    async def _send(self, payload: SubmissionPayload) -> DeliveryOutcome:
        try:
            host = self.host_provider()
            environment: Environment = detect(host, self.settings)
            channel = self._channel_factory(self.form, environment, host, self.settings, transport=self._transport)
            return await channel.send(payload)
        except Exception as e:
            logger.error(f"❌ {self.form.kind.value} form could not be delivered: {str(e)}", exc_info=True)
            return DeliveryOutcome.failure(messages.GENERIC_ERROR)

    @abstractmethod
    def _resolve(self, outcome: DeliveryOutcome) -> List[GatewayEvent]:
        ...


class LeadSubmissionController(SubmissionController):
    """Framework download form. The PDF is released whatever the channel says."""
    form = LEAD_FORM

    def _resolve(self, outcome: DeliveryOutcome) -> List[GatewayEvent]:
        self._state = SubmissionState.SUCCEEDED

        if outcome.delivered:
            self._message = outcome.message
            toast = ShowToast(title=messages.TOAST_SUCCESS_TITLE, description=outcome.message)
        else:
            logger.warning(f"⚠️ Lead delivery failed ({outcome.message}); releasing the framework download anyway")
            self._message = messages.LEAD_FOLLOW_UP
            toast = ShowToast(title=messages.TOAST_RECEIVED_TITLE, description=messages.LEAD_FOLLOW_UP)

        return [
            toast,
            ResetForm(),
            DownloadArtifact(href=self.settings.artifact_path, filename=self.settings.artifact_filename),
        ]


class ContactSubmissionController(SubmissionController):
    form = CONTACT_FORM

    def _resolve(self, outcome: DeliveryOutcome) -> List[GatewayEvent]:
        self._message = outcome.message

        if not outcome.delivered:
            self._state = SubmissionState.IDLE
            self._error = True
            return [ShowToast(title=messages.TOAST_ERROR_TITLE, description=outcome.message, variant="destructive")]

        self._state = SubmissionState.SUCCEEDED
        return [
            ScrollToTop(),
            ShowToast(title=messages.TOAST_MESSAGE_SENT_TITLE, description=outcome.message),
            ResetForm(),
        ]
