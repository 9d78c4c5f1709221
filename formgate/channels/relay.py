"""
EmailJS relay channel, used when the site runs on a static host.

The lead form sends two emails (confirmation to the visitor and a notification
to the ZenPrivata inbox) concurrently; the contact form sends the notification
only. Any failed email fails the whole delivery.
"""

import asyncio
import logging
from datetime import datetime
from typing import Any, Dict, List, Tuple

import httpx

from formgate.channels.base import DeliveryChannel
from formgate.core import messages
from formgate.core.errors import ChannelError, ConfigurationError
from formgate.models.outcome import DeliveryOutcome
from formgate.models.submission import ContactPayload, SubmissionPayload

logger = logging.getLogger(__name__)


class RelayChannel(DeliveryChannel):
    name = "EmailJS relay"

    def check_configuration(self) -> None:
        """
        Make sure every id the relay needs is configured.

        Logs which settings exist (never their values).

        Raises:
            ConfigurationError: If a credential or template id is missing
        """
        status = self.settings.relay_settings_status(with_confirmation=self.form.sends_confirmation)

        logger.info(
            "EmailJS config check: "
            + ", ".join(f"{name}={'exists' if present else 'missing'}" for name, present in status.items())
        )

        missing = self.settings.missing_relay_settings(with_confirmation=self.form.sends_confirmation)
        if missing:
            raise ConfigurationError(missing)

    def build_messages(self, payload: SubmissionPayload) -> List[Tuple[str, Dict[str, Any]]]:
        """
        Build (template_id, template_params) pairs for one submission.

        The confirmation message (lead form only) comes first.
        """
        timestamp = datetime.now().strftime("%m/%d/%Y, %I:%M:%S %p")

        notification = {
            "user_email": payload.email,
            "organization": payload.organization,
            "form_type": self.form.form_type,
            "timestamp": timestamp,
        }
        if isinstance(payload, ContactPayload):
            notification["message"] = payload.message

        parameter_sets = []
        if self.form.sends_confirmation:
            parameter_sets.append((
                self.settings.emailjs_template_confirmation,
                {
                    "to_email": payload.email,
                    "organization": payload.organization,
                    "download_link": self.settings.artifact_path,
                    "download_filename": self.settings.artifact_filename,
                    "timestamp": timestamp,
                },
            ))
        parameter_sets.append((self.settings.emailjs_template_notification, notification))
        return parameter_sets

    async def _deliver(self, payload: SubmissionPayload) -> DeliveryOutcome:
        self.check_configuration()
        parameter_sets = self.build_messages(payload)

        async with self._client(self.settings.relay_timeout) as client:
            results = await asyncio.gather(
                *(self._dispatch(client, template_id, params) for template_id, params in parameter_sets),
                return_exceptions=True,
            )

        failures = [result for result in results if isinstance(result, BaseException)]
        if failures:
            for extra in failures[1:]:
                logger.error(f"❌ Additional EmailJS failure for {payload.email}: {str(extra)}")
            raise failures[0]

        return DeliveryOutcome.success(self.form.confirmation_message)

    async def _dispatch(self, client: httpx.AsyncClient, template_id: str, params: Dict[str, Any]) -> None:
        body = {
            "service_id": self.settings.emailjs_service_id,
            "template_id": template_id,
            "user_id": self.settings.emailjs_public_key,
            "template_params": params,
        }
        if self.settings.emailjs_private_key:
            body["accessToken"] = self.settings.emailjs_private_key

        try:
            response = await client.post(self.settings.emailjs_api_url, json=body)
        except httpx.HTTPError as e:
            raise ChannelError(
                f"EmailJS request for template {template_id} failed: {str(e)}",
                user_message=messages.NETWORK_ERROR,
            ) from e

        if not response.is_success:
            raise ChannelError(
                f"EmailJS rejected template {template_id} - Status: {response.status_code} {response.text}"
            )

        logger.info(f"EmailJS accepted template {template_id} for {params.get('user_email') or params.get('to_email')}")
