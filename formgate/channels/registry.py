import logging
from typing import Optional

import httpx

from formgate.channels.backend import BackendChannel
from formgate.channels.base import DeliveryChannel
from formgate.channels.relay import RelayChannel
from formgate.core.config import Settings
from formgate.core.environment import Environment
from formgate.core.forms import FormDefinition

logger = logging.getLogger(__name__)


def select_channel(
    form: FormDefinition,
    environment: Environment,
    host: Optional[str],
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> DeliveryChannel:
    """
    Pick the delivery channel for a hosting environment.

    Args:
        form: Form being submitted
        environment: Result of detect() for the current page host
        host: Page host, used as the backend origin when BACKEND_BASE_URL is unset
        settings: Gateway settings
        transport: Optional httpx transport shared by every request of the channel

    Returns:
        DeliveryChannel: RelayChannel for STATIC, BackendChannel for DYNAMIC
    """
    if environment is Environment.DYNAMIC:
        channel = BackendChannel(form, settings, host=host, transport=transport)
    else:
        channel = RelayChannel(form, settings, transport=transport)

    logger.info(f"Using {channel.name} for {form.kind.value} form ({environment.value} host)")
    return channel
