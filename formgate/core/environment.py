"""
Hosting environment detection.

The same front-end bundle is deployed to a static file host and to the
dynamic server host. At submit time the gateway looks at the page host to pick
the delivery channel, so no build-time flag is needed.
"""

import logging
from enum import Enum
from typing import Optional

from formgate.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"


def detect(host: Optional[str], settings: Optional[Settings] = None) -> Environment:
    """
    Classify a page host address.

    DYNAMIC only when the host carries the dynamic-hosting suffix and none of
    the static-hosting suffixes; STATIC for everything else, including
    localhost and empty hosts.

    Args:
        host: Page host, e.g. "zenprivata.replit.app" or "localhost:5173"
        settings: Settings to read the suffixes from (defaults to get_settings())

    Returns:
        Environment: STATIC or DYNAMIC
    """
    if settings is None:
        settings = get_settings()

    normalized = (host or "").strip().lower()

    if any(suffix.lower() in normalized for suffix in settings.static_host_suffixes if suffix):
        environment = Environment.STATIC
    elif settings.dynamic_host_suffix and settings.dynamic_host_suffix.lower() in normalized:
        environment = Environment.DYNAMIC
    else:
        environment = Environment.STATIC

    logger.debug(f"Host '{normalized}' classified as {environment.value}")
    return environment
