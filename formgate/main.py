"""
Entry point for the presentation layer.

    from formgate.main import build_controller, configure_logging

    configure_logging()
    contact = build_controller("contact", host_provider=lambda: page_host)
    events = await contact.submit({"email": ..., "organization": ..., ...})
"""

import logging
from typing import Callable, Optional, Union

import httpx

from formgate.core.config import Settings, get_settings
from formgate.core.controller import ContactSubmissionController, LeadSubmissionController, SubmissionController
from formgate.core.forms import FormKind, get_form

CONTROLLERS = {
    FormKind.LEAD: LeadSubmissionController,
    FormKind.CONTACT: ContactSubmissionController,
}


def configure_logging(settings: Optional[Settings] = None):
    """Set up root logging the same way for every embedding"""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_controller(
    form: Union[FormKind, str],
    host_provider: Callable[[], Optional[str]],
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> SubmissionController:
    """
    Create the submission controller for one form instance.

    Args:
        form: "lead" or "contact"
        host_provider: Returns the page host (e.g. window.location.host)
        settings: Gateway settings (defaults to get_settings())
        transport: Optional httpx transport for every outbound request

    Returns:
        SubmissionController: LeadSubmissionController or ContactSubmissionController

    Raises:
        ValueError: If the form kind is unknown
    """
    definition = get_form(form)
    controller_class = CONTROLLERS[definition.kind]
    logging.getLogger(__name__).debug(f"Building {controller_class.__name__}")
    return controller_class(host_provider, settings=settings, transport=transport)
