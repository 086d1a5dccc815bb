"""Notifier that sends the two-step applicant email sequence.

1. Welcome email after signup, carrying the applicant's private link.
2. Confirmation email once the application is locked.

Rendering is done here; delivery is delegated to an `EmailSender`.
"""

import logging
from typing import Callable, Optional

from jinja2 import Environment

from tokensale.domain.interfaces.notifier import EmailSender, Notifier
from tokensale.domain.models.application import Application
from tokensale.domain.models.common import EmailAddress, PrivateId
from tokensale.infrastructure.mail.templates import (
    CONFIRMATION_TEMPLATE,
    WELCOME_TEMPLATE,
    create_template_environment,
)

logger = logging.getLogger(__name__)

DEFAULT_LINK_BASE_URL = "https://blockfood.io/pre-sale"
WELCOME_SUBJECT = "Complete your pre-sale application"
CONFIRMATION_SUBJECT = "Your pre-sale application is confirmed"

LinkBuilder = Callable[[PrivateId], str]


def build_private_link(base_url: str = DEFAULT_LINK_BASE_URL) -> LinkBuilder:
    """Returns a function turning a private id into the applicant's personal link."""
    def link_builder(private_id: PrivateId) -> str:
        return f"{base_url}#privateId={private_id}"
    return link_builder


class EmailSequenceNotifier(Notifier):
    """Renders the welcome/confirmation emails and hands them to a sender."""

    def __init__(
        self,
        sender: EmailSender,
        link_builder: Optional[LinkBuilder] = None,
        templates: Optional[Environment] = None,
    ):
        self.sender = sender
        self.link_builder = link_builder or build_private_link()
        self.templates = templates or create_template_environment()

    async def send_first_email(self, email: EmailAddress, private_id: PrivateId) -> None:
        html_body = self.templates.get_template(WELCOME_TEMPLATE).render(
            link=self.link_builder(private_id),
        )
        await self.sender.send(email, WELCOME_SUBJECT, html_body)
        logger.info("Welcome email sent.")

    async def send_second_email(self, email: EmailAddress, application: Application) -> None:
        html_body = self.templates.get_template(CONFIRMATION_TEMPLATE).render(
            first_name=application.first_name,
            last_name=application.last_name,
            country=application.country,
            public_id=application.public_id,
            tx_hashes=application.tx_hashes or (),
        )
        await self.sender.send(email, CONFIRMATION_SUBJECT, html_body)
        logger.info(f"Confirmation email sent for application {application.public_id}.")
