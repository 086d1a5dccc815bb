"""Interfaces for notifying applicants.

`Notifier` is what the handlers talk to. `EmailSender` is the lower-level
mail transport used by email based notifiers.
"""

import abc

from tokensale.domain.models.application import Application
from tokensale.domain.models.common import EmailAddress, PrivateId


class Notifier(abc.ABC):
    """Abstract Base Class for the two-step applicant notification."""

    @abc.abstractmethod
    async def send_first_email(self, email: EmailAddress, private_id: PrivateId) -> None:
        """Sends the welcome notification after signup.

        Args:
            email: Recipient address.
            private_id: The applicant's private identifier (used to build
                their personal link).
        """
        pass

    @abc.abstractmethod
    async def send_second_email(self, email: EmailAddress, application: Application) -> None:
        """Sends the confirmation notification after the application is locked.

        Args:
            email: Recipient address.
            application: The locked application as persisted.
        """
        pass


class EmailSender(abc.ABC):
    """Abstract Base Class for a mail transport."""

    @abc.abstractmethod
    async def send(self, recipient: EmailAddress, subject: str, html_body: str) -> None:
        """Sends a single HTML email.

        Raises:
            Exception: Transport failures propagate to the caller.
        """
        pass
