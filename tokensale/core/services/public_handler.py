"""
Applicant-facing application handler.

Enforces the signup lifecycle (created -> updated -> locked) and coordinates
identity issuance, persistence and notification. Every operation is a
sequential await chain: a notification is only sent once the write it
announces has been persisted.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

# Domain Layer Imports
from tokensale.domain.errors import (
    ApplicationLocked,
    ApplicationNotFound,
    InvalidEmail,
    MissingFields,
)
from tokensale.domain.interfaces.application_store import ApplicationStore
from tokensale.domain.interfaces.identity_issuer import IdentityIssuer
from tokensale.domain.interfaces.notifier import Notifier
from tokensale.domain.models.application import Application, PublicApplication
from tokensale.domain.models.common import EmailAddress, FieldName, PrivateId

from tokensale.core.validation import get_missing_fields, is_valid_email, to_public

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PublicApplicationHandler:
    """Orchestrates the applicant-facing operations: add, update, get, lock."""

    def __init__(
        self,
        store: ApplicationStore,
        identity_issuer: IdentityIssuer,
        notifier: Notifier,
        clock: Optional[Clock] = None,
    ):
        """Initializes the handler with its collaborators.

        Args:
            store: Persistence for applications.
            identity_issuer: Source of private and public identifiers.
            notifier: Sends the welcome and confirmation notifications.
            clock: Used for `now` when add/lock are called without one.
        """
        self.store = store
        self.identity_issuer = identity_issuer
        self.notifier = notifier
        self.clock = clock or utc_now

    async def add(self, email: str, now: Optional[datetime] = None) -> None:
        """Registers a new applicant and sends them their personal link.

        Raises:
            InvalidEmail: If `email` is malformed. Nothing is stored or sent.
        """
        if not is_valid_email(email):
            logger.warning(f"Signup rejected, invalid email: {email!r}")
            raise InvalidEmail(email)

        private_id = await self.identity_issuer.generate_private_id()
        public_id = await self.identity_issuer.generate_public_id()
        application = Application(
            email=EmailAddress(email),
            private_id=private_id,
            public_id=public_id,
            creation=now or self.clock(),
        )

        await self.store.add(application)
        logger.info(f"Application {public_id} created.")

        await self.notifier.send_first_email(EmailAddress(email), private_id)
        logger.debug(f"Welcome email dispatched for application {public_id}.")

    @staticmethod
    def get_missing_fields_for_update(application: Application | PublicApplication) -> List[FieldName]:
        """Lists the required fields still missing from `application`.

        Returns:
            A subset of ["firstName", "lastName", "country"], in that order.
        """
        return get_missing_fields(application)

    async def update(
        self,
        private_id: PrivateId,
        application: Application,
        validate: bool = True,
        now: Optional[datetime] = None,
    ) -> None:
        """Replaces the stored application with `application`.

        The checks look at the submitted payload only: an update that claims
        to be locked is refused, but the stored record is not fetched.

        Args:
            private_id: Key of the application to replace.
            application: The complete new value (not a diff).
            validate: Set to False for writes whose data was verified
                elsewhere; all checks are then skipped.
            now: Stamped as `last_update` when given.

        Raises:
            ApplicationLocked: If validating and the payload is locked.
            MissingFields: If validating and required fields are missing.
        """
        if validate:
            if application.is_locked:
                logger.warning(f"Update refused, payload for {private_id} is locked.")
                raise ApplicationLocked(private_id)

            missing_fields = self.get_missing_fields_for_update(application)
            if missing_fields:
                logger.warning(f"Update refused, missing fields: {missing_fields}")
                raise MissingFields(missing_fields)

        payload = application if now is None else application.merge(last_update=now)
        await self.store.update(private_id, payload)
        logger.info(f"Application updated (validated={validate}).")

    async def get(self, private_id: PrivateId) -> PublicApplication:
        """Fetches the applicant-facing view of an application.

        Raises:
            ApplicationNotFound: If no application has this private id.
        """
        application = await self.store.get(private_id)
        if application is None:
            raise ApplicationNotFound(private_id)
        return to_public(application)

    async def lock(self, private_id: PrivateId, now: Optional[datetime] = None) -> None:
        """Locks an application and sends the confirmation email.

        Reads then writes without a compare-and-set: two concurrent locks on
        the same id both persist and both notify, the last write wins.
        Locking an already locked application persists and notifies again.
        If the notification fails the lock stays persisted and the error
        propagates.

        Raises:
            ApplicationNotFound: If no application has this private id.
        """
        application = await self.store.get(private_id)
        if application is None:
            raise ApplicationNotFound(private_id)

        locked = application.merge(lock_date=now or self.clock(), is_locked=True)
        await self.store.update(private_id, locked)
        logger.info(f"Application {application.public_id} locked.")

        if not application.email:
            logger.info(f"Application {application.public_id} has no email, skipping confirmation.")
            return

        try:
            await self.notifier.send_second_email(application.email, locked)
        except Exception as e:
            logger.error(
                f"Application {application.public_id} locked but confirmation email failed: {e}",
                exc_info=True,
            )
            raise
