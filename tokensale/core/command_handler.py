"""Command Handler: Orchestrates CLI command execution.

Receives commands from the main entry point (main.py), resolves identifiers
and payloads, delegates the work to the public or private application
handler and translates the outcome (or the error kind) into UI output.
Every handle_* method returns True on success and False otherwise.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from tokensale.core.services.private_handler import PrivateApplicationHandler
from tokensale.core.services.public_handler import PublicApplicationHandler, utc_now
from tokensale.domain.errors import ApplicationError, MissingFields
from tokensale.domain.interfaces.user_interface import UserInterface
from tokensale.domain.models.application import Application
from tokensale.domain.models.common import PrivateId, PublicId

logger = logging.getLogger(__name__)


class CommandHandler:
    """Handles incoming commands and delegates to the application handlers."""

    def __init__(
        self,
        public_handler: PublicApplicationHandler,
        private_handler: PrivateApplicationHandler,
        ui: UserInterface,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initializes the CommandHandler with the handlers and the UI."""
        self.public_handler = public_handler
        self.private_handler = private_handler
        self.ui = ui
        self.clock = clock or utc_now

    def _report_failure(self, action: str, error: Exception) -> None:
        """Displays a rejected operation; unexpected errors are logged with traceback."""
        if isinstance(error, MissingFields):
            self.ui.display_error(f"{action} failed, missing fields: {', '.join(error.fields)}")
        elif isinstance(error, ApplicationError):
            self.ui.display_error(f"{action} failed: {error}")
        else:
            logger.error(f"{action} failed unexpectedly: {error}", exc_info=True)
            self.ui.display_error(f"{action} failed: {error}")

    async def handle_signup(self, email: str) -> bool:
        """Handles the 'signup' command."""
        logger.info("Handling 'signup' command.")
        try:
            await self.public_handler.add(email, now=self.clock())
        except Exception as e:
            self._report_failure("Signup", e)
            return False
        self.ui.display_info(f"Application created. A welcome email has been sent to {email}.")
        return True

    async def handle_update(
        self,
        private_id: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        country: Optional[str] = None,
        tx_hashes: Optional[List[str]] = None,
        validate: bool = True,
    ) -> bool:
        """Handles the 'update' command.

        The handler replaces whole records, so the payload is built from the
        currently stored record with the given changes applied; tx hashes
        are appended to the ones already recorded.
        """
        logger.info("Handling 'update' command.")
        try:
            current = await self.public_handler.get(PrivateId(private_id))
            stored = await self.private_handler.get(current.public_id)
            if stored is None:
                stored = Application.from_record(current.to_record())
            changes = {
                "first_name": first_name,
                "last_name": last_name,
                "country": country,
            }
            payload = stored.merge(
                **{name: value for name, value in changes.items() if value is not None}
            )
            if tx_hashes:
                payload = payload.merge(tx_hashes=(payload.tx_hashes or ()) + tuple(tx_hashes))

            await self.public_handler.update(PrivateId(private_id), payload, validate=validate, now=self.clock())
        except Exception as e:
            self._report_failure("Update", e)
            return False
        self.ui.display_info("Application updated.")
        return True

    async def handle_show(self, private_id: str) -> bool:
        """Handles the 'show' command (applicant view)."""
        try:
            application = await self.public_handler.get(PrivateId(private_id))
        except Exception as e:
            self._report_failure("Lookup", e)
            return False

        self.ui.display_application(application, title="Your application")
        missing = self.public_handler.get_missing_fields_for_update(application)
        if missing and not application.is_locked:
            self.ui.display_warning(f"Still missing: {', '.join(missing)}")
        return True

    async def handle_lock(self, private_id: str) -> bool:
        """Handles the 'lock' command."""
        logger.info("Handling 'lock' command.")
        try:
            await self.public_handler.lock(PrivateId(private_id), now=self.clock())
        except Exception as e:
            self._report_failure("Lock", e)
            return False
        self.ui.display_info("Application locked.")
        return True

    async def handle_admin_show(self, public_id: str) -> bool:
        """Handles the 'admin-show' command (full stored record)."""
        try:
            application = await self.private_handler.get(PublicId(public_id))
        except Exception as e:
            self._report_failure("Lookup", e)
            return False

        if application is None:
            self.ui.display_error(f"No application with public id {public_id}.")
            return False
        self.ui.display_application(application, title=f"Application {public_id}")
        return True

    async def handle_admin_list(self) -> bool:
        """Handles the 'admin-list' command."""
        try:
            applications = await self.private_handler.get_all()
        except Exception as e:
            self._report_failure("Listing", e)
            return False
        self.ui.display_applications(applications)
        return True
