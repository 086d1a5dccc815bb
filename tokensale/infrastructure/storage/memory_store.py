"""In-memory implementation of the ApplicationStore interface.

Keeps applications in a dict keyed by private id. Useful for tests and as
the base of the file-backed store.
"""

import logging
from typing import Dict, List, Optional

from tokensale.domain.interfaces.application_store import ApplicationStore
from tokensale.domain.models.application import Application
from tokensale.domain.models.common import PrivateId, PublicId

logger = logging.getLogger(__name__)


class DuplicateApplication(Exception):
    """Raised when adding an application whose private id is already stored."""

    def __init__(self, private_id: str):
        self.private_id = private_id
        super().__init__(f"Application already exists: {private_id}")


class InMemoryApplicationStore(ApplicationStore):
    """Dict-backed application store."""

    def __init__(self, applications: Optional[List[Application]] = None):
        self._applications: Dict[PrivateId, Application] = {}
        for application in applications or []:
            self._applications[application.private_id] = application
        logger.debug(f"InMemoryApplicationStore initialized with {len(self._applications)} applications.")

    async def add(self, application: Application) -> None:
        if application.private_id in self._applications:
            raise DuplicateApplication(application.private_id)
        self._applications[application.private_id] = application

    async def update(self, private_id: PrivateId, application: Application) -> None:
        # Replace only, never insert.
        if private_id not in self._applications:
            logger.warning(f"Update ignored, no application stored under {private_id}.")
            return
        self._applications[private_id] = application

    async def get(self, private_id: PrivateId) -> Optional[Application]:
        return self._applications.get(private_id)

    async def get_with_public_id(self, public_id: PublicId) -> Optional[Application]:
        for application in self._applications.values():
            if application.public_id == public_id:
                return application
        return None

    async def get_all(self) -> List[Application]:
        return list(self._applications.values())
