"""Administrator-facing application handler.

Unfiltered and unvalidated: results are returned exactly as the store hands
them over.
"""

import logging
from typing import List, Optional

from tokensale.domain.interfaces.application_store import ApplicationStore
from tokensale.domain.models.application import Application
from tokensale.domain.models.common import PublicId

logger = logging.getLogger(__name__)


class PrivateApplicationHandler:
    """Read-only access to the full stored applications."""

    def __init__(self, store: ApplicationStore):
        self.store = store

    async def get(self, public_id: PublicId) -> Optional[Application]:
        """Fetches the stored application for a public id (None if absent)."""
        logger.debug(f"Admin lookup of application {public_id}")
        return await self.store.get_with_public_id(public_id)

    async def get_all(self) -> List[Application]:
        """Lists every stored application."""
        return await self.store.get_all()
