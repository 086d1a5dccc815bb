"""Interface for application persistence.

Defines the contract for storing and retrieving applications, keyed by
private identifier with a secondary lookup by public identifier, allowing
the handlers to be independent of the storage engine (memory, JSON file,
document database).
"""

import abc
from typing import List, Optional

from tokensale.domain.models.application import Application
from tokensale.domain.models.common import PrivateId, PublicId


class ApplicationStore(abc.ABC):
    """Abstract Base Class for application persistence."""

    @abc.abstractmethod
    async def add(self, application: Application) -> None:
        """Persists a newly created application.

        Args:
            application: The complete application, carrying its private id.
        """
        pass

    @abc.abstractmethod
    async def update(self, private_id: PrivateId, application: Application) -> None:
        """Replaces the stored application with the given one.

        This is a full-record replace, not a merge: fields absent from
        `application` are absent from the stored record afterwards.

        Args:
            private_id: Key of the record to replace.
            application: The complete new value.
        """
        pass

    @abc.abstractmethod
    async def get(self, private_id: PrivateId) -> Optional[Application]:
        """Fetches an application by private identifier.

        Returns:
            The stored application, or None if there is none.
        """
        pass

    @abc.abstractmethod
    async def get_with_public_id(self, public_id: PublicId) -> Optional[Application]:
        """Fetches an application by public identifier.

        Returns:
            The stored application, or None if there is none.
        """
        pass

    @abc.abstractmethod
    async def get_all(self) -> List[Application]:
        """Lists every stored application."""
        pass
