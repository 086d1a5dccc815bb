"""Interface for issuing application identifiers."""

import abc

from tokensale.domain.models.common import PrivateId, PublicId


class IdentityIssuer(abc.ABC):
    """Abstract Base Class for identifier generation.

    Implementations must return values that are unique within the dataset;
    the handlers never check uniqueness themselves.
    """

    @abc.abstractmethod
    async def generate_private_id(self) -> PrivateId:
        """Issues a new private identifier (the applicant's capability token)."""
        pass

    @abc.abstractmethod
    async def generate_public_id(self) -> PublicId:
        """Issues a new public identifier (safe to reference externally)."""
        pass
