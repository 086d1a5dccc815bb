"""IdentityIssuer backed by random (version 4) UUIDs."""

import logging
import uuid

from tokensale.domain.interfaces.identity_issuer import IdentityIssuer
from tokensale.domain.models.common import PrivateId, PublicId

logger = logging.getLogger(__name__)


class UuidIdentityIssuer(IdentityIssuer):
    """Issues dashed UUIDs as private ids and bare hex UUIDs as public ids."""

    async def generate_private_id(self) -> PrivateId:
        return PrivateId(str(uuid.uuid4()))

    async def generate_public_id(self) -> PublicId:
        return PublicId(uuid.uuid4().hex)
