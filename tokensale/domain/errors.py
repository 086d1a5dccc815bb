"""Error kinds raised by the application handlers.

The outer surface (command handler, or any transport built on top of the
handlers) is responsible for turning these into user-facing responses.
Collaborator failures (store, identity issuer, notifier) are never wrapped
in these types.
"""

from typing import List, Sequence

from tokensale.domain.models.common import FieldName


class ApplicationError(Exception):
    """Base class for rejected application operations."""


class InvalidEmail(ApplicationError):
    """Raised when a signup email does not look like an email address."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Invalid email address: {email!r}")


class MissingFields(ApplicationError):
    """Raised when a validated update lacks required fields."""

    def __init__(self, fields: Sequence[FieldName]):
        self.fields: List[FieldName] = list(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")


class ApplicationLocked(ApplicationError):
    """Raised when an update payload claims to be locked."""

    def __init__(self, private_id: str):
        self.private_id = private_id
        super().__init__("Application is locked and can no longer be updated")


class ApplicationNotFound(ApplicationError):
    """Raised when no application exists for the given identifier."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Application not found: {identifier}")
