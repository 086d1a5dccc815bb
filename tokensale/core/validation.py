"""Validation and projection helpers shared by the application handlers.

Pure functions, no I/O.
"""

import logging
from typing import List

from email_validator import EmailNotValidError, validate_email

from tokensale.domain.models.application import (
    REQUIRED_FIELDS,
    Application,
    PublicApplication,
)
from tokensale.domain.models.common import FieldName

logger = logging.getLogger(__name__)


def is_valid_email(email: str) -> bool:
    """Checks the address format only; the domain is not resolved."""
    if not email or not isinstance(email, str):
        return False
    try:
        validate_email(email, check_deliverability=False)
        return True
    except EmailNotValidError as e:
        logger.debug(f"Rejected email {email!r}: {e}")
        return False


def get_missing_fields(application: Application | PublicApplication) -> List[FieldName]:
    """Returns the required fields that are absent or empty, in fixed order."""
    return [key for key in REQUIRED_FIELDS if not application.value_of(key)]


def to_public(application: Application) -> PublicApplication:
    """Projects a stored application onto the applicant-facing allow-list."""
    return PublicApplication.from_application(application)
