"""Defines common Value Objects used across the domain.

These objects represent simple values like identifiers, email addresses and
record field names, ensuring consistency and type safety.
"""

from typing import Any, Dict, NewType

# === Identity ===

# Using NewType for semantic clarity, although they are strings at runtime.
PrivateId = NewType("PrivateId", str)     # Capability token known to the applicant
PublicId = NewType("PublicId", str)       # Externally referenceable identifier

# === Contact ===
EmailAddress = NewType("EmailAddress", str)

# === Persistence ===
FieldName = NewType("FieldName", str)     # camelCase key of a persisted record
Record = Dict[str, Any]                   # Persisted layout of an application
