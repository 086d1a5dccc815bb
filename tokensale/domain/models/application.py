"""Domain models for pre-sale applications.

Includes the `Application` entity (the signup record as persisted) and the
`PublicApplication` projection handed back to applicants.

Both are immutable: transitions build a new value with `Application.merge`
and the complete value is handed to the store.
"""

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Tuple

from tokensale.domain.models.common import (
    EmailAddress,
    FieldName,
    PrivateId,
    PublicId,
    Record,
)

# Attribute name -> persisted record key. Order is the canonical record order.
RECORD_KEYS: Dict[str, FieldName] = {
    "private_id": FieldName("privateId"),
    "public_id": FieldName("publicId"),
    "email": FieldName("email"),
    "first_name": FieldName("firstName"),
    "last_name": FieldName("lastName"),
    "country": FieldName("country"),
    "tx_hashes": FieldName("txHashes"),
    "is_locked": FieldName("isLocked"),
    "lock_date": FieldName("lockDate"),
    "creation": FieldName("creation"),
    "last_update": FieldName("lastUpdate"),
}
ATTRIBUTES: Dict[FieldName, str] = {key: attr for attr, key in RECORD_KEYS.items()}

TIMESTAMP_FIELDS = ("lock_date", "creation", "last_update")

# Fields an applicant must fill in before a validated update goes through.
REQUIRED_FIELDS: List[FieldName] = [
    FieldName("firstName"),
    FieldName("lastName"),
    FieldName("country"),
]


def _parse_timestamp(value: Any) -> Optional[datetime]:
    """Accepts a datetime or an ISO-8601 string (as written by JSON stores)."""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


@dataclass(frozen=True)
class Application:
    """Entity representing a single pre-sale signup.

    Every attribute is optional so the same type can describe a freshly
    created record, a partial update payload and a locked record.
    """
    private_id: Optional[PrivateId] = None
    public_id: Optional[PublicId] = None
    email: Optional[EmailAddress] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    country: Optional[str] = None
    tx_hashes: Optional[Tuple[str, ...]] = None
    is_locked: Optional[bool] = None
    lock_date: Optional[datetime] = None
    creation: Optional[datetime] = None
    last_update: Optional[datetime] = None
    # Stored keys this model does not know about (internal metadata).
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.tx_hashes is not None and not isinstance(self.tx_hashes, tuple):
            object.__setattr__(self, "tx_hashes", tuple(self.tx_hashes))

    def merge(self, **changes: Any) -> "Application":
        """Returns a copy of this application with `changes` applied."""
        return dataclasses.replace(self, **changes)

    def value_of(self, key: FieldName) -> Any:
        """Looks up a value by its persisted record key."""
        attr = ATTRIBUTES.get(key)
        if attr is None:
            return self.extra.get(key)
        return getattr(self, attr)

    def to_record(self) -> Record:
        """Converts the application to its persisted layout.

        Absent (None) fields are omitted, unknown stored keys are kept.
        """
        record: Record = {}
        for attr, key in RECORD_KEYS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            record[key] = list(value) if attr == "tx_hashes" else value
        for key, value in self.extra.items():
            record.setdefault(key, value)
        return record

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Application":
        """Builds an application from a persisted record."""
        values: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in record.items():
            attr = ATTRIBUTES.get(FieldName(key))
            if attr is None:
                extra[key] = value
            elif attr in TIMESTAMP_FIELDS:
                values[attr] = _parse_timestamp(value)
            else:
                values[attr] = value
        return cls(extra=extra, **values)


@dataclass(frozen=True)
class PublicApplication:
    """Applicant-facing view of an application.

    Only the allow-listed fields are carried; creation, update and lock
    timestamps and internal metadata are never part of it.
    """
    private_id: Optional[PrivateId] = None
    public_id: Optional[PublicId] = None
    email: Optional[EmailAddress] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    country: Optional[str] = None
    tx_hashes: Optional[Tuple[str, ...]] = None
    is_locked: Optional[bool] = None

    @classmethod
    def from_application(cls, application: Application) -> "PublicApplication":
        return cls(**{
            f.name: getattr(application, f.name) for f in dataclasses.fields(cls)
        })

    def to_record(self) -> Record:
        record: Record = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            record[RECORD_KEYS[f.name]] = list(value) if isinstance(value, tuple) else value
        return record

    def value_of(self, key: FieldName) -> Any:
        """Looks up a value by its record key; keys outside the allow-list are None."""
        attr = ATTRIBUTES.get(key)
        if attr is None or attr not in self.__dataclass_fields__:
            return None
        return getattr(self, attr)
