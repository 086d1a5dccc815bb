import dataclasses
import pytest
from datetime import datetime, timezone

from tokensale.domain.errors import MissingFields
from tokensale.domain.models.application import Application


def test_merge_returns_new_value():
    original = Application(email="foo@bar.baz")

    merged = original.merge(first_name="Ada")

    assert merged.first_name == "Ada"
    assert original.first_name is None
    assert merged.email == "foo@bar.baz"


def test_application_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Application().email = "foo@bar.baz"


def test_tx_hashes_are_stored_as_tuple():
    assert Application(tx_hashes=["a", "b"]).tx_hashes == ("a", "b")


def test_to_record_omits_absent_fields_and_keeps_extra():
    application = Application(private_id="p", is_locked=False, tx_hashes=("h",), extra={"source": "web"})

    assert application.to_record() == {
        "privateId": "p",
        "txHashes": ["h"],
        "isLocked": False,
        "source": "web",
    }


def test_from_record_parses_timestamps_and_collects_unknown_keys():
    record = {
        "privateId": "p",
        "publicId": "q",
        "lockDate": "2018-03-01T12:00:00+00:00",
        "creation": datetime(2018, 2, 1, tzinfo=timezone.utc),
        "txHashes": ["h1", "h2"],
        "_id": "5a9f",
    }

    application = Application.from_record(record)

    assert application.lock_date == datetime(2018, 3, 1, 12, tzinfo=timezone.utc)
    assert application.creation == datetime(2018, 2, 1, tzinfo=timezone.utc)
    assert application.tx_hashes == ("h1", "h2")
    assert application.extra == {"_id": "5a9f"}


def test_value_of_uses_record_keys():
    application = Application(first_name="Ada", extra={"source": "web"})

    assert application.value_of("firstName") == "Ada"
    assert application.value_of("source") == "web"
    assert application.value_of("lastName") is None


def test_missing_fields_error_carries_ordered_list():
    error = MissingFields(["lastName", "country"])

    assert error.fields == ["lastName", "country"]
    assert "lastName, country" in str(error)
