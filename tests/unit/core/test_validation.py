import pytest

from tokensale.core.validation import get_missing_fields, is_valid_email, to_public
from tokensale.domain.models.application import Application, PublicApplication


@pytest.mark.parametrize("email", ["foo@bar.baz", "first.last+presale@example.co.uk"])
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", ["not-an-email", "", "foo@", "@bar.baz", "foo bar@baz.com", None])
def test_invalid_emails(email):
    assert not is_valid_email(email)


def test_missing_fields_treats_empty_string_as_missing():
    assert get_missing_fields(Application(first_name="", last_name="Doe", country="")) == ["firstName", "country"]


def test_missing_fields_of_public_projection():
    projection = PublicApplication(private_id="p", first_name="Ada", country="UK")

    assert get_missing_fields(projection) == ["lastName"]
    assert projection.value_of("creation") is None


def test_to_public_strips_administrative_fields(now):
    application = Application(
        private_id="p",
        public_id="q",
        email="foo@bar.baz",
        creation=now,
        last_update=now,
        lock_date=now,
        extra={"internal": 1},
    )

    projection = to_public(application)

    assert projection == PublicApplication(private_id="p", public_id="q", email="foo@bar.baz")
    assert not hasattr(projection, "creation")
    assert not hasattr(projection, "extra")
