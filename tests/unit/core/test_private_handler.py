import pytest

from tokensale.core.services.private_handler import PrivateApplicationHandler
from tokensale.domain.models.application import Application
from tokensale.domain.models.common import PublicId


@pytest.fixture
def private_handler(mock_store):
    return PrivateApplicationHandler(store=mock_store)


async def test_get_returns_stored_record_verbatim(private_handler, mock_store, now):
    stored = Application(
        private_id="private-id",
        public_id="public-id",
        email="foo@bar.baz",
        creation=now,
        lock_date=now,
        is_locked=True,
        extra={"reviewer": "admin"},
    )
    mock_store.get_with_public_id.return_value = stored

    result = await private_handler.get(PublicId("public-id"))

    mock_store.get_with_public_id.assert_awaited_once_with("public-id")
    assert result is stored


async def test_get_passes_through_missing_record(private_handler, mock_store):
    assert await private_handler.get(PublicId("unknown")) is None


async def test_get_all_returns_store_listing(private_handler, mock_store, now):
    listing = [Application(public_id="a", creation=now), Application(public_id="b")]
    mock_store.get_all.return_value = listing

    assert await private_handler.get_all() is listing
