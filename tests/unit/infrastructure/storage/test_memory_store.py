import pytest

from tokensale.domain.models.application import Application
from tokensale.infrastructure.storage.memory_store import DuplicateApplication, InMemoryApplicationStore


@pytest.fixture
def store():
    return InMemoryApplicationStore([Application(private_id="p1", public_id="q1", email="a@b.cd")])


async def test_get_by_private_and_public_id(store):
    assert (await store.get("p1")).email == "a@b.cd"
    assert (await store.get_with_public_id("q1")).private_id == "p1"
    assert await store.get("unknown") is None
    assert await store.get_with_public_id("unknown") is None


async def test_add_rejects_duplicate_private_id(store):
    with pytest.raises(DuplicateApplication):
        await store.add(Application(private_id="p1", public_id="other"))


async def test_update_replaces_the_whole_record(store):
    await store.update("p1", Application(first_name="Ada"))

    stored = await store.get("p1")
    assert stored == Application(first_name="Ada")
    assert stored.email is None


async def test_update_of_unknown_id_is_ignored(store):
    await store.update("unknown", Application(first_name="Ada"))

    assert await store.get("unknown") is None
    assert len(await store.get_all()) == 1
