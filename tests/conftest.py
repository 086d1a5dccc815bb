import pytest
from typer.testing import CliRunner
from unittest.mock import AsyncMock, MagicMock
from datetime import datetime, timezone
from pathlib import Path

from tokensale import main
from tokensale.core.services.public_handler import PublicApplicationHandler
from tokensale.domain.interfaces.application_store import ApplicationStore
from tokensale.domain.interfaces.identity_issuer import IdentityIssuer
from tokensale.domain.interfaces.notifier import Notifier
from tokensale.domain.models.common import PrivateId, PublicId
from tokensale.infrastructure.config import settings

PRIVATE_ID = PrivateId("private-id")
PUBLIC_ID = PublicId("public-id")
NOW = datetime(2018, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def mock_store():
    """ApplicationStore double; every method is an AsyncMock."""
    mock = AsyncMock(spec=ApplicationStore)
    mock.get.return_value = None
    mock.get_with_public_id.return_value = None
    mock.get_all.return_value = []
    return mock


@pytest.fixture
def mock_identity_issuer():
    mock = AsyncMock(spec=IdentityIssuer)
    mock.generate_private_id.return_value = PRIVATE_ID
    mock.generate_public_id.return_value = PUBLIC_ID
    return mock


@pytest.fixture
def mock_notifier():
    return AsyncMock(spec=Notifier)


@pytest.fixture
def collaborators(mock_store, mock_identity_issuer, mock_notifier):
    """Parent mock recording the calls of all collaborators in order."""
    manager = MagicMock()
    manager.attach_mock(mock_store, "store")
    manager.attach_mock(mock_identity_issuer, "identity_issuer")
    manager.attach_mock(mock_notifier, "notifier")
    return manager


@pytest.fixture
def public_handler(mock_store, mock_identity_issuer, mock_notifier, collaborators):
    return PublicApplicationHandler(
        store=mock_store,
        identity_issuer=mock_identity_issuer,
        notifier=mock_notifier,
        clock=lambda: NOW,
    )


@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture
def cli_environment(tmp_path: Path, monkeypatch):
    """Points the CLI at a temporary JSON store with email delivery suppressed.

    Dependencies are rebuilt for every test so that each one gets its own store.
    """
    store_path = tmp_path / "applications.json"
    settings.set_config_for_testing({
        "store.path": str(store_path),
        "mail.suppress": True,
        "presale.link_base_url": "https://presale.example/apply",
    })
    monkeypatch.setattr(main, "_dependencies", None)
    yield store_path
    settings.clear_test_config()
