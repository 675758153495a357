"""
Fixtures pytest partagees pour les tests shokosync.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Mock de APICache (toujours en cache miss)
- Faux gestionnaire de synchronisation
"""

import copy
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.adapters.api.cache import APICache
from src.config import Settings
from src.core.ports.sync import IUserDataSyncManager, ProgressReporter, SyncDirection
from src.utils.cancellation import CancellationToken
from tests.fixtures.shoko_responses import SHOKO_EPISODE_RESPONSE, SHOKO_SERIES_RESPONSE


class FakeUserDataSyncManager(IUserDataSyncManager):
    """
    Gestionnaire de synchronisation en memoire.

    Observe le jeton d'annulation avant tout effet, puis enregistre
    l'import et rapporte une progression complete.
    """

    def __init__(self) -> None:
        self.calls: list[SyncDirection] = []
        self.completed: list[SyncDirection] = []

    async def scan_and_sync(
        self,
        direction: SyncDirection,
        progress: ProgressReporter,
        cancellation_token: CancellationToken,
    ) -> None:
        self.calls.append(direction)
        cancellation_token.raise_if_cancellation_requested()
        progress(50.0)
        cancellation_token.raise_if_cancellation_requested()
        self.completed.append(direction)
        progress(100.0)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le cache et les logs.
    """
    return Settings(
        shoko_url="http://shoko.test:8111",
        shoko_api_key="test-api-key",
        cache_dir=tmp_path / "cache",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def mock_cache() -> MagicMock:
    """Mock APICache: toujours en cache miss."""
    cache = MagicMock(spec=APICache)
    cache.get = AsyncMock(return_value=None)
    cache.set = AsyncMock()
    cache.set_search = AsyncMock()
    cache.set_details = AsyncMock()
    return cache


@pytest.fixture
def fake_sync_manager() -> FakeUserDataSyncManager:
    """Gestionnaire de synchronisation en memoire."""
    return FakeUserDataSyncManager()


@pytest.fixture
def series_payload() -> dict:
    """Copie modifiable du payload d'une serie complete."""
    return copy.deepcopy(SHOKO_SERIES_RESPONSE)


@pytest.fixture
def episode_payload() -> dict:
    """Copie modifiable du payload d'un episode complet."""
    return copy.deepcopy(SHOKO_EPISODE_RESPONSE)
