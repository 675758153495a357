"""
Port du gestionnaire de synchronisation des donnees utilisateur.

Le gestionnaire (hors de ce projet) compare les donnees utilisateur
(vu/non vu, progression, notes) entre le serveur de metadonnees et le
serveur multimedia, puis importe et/ou exporte les differences.
"""

from abc import ABC, abstractmethod
from enum import Flag
from typing import Callable

from src.utils.cancellation import CancellationToken

# Recoit un pourcentage d'avancement entre 0 et 100
ProgressReporter = Callable[[float], None]


class SyncDirection(Flag):
    """Sens de synchronisation."""

    # Serveur de metadonnees -> serveur multimedia
    IMPORT = 1
    # Serveur multimedia -> serveur de metadonnees
    EXPORT = 2
    SYNC = IMPORT | EXPORT


class IUserDataSyncManager(ABC):
    """Gestionnaire de synchronisation des donnees utilisateur."""

    @abstractmethod
    async def scan_and_sync(
        self,
        direction: SyncDirection,
        progress: ProgressReporter,
        cancellation_token: CancellationToken,
    ) -> None:
        """
        Parcourt les bibliotheques et synchronise les donnees utilisateur.

        Args:
            direction: Sens de synchronisation
            progress: Recepteur de progression (0 a 100)
            cancellation_token: Signal d'annulation a observer

        Raises:
            SyncFailureError: En cas d'echec de la synchronisation
            asyncio.CancelledError: Si l'annulation est observee
        """
        ...
