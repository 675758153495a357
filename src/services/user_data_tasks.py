"""
Taches planifiees de synchronisation des donnees utilisateur.

Chaque tache est un adaptateur sans etat: elle transmet l'execution au
gestionnaire de synchronisation avec un sens fixe. Aucune relance, aucune
reprise partielle, aucune politique d'annulation propre: les echecs et
l'annulation remontent tels quels au planificateur de l'hote.
"""

from loguru import logger

from src.core.ports.sync import IUserDataSyncManager, ProgressReporter, SyncDirection
from src.core.ports.tasks import IScheduledTask, TaskTriggerInfo
from src.utils.cancellation import CancellationToken

TASK_CATEGORY = "Shokofin"


class UserDataSyncTask(IScheduledTask):
    """
    Base des taches de synchronisation.

    Les sous-classes ne font que fixer les constantes descriptives et
    le sens de synchronisation.
    """

    direction: SyncDirection

    category = TASK_CATEGORY
    is_hidden = False
    is_enabled = True
    is_logged = True

    def __init__(self, user_sync_manager: IUserDataSyncManager) -> None:
        self._user_sync_manager = user_sync_manager

    def get_default_triggers(self) -> list[TaskTriggerInfo]:
        """Aucun declencheur: execution manuelle ou planifiee par l'operateur."""
        return []

    async def execute(
        self,
        progress: ProgressReporter,
        cancellation_token: CancellationToken,
    ) -> None:
        """Lance la synchronisation dans le sens de la tache."""
        logger.debug("Execution de la tache", key=self.key, direction=self.direction.name)
        await self._user_sync_manager.scan_and_sync(
            self.direction, progress, cancellation_token
        )
        logger.debug("Tache terminee", key=self.key)


class ImportUserDataTask(UserDataSyncTask):
    """Importe les donnees utilisateur du serveur de metadonnees."""

    name = "Import User Data"
    description = (
        "Import the user-data stored in Shoko to Jellyfin. "
        "Will not export user-data to Shoko."
    )
    key = "ShokoImportUserData"
    direction = SyncDirection.IMPORT


class ExportUserDataTask(UserDataSyncTask):
    """Exporte les donnees utilisateur vers le serveur de metadonnees."""

    name = "Export User Data"
    description = (
        "Export the user-data stored in Jellyfin to Shoko. "
        "Will not import user-data from Shoko."
    )
    key = "ShokoExportUserData"
    direction = SyncDirection.EXPORT


class SyncUserDataTask(UserDataSyncTask):
    """Synchronise les donnees utilisateur dans les deux sens."""

    name = "Sync User Data"
    description = (
        "Synchronize the user-data stored in Jellyfin with the user-data "
        "stored in Shoko. Imports or exports data as needed."
    )
    key = "ShokoSyncUserData"
    direction = SyncDirection.SYNC


# Taches exposees au planificateur de l'hote
SCHEDULED_TASKS: tuple[type[UserDataSyncTask], ...] = (
    ImportUserDataTask,
    ExportUserDataTask,
    SyncUserDataTask,
)
