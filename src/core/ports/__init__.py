"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Port client API :
- IShokoAPIClient : Récupération des séries et épisodes

Port synchronisation :
- IUserDataSyncManager : Gestionnaire externe de synchronisation
- SyncDirection : Sens de synchronisation (import, export, les deux)
- ProgressReporter : Récepteur de progression

Port tâches planifiées :
- IScheduledTask : Tâche enregistrable auprès de l'hôte
- TaskTriggerInfo : Déclencheur par défaut d'une tâche
"""

from src.core.ports.api_clients import IShokoAPIClient
from src.core.ports.sync import IUserDataSyncManager, ProgressReporter, SyncDirection
from src.core.ports.tasks import IScheduledTask, TaskTriggerInfo

__all__ = [
    # Client API
    "IShokoAPIClient",
    # Synchronisation
    "IUserDataSyncManager",
    "ProgressReporter",
    "SyncDirection",
    # Tâches planifiées
    "IScheduledTask",
    "TaskTriggerInfo",
]
