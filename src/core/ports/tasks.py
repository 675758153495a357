"""
Port des taches planifiables exposees au serveur multimedia hote.

Une tache est une unite de travail nommee et categorisee que le
planificateur de l'hote enregistre, affiche et declenche.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from src.core.ports.sync import ProgressReporter
from src.utils.cancellation import CancellationToken


@dataclass(frozen=True)
class TaskTriggerInfo:
    """
    Declencheur par defaut d'une tache.

    Attributs :
        type : Type de declencheur ("Daily", "Interval", "Startup")
        interval : Intervalle pour les declencheurs periodiques
        time_of_day : Heure d'execution pour les declencheurs quotidiens
    """

    type: str
    interval: Optional[timedelta] = None
    time_of_day: Optional[timedelta] = None


class IScheduledTask(ABC):
    """
    Interface d'une tache planifiable.

    Les attributs descriptifs sont constants pour une classe de tache donnee.
    """

    name: str
    description: str
    category: str
    key: str
    is_hidden: bool
    is_enabled: bool
    is_logged: bool

    @abstractmethod
    def get_default_triggers(self) -> list[TaskTriggerInfo]:
        """Retourne les declencheurs proposes par defaut a l'operateur."""
        ...

    @abstractmethod
    async def execute(
        self,
        progress: ProgressReporter,
        cancellation_token: CancellationToken,
    ) -> None:
        """
        Execute la tache.

        Args :
            progress : Recepteur de progression (0 a 100)
            cancellation_token : Signal d'annulation
        """
        ...
