"""
Interface port pour le client du serveur de metadonnees.

Contrat minimal: recuperer les series et episodes sous forme
d'enregistrements types. L'implementation concrete (ShokoClient) gere
le transport HTTP, le cache et les relances.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities import Episode, Series


class IShokoAPIClient(ABC):
    """
    Interface du client de metadonnees series/episodes.

    Chaque appel renvoie des instances neuves: l'appelant en est
    l'unique proprietaire.
    """

    @abstractmethod
    async def get_series(self, series_id: int) -> Optional[Series]:
        """
        Recupere une serie par son identifiant local.

        Args :
            series_id : Identifiant Shoko de la serie

        Retourne :
            La serie, ou None si non trouvee
        """
        ...

    @abstractmethod
    async def get_episode(self, episode_id: int) -> Optional[Episode]:
        """
        Recupere un episode par son identifiant local.

        Args :
            episode_id : Identifiant Shoko de l'episode

        Retourne :
            L'episode, ou None si non trouve
        """
        ...

    @abstractmethod
    async def get_series_episodes(
        self, series_id: int, include_hidden: bool = False
    ) -> list[Episode]:
        """
        Liste les episodes d'une serie.

        Args :
            series_id : Identifiant Shoko de la serie
            include_hidden : Inclure les episodes masques

        Retourne :
            Liste des episodes, vide si la serie n'existe pas
        """
        ...

    @abstractmethod
    async def search_series(self, query: str, limit: int = 10) -> list[Series]:
        """Recherche des series par titre."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        ...
