"""
Entites metier representant les enregistrements du serveur de metadonnees.

Les enregistrements sont des instantanes en lecture: chaque client qui les
recupere en est l'unique proprietaire.

Exports:
- Series: Serie avec son entree AniDB et ses statistiques
- AniDBSeries / AniDBSeriesWithDate: Formes legere et complete d'une serie AniDB
- Episode: Episode avec son entree AniDB et ses references croisees
- AniDBEpisode: Episode AniDB
"""

from src.core.entities.episode import AniDBEpisode, Episode
from src.core.entities.series import AniDBSeries, AniDBSeriesWithDate, Series

__all__ = [
    "Series",
    "AniDBSeries",
    "AniDBSeriesWithDate",
    "Episode",
    "AniDBEpisode",
]
