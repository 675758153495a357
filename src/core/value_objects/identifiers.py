"""
Identifiants des series, episodes et references croisees.

L'identifiant local (Shoko) fait autorite; les identifiants externes
(AniDB, TMDB) sont optionnels et valent 0 ou une liste vide par defaut.
"""

from typing import Optional

from pydantic import Field

from src.core.value_objects.base import ShokoRecord


class IDs(ShokoRecord):
    """Identifiant local d'une entree."""

    shoko: int = Field(alias="ID")


class TmdbIDs(ShokoRecord):
    """Identifiants TMDB lies a une serie."""

    movie: list[int] = Field(default_factory=list, alias="Movie")
    show: list[int] = Field(default_factory=list, alias="Show")


class SeriesIDs(IDs):
    """Identifiants d'une serie (groupes parents et fournisseurs externes)."""

    parent_group: int = Field(default=0, alias="ParentGroup")
    top_level_group: int = Field(default=0, alias="TopLevelGroup")
    anidb: int = Field(default=0, alias="AniDB")
    tmdb: TmdbIDs = Field(default_factory=TmdbIDs, alias="TMDB")


class EpisodeIDs(IDs):
    """Identifiants d'un episode."""

    parent_series: int = Field(default=0, alias="ParentSeries")
    anidb: int = Field(default=0, alias="AniDB")


class CrossReferencePercentage(ShokoRecord):
    """Portion d'episode couverte par un fichier."""

    start: int = Field(default=0, alias="Start")
    end: int = Field(default=100, alias="End")
    size: int = Field(default=100, alias="Size")
    group: int = Field(default=1, alias="Group")


class EpisodeCrossReferenceIDs(ShokoRecord):
    """
    Lien entre un episode et un fichier local.

    Le couple (ed2k, file_size) identifie le fichier cote AniDB,
    shoko/anidb identifient l'episode.
    """

    shoko: Optional[int] = Field(default=None, alias="ID")
    anidb: int = Field(default=0, alias="AniDB")
    release_group: Optional[int] = Field(default=None, alias="ReleaseGroup")
    percentage: CrossReferencePercentage = Field(
        default_factory=CrossReferencePercentage, alias="Percentage"
    )
    ed2k: Optional[str] = Field(default=None, alias="ED2K")
    file_size: Optional[int] = Field(default=None, alias="FileSize")
