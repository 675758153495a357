"""
Entite Episode et son enregistrement AniDB.
"""

from datetime import timedelta
from typing import Optional

from pydantic import Field

from src.core.value_objects.base import ShokoRecord
from src.core.value_objects.dates import ShokoDateTime, ShokoDuration
from src.core.value_objects.enums import EpisodeType, EpisodeTypeField
from src.core.value_objects.identifiers import EpisodeCrossReferenceIDs, EpisodeIDs
from src.core.value_objects.metadata import Rating, Title


class AniDBEpisode(ShokoRecord):
    """
    Episode AniDB.

    air_date n'est pas normalise: contrairement aux dates d'une serie,
    une date sentinelle est conservee telle quelle.
    """

    id: int = Field(default=0, alias="ID")
    # Peut differer de la duree localisee de l'episode
    duration: ShokoDuration = Field(default=timedelta(0), alias="Duration")
    type: EpisodeTypeField = Field(default=EpisodeType.OTHER, alias="Type")
    # Numero au sein de son type (episode 3 des specials, etc.)
    episode_number: int = Field(default=0, alias="EpisodeNumber")
    air_date: Optional[ShokoDateTime] = Field(default=None, alias="AirDate")
    titles: list[Title] = Field(default_factory=list, alias="Titles")
    description: str = Field(default="", alias="Description")
    rating: Rating = Field(default_factory=Rating, alias="Rating")


class Episode(ShokoRecord):
    """
    Episode tel que renvoye par le serveur.

    Attributes:
        ids: Identifiants (episode, serie parente, AniDB)
        name: Nom prefere selon la langue configuree sur le serveur
        description: Description preferee
        duration: Duree de l'episode
        is_hidden: Episode masque (exclu des bibliotheques)
        size: Nombre de fichiers locaux
        anidb_entity: Entree AniDB (cle JSON "AniDB")
        cross_references: Liens vers les fichiers locaux
    """

    ids: EpisodeIDs = Field(alias="IDs")
    name: str = Field(default="", alias="Name")
    description: str = Field(default="", alias="Description")
    duration: ShokoDuration = Field(default=timedelta(0), alias="Duration")
    is_hidden: bool = Field(default=False, alias="IsHidden")
    size: int = Field(default=0, alias="Size")
    anidb_entity: AniDBEpisode = Field(default_factory=AniDBEpisode, alias="AniDB")
    cross_references: list[EpisodeCrossReferenceIDs] = Field(
        default_factory=list, alias="CrossReferences"
    )
