"""
Entite Series et ses sous-enregistrements AniDB.

Les enregistrements AniDB d'une serie existent sous deux formes:
- AniDBSeries: forme legere (relations, series similaires), champs optionnels
- AniDBSeriesWithDate: forme complete embarquee dans Series, avec dates

Les deux formes partagent un bloc de champs commun mais aucune n'herite
de l'autre.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from src.core.value_objects.base import ShokoRecord
from src.core.value_objects.dates import ShokoDateTime, normalize_sentinel_date
from src.core.value_objects.enums import SeriesType, SeriesTypeField
from src.core.value_objects.identifiers import SeriesIDs
from src.core.value_objects.metadata import Image, Images, Rating, Title
from src.core.value_objects.sizes import SeriesSizes


class _AniDBSeriesFields(ShokoRecord):
    """Champs communs aux deux formes d'enregistrement AniDB d'une serie."""

    id: int = Field(default=0, alias="ID")
    # Serie locale correspondante, si disponible
    shoko_id: Optional[int] = Field(default=None, alias="ShokoID")
    type: SeriesTypeField = Field(default=SeriesType.UNKNOWN, alias="Type")
    # Titre principal, generalement x-jat
    title: str = Field(default="", alias="Title")
    restricted: bool = Field(default=False, alias="Restricted")
    poster: Image = Field(default_factory=Image, alias="Poster")
    # Uniquement pour les series similaires
    user_approval: Optional[Rating] = Field(default=None, alias="UserApproval")
    # Uniquement pour les relations
    relation: Optional[str] = Field(default=None, alias="Relation")


class AniDBSeries(_AniDBSeriesFields):
    """Forme legere d'une serie AniDB (relations, similaires)."""

    titles: Optional[list[Title]] = Field(default=None, alias="Titles")
    description: str = Field(default="", alias="Description")
    episode_count: Optional[int] = Field(default=None, alias="EpisodeCount")
    rating: Optional[Rating] = Field(default=None, alias="Rating")


class AniDBSeriesWithDate(_AniDBSeriesFields):
    """
    Forme complete d'une serie AniDB.

    air_date et end_date sont normalises a chaque ecriture (construction ou
    affectation): une date sentinelle devient None. end_date absent signifie
    que la serie est encore en cours de diffusion.
    """

    titles: list[Title] = Field(default_factory=list, alias="Titles")
    description: str = Field(default="", alias="Description")
    episode_count: int = Field(default=0, alias="EpisodeCount")
    rating: Rating = Field(default_factory=Rating, alias="Rating")
    air_date: Optional[ShokoDateTime] = Field(default=None, alias="AirDate")
    end_date: Optional[ShokoDateTime] = Field(default=None, alias="EndDate")

    @field_validator("air_date", "end_date")
    @classmethod
    def drop_sentinel_dates(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Remplace les dates sentinelles par None."""
        return normalize_sentinel_date(value)


class Series(ShokoRecord):
    """
    Serie telle que renvoyee par le serveur.

    Attributes:
        name: Nom prefere selon la langue configuree sur le serveur
        description: Description preferee
        size: Nombre de fichiers de la serie
        ids: Identifiants locaux et externes
        images: Images representatives
        user_rating: Note de l'utilisateur, si presente
        anidb_entity: Entree AniDB (cle JSON "AniDB")
        sizes: Statistiques d'episodes et de fichiers
        created_at: Creation de l'entree (cle "Created"), lecture seule
        last_updated_at: Derniere mise a jour (cle "Updated"), lecture seule
    """

    name: str = Field(default="", alias="Name")
    description: str = Field(default="", alias="Description")
    size: int = Field(default=0, alias="Size")
    ids: SeriesIDs = Field(alias="IDs")
    images: Images = Field(default_factory=Images, alias="Images")
    user_rating: Optional[Rating] = Field(default_factory=Rating, alias="UserRating")
    anidb_entity: AniDBSeriesWithDate = Field(
        default_factory=AniDBSeriesWithDate, alias="AniDB"
    )
    sizes: SeriesSizes = Field(default_factory=SeriesSizes, alias="Sizes")
    created_at: Optional[ShokoDateTime] = Field(default=None, alias="Created", frozen=True)
    last_updated_at: Optional[ShokoDateTime] = Field(
        default=None, alias="Updated", frozen=True
    )
