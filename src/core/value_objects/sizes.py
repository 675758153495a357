"""
Statistiques de taille d'une serie (episodes locaux, vus, totaux, sources).
"""

from pydantic import Field, computed_field

from src.core.value_objects.base import ShokoRecord


class EpisodeTypeCounts(ShokoRecord):
    """Nombre d'episodes par type."""

    unknown: int = Field(default=0, alias="Unknown")
    episodes: int = Field(default=0, alias="Episodes")
    specials: int = Field(default=0, alias="Specials")
    credits: int = Field(default=0, alias="Credits")
    trailers: int = Field(default=0, alias="Trailers")
    parodies: int = Field(default=0, alias="Parodies")
    others: int = Field(default=0, alias="Others")


class FileSourceCounts(ShokoRecord):
    """Nombre de fichiers locaux par source."""

    unknown: int = Field(default=0, alias="Unknown")
    other: int = Field(default=0, alias="Other")
    tv: int = Field(default=0, alias="TV")
    dvd: int = Field(default=0, alias="DVD")
    bluray: int = Field(default=0, alias="BluRay")
    web: int = Field(default=0, alias="Web")
    vhs: int = Field(default=0, alias="VHS")
    vcd: int = Field(default=0, alias="VCD")
    laserdisc: int = Field(default=0, alias="LaserDisc")
    camera: int = Field(default=0, alias="Camera")


class SeriesSizes(ShokoRecord):
    """
    Compteurs d'une serie: disponibles localement, vus, totaux.

    Attributes:
        file_sources: Fichiers locaux par source
        local: Episodes telecharges et disponibles
        watched: Episodes locaux deja vus
        total: Episodes connus, par type
    """

    file_sources: FileSourceCounts = Field(default_factory=FileSourceCounts, alias="FileSources")
    local: EpisodeTypeCounts = Field(default_factory=EpisodeTypeCounts, alias="Local")
    watched: EpisodeTypeCounts = Field(default_factory=EpisodeTypeCounts, alias="Watched")
    total: EpisodeTypeCounts = Field(default_factory=EpisodeTypeCounts, alias="Total")

    @computed_field(alias="Files")
    @property
    def files(self) -> int:
        """Nombre total de fichiers, recalcule a chaque lecture."""
        sources = self.file_sources
        return (
            sources.unknown
            + sources.other
            + sources.tv
            + sources.dvd
            + sources.bluray
            + sources.web
            + sources.vhs
            + sources.vcd
            + sources.laserdisc
            + sources.camera
        )
