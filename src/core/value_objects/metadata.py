"""
Sous-enregistrements descriptifs: images, notes et titres.
"""

from typing import Optional

from pydantic import Field

from src.core.value_objects.base import ShokoRecord


class Image(ShokoRecord):
    """Image servie par le serveur (poster, fanart, banniere, logo)."""

    source: str = Field(default="", alias="Source")
    type: str = Field(default="", alias="Type")
    id: int = Field(default=0, alias="ID")
    relative_filepath: Optional[str] = Field(default=None, alias="RelativeFilepath")
    preferred: bool = Field(default=False, alias="Preferred")
    disabled: bool = Field(default=False, alias="Disabled")
    width: Optional[int] = Field(default=None, alias="Width")
    height: Optional[int] = Field(default=None, alias="Height")

    @property
    def url_path(self) -> str:
        """Chemin relatif de l'image sur l'API du serveur."""
        return f"/api/v3/Image/{self.source}/{self.type}/{self.id}"


class Images(ShokoRecord):
    """
    Image representative par role (zero ou une).

    Un poster est normalement toujours present, le reste sans garantie.
    """

    poster: Optional[Image] = Field(default=None, alias="Poster")
    fanart: Optional[Image] = Field(default=None, alias="Fanart")
    banner: Optional[Image] = Field(default=None, alias="Banner")
    logo: Optional[Image] = Field(default=None, alias="Logo")


class Rating(ShokoRecord):
    """Note (valeur sur une echelle, nombre de votes)."""

    value: float = Field(default=0.0, alias="Value")
    max_value: int = Field(default=0, alias="MaxValue")
    votes: Optional[int] = Field(default=None, alias="Votes")
    source: str = Field(default="", alias="Source")
    type: Optional[str] = Field(default=None, alias="Type")

    def scaled(self, scale: int = 10) -> float:
        """
        Convertit la note sur une autre echelle.

        Args:
            scale: Echelle cible (defaut: 10)

        Returns:
            Note convertie, 0.0 si l'echelle d'origine est inconnue
        """
        if self.max_value <= 0:
            return 0.0
        return self.value * scale / self.max_value


class Title(ShokoRecord):
    """Titre dans une langue donnee."""

    name: str = Field(default="", alias="Name")
    language: str = Field(default="", alias="Language")
    type: Optional[str] = Field(default=None, alias="Type")
    default: bool = Field(default=False, alias="Default")
    source: Optional[str] = Field(default=None, alias="Source")
