"""
Enumerations du fournisseur de metadonnees.

- EpisodeType: type d'episode AniDB (numerique, serialise par nom)
- SeriesType: type de serie AniDB (serialise en texte)

Le type de relation entre series reste une etiquette opaque (str).
"""

from enum import Enum, IntEnum
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer


def _normalize_name(name: str) -> str:
    """Normalise un nom d'enum pour comparaison ("ThemeSong" == "THEME_SONG")."""
    return name.replace("_", "").replace("-", "").replace(" ", "").lower()


class EpisodeType(IntEnum):
    """
    Type d'episode.

    UNKNOWN est un alias de OTHER: meme valeur, un seul membre,
    deux noms d'affichage.
    """

    # Type fourre-tout pour les extensions futures
    OTHER = 1
    UNKNOWN = 1
    NORMAL = 2
    SPECIAL = 3
    TRAILER = 4
    # Opening ou ending
    THEME_SONG = 5
    OPENING_SONG = 6
    ENDING_SONG = 7
    PARODY = 8
    INTERVIEW = 9
    # Extra DVD/BD (menus, scenes coupees)
    EXTRA = 10

    @classmethod
    def parse(cls, value: Any) -> Any:
        """
        Accepte un nom (insensible a la casse) ou une valeur entiere.

        Les valeurs non reconnues sont laissees a pydantic qui signalera
        l'erreur.
        """
        if isinstance(value, str):
            key = _normalize_name(value)
            for name, member in cls.__members__.items():
                if _normalize_name(name) == key:
                    return member
            if value.strip().isdigit():
                return int(value)
        return value

    @property
    def display_name(self) -> str:
        """Nom d'affichage PascalCase (ex: "ThemeSong")."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class SeriesType(str, Enum):
    """Type de serie AniDB."""

    UNKNOWN = "Unknown"
    OTHER = "Other"
    TV = "TV"
    TV_SPECIAL = "TVSpecial"
    WEB = "Web"
    MOVIE = "Movie"
    OVA = "OVA"

    @classmethod
    def parse(cls, value: Any) -> Any:
        """Accepte la valeur texte (insensible a la casse) ou l'ordinal."""
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            members = list(cls)
            return members[value] if 0 <= value < len(members) else value
        if isinstance(value, str):
            key = _normalize_name(value)
            for member in cls:
                if _normalize_name(member.value) == key:
                    return member
        return value


EpisodeTypeField = Annotated[
    EpisodeType,
    BeforeValidator(EpisodeType.parse),
    PlainSerializer(lambda member: member.display_name, return_type=str, when_used="json"),
]

SeriesTypeField = Annotated[SeriesType, BeforeValidator(SeriesType.parse)]
