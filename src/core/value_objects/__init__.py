"""
Objets valeur representant les sous-enregistrements du serveur de metadonnees.

Exports :
- ShokoRecord : Base des enregistrements (alias JSON, from_payload/to_payload)
- IDs, SeriesIDs, EpisodeIDs, TmdbIDs : Identifiants
- EpisodeCrossReferenceIDs, CrossReferencePercentage : Liens episode <-> fichier
- Image, Images, Rating, Title : Metadonnees descriptives
- SeriesSizes, EpisodeTypeCounts, FileSourceCounts : Statistiques
- EpisodeType, SeriesType : Enumerations
"""

from src.core.value_objects.base import ShokoRecord
from src.core.value_objects.enums import EpisodeType, SeriesType
from src.core.value_objects.identifiers import (
    CrossReferencePercentage,
    EpisodeCrossReferenceIDs,
    EpisodeIDs,
    IDs,
    SeriesIDs,
    TmdbIDs,
)
from src.core.value_objects.metadata import Image, Images, Rating, Title
from src.core.value_objects.sizes import (
    EpisodeTypeCounts,
    FileSourceCounts,
    SeriesSizes,
)

__all__ = [
    "ShokoRecord",
    "IDs",
    "SeriesIDs",
    "EpisodeIDs",
    "TmdbIDs",
    "EpisodeCrossReferenceIDs",
    "CrossReferencePercentage",
    "Image",
    "Images",
    "Rating",
    "Title",
    "SeriesSizes",
    "EpisodeTypeCounts",
    "FileSourceCounts",
    "EpisodeType",
    "SeriesType",
]
