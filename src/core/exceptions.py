"""
Exceptions du domaine shokosync.

Hierarchie:
- ShokoSyncError: base de toutes les erreurs applicatives
- SchemaMismatchError: payload JSON non conforme a la forme attendue
- SyncFailureError: echec signale par un gestionnaire de synchronisation
- ConfigurationError: configuration insuffisante pour joindre le serveur
"""

from typing import Any, Optional


class ShokoSyncError(Exception):
    """Classe de base des erreurs applicatives."""


class SchemaMismatchError(ShokoSyncError):
    """
    Levee quand un payload ne correspond pas a la forme d'un enregistrement.

    Attributes:
        record: Nom de l'enregistrement cible (ex: "Series")
        errors: Details des erreurs de validation (format pydantic)
    """

    def __init__(self, record: str, errors: Optional[list[dict[str, Any]]] = None) -> None:
        self.record = record
        self.errors = errors or []
        super().__init__(
            f"Payload does not match {record} schema ({len(self.errors)} error(s))"
        )


class SyncFailureError(ShokoSyncError):
    """Echec d'une synchronisation des donnees utilisateur."""


class ConfigurationError(ShokoSyncError):
    """Configuration incomplete (ni cle API ni identifiants Shoko)."""
