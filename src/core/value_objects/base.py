"""
Base commune des enregistrements echanges avec le fournisseur de metadonnees.

Chaque champ declare sa cle JSON (PascalCase cote serveur) via un alias
pydantic. Les cles ne doivent apparaitre nulle part ailleurs que dans les
declarations de modeles.
"""

import json
from collections.abc import Mapping
from typing import Any, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from src.core.exceptions import SchemaMismatchError

RecordT = TypeVar("RecordT", bound="ShokoRecord")


class ShokoRecord(BaseModel):
    """
    Enregistrement deserialise depuis un payload JSON.

    Les affectations sont revalidees (validate_assignment), ce qui permet aux
    validateurs de normaliser les valeurs a l'ecriture.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    @classmethod
    def from_payload(
        cls: type[RecordT], payload: Union[Mapping[str, Any], str, bytes]
    ) -> RecordT:
        """
        Construit l'enregistrement depuis un payload JSON.

        Args:
            payload: Dictionnaire deja decode, ou document JSON brut

        Returns:
            Instance validee

        Raises:
            SchemaMismatchError: Si le payload n'a pas la forme attendue
        """
        try:
            if isinstance(payload, (str, bytes)):
                return cls.model_validate_json(payload)
            if not isinstance(payload, Mapping):
                raise SchemaMismatchError(
                    cls.__name__,
                    [{"type": "model_type", "msg": f"Expected an object, got {type(payload).__name__}"}],
                )
            return cls.model_validate(dict(payload))
        except ValidationError as e:
            raise SchemaMismatchError(
                cls.__name__, json.loads(e.json(include_url=False))
            ) from e

    def to_payload(self) -> dict[str, Any]:
        """Serialise l'enregistrement avec les cles JSON du serveur."""
        return self.model_dump(mode="json", by_alias=True)
