"""
Fonctions de lecture des champs d'un payload JSON decode.

Regles communes a toutes les entites:
- une cle absente ou a null donne None (ou un tuple vide pour les listes)
- une entite imbriquee n'est construite que si sa cle est presente et non nulle
- un champ obligatoire absent leve MalformedResponseError
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional, TypeVar

from tvmaze.core.errors import MalformedResponseError

T = TypeVar("T")


def ensure_mapping(data: Any, entity: str) -> Mapping[str, Any]:
    """Verifie que le payload est bien un objet JSON."""
    if not isinstance(data, Mapping):
        raise MalformedResponseError(
            f"Expected a JSON object for {entity}, got {type(data).__name__}",
            entity=entity,
        )
    return data


def require(data: Mapping[str, Any], key: str, entity: str) -> Any:
    """Retourne un champ obligatoire, ou leve MalformedResponseError."""
    value = data.get(key)
    if value is None:
        raise MalformedResponseError.missing_field(entity, key)
    return value


def optional_list(data: Mapping[str, Any], key: str, entity: str) -> tuple:
    """
    Retourne un champ liste sous forme de tuple, vide si absent.

    Raises:
        MalformedResponseError: si la valeur presente n'est pas un tableau JSON
    """
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise MalformedResponseError(
            f"Expected a JSON array for '{key}' in {entity} payload, got {type(value).__name__}",
            entity=entity,
            field=key,
        )
    return tuple(value)


def nested(
    data: Mapping[str, Any],
    key: str,
    factory: Callable[[Mapping[str, Any]], T],
) -> Optional[T]:
    """Construit une entite imbriquee si la cle est presente."""
    value = data.get(key)
    if value is None:
        return None
    return factory(value)
