"""
Conversion des corps de reponse TVMaze vers les entites du domaine.

Chaque fonction recoit le JSON deja decode et retourne la forme promise
par l'operation correspondante du client. Aucune validation au-dela de
celle des constructeurs from_dict; aucune journalisation.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from tvmaze.core.entities import Episode, Person, Show
from tvmaze.core.errors import MalformedResponseError

T = TypeVar("T")


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    """
    Resultat de recherche: une entite et son score de pertinence.

    Attributes:
        score: Score de pertinence retourne par TVMaze
        item: Show ou Person trouve
    """

    score: float
    item: T


def decode_json(body: bytes | str) -> Any:
    """
    Decode un corps de reponse JSON.

    Raises:
        MalformedResponseError: si le corps n'est pas du JSON valide
    """
    try:
        return json.loads(body)
    except ValueError as e:
        raise MalformedResponseError(f"Invalid JSON body: {e}") from e


def _ensure_list(data: Any, what: str) -> list:
    if not isinstance(data, list):
        raise MalformedResponseError(
            f"Expected a JSON array of {what}, got {type(data).__name__}",
            entity=what,
        )
    return data


def _map_search(data: Any, key: str, factory: Callable[[Any], T]) -> list[SearchResult[T]]:
    results = []
    for entry in _ensure_list(data, "search results"):
        if not isinstance(entry, Mapping) or "score" not in entry or key not in entry:
            raise MalformedResponseError(
                f"Search result must contain 'score' and '{key}'",
                entity="SearchResult",
                field=key,
            )
        results.append(SearchResult(score=entry["score"], item=factory(entry[key])))
    return results


def map_show_search(data: Any) -> list[SearchResult[Show]]:
    """[{score, show}, ...] -> [SearchResult(score, Show), ...] dans l'ordre recu."""
    return _map_search(data, "show", Show.from_dict)


def map_people_search(data: Any) -> list[SearchResult[Person]]:
    """[{score, person}, ...] -> [SearchResult(score, Person), ...] dans l'ordre recu."""
    return _map_search(data, "person", Person.from_dict)


def map_show(data: Any) -> Show:
    return Show.from_dict(data)


def map_person(data: Any) -> Person:
    return Person.from_dict(data)


def map_episode(data: Any) -> Episode:
    return Episode.from_dict(data)


def map_episodes(data: Any) -> list[Episode]:
    """Liste d'episodes (episodes, episodes par date, grilles de programmes)."""
    return [Episode.from_dict(item) for item in _ensure_list(data, "Episode")]


def map_credits(data: Any) -> list[dict[str, Any]]:
    """
    Cast ou crew: retourne les entrees brutes.

    Chaque entree garde sa structure d'origine ({person, character} pour le
    cast, {type, person} pour le crew).
    """
    return list(_ensure_list(data, "credits"))


def map_updates(data: Any) -> dict[int, int]:
    """
    {"<id>": timestamp, ...} -> {id: timestamp, ...}.

    Raises:
        MalformedResponseError: si une cle n'est pas un identifiant numerique
    """
    if not isinstance(data, Mapping):
        raise MalformedResponseError(
            f"Expected a JSON object of updates, got {type(data).__name__}",
            entity="updates",
        )
    try:
        return {int(key): value for key, value in data.items()}
    except ValueError as e:
        raise MalformedResponseError(
            f"Non-numeric ID in updates payload: {e}", entity="updates"
        ) from e
