"""
Entite personne (acteurs, membres de l'equipe technique).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from tvmaze.core.entities.common import Country, Embedded, Image, Links
from tvmaze.core.entities.fields import ensure_mapping, nested, require


@dataclass(frozen=True)
class Person:
    """
    Personne connue de TVMaze.

    `id` et `updated` sont toujours envoyes par l'API et sont obligatoires.

    Attributes:
        id: ID TVMaze de la personne
        updated: Derniere mise a jour (timestamp Unix)
        url: Page de la personne sur tvmaze.com
        name: Nom complet
        country: Pays de naissance
        birthday: Date de naissance (YYYY-MM-DD)
        deathday: Date de deces (YYYY-MM-DD)
        gender: Male, Female...
        image: URLs du portrait
        links: Liens HAL
        embedded: Sous-ressources demandees via `embed` (castcredits...)
    """

    id: int
    updated: int
    url: Optional[str] = None
    name: Optional[str] = None
    country: Optional[Country] = None
    birthday: Optional[str] = None
    deathday: Optional[str] = None
    gender: Optional[str] = None
    image: Optional[Image] = None
    links: Optional[Links] = None
    embedded: Optional[Embedded] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Person":
        data = ensure_mapping(data, "Person")
        return cls(
            id=require(data, "id", "Person"),
            updated=require(data, "updated", "Person"),
            url=data.get("url"),
            name=data.get("name"),
            country=nested(data, "country", Country.from_dict),
            birthday=data.get("birthday"),
            deathday=data.get("deathday"),
            gender=data.get("gender"),
            image=nested(data, "image", Image.from_dict),
            links=nested(data, "_links", Links.from_dict),
            embedded=nested(data, "_embedded", Embedded.from_dict),
        )
