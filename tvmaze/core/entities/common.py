"""
Objets valeur partages par les series, episodes et personnes.

Chacun est construit depuis un objet JSON decode via son constructeur
from_dict.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from tvmaze.core.entities.fields import ensure_mapping, nested, optional_list, require


@dataclass(frozen=True)
class Image:
    """URLs d'une image en deux tailles."""

    medium: Optional[str] = None
    original: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Image":
        data = ensure_mapping(data, "Image")
        return cls(medium=data.get("medium"), original=data.get("original"))


@dataclass(frozen=True)
class Rating:
    average: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Rating":
        data = ensure_mapping(data, "Rating")
        return cls(average=data.get("average"))


@dataclass(frozen=True)
class Link:
    """Reference hypermedia HAL."""

    href: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Link":
        data = ensure_mapping(data, "Link")
        return cls(href=data.get("href"))


@dataclass(frozen=True)
class Links:
    """
    Bloc `_links` d'une ressource.

    Attributes:
        self_link: Lien vers la ressource elle-meme (cle JSON `self`)
        previousepisode: Lien vers le dernier episode diffuse d'une serie
        nextepisode: Lien vers le prochain episode programme d'une serie
    """

    self_link: Optional[Link] = None
    previousepisode: Optional[Link] = None
    nextepisode: Optional[Link] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Links":
        data = ensure_mapping(data, "Links")
        return cls(
            self_link=nested(data, "self", Link.from_dict),
            previousepisode=nested(data, "previousepisode", Link.from_dict),
            nextepisode=nested(data, "nextepisode", Link.from_dict),
        )


@dataclass(frozen=True)
class Country:
    """
    Pays d'une chaine ou d'une personne.

    Sert aussi pour le `dvdCountry` d'une serie (meme forme).
    """

    name: Optional[str] = None
    code: Optional[str] = None
    timezone: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Country":
        data = ensure_mapping(data, "Country")
        return cls(
            name=data.get("name"),
            code=data.get("code"),
            timezone=data.get("timezone"),
        )


DvdCountry = Country


@dataclass(frozen=True)
class Network:
    """
    Chaine de diffusion, ou plateforme web pour les series en streaming.

    Attributes:
        id: ID TVMaze de la chaine (obligatoire)
        name: Nom de la chaine
        country: Pays de la chaine (None pour les plateformes mondiales)
        official_site: Site officiel
    """

    id: int
    name: Optional[str] = None
    country: Optional[Country] = None
    official_site: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Network":
        data = ensure_mapping(data, "Network")
        return cls(
            id=require(data, "id", "Network"),
            name=data.get("name"),
            country=nested(data, "country", Country.from_dict),
            official_site=data.get("officialSite"),
        )


WebChannel = Network


@dataclass(frozen=True)
class Schedule:
    """Creneau de diffusion: heure et jours de la semaine."""

    time: Optional[str] = None
    days: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Schedule":
        data = ensure_mapping(data, "Schedule")
        return cls(time=data.get("time"), days=optional_list(data, "days", "Schedule"))


@dataclass(frozen=True)
class Externals:
    """Identifiants de la serie sur les autres services."""

    tvrage: Optional[int] = None
    thetvdb: Optional[int] = None
    imdb: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Externals":
        data = ensure_mapping(data, "Externals")
        return cls(
            tvrage=data.get("tvrage"),
            thetvdb=data.get("thetvdb"),
            imdb=data.get("imdb"),
        )


@dataclass(frozen=True)
class Embedded:
    """
    Sous-ressources incluses via `embed`.

    Les valeurs restent le JSON decode brut (listes d'objets, ou un objet
    pour nextepisode/previousepisode/show). La grille web place ici la
    serie parente.
    """

    episodes: Optional[Any] = None
    cast: Optional[Any] = None
    crew: Optional[Any] = None
    nextepisode: Optional[Any] = None
    previousepisode: Optional[Any] = None
    show: Optional[Any] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Embedded":
        data = ensure_mapping(data, "Embedded")
        return cls(
            episodes=data.get("episodes"),
            cast=data.get("cast"),
            crew=data.get("crew"),
            nextepisode=data.get("nextepisode"),
            previousepisode=data.get("previousepisode"),
            show=data.get("show"),
        )
