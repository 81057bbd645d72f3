"""
Entite serie TV.

Construite depuis les payloads de /shows/{id}, /singlesearch/shows,
/lookup/shows et les objets `show` imbriques dans les resultats de
recherche et les grilles.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from tvmaze.core.entities.common import (
    Country,
    Embedded,
    Externals,
    Image,
    Links,
    Network,
    Rating,
    Schedule,
)
from tvmaze.core.entities.fields import ensure_mapping, nested, optional_list, require
from tvmaze.utils import attribution
from tvmaze.utils.constants import DEFAULT_SUMMARY_LENGTH
from tvmaze.utils.helpers import truncated_summary


@dataclass(frozen=True)
class Show:
    """
    Serie TV telle que decrite par TVMaze.

    Seul `id` est garanti par l'API. Tout autre champ vaut None s'il est
    absent, sauf `genres` qui vaut un tuple vide.

    Attributes:
        id: ID TVMaze de la serie
        url: Page de la serie sur tvmaze.com
        name: Titre
        type: Scripted, Reality, Animation, Documentary...
        language: Langue principale
        genres: Noms des genres
        status: Running, Ended, To Be Determined...
        runtime: Duree nominale d'un episode en minutes
        average_runtime: Duree moyenne d'un episode en minutes
        premiered: Date de premiere diffusion (YYYY-MM-DD)
        ended: Date de derniere diffusion (YYYY-MM-DD)
        official_site: Site officiel
        schedule: Creneau hebdomadaire
        rating: Note moyenne des utilisateurs
        weight: Poids de popularite TVMaze (0-100)
        network: Chaine de diffusion
        web_channel: Plateforme de streaming
        dvd_country: Pays de sortie DVD
        externals: IDs TVRage, TheTVDB et IMDb
        image: URLs de l'affiche
        summary: Resume HTML
        updated: Derniere mise a jour (timestamp Unix)
        links: Liens HAL (`_links`)
        embedded: Sous-ressources demandees via `embed` (`_embedded`)
    """

    id: int
    url: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    language: Optional[str] = None
    genres: tuple[str, ...] = ()
    status: Optional[str] = None
    runtime: Optional[int] = None
    average_runtime: Optional[int] = None
    premiered: Optional[str] = None
    ended: Optional[str] = None
    official_site: Optional[str] = None
    schedule: Optional[Schedule] = None
    rating: Optional[Rating] = None
    weight: Optional[int] = None
    network: Optional[Network] = None
    web_channel: Optional[Network] = None
    dvd_country: Optional[Country] = None
    externals: Optional[Externals] = None
    image: Optional[Image] = None
    summary: Optional[str] = None
    updated: Optional[int] = None
    links: Optional[Links] = None
    embedded: Optional[Embedded] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Show":
        """
        Construit une Show depuis un objet JSON decode.

        Raises:
            MalformedResponseError: si `data` n'est pas un objet ou n'a pas d'`id`
        """
        data = ensure_mapping(data, "Show")
        return cls(
            id=require(data, "id", "Show"),
            url=data.get("url"),
            name=data.get("name"),
            type=data.get("type"),
            language=data.get("language"),
            genres=optional_list(data, "genres", "Show"),
            status=data.get("status"),
            runtime=data.get("runtime"),
            average_runtime=data.get("averageRuntime"),
            premiered=data.get("premiered"),
            ended=data.get("ended"),
            official_site=data.get("officialSite"),
            schedule=nested(data, "schedule", Schedule.from_dict),
            rating=nested(data, "rating", Rating.from_dict),
            weight=data.get("weight"),
            network=nested(data, "network", Network.from_dict),
            web_channel=nested(data, "webChannel", Network.from_dict),
            dvd_country=nested(data, "dvdCountry", Country.from_dict),
            externals=nested(data, "externals", Externals.from_dict),
            image=nested(data, "image", Image.from_dict),
            summary=data.get("summary"),
            updated=data.get("updated"),
            links=nested(data, "_links", Links.from_dict),
            embedded=nested(data, "_embedded", Embedded.from_dict),
        )

    def truncated_summary(self, max_length: int = DEFAULT_SUMMARY_LENGTH) -> Optional[str]:
        """Resume en texte brut, coupe apres max_length caracteres."""
        return truncated_summary(self.summary, max_length)

    def attribution_text(self) -> str:
        return attribution.attribution_text()

    def attribution_html(self) -> str:
        return attribution.attribution_html()

    def attribution_markdown(self) -> str:
        return attribution.attribution_markdown()
