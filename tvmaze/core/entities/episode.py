"""
Entite episode.

Construite depuis /shows/{id}/episodes, /shows/{id}/episodebynumber,
/shows/{id}/episodesbydate et les grilles de programmes. Les entrees de
grille portent leur serie sous `show` (ou `_embedded.show` pour la grille
web).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from tvmaze.core.entities.common import Embedded, Image, Links, Rating
from tvmaze.core.entities.fields import ensure_mapping, nested, require
from tvmaze.core.entities.show import Show
from tvmaze.utils import attribution
from tvmaze.utils.constants import DEFAULT_SUMMARY_LENGTH
from tvmaze.utils.helpers import truncated_summary

# Remplace une saison ou un numero absent dans le titre formate
MISSING_NUMBER = "?"
MISSING_NAME = "Unknown"


@dataclass(frozen=True)
class Episode:
    """
    Un episode d'une serie.

    Attributes:
        id: ID TVMaze de l'episode
        url: Page de l'episode sur tvmaze.com
        name: Titre de l'episode
        season: Numero de saison
        number: Numero dans la saison (None pour les speciaux)
        type: regular, significant_special, insignificant_special
        airdate: Date de diffusion (YYYY-MM-DD)
        airtime: Heure locale de diffusion (HH:MM)
        airstamp: Date et heure de diffusion (ISO 8601, decalage UTC)
        runtime: Duree en minutes
        rating: Note moyenne des utilisateurs
        image: URLs de la capture
        summary: Resume HTML
        links: Liens HAL
        show: Serie parente, presente dans les grilles
        embedded: Sous-ressources demandees via `embed`
    """

    id: int
    url: Optional[str] = None
    name: Optional[str] = None
    season: Optional[int] = None
    number: Optional[int] = None
    type: Optional[str] = None
    airdate: Optional[str] = None
    airtime: Optional[str] = None
    airstamp: Optional[str] = None
    runtime: Optional[int] = None
    rating: Optional[Rating] = None
    image: Optional[Image] = None
    summary: Optional[str] = None
    links: Optional[Links] = None
    show: Optional[Show] = None
    embedded: Optional[Embedded] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Episode":
        data = ensure_mapping(data, "Episode")
        return cls(
            id=require(data, "id", "Episode"),
            url=data.get("url"),
            name=data.get("name"),
            season=data.get("season"),
            number=data.get("number"),
            type=data.get("type"),
            airdate=data.get("airdate"),
            airtime=data.get("airtime"),
            airstamp=data.get("airstamp"),
            runtime=data.get("runtime"),
            rating=nested(data, "rating", Rating.from_dict),
            image=nested(data, "image", Image.from_dict),
            summary=data.get("summary"),
            links=nested(data, "_links", Links.from_dict),
            show=nested(data, "show", Show.from_dict),
            embedded=nested(data, "_embedded", Embedded.from_dict),
        )

    @property
    def formatted_title(self) -> str:
        """Titre au format `S{season}E{number}: {name}`, ex: `S1E1: Pilot`."""
        season = MISSING_NUMBER if self.season is None else self.season
        number = MISSING_NUMBER if self.number is None else self.number
        name = self.name or MISSING_NAME
        return f"S{season}E{number}: {name}"

    def truncated_summary(self, max_length: int = DEFAULT_SUMMARY_LENGTH) -> Optional[str]:
        return truncated_summary(self.summary, max_length)

    def attribution_text(self) -> str:
        return attribution.attribution_text()

    def attribution_html(self) -> str:
        return attribution.attribution_html()

    def attribution_markdown(self) -> str:
        return attribution.attribution_markdown()
