"""
Entites du domaine construites depuis les payloads JSON TVMaze.

Les entites sont des dataclasses immuables reconstruites a chaque reponse;
elles ne gardent aucune reference vers le client qui les a produites.

Exporte:
- Show, Episode, Person : les trois ressources principales
- Network (alias WebChannel), Country (alias DvdCountry)
- Image, Rating, Link, Links, Schedule, Externals, Embedded
"""

from tvmaze.core.entities.common import (
    Country,
    DvdCountry,
    Embedded,
    Externals,
    Image,
    Link,
    Links,
    Network,
    Rating,
    Schedule,
    WebChannel,
)
from tvmaze.core.entities.episode import Episode
from tvmaze.core.entities.person import Person
from tvmaze.core.entities.show import Show

__all__ = [
    "Country",
    "DvdCountry",
    "Embedded",
    "Episode",
    "Externals",
    "Image",
    "Link",
    "Links",
    "Network",
    "Person",
    "Rating",
    "Schedule",
    "Show",
    "WebChannel",
]
