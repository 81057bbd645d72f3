"""
tvmaze - Client Python pour l'API publique TVMaze.

Ce package emet les requetes HTTP, convertit les reponses JSON en entites
typees et classe les echecs en erreurs typees.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, erreurs)
- adapters/ : Couche infrastructure (client HTTP, CLI)
- utils/ : Constantes, texte, attribution

Les logs loguru du package sont desactives par defaut; configure_logging
les reactive.
"""

from loguru import logger

from tvmaze.adapters.api import ClientConfig, SearchResult, TVMazeClient
from tvmaze.core.entities import Episode, Person, Show
from tvmaze.core.errors import (
    ClientError,
    ErrorKind,
    MalformedResponseError,
    RateLimitedError,
    ServerError,
    TransportError,
    TVMazeError,
    UnknownError,
)

logger.disable("tvmaze")

__version__ = "1.0.0"

__all__ = [
    "ClientConfig",
    "ClientError",
    "Episode",
    "ErrorKind",
    "MalformedResponseError",
    "Person",
    "RateLimitedError",
    "SearchResult",
    "ServerError",
    "Show",
    "TVMazeClient",
    "TVMazeError",
    "TransportError",
    "UnknownError",
]
