"""
Adaptateur HTTP pour l'API TVMaze.

- TVMazeClient / ClientConfig : facade synchrone, une requete par operation
- SearchResult : paire (score, entite) des endpoints de recherche
- mapper : conversion JSON -> entites du domaine
"""

from tvmaze.adapters.api.client import ClientConfig, TVMazeClient
from tvmaze.adapters.api.mapper import SearchResult

__all__ = [
    "ClientConfig",
    "SearchResult",
    "TVMazeClient",
]
