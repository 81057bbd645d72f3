"""
Fixtures pytest partagees pour les tests tvmaze.

Ce module contient les fixtures communes utilisees dans les tests:
- Client TVMaze pointant vers l'URL de production (mockee par respx)
- Isolation des variables d'environnement TVMAZE_*
"""

import os
from typing import Iterator

import pytest

from tvmaze.adapters.api.client import ClientConfig, TVMazeClient


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Retire les variables TVMAZE_* et isole le .env du poste de dev."""
    for name in list(os.environ):
        if name.startswith("TVMAZE_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def client() -> Iterator[TVMazeClient]:
    """
    Client TVMaze de test.

    Les requetes HTTP doivent etre mockees avec respx dans chaque test.
    """
    tvmaze_client = TVMazeClient(ClientConfig(user_agent="tvmaze-tests/1.0"))
    try:
        yield tvmaze_client
    finally:
        tvmaze_client.close()
