"""
Client HTTP synchrone pour l'API publique TVMaze.

Chaque operation construit sa requete, emet exactement un GET, classe
les reponses non-2xx en erreurs typees (tvmaze.core.errors) puis confie
le corps au mapper. Pas de retry, pas de cache, pas d'etat partage entre
les appels: le client ne garde que sa configuration et le pool httpx.

Reference API: https://www.tvmaze.com/api
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date as Date
from typing import Any, Optional

import httpx
from loguru import logger

from tvmaze.adapters.api import mapper
from tvmaze.adapters.api.mapper import SearchResult
from tvmaze.config import Settings
from tvmaze.core.entities import Episode, Person, Show
from tvmaze.core.errors import ClientError, TransportError, classify_status
from tvmaze.utils import attribution
from tvmaze.utils.constants import (
    ACCEPT_JSON,
    BASE_URL,
    DEFAULT_TIMEOUT,
    LOOKUP_TYPES,
    UPDATE_WINDOWS,
    USER_AGENT,
)


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration immuable du client.

    Attributes:
        base_url: Point d'entree de l'API
        user_agent: Valeur du header User-Agent
        timeout: Delai maximum d'une requete en secondes
    """

    base_url: str = BASE_URL
    user_agent: str = USER_AGENT
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClientConfig":
        """Construit la configuration depuis les Settings (variables TVMAZE_*)."""
        return cls(
            base_url=settings.base_url,
            user_agent=settings.user_agent,
            timeout=settings.timeout,
        )

    @property
    def headers(self) -> dict[str, str]:
        """Headers envoyes avec chaque requete."""
        return {"User-Agent": self.user_agent, "Accept": ACCEPT_JSON}


def _embed_params(embed: str | Iterable[str]) -> dict[str, Any]:
    """
    Encode le parametre embed.

    Une seule ressource: `embed=cast`. Plusieurs: `embed[]=cast&embed[]=episodes`.
    Une chaine seule compte comme une ressource, pas comme une suite de lettres.
    """
    if isinstance(embed, str):
        embed = [embed] if embed else []
    embed = list(embed)
    if not embed:
        return {}
    if len(embed) == 1:
        return {"embed": embed[0]}
    return {"embed[]": embed}


def _format_date(value: Date | str) -> str:
    if isinstance(value, Date):
        return value.isoformat()
    return value


def _retry_after(response: httpx.Response) -> Optional[int]:
    header = response.headers.get("Retry-After")
    if header and header.isdigit():
        return int(header)
    return None


class TVMazeClient:
    """
    Client TVMaze.

    Example:
        with TVMazeClient.create("MonApp/1.0") as client:
            results = client.search_shows("breaking bad")
            show = client.get_show(results[0].item.id, embed=["cast"])
            episode = client.get_episode_by_number(show.id, 1, 1)
            print(episode.formatted_title)

    Toutes les operations peuvent lever une erreur de tvmaze.core.errors.
    Seules single_show_search et lookup_show convertissent un 404 en None.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialise le client.

        Args:
            config: Configuration (valeurs par defaut si None)
            http_client: Client httpx a utiliser; si None, un client est cree
                         et sera ferme par close()
        """
        self._config = config or ClientConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            headers=self._config.headers,
            timeout=self._config.timeout,
            follow_redirects=True,
        )

    @classmethod
    def create(cls, user_agent: Optional[str] = None) -> "TVMazeClient":
        """Client pret a l'emploi: timeout 30s, Accept JSON, User-Agent optionnel."""
        return cls(ClientConfig(user_agent=user_agent or USER_AGENT))

    @classmethod
    def from_settings(cls, settings: Settings) -> "TVMazeClient":
        return cls(ClientConfig.from_settings(settings))

    @property
    def config(self) -> ClientConfig:
        return self._config

    def close(self) -> None:
        """Ferme le client HTTP s'il a ete cree par ce client."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "TVMazeClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _request(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        """
        Emet un GET et retourne le corps JSON decode.

        Raises:
            TransportError: aucune reponse (connexion, timeout...)
            RateLimitedError, ClientError, ServerError, UnknownError: statut non-2xx
            MalformedResponseError: corps non JSON
        """
        url = f"{self._config.base_url}{path}"
        logger.debug("GET {path}", path=path, params=params)
        try:
            # Repetes par requete pour un http_client injecte, cree sans ces valeurs.
            # /lookup/shows repond par une redirection 301 vers /shows/{id}
            response = self._client.get(
                url,
                params=params or None,
                headers=self._config.headers,
                timeout=self._config.timeout,
                follow_redirects=True,
            )
        except httpx.RequestError as e:
            logger.debug("Transport failure on {path}: {error}", path=path, error=repr(e))
            raise TransportError(f"Request failed: {e}") from e

        if not response.is_success:
            error = classify_status(response.status_code, _retry_after(response))
            logger.debug(
                "{path} -> HTTP {status} ({kind})",
                path=path,
                status=response.status_code,
                kind=error.kind.value,
            )
            raise error

        return mapper.decode_json(response.content)

    # ------------------------------------------------------------------
    # Shows
    # ------------------------------------------------------------------

    def search_shows(self, query: str) -> list[SearchResult[Show]]:
        """
        Recherche des series par titre.

        Returns:
            Liste de SearchResult(score, Show), dans l'ordre de l'API
        """
        data = self._request("/search/shows", {"q": query})
        return mapper.map_show_search(data)

    def single_show_search(self, query: str, embed: str | Iterable[str] = ()) -> Optional[Show]:
        """
        Retourne la meilleure correspondance pour une recherche.

        Returns:
            Show, ou None si aucune serie ne correspond (404)
        """
        params = {"q": query, **_embed_params(embed)}
        try:
            data = self._request("/singlesearch/shows", params)
        except ClientError as e:
            if e.is_not_found:
                return None
            raise
        return mapper.map_show(data)

    def lookup_show(self, type: str, id: str) -> Optional[Show]:
        """
        Recherche une serie par identifiant externe.

        Args:
            type: "tvrage", "thetvdb" ou "imdb"
            id: Identifiant sur le service externe

        Returns:
            Show, ou None si inconnu de TVMaze (404)
        """
        if type not in LOOKUP_TYPES:
            raise ValueError(f"Unsupported lookup type {type!r}, expected one of {sorted(LOOKUP_TYPES)}")
        try:
            data = self._request("/lookup/shows", {type: id})
        except ClientError as e:
            if e.is_not_found:
                return None
            raise
        return mapper.map_show(data)

    def get_show(self, id: int, embed: str | Iterable[str] = ()) -> Show:
        """
        Recupere une serie par son ID TVMaze.

        Un ID inconnu leve ClientError (404): contrairement a la recherche
        unique, l'absence n'est pas convertie en None.
        """
        data = self._request(f"/shows/{id}", _embed_params(embed))
        return mapper.map_show(data)

    def get_show_episodes(self, show_id: int, include_specials: bool = False) -> list[Episode]:
        params = {"specials": "1"} if include_specials else None
        data = self._request(f"/shows/{show_id}/episodes", params)
        return mapper.map_episodes(data)

    def get_episode_by_number(self, show_id: int, season: int, number: int) -> Episode:
        data = self._request(
            f"/shows/{show_id}/episodebynumber",
            {"season": season, "number": number},
        )
        return mapper.map_episode(data)

    def get_episodes_by_date(self, show_id: int, date: Date | str) -> list[Episode]:
        """Episodes diffuses a une date donnee (YYYY-MM-DD ou datetime.date)."""
        data = self._request(f"/shows/{show_id}/episodesbydate", {"date": _format_date(date)})
        return mapper.map_episodes(data)

    def get_show_cast(self, show_id: int) -> list[dict[str, Any]]:
        """Cast brut: liste de {person, character, self, voice}."""
        return mapper.map_credits(self._request(f"/shows/{show_id}/cast"))

    def get_show_crew(self, show_id: int) -> list[dict[str, Any]]:
        """Crew brut: liste de {type, person}."""
        return mapper.map_credits(self._request(f"/shows/{show_id}/crew"))

    # ------------------------------------------------------------------
    # People
    # ------------------------------------------------------------------

    def search_people(self, query: str) -> list[SearchResult[Person]]:
        data = self._request("/search/people", {"q": query})
        return mapper.map_people_search(data)

    def get_person(self, id: int, embed: str | Iterable[str] = ()) -> Person:
        data = self._request(f"/people/{id}", _embed_params(embed))
        return mapper.map_person(data)

    # ------------------------------------------------------------------
    # Schedules
    # ------------------------------------------------------------------

    def get_schedule(
        self,
        country: Optional[str] = None,
        date: Optional[Date | str] = None,
    ) -> list[Episode]:
        """
        Grille des programmes TV.

        Args:
            country: Code pays ISO 3166-1 (US par defaut cote API)
            date: Jour de la grille (aujourd'hui par defaut cote API)
        """
        return mapper.map_episodes(self._request("/schedule", self._schedule_params(country, date)))

    def get_web_schedule(
        self,
        country: Optional[str] = None,
        date: Optional[Date | str] = None,
    ) -> list[Episode]:
        """
        Grille des programmes des plateformes web.

        Une chaine vide pour country limite la grille aux chaines mondiales.
        """
        return mapper.map_episodes(
            self._request("/schedule/web", self._schedule_params(country, date))
        )

    @staticmethod
    def _schedule_params(country: Optional[str], date: Optional[Date | str]) -> dict[str, str]:
        params = {}
        if country is not None:
            params["country"] = country
        if date is not None:
            params["date"] = _format_date(date)
        return params

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def get_show_updates(self, since: Optional[str] = None) -> dict[int, int]:
        """
        Date de derniere mise a jour de chaque serie.

        Args:
            since: "day", "week" ou "month"; None pour tout l'historique

        Returns:
            Dictionnaire {show_id: timestamp Unix}
        """
        return mapper.map_updates(self._request("/updates/shows", self._updates_params(since)))

    def get_people_updates(self, since: Optional[str] = None) -> dict[int, int]:
        return mapper.map_updates(self._request("/updates/people", self._updates_params(since)))

    @staticmethod
    def _updates_params(since: Optional[str]) -> dict[str, str]:
        if since is None:
            return {}
        if since not in UPDATE_WINDOWS:
            raise ValueError(f"Unsupported update window {since!r}, expected one of {sorted(UPDATE_WINDOWS)}")
        return {"since": since}

    # ------------------------------------------------------------------
    # Attribution
    # ------------------------------------------------------------------

    def attribution_text(self) -> str:
        return attribution.attribution_text()

    def attribution_html(self) -> str:
        return attribution.attribution_html()

    def attribution_markdown(self) -> str:
        return attribution.attribution_markdown()

    def detailed_attribution_html(self) -> str:
        return attribution.detailed_attribution_html()
