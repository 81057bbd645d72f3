"""
Taxonomie des erreurs du client TVMaze.

Chaque erreur porte un tag ErrorKind (enumeration fermee) et, quand il
existe, le code HTTP de la reponse. Les classes derivent toutes
directement de TVMazeError, sans hierarchie intermediaire:

- RateLimitedError : HTTP 429
- ClientError : HTTP 4xx (hors 429)
- ServerError : HTTP 5xx
- TransportError : aucune reponse recue (connexion, timeout, TLS...)
- UnknownError : tout autre statut inattendu
- MalformedResponseError : corps de reponse impossible a deserialiser

classify_status() est le point d'entree unique de la classification.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Tag identifiant la categorie d'une erreur TVMaze."""

    RATE_LIMITED = "rate_limited"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    TRANSPORT_FAILURE = "transport_failure"
    UNKNOWN_FAILURE = "unknown_failure"
    MALFORMED_RESPONSE = "malformed_response"


class TVMazeError(Exception):
    """
    Erreur de base du client TVMaze.

    Attributes:
        kind: Categorie de l'erreur
        status_code: Code HTTP de la reponse, ou None si non applicable
    """

    kind: ErrorKind = ErrorKind.UNKNOWN_FAILURE

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class RateLimitedError(TVMazeError):
    """
    L'API a retourne 429 Too Many Requests.

    Attributes:
        retry_after: Secondes a attendre (header Retry-After), ou None
    """

    kind = ErrorKind.RATE_LIMITED

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limit exceeded. Retry after: {retry_after}s", 429)


class ClientError(TVMazeError):
    """Erreur 4xx (hors 429). Un 404 signale une ressource inexistante."""

    kind = ErrorKind.CLIENT_ERROR

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Client error: {status_code}", status_code)

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class ServerError(TVMazeError):
    """Erreur 5xx cote TVMaze."""

    kind = ErrorKind.SERVER_ERROR

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Server error: {status_code}", status_code)


class TransportError(TVMazeError):
    """Aucune reponse HTTP n'a ete obtenue."""

    kind = ErrorKind.TRANSPORT_FAILURE

    def __init__(self, message: str = "Request failed: no response received") -> None:
        super().__init__(message, None)


class UnknownError(TVMazeError):
    """Statut HTTP hors des plages attendues (1xx, 3xx, ...)."""

    kind = ErrorKind.UNKNOWN_FAILURE

    def __init__(self, status_code: Optional[int]) -> None:
        super().__init__(f"Unexpected response status: {status_code}", status_code)


class MalformedResponseError(TVMazeError):
    """
    Le corps de la reponse ne correspond pas au contrat attendu.

    Attributes:
        entity: Nom de l'entite en cours de deserialisation, si connu
        field: Champ manquant ou invalide, si connu
    """

    kind = ErrorKind.MALFORMED_RESPONSE

    def __init__(
        self,
        message: str,
        entity: Optional[str] = None,
        field: Optional[str] = None,
    ) -> None:
        self.entity = entity
        self.field = field
        super().__init__(message, None)

    @classmethod
    def missing_field(cls, entity: str, field: str) -> "MalformedResponseError":
        """Construit l'erreur pour un champ obligatoire absent."""
        return cls(
            f"Missing required field '{field}' in {entity} payload",
            entity=entity,
            field=field,
        )


def classify_status(
    status_code: Optional[int],
    retry_after: Optional[int] = None,
) -> TVMazeError:
    """
    Associe un code HTTP (ou l'absence de reponse) a une erreur.

    Args:
        status_code: Code HTTP recu, ou None si aucune reponse
        retry_after: Valeur du header Retry-After, utilisee pour les 429

    Returns:
        L'erreur correspondante (jamais levee ici, l'appelant decide)
    """
    if status_code is None:
        return TransportError()
    if status_code == 429:
        return RateLimitedError(retry_after)
    if 400 <= status_code < 500:
        return ClientError(status_code)
    if 500 <= status_code < 600:
        return ServerError(status_code)
    return UnknownError(status_code)
