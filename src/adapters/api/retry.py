"""
Mecanisme de retry avec backoff exponentiel pour l'API du serveur.

Gere automatiquement les erreurs transitoires en relancant les requetes
avec un delai croissant et du jitter aleatoire:
- 429 Too Many Requests (rate limiting)
- 503 Service Unavailable (serveur en cours de demarrage)

Usage:
    # Avec le decorateur
    @with_retry(max_attempts=5, max_wait=60)
    async def my_api_call():
        ...

    # Avec la fonction helper
    response = await request_with_retry(client, "GET", url)
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

RETRYABLE_STATUS_CODES = frozenset({429, 503})


class TransientAPIError(Exception):
    """
    Exception levee pour une reponse HTTP transitoire (relancable).

    Attributes:
        status_code: Code HTTP recu
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, status_code: int, retry_after: Optional[int] = None) -> None:
        self.status_code = status_code
        self.retry_after = retry_after
        super().__init__(f"HTTP {status_code}. Retry after: {retry_after}s")


class RateLimitError(TransientAPIError):
    """Exception levee quand l'API retourne 429 Too Many Requests."""

    def __init__(self, retry_after: Optional[int] = None) -> None:
        super().__init__(429, retry_after)


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur pour relancer sur TransientAPIError avec backoff exponentiel.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 60)

    Returns:
        Decorateur a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception_type(TransientAPIError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Retry-After en secondes; les dates HTTP sont ignorees."""
    if value and value.strip().isdigit():
        return int(value)
    return None


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    max_wait: int = 60,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec retry automatique sur 429 et 503.

    Les autres erreurs HTTP (4xx, 5xx) sont propagees immediatement
    sans retry.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL a appeler
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre les tentatives en secondes
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        httpx.Response en cas de succes

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        TransientAPIError: Si 503 apres epuisement des tentatives
        httpx.HTTPStatusError: Pour les autres erreurs HTTP
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code in RETRYABLE_STATUS_CODES:
            retry_after = _parse_retry_after(response.headers.get("Retry-After"))
            logger.debug(
                "Reponse transitoire, nouvelle tentative",
                url=url,
                status=response.status_code,
                retry_after=retry_after,
            )
            if response.status_code == 429:
                raise RateLimitError(retry_after)
            raise TransientAPIError(response.status_code, retry_after)
        response.raise_for_status()
        return response

    return await _do_request()
