"""
Client API du serveur de metadonnees.

Ce module fournit l'adaptateur pour communiquer avec le serveur Shoko:
- ShokoClient: series, episodes et recherche (API v3)

Infrastructure partagee:
- APICache: Cache persistant avec TTL differencies (recherche 1h, details 15 min)
- TransientAPIError / RateLimitError: Exceptions pour les erreurs 503 / 429
- with_retry, request_with_retry: Backoff exponentiel sur erreurs transitoires

Le client implemente IShokoAPIClient defini dans core/ports/api_clients.py.
"""

from src.adapters.api.cache import APICache
from src.adapters.api.retry import (
    RateLimitError,
    TransientAPIError,
    request_with_retry,
    with_retry,
)
from src.adapters.api.shoko_client import ShokoClient

__all__ = [
    "APICache",
    "ShokoClient",
    "RateLimitError",
    "TransientAPIError",
    "with_retry",
    "request_with_retry",
]
