"""
Client de l'API v3 du serveur Shoko pour les series et episodes.

Implemente IShokoAPIClient: recupere les payloads JSON, les met en cache
et les convertit en enregistrements types. Gere l'authentification par
cle API (fournie, ou obtenue via /api/auth) et les relances sur erreurs
transitoires.

Reference API: {shoko_url}/swagger
"""

from typing import Any, Optional

import httpx
from loguru import logger

from src.adapters.api.cache import APICache
from src.adapters.api.retry import request_with_retry
from src.core.entities import Episode, Series
from src.core.exceptions import ConfigurationError, SchemaMismatchError
from src.core.ports.api_clients import IShokoAPIClient

DEVICE_NAME = "shokosync"


class ShokoClient(IShokoAPIClient):
    """
    Client du serveur Shoko.

    La cle API est envoyee dans le header "apikey". Sans cle configuree,
    elle est obtenue a la premiere requete a partir des identifiants.

    Example:
        cache = APICache(cache_dir=".cache/api")
        client = ShokoClient("http://localhost:8111", cache, api_key="...")
        series = await client.get_series(42)
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        cache: APICache,
        api_key: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client.

        Args:
            base_url: URL racine du serveur (ex: http://localhost:8111)
            cache: Instance de APICache pour le caching des payloads
            api_key: Cle API existante (prioritaire sur les identifiants)
            username: Utilisateur pour obtenir une cle via /api/auth
            password: Mot de passe associe
            timeout: Timeout global des requetes en secondes
        """
        self._base_url = base_url.rstrip("/")
        self._cache = cache
        self._api_key = api_key or None
        self._username = username
        self._password = password or ""
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, cree s'il n'existe pas.

        Utilise un client unique pour beneficier du connection pooling.
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout, connect=10.0),
            )
        return self._client

    async def _ensure_api_key(self) -> str:
        """
        S'assure qu'une cle API est disponible.

        Returns:
            Cle API valide

        Raises:
            ConfigurationError: Si ni cle ni identifiants ne sont configures
            SchemaMismatchError: Si la reponse d'authentification est illisible
        """
        if self._api_key:
            return self._api_key
        if not self._username:
            raise ConfigurationError("No API key or username configured for Shoko.")

        client = await self._get_client()
        response = await client.post(
            "/api/auth",
            json={"user": self._username, "pass": self._password, "device": DEVICE_NAME},
        )
        response.raise_for_status()
        try:
            self._api_key = response.json()["apikey"]
        except (ValueError, KeyError, TypeError) as e:
            raise SchemaMismatchError("AuthResponse") from e
        logger.debug("Cle API obtenue", user=self._username)
        return self._api_key

    async def _get_json(
        self, path: str, params: Optional[dict[str, Any]] = None
    ) -> Optional[Any]:
        """
        Execute un GET authentifie et retourne le JSON decode.

        Returns:
            Le JSON de la reponse, ou None si 404

        Raises:
            SchemaMismatchError: Si le corps n'est pas du JSON
        """
        api_key = await self._ensure_api_key()
        client = await self._get_client()
        try:
            response = await request_with_retry(
                client,
                "GET",
                path,
                params=params,
                headers={"apikey": api_key},
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise
        try:
            return response.json()
        except ValueError as e:
            raise SchemaMismatchError(
                "JSON", [{"type": "json_invalid", "loc": [path], "msg": str(e)}]
            ) from e

    async def get_series(self, series_id: int) -> Optional[Series]:
        """
        Recupere une serie avec son entree AniDB.

        Verifie le cache avant d'appeler l'API.

        Args:
            series_id: Identifiant Shoko de la serie

        Returns:
            Series, ou None si non trouvee

        Raises:
            SchemaMismatchError: Si le payload n'a pas la forme attendue
        """
        cache_key = f"shoko:series:{series_id}"
        payload = await self._cache.get(cache_key)
        if payload is None:
            payload = await self._get_json(
                f"/api/v3/Series/{series_id}",
                params={"includeDataFrom": "AniDB"},
            )
            if payload is None:
                return None
            await self._cache.set_details(cache_key, payload)

        return Series.from_payload(payload)

    async def get_episode(self, episode_id: int) -> Optional[Episode]:
        """
        Recupere un episode avec son entree AniDB et ses references croisees.

        Args:
            episode_id: Identifiant Shoko de l'episode

        Returns:
            Episode, ou None si non trouve
        """
        cache_key = f"shoko:episode:{episode_id}"
        payload = await self._cache.get(cache_key)
        if payload is None:
            payload = await self._get_json(
                f"/api/v3/Episode/{episode_id}",
                params={"includeDataFrom": "AniDB", "includeXRefs": "true"},
            )
            if payload is None:
                return None
            await self._cache.set_details(cache_key, payload)

        return Episode.from_payload(payload)

    async def get_series_episodes(
        self, series_id: int, include_hidden: bool = False
    ) -> list[Episode]:
        """
        Liste tous les episodes d'une serie (sans pagination).

        Args:
            series_id: Identifiant Shoko de la serie
            include_hidden: Inclure les episodes masques

        Returns:
            Liste d'Episode, vide si la serie n'existe pas
        """
        cache_key = f"shoko:series_episodes:{series_id}:{include_hidden}"
        payload = await self._cache.get(cache_key)
        if payload is None:
            payload = await self._get_json(
                f"/api/v3/Series/{series_id}/Episode",
                params={
                    "pageSize": 0,
                    "includeHidden": "true" if include_hidden else "false",
                    "includeDataFrom": "AniDB",
                    "includeXRefs": "true",
                },
            )
            if payload is None:
                return []
            await self._cache.set_details(cache_key, payload)

        return [Episode.from_payload(item) for item in self._list_items(payload, "Episode")]

    async def search_series(self, query: str, limit: int = 10) -> list[Series]:
        """
        Recherche des series par titre.

        Les resultats sont caches pendant 1 heure.

        Args:
            query: Titre a rechercher
            limit: Nombre maximum de resultats

        Returns:
            Liste de Series, dans l'ordre de pertinence du serveur
        """
        cache_key = f"shoko:search:{query}:{limit}"
        payload = await self._cache.get(cache_key)
        if payload is None:
            payload = await self._get_json(
                "/api/v3/Series/Search",
                params={"query": query, "limit": limit, "includeDataFrom": "AniDB"},
            )
            if payload is None:
                return []
            await self._cache.set_search(cache_key, payload)

        return [Series.from_payload(item) for item in self._list_items(payload, "Series")]

    @staticmethod
    def _list_items(payload: Any, record: str) -> list[Any]:
        """
        Extrait les elements d'une reponse liste.

        Le serveur renvoie soit une liste, soit un objet pagine
        {"Total": n, "List": [...]}.
        """
        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict) and isinstance(payload.get("List"), list):
            return payload["List"]
        raise SchemaMismatchError(
            record, [{"type": "list_type", "msg": "Expected a list or a paged list result"}]
        )

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "shoko"

    async def close(self) -> None:
        """Ferme le client HTTP et libere les ressources."""
        if self._client:
            await self._client.aclose()
            self._client = None
