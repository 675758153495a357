"""
Tests unitaires pour le mecanisme de retry avec backoff exponentiel.

Ces tests verifient:
- RateLimitError et TransientAPIError capturent le header Retry-After
- with_retry relance sur les erreurs transitoires
- request_with_retry detecte les 429 et 503 et relance automatiquement
- Les echecs permanents remontent apres epuisement des tentatives
"""

import pytest
import httpx
import respx

from src.adapters.api.retry import (
    RateLimitError,
    TransientAPIError,
    _parse_retry_after,
    request_with_retry,
    with_retry,
)


class TestRateLimitError:
    """Tests pour l'exception RateLimitError."""

    def test_rate_limit_error_stores_retry_after(self) -> None:
        """RateLimitError stocke la valeur Retry-After."""
        error = RateLimitError(retry_after=60)
        assert error.retry_after == 60
        assert "60" in str(error)

    def test_rate_limit_error_without_retry_after(self) -> None:
        """RateLimitError fonctionne sans Retry-After."""
        error = RateLimitError(retry_after=None)
        assert error.retry_after is None


class TestWithRetryDecorator:
    """Tests pour le decorateur with_retry."""

    @pytest.mark.asyncio
    async def test_with_retry_retries_on_rate_limit_error(self) -> None:
        """with_retry relance quand RateLimitError est levee."""
        call_count = 0

        @with_retry(max_attempts=3, max_wait=1)
        async def flaky_function() -> str:
            nonlocal call_count
            call_count += 1
            if call_count < 3:
                raise RateLimitError(retry_after=1)
            return "success"

        result = await flaky_function()
        assert result == "success"
        assert call_count == 3

    @pytest.mark.asyncio
    async def test_with_retry_stops_after_max_attempts(self) -> None:
        """with_retry abandonne apres max_attempts tentatives."""
        call_count = 0

        @with_retry(max_attempts=3, max_wait=1)
        async def always_fails() -> str:
            nonlocal call_count
            call_count += 1
            raise RateLimitError(retry_after=1)

        with pytest.raises(RateLimitError):
            await always_fails()
        assert call_count == 3

    @pytest.mark.asyncio
    async def test_with_retry_does_not_retry_other_exceptions(self) -> None:
        """with_retry ne relance pas les autres exceptions."""
        call_count = 0

        @with_retry(max_attempts=3, max_wait=1)
        async def raises_value_error() -> str:
            nonlocal call_count
            call_count += 1
            raise ValueError("not a rate limit error")

        with pytest.raises(ValueError):
            await raises_value_error()
        assert call_count == 1  # Pas de retry


class TestRequestWithRetry:
    """Tests pour request_with_retry avec httpx."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_with_retry_raises_on_429(self, respx_mock: respx.Router) -> None:
        """request_with_retry convertit 429 en RateLimitError et relance."""
        # Mock 3 appels: 429, 429, 429 (epuisement)
        route = respx_mock.get("http://shoko.test/api/v3/Series/42").mock(
            return_value=httpx.Response(429, headers={"Retry-After": "30"})
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(RateLimitError) as exc_info:
                await request_with_retry(
                    client, "GET", "http://shoko.test/api/v3/Series/42", max_attempts=3
                )

        assert exc_info.value.retry_after == 30
        assert route.call_count == 3

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_with_retry_retries_then_succeeds(self, respx_mock: respx.Router) -> None:
        """request_with_retry reussit apres des 429 initiaux."""
        # Mock: 429 puis 200
        route = respx_mock.get("http://shoko.test/api/v3/Series/42").mock(
            side_effect=[
                httpx.Response(429, headers={"Retry-After": "1"}),
                httpx.Response(200, json={"IDs": {"ID": 42}}),
            ]
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(
                client, "GET", "http://shoko.test/api/v3/Series/42", max_attempts=3
            )

        assert response.status_code == 200
        assert response.json() == {"IDs": {"ID": 42}}
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_with_retry_passes_on_success(self, respx_mock: respx.Router) -> None:
        """request_with_retry retourne directement sur 200."""
        route = respx_mock.get("http://shoko.test/api/v3/Series/42").mock(
            return_value=httpx.Response(200, json={"Name": "Shingeki no Kyojin"})
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(
                client, "GET", "http://shoko.test/api/v3/Series/42"
            )

        assert response.status_code == 200
        assert response.json() == {"Name": "Shingeki no Kyojin"}
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_with_retry_raises_on_other_errors(self, respx_mock: respx.Router) -> None:
        """request_with_retry leve HTTPStatusError sur autres erreurs."""
        route = respx_mock.get("http://shoko.test/api/v3/Series/42").mock(
            return_value=httpx.Response(500, text="Internal Server Error")
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(httpx.HTTPStatusError) as exc_info:
                await request_with_retry(
                    client, "GET", "http://shoko.test/api/v3/Series/42"
                )

        assert exc_info.value.response.status_code == 500
        assert route.call_count == 1  # Pas de retry sur 500

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_with_retry_429_without_retry_after(self, respx_mock: respx.Router) -> None:
        """request_with_retry gere 429 sans header Retry-After."""
        route = respx_mock.get("http://shoko.test/api/v3/Series/42").mock(
            side_effect=[
                httpx.Response(429),  # Sans Retry-After
                httpx.Response(200, json={"ok": True}),
            ]
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(
                client, "GET", "http://shoko.test/api/v3/Series/42", max_attempts=3
            )

        assert response.status_code == 200
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_with_retry_retries_on_503(self, respx_mock: respx.Router) -> None:
        """request_with_retry relance sur 503 (serveur en demarrage)."""
        route = respx_mock.get("http://shoko.test/api/v3/Series/42").mock(
            side_effect=[
                httpx.Response(503),
                httpx.Response(200, json={"IDs": {"ID": 42}}),
            ]
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(
                client, "GET", "http://shoko.test/api/v3/Series/42", max_attempts=3
            )

        assert response.status_code == 200
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_with_retry_raises_transient_error_on_503(
        self, respx_mock: respx.Router
    ) -> None:
        """Apres epuisement, un 503 remonte en TransientAPIError (pas RateLimitError)."""
        route = respx_mock.get("http://shoko.test/api/v3/Series/42").mock(
            return_value=httpx.Response(503, headers={"Retry-After": "2"})
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(TransientAPIError) as exc_info:
                await request_with_retry(
                    client, "GET", "http://shoko.test/api/v3/Series/42", max_attempts=2
                )

        assert not isinstance(exc_info.value, RateLimitError)
        assert exc_info.value.status_code == 503
        assert exc_info.value.retry_after == 2
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_with_retry_does_not_retry_404(self, respx_mock: respx.Router) -> None:
        """Un 404 remonte immediatement en HTTPStatusError."""
        route = respx_mock.get("http://shoko.test/api/v3/Series/42").mock(
            return_value=httpx.Response(404)
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(httpx.HTTPStatusError):
                await request_with_retry(client, "GET", "http://shoko.test/api/v3/Series/42")

        assert route.call_count == 1


class TestParseRetryAfter:
    """Tests pour la lecture du header Retry-After."""

    def test_seconds_are_parsed(self) -> None:
        assert _parse_retry_after("30") == 30

    def test_http_date_is_ignored(self) -> None:
        assert _parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT") is None

    def test_missing_header(self) -> None:
        assert _parse_retry_after(None) is None


class TestTransientAPIError:
    """Tests pour TransientAPIError."""

    def test_stores_status_code(self) -> None:
        error = TransientAPIError(503, retry_after=5)
        assert error.status_code == 503
        assert "503" in str(error)

    def test_rate_limit_error_is_transient(self) -> None:
        """RateLimitError est une TransientAPIError de code 429."""
        error = RateLimitError()
        assert isinstance(error, TransientAPIError)
        assert error.status_code == 429
