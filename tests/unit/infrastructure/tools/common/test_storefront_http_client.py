"""Unit tests — StorefrontHttpClient (respx-mocked transport)."""

import httpx
import pytest
import respx
from httpx import Response

from storefront_client.core.application.exceptions import AuthError, ProviderError, TransportError
from storefront_client.infrastructure.configuration import StorefrontSettings
from storefront_client.infrastructure.tools.common.storefront_http_client import (
    StorefrontHttpClient,
)

API_URL = "https://shop.example.com/api"


class TestRequest:
    @respx.mock
    async def test_sends_bearer_token_and_parses_json(self, settings: StorefrontSettings) -> None:
        route = respx.get(f"{API_URL}/cart").mock(return_value=Response(200, json={"items": []}))
        client = StorefrontHttpClient(settings)

        payload = await client.get("cart")

        assert payload == {"items": []}
        assert route.calls.last.request.headers["Authorization"] == "Bearer mock_storefront_token"

    @respx.mock
    async def test_query_params_are_forwarded(self, settings: StorefrontSettings) -> None:
        route = respx.get(f"{API_URL}/products/search").mock(return_value=Response(200, json=[]))

        await StorefrontHttpClient(settings).get("products/search", params={"q": "trail"})

        assert route.calls.last.request.url.params["q"] == "trail"

    @respx.mock
    async def test_unauthorized_raises_auth_error(self, settings: StorefrontSettings) -> None:
        respx.get(f"{API_URL}/cart").mock(return_value=Response(401))

        with pytest.raises(AuthError):
            await StorefrontHttpClient(settings).get("cart")

    @respx.mock
    async def test_server_error_is_retryable(self, settings: StorefrontSettings) -> None:
        respx.delete(f"{API_URL}/cart/clear").mock(return_value=Response(503, text="busy"))

        with pytest.raises(ProviderError) as exc_info:
            await StorefrontHttpClient(settings).delete("cart/clear")

        assert exc_info.value.status_code == 503
        assert exc_info.value.retryable

    @respx.mock
    async def test_client_error_is_not_retryable(self, settings: StorefrontSettings) -> None:
        respx.put(f"{API_URL}/cart/update").mock(return_value=Response(404))

        with pytest.raises(ProviderError) as exc_info:
            await StorefrontHttpClient(settings).put("cart/update", {"itemId": "x", "quantity": 1})

        assert exc_info.value.status_code == 404
        assert not exc_info.value.retryable
        assert str(exc_info.value) == "storefront-api: PUT cart/update returned 404 status=404"

    @respx.mock
    async def test_network_failure_becomes_transport_error(
        self, settings: StorefrontSettings
    ) -> None:
        respx.post(f"{API_URL}/cart/add").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(TransportError) as exc_info:
            await StorefrontHttpClient(settings).post("cart/add", {})

        assert exc_info.value.retryable
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @respx.mock
    @pytest.mark.parametrize(
        "response",
        [Response(204), Response(200, text="Item added")],
        ids=["empty", "plain-text"],
    )
    async def test_acknowledgements_without_json_return_none(
        self, settings: StorefrontSettings, response: Response
    ) -> None:
        respx.post(f"{API_URL}/cart/add").mock(return_value=response)

        assert await StorefrontHttpClient(settings).post("cart/add", {}) is None

    async def test_missing_token_fails_before_sending(self) -> None:
        settings = StorefrontSettings(STOREFRONT_API_URL=API_URL, STOREFRONT_API_TOKEN=None)

        with respx.mock(assert_all_called=False) as router:
            route = router.get(f"{API_URL}/cart")
            with pytest.raises(AuthError):
                await StorefrontHttpClient(settings).get("cart")

        assert not route.called


class TestLifecycle:
    async def test_injected_client_is_not_closed(self, settings: StorefrontSettings) -> None:
        injected = httpx.AsyncClient()
        client = StorefrontHttpClient(settings, client=injected)

        await client.aclose()

        assert not injected.is_closed
        await injected.aclose()

    async def test_owned_client_is_closed(self, settings: StorefrontSettings) -> None:
        client = StorefrontHttpClient(settings)
        owned = client._get_client()

        await client.aclose()

        assert owned.is_closed
