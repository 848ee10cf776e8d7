"""Tests for ProductApiClient against a mock transport."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from cubicweight.config.models import ApiConfig
from cubicweight.config.settings import CubicWeightSettings
from cubicweight.domain.errors import DecodeError, TransportError
from cubicweight.infrastructure.client import ProductApiClient, build_client
from tests.conftest import BASE_URL, FakeApi, Handler, page, product

URL = f"{BASE_URL}/api/products/1"

MakeClient = Callable[[Handler], ProductApiClient]


class TestFetchPage:
    def test_decodes_page(self, make_client: MakeClient) -> None:
        first = page(product("Gadgets", 10, 10, 10), next_path="/api/products/2")
        api = FakeApi({"/api/products/1": first})
        result = make_client(api).fetch_page(URL)
        assert result.next == "/api/products/2"
        assert result.objects[0].category == "Gadgets"
        assert api.requests == [URL]

    def test_sends_accept_and_user_agent(self, make_client: MakeClient) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"objects": []})

        make_client(handler).fetch_page(URL)
        assert seen[0].headers["Accept"] == "application/json"
        assert seen[0].headers["User-Agent"].startswith("cubicweight/")

    @pytest.mark.parametrize("status", [404, 500, 204, 301])
    def test_non_ok_status_is_transport_error(self, make_client: MakeClient, status: int) -> None:
        client = make_client(lambda request: httpx.Response(status, text="nope"))
        with pytest.raises(TransportError, match=str(status)) as exc_info:
            client.fetch_page(URL)
        assert exc_info.value.url == URL

    def test_network_failure_is_transport_error(self, make_client: MakeClient) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError, match="Error fetching data"):
            make_client(handler).fetch_page(URL)

    def test_unusable_url_is_transport_error(self, make_client: MakeClient) -> None:
        api = FakeApi({})
        bad = f"{BASE_URL}/api/\x00bad"
        with pytest.raises(TransportError) as exc_info:
            make_client(api).fetch_page(bad)
        assert exc_info.value.url == bad
        assert api.requests == []

    def test_invalid_json_is_decode_error(self, make_client: MakeClient) -> None:
        client = make_client(lambda request: httpx.Response(200, content=b"{not json"))
        with pytest.raises(DecodeError, match="JSON decoding failed"):
            client.fetch_page(URL)

    def test_empty_body_is_decode_error(self, make_client: MakeClient) -> None:
        client = make_client(lambda request: httpx.Response(200, content=b""))
        with pytest.raises(DecodeError):
            client.fetch_page(URL)

    def test_wrong_shape_is_decode_error(self, make_client: MakeClient) -> None:
        client = make_client(lambda request: httpx.Response(200, json=[1, 2, 3]))
        with pytest.raises(DecodeError, match="Unexpected page structure"):
            client.fetch_page(URL)

    def test_bad_dimension_type_is_decode_error(self, make_client: MakeClient) -> None:
        body = {"objects": [{"category": "x", "size": {"width": "wide"}}]}
        client = make_client(lambda request: httpx.Response(200, json=body))
        with pytest.raises(DecodeError):
            client.fetch_page(URL)


class TestLifecycle:
    def test_context_manager_closes(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))
        with ProductApiClient(ApiConfig(), transport=transport) as client:
            client.fetch_page(URL)
        with pytest.raises(RuntimeError):
            client.fetch_page(URL)

    def test_build_client_uses_settings(self) -> None:
        settings = CubicWeightSettings(api=ApiConfig(timeout_seconds=3.5))
        client = build_client(settings)
        try:
            assert isinstance(client, ProductApiClient)
        finally:
            client.close()
