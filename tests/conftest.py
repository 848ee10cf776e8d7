"""Shared pytest fixtures and test helpers for cubicweight tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest
from click.testing import CliRunner

from cubicweight.config.models import ApiConfig
from cubicweight.infrastructure.client import ProductApiClient

BASE_URL = "http://api.example.test"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() so handlers never outlive a CliRunner stream."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("cubicweight")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


# ---------------------------------------------------------------------------
# Fake listing API
# ---------------------------------------------------------------------------


def product(
    category: str,
    width: float,
    length: float,
    height: float,
    *,
    title: str = "Item",
    weight: float = 100.0,
) -> dict[str, Any]:
    """Build one wire-format product entry."""
    return {
        "category": category,
        "title": title,
        "weight": weight,
        "size": {"width": width, "length": length, "height": height},
    }


def page(*objects: dict[str, Any], next_path: str | None = None) -> dict[str, Any]:
    """Build one wire-format listing page."""
    return {"objects": list(objects), "next": next_path}


class FakeApi:
    """Serves listing pages by path and records every requested URL."""

    def __init__(self, pages: dict[str, Any]) -> None:
        self.pages = pages
        self.requests: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(str(request.url))
        key = request.url.raw_path.decode("ascii")
        body = self.pages.get(key)
        if body is None:
            return httpx.Response(404, text="not found")
        if isinstance(body, httpx.Response):
            return body
        if isinstance(body, (str, bytes)):
            return httpx.Response(200, content=body)
        return httpx.Response(200, content=json.dumps(body))


@pytest.fixture
def make_client() -> Generator[Callable[[Handler], ProductApiClient]]:
    """Factory for ProductApiClient instances backed by a MockTransport."""
    clients: list[ProductApiClient] = []

    def _make(handler: Handler) -> ProductApiClient:
        client = ProductApiClient(ApiConfig(), transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
