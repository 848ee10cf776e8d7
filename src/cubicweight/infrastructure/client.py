"""Blocking HTTP client for the product listing API.

This module is the only place that talks to the network. It translates
transport failures into :class:`TransportError` and malformed bodies into
:class:`DecodeError`, so callers never handle ``httpx`` exceptions.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Protocol

import httpx
from pydantic import ValidationError

from cubicweight.domain.errors import DecodeError, TransportError
from cubicweight.domain.products import ProductPage

if TYPE_CHECKING:
    from types import TracebackType

    from cubicweight.config.models import ApiConfig
    from cubicweight.config.settings import CubicWeightSettings

logger = logging.getLogger(__name__)


class PageFetcher(Protocol):
    """Anything that can turn a page URL into a decoded ProductPage."""

    def fetch_page(self, url: str) -> ProductPage: ...


class ProductApiClient:
    """Fetch and decode listing pages over a single ``httpx.Client``.

    Usage::

        with ProductApiClient(settings.api) as client:
            page = client.fetch_page("http://host/api/products/1")
    """

    def __init__(
        self,
        config: ApiConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = httpx.Client(
            timeout=config.timeout_seconds,
            follow_redirects=config.follow_redirects,
            headers={"User-Agent": config.user_agent, "Accept": "application/json"},
            transport=transport,
        )

    def fetch_page(self, url: str) -> ProductPage:
        """GET *url* and decode it as a ProductPage.

        The response is released on every path out of this method.

        Raises:
            TransportError: On network failure, an unusable URL, or a
                non-200 status.
            DecodeError: If the body is not JSON or not a listing page.
        """
        try:
            with self._http.stream("GET", url) as response:
                if response.status_code != httpx.codes.OK:
                    raise TransportError(
                        url,
                        f"API request to URL {url} failed: "
                        f"{response.status_code} {response.reason_phrase}",
                    )
                body = response.read()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(url, f"Error fetching data from API URL ({url}): {exc}") from exc

        logger.debug("Fetched %s (%d bytes)", url, len(body))
        try:
            payload = json.loads(body)
        except ValueError as exc:
            raise DecodeError(url, f"JSON decoding failed for {url}: {exc}") from exc
        try:
            return ProductPage.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(url, f"Unexpected page structure at {url}: {exc}") from exc

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> ProductApiClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def build_client(settings: CubicWeightSettings) -> ProductApiClient:
    """Construct the client for a CLI run from resolved settings."""
    return ProductApiClient(settings.api)
