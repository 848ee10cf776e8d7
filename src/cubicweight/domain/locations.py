"""API locations and command-line argument parsing.

The listing API keeps its scheme and host constant across pages; only the
path varies. ``next`` links are therefore resolved against the root URL's
scheme and host, and pages are identified by everything after the host.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from urllib.parse import urlsplit

from cubicweight.domain.errors import ArgumentError

ALLOWED_SCHEMES = frozenset({"http", "https"})

# Rejected in a host, along with whitespace and control characters.
_BAD_HOST_CHARS = frozenset('<>"{}|\\^`')


@dataclass(frozen=True)
class ApiLocation:
    """A parsed API endpoint URL."""

    scheme: str
    host: str
    path: str
    query: str = ""

    @property
    def url(self) -> str:
        suffix = f"?{self.query}" if self.query else ""
        return f"{self.scheme}://{self.host}{self.path}{suffix}"

    @property
    def page_key(self) -> str:
        """Cycle-detection key: the location without scheme and host."""
        return f"{self.path}?{self.query}" if self.query else self.path

    def resolve(self, next_path: str) -> ApiLocation:
        """Return the location of *next_path* on this scheme and host."""
        parts = urlsplit(next_path)
        path = parts.path or "/"
        if not path.startswith("/"):
            path = f"/{path}"
        return ApiLocation(self.scheme, self.host, path, parts.query)


def parse_api_location(raw: str) -> ApiLocation:
    """Parse the API endpoint URL argument.

    Raises:
        ArgumentError: If the URL cannot be parsed, does not use http(s),
            or has a missing or malformed host.
    """
    try:
        parts = urlsplit(raw.strip())
        host = parts.netloc
        # Accessing .port validates the port component.
        _ = parts.port
    except ValueError as exc:
        raise ArgumentError(f"Invalid API URL: {exc}") from exc
    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        raise ArgumentError(f"Invalid API URL: unsupported scheme in {raw!r}")
    if not host:
        raise ArgumentError(f"Invalid API URL: missing host in {raw!r}")
    if any(ch.isspace() or not ch.isprintable() or ch in _BAD_HOST_CHARS for ch in host):
        raise ArgumentError(f"Invalid API URL: invalid character in host {host!r}")
    return ApiLocation(parts.scheme.lower(), host, parts.path or "/", parts.query)


def parse_conversion_factor(raw: str) -> float:
    """Parse the cubic weight conversion factor argument.

    Raises:
        ArgumentError: If *raw* is not a finite number greater than zero.
    """
    try:
        factor = float(raw)
    except ValueError as exc:
        raise ArgumentError(f"Invalid cubic weight conversion factor: {raw!r}") from exc
    if not math.isfinite(factor) or factor <= 0:
        raise ArgumentError(f"Invalid cubic weight conversion factor: {factor:f}")
    return factor


def validate_category(raw: str) -> str:
    """Return *raw* unchanged, rejecting the empty category name."""
    if raw == "":
        raise ArgumentError("Invalid product category: category name must not be empty")
    return raw
