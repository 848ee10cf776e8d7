"""AppContext — per-invocation state for the cubicweight command.

Configures logging, owns the lazily built API client, and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from cubicweight.config.logging import configure_logging
from cubicweight.infrastructure.client import build_client
from cubicweight.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from cubicweight.config.settings import CubicWeightSettings
    from cubicweight.infrastructure.client import ProductApiClient
    from cubicweight.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared state for one CLI invocation.

    The client is built on first use and closed by :meth:`close` once
    the run is over.
    """

    def __init__(self, settings: CubicWeightSettings) -> None:
        self.settings = settings
        self._client: ProductApiClient | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def client(self) -> ProductApiClient:
        if self._client is None:
            self._client = build_client(self.settings)
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            decimal_places=self.settings.report.decimal_places,
            unit=self.settings.report.unit,
        )

    def progress(self, url: str) -> None:
        """Announce a page fetch; kept off stdout in JSON and quiet modes."""
        if self.settings.json_output or self.settings.quiet:
            logger.debug("Visiting %s", url)
            return
        click.echo(f"Visiting {url}")

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally. Walk warnings were
          already logged to stderr as they happened.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, settings=self.output_settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
