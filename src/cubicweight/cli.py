"""The cubicweight command: average cubic weight of one product category."""

from __future__ import annotations

import click

from cubicweight import __version__
from cubicweight.commands._base import CubicWeightCommand
from cubicweight.commands._context import AppContext
from cubicweight.config.settings import CubicWeightSettings

USAGE = (
    "Usage: cubicweight [OPTIONS] <api_endpoint_url> <category_name> "
    "<cubic_weight_conversion_factor>"
)


@click.command(
    cls=CubicWeightCommand,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    examples="""\
  cubicweight http://wp8m3he1wt.s3-website-ap-southeast-2.amazonaws.com/api/products/1 \\
      "Air Conditioners" 250
  cubicweight --json http://localhost:8000/api/products/1 Gadgets 250
  cubicweight -q -c ./cubicweight.toml http://localhost:8000/api/products/1 Gadgets 333""",
)
@click.version_option(version=__version__, prog_name="cubicweight")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the average.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.argument("api_url", required=False)
@click.argument("category", required=False)
@click.argument("conversion_factor", required=False)
def cli(
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    api_url: str | None,
    category: str | None,
    conversion_factor: str | None,
) -> None:
    """Average cubic weight of a product category from a paginated API.

    Walks every page of the listing at API_URL, keeps products whose
    category equals CATEGORY exactly, and averages their cubic weight
    using CONVERSION_FACTOR (kg per cubic meter).
    """
    if api_url is None or category is None or conversion_factor is None:
        click.echo(USAGE)
        return

    settings = CubicWeightSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)

    from cubicweight.services.calculator import CalculatorService

    try:
        result = CalculatorService(app.client).calculate(
            api_url, category, conversion_factor, on_visit=app.progress
        )
    finally:
        app.close()
    app.emit(result)
