"""Human, quiet, and JSON renderings of a calculation ServiceResult."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.text import Text

from cubicweight.output.console import create_console, get_output

if TYPE_CHECKING:
    from cubicweight.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags plus report formatting."""

    json_output: bool = False
    quiet: bool = False
    decimal_places: int = 4
    unit: str = "kg"


def format_weight(value: float, settings: OutputSettings) -> str:
    return f"{value:.{settings.decimal_places}f}{settings.unit}"


def _render_report(result: ServiceResult, settings: OutputSettings) -> str:
    console = create_console()
    data = result.data
    lines = [
        Text.assemble(
            ("Product Category: ", "cw.label"),
            (f'"{data["category"]}"', "cw.category"),
        ),
        Text.assemble(
            ("Total Products in Category: ", "cw.label"),
            (f"{data['product_count']:d}", "cw.count"),
        ),
        Text.assemble(
            ("Average Cubic Weight: ", "cw.label"),
            (format_weight(data["average_cubic_weight"], settings), "cw.weight"),
        ),
    ]
    for line in lines:
        console.print(line, soft_wrap=True)
    # Blank line above and below, setting the report apart from progress output.
    return "\n" + get_output(console).rstrip("\n") + "\n"


def _render_error(result: ServiceResult) -> str:
    console = create_console()
    message = result.error.message if result.error else "Unknown error"
    console.print(
        Text.assemble(("ERROR: ", "cw.error"), (result.op, "cw.op"), f" — {message}"),
        soft_wrap=True,
    )
    return get_output(console).rstrip("\n")


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON mode serializes the whole result. Quiet mode prints only the
    average. Otherwise the three-line category report is rendered.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        return _render_error(result)
    if settings.quiet:
        return format_weight(result.data["average_cubic_weight"], settings)
    return _render_report(result, settings)
