"""CalculatorService — one average-cubic-weight run from raw CLI arguments.

Validates the arguments before any request is made, walks the listing,
and reduces the totals to an average. Fatal conditions come back as a
failed ServiceResult; the walker's recovered errors come back as warnings.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from cubicweight.domain.errors import ArgumentError, InvalidTotals
from cubicweight.domain.locations import (
    parse_api_location,
    parse_conversion_factor,
    validate_category,
)
from cubicweight.domain.weights import average_cubic_weight
from cubicweight.services.result import INVALID_ARGUMENT, INVALID_TOTALS, ServiceResult
from cubicweight.services.walker import PaginationWalker

if TYPE_CHECKING:
    from cubicweight.infrastructure.client import PageFetcher

logger = logging.getLogger(__name__)

OP = "average_cubic_weight"


class CalculatorService:
    """Computes the average cubic weight of one product category."""

    def __init__(self, fetcher: PageFetcher) -> None:
        self._fetcher = fetcher

    def calculate(
        self,
        api_url: str,
        category: str,
        conversion_factor: str,
        *,
        on_visit: Callable[[str], None] | None = None,
    ) -> ServiceResult:
        """Run the whole calculation.

        Arguments arrive as the raw strings typed on the command line.
        """
        try:
            factor = parse_conversion_factor(conversion_factor)
            category = validate_category(category)
            start = parse_api_location(api_url)
        except ArgumentError as exc:
            return ServiceResult.failure(OP, INVALID_ARGUMENT, str(exc))

        walker = PaginationWalker(self._fetcher, category, factor, on_visit=on_visit)
        outcome = walker.walk(start)
        totals = outcome.totals
        data = {
            "category": category,
            "product_count": totals.product_count,
            "cubic_weight_total": totals.cubic_weight_total,
            "stop_reason": str(outcome.stop_reason),
            "pages_visited": outcome.pages_visited,
        }

        try:
            average = average_cubic_weight(totals.cubic_weight_total, totals.product_count)
        except InvalidTotals as exc:
            return ServiceResult.failure(
                OP,
                INVALID_TOTALS,
                f"Error calculating average cubic weight: {exc}",
                data=data,
                warnings=outcome.warnings,
                weight_total=exc.weight_total,
                product_count=exc.product_count,
            )

        logger.debug("Average cubic weight for %r: %f", category, average)
        return ServiceResult(
            ok=True,
            op=OP,
            data={**data, "average_cubic_weight": average},
            warnings=outcome.warnings,
        )
