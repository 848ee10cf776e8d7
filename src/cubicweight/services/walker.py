"""PaginationWalker — follow ``next`` links and accumulate cubic weights.

One page is fetched, processed, and released before the next request.
The walk ends when a page has no ``next`` link, when a page key repeats,
or when a fetch or decode fails. Every ending returns the totals
accumulated so far.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

import structlog

from cubicweight.domain.errors import DecodeError, InvalidDimensions, TransportError
from cubicweight.domain.weights import cubic_weight

if TYPE_CHECKING:
    from cubicweight.domain.locations import ApiLocation
    from cubicweight.domain.products import ProductPage
    from cubicweight.infrastructure.client import PageFetcher

logger = structlog.get_logger(__name__)


class StopReason(StrEnum):
    """Why the walk ended."""

    COMPLETE = "complete"
    CYCLE_DETECTED = "cycle_detected"
    TRANSPORT_ERROR = "transport_error"
    DECODE_ERROR = "decode_error"


@dataclass
class Accumulator:
    """Running totals for matched products."""

    cubic_weight_total: float = 0.0
    product_count: int = 0

    def add(self, weight: float) -> None:
        self.cubic_weight_total += weight
        self.product_count += 1


@dataclass
class WalkOutcome:
    """Everything a finished walk hands back."""

    totals: Accumulator
    stop_reason: StopReason
    pages_visited: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class PaginationWalker:
    """Walk a paginated listing for a single category.

    Args:
        fetcher: Page source (normally a ProductApiClient).
        category: Exact, case-sensitive category name to match.
        conversion_factor: Cubic meters to kilograms multiplier.
        on_visit: Called with each page URL just before it is fetched.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        category: str,
        conversion_factor: float,
        *,
        on_visit: Callable[[str], None] | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._category = category
        self._conversion_factor = conversion_factor
        self._on_visit = on_visit

    def walk(self, start: ApiLocation) -> WalkOutcome:
        outcome = WalkOutcome(totals=Accumulator(), stop_reason=StopReason.COMPLETE)
        visited: set[str] = set()
        location: ApiLocation | None = start

        while location is not None:
            if location.page_key in visited:
                logger.info("Page already visited, stopping", page=location.page_key)
                outcome.stop_reason = StopReason.CYCLE_DETECTED
                break
            visited.add(location.page_key)

            url = location.url
            if self._on_visit is not None:
                self._on_visit(url)
            outcome.pages_visited.append(url)

            try:
                page = self._fetcher.fetch_page(url)
            except TransportError as exc:
                self._warn(outcome, str(exc), url=url)
                outcome.stop_reason = StopReason.TRANSPORT_ERROR
                break
            except DecodeError as exc:
                self._warn(outcome, str(exc), url=url)
                outcome.stop_reason = StopReason.DECODE_ERROR
                break

            self._accumulate(page, outcome)
            location = start.resolve(page.next) if page.next else None

        logger.debug(
            "Walk finished",
            stop_reason=str(outcome.stop_reason),
            pages=len(outcome.pages_visited),
            products=outcome.totals.product_count,
        )
        return outcome

    def _accumulate(self, page: ProductPage, outcome: WalkOutcome) -> None:
        for product in page.in_category(self._category):
            try:
                weight = cubic_weight(product.size, self._conversion_factor)
            except InvalidDimensions as exc:
                self._warn(
                    outcome,
                    f"Error calculating cubic weight for {product.title}: {exc}",
                    title=product.title,
                )
                continue
            outcome.totals.add(weight)

    @staticmethod
    def _warn(outcome: WalkOutcome, message: str, **context: str) -> None:
        logger.warning(message, **context)
        outcome.warnings.append(message)
