"""Cubic weight arithmetic.

Dimensions arrive in centimeters and are converted to meters before
multiplying; the conversion factor maps cubic meters to kilograms.
"""

from __future__ import annotations

from cubicweight.domain.errors import InvalidDimensions, InvalidTotals
from cubicweight.domain.products import ProductSize

CENTIMETERS_PER_METER = 100


def cubic_weight(size: ProductSize | None, conversion_factor: float) -> float:
    """Return the cubic weight of a product of the given *size*.

    Raises:
        InvalidDimensions: If *size* is missing or any dimension is not
            strictly positive.
    """
    if size is None:
        raise InvalidDimensions(0.0, 0.0, 0.0)
    if size.width > 0 and size.length > 0 and size.height > 0:
        return (
            (size.width / CENTIMETERS_PER_METER)
            * (size.length / CENTIMETERS_PER_METER)
            * (size.height / CENTIMETERS_PER_METER)
            * conversion_factor
        )
    raise InvalidDimensions(size.width, size.length, size.height)


def average_cubic_weight(weight_total: float, product_count: float) -> float:
    """Return ``weight_total / product_count``.

    An empty category (both zero) averages to 0. Any other combination
    where either operand is not strictly positive raises
    :class:`InvalidTotals`, including a zero total over a nonzero count.
    """
    if weight_total == 0 and product_count == 0:
        return 0.0
    if weight_total <= 0 or product_count <= 0:
        raise InvalidTotals(weight_total, product_count)
    return weight_total / product_count
