"""Error taxonomy for a cubic weight run.

Fatal: ArgumentError, InvalidTotals.
Recovered: TransportError and DecodeError stop the walk,
InvalidDimensions skips a single product.
"""

from __future__ import annotations


class CubicWeightError(Exception):
    """Base class for every error raised by cubicweight."""


class ArgumentError(CubicWeightError):
    """Bad command-line input, detected before any network activity."""


class TransportError(CubicWeightError):
    """A page fetch failed or returned a non-success status."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class DecodeError(CubicWeightError):
    """A page body was not JSON or did not have the listing shape."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class InvalidDimensions(CubicWeightError):
    """Product size has a non-positive (or missing) dimension."""

    def __init__(self, width: float, length: float, height: float) -> None:
        super().__init__(
            "Product size dimensions must be positive "
            f"(W: {width:f} L: {length:f} H: {height:f})"
        )
        self.width = width
        self.length = length
        self.height = height


class InvalidTotals(CubicWeightError):
    """Weight total and product count cannot produce an average."""

    def __init__(self, weight_total: float, product_count: float) -> None:
        super().__init__(
            "Invalid weight and product totals "
            f"({weight_total:f} and {product_count:f})"
        )
        self.weight_total = weight_total
        self.product_count = product_count
