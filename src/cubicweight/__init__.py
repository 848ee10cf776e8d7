"""cubicweight — average cubic weight calculator for paginated product APIs."""

__version__ = "0.1.0"
