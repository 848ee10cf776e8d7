"""Wire models for the paginated product listing.

Validation here is about shape only. Dimension positivity is checked by
:func:`cubicweight.domain.weights.cubic_weight` so that one bad product
can be skipped without rejecting its page.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ProductSize(BaseModel):
    """Product dimensions in centimeters.

    A ``null`` dimension reads as 0 and so fails the positivity check later.
    """

    model_config = {"frozen": True}

    width: float = 0.0
    length: float = 0.0
    height: float = 0.0

    @field_validator("width", "length", "height", mode="before")
    @classmethod
    def _null_dimension(cls, value: object) -> object:
        return 0.0 if value is None else value


class Product(BaseModel):
    """One entry of a listing page."""

    model_config = {"frozen": True}

    category: str = ""
    title: str = ""
    weight: float | None = None
    size: ProductSize | None = None

    @field_validator("category", "title", mode="before")
    @classmethod
    def _null_text(cls, value: object) -> object:
        return "" if value is None else value


class ProductPage(BaseModel):
    """One page of the listing plus the relative path of the next page."""

    model_config = {"frozen": True}

    objects: list[Product] = Field(default_factory=list)
    next: str = ""

    @field_validator("objects", mode="before")
    @classmethod
    def _null_objects(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value

    @field_validator("next", mode="before")
    @classmethod
    def _null_next(cls, value: object) -> object:
        return "" if value is None else value

    def in_category(self, category: str) -> list[Product]:
        """Products whose category matches *category* exactly (case-sensitive)."""
        return [p for p in self.objects if p.category == category]
