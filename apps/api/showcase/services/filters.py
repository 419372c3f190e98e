"""Catalog filtering: text search plus price and bedroom bounds."""
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Iterable

from ..data.catalog import Category, ListingItem

NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """User-supplied predicates for one catalog page.

    ``None`` bounds are unbounded. Bounds are inclusive.
    """

    text: str = ""
    min_price: int | None = None
    max_price: int | None = None
    min_beds: int | None = None

    def is_empty(self) -> bool:
        return (
            not self.text.strip()
            and self.min_price is None
            and self.max_price is None
            and self.min_beds is None
        )


def extract_price(price_text: str | None) -> int | None:
    """Return the numeric price encoded in ``price_text``.

    Every digit in the string is kept, in order, and the result is read as a
    single unsigned integer: ``"₦1,200,000"`` gives ``1200000``. Strings
    without digits (``"Contact Agent"``) give ``None``. A string holding
    several numbers is concatenated, not split.
    """

    if not price_text:
        return None
    digits = NON_DIGITS.sub("", price_text)
    if not digits:
        return None
    return int(digits)


def filter_items(items: Iterable[ListingItem], criteria: FilterCriteria) -> list[ListingItem]:
    """Return the items passing every active predicate, in input order."""

    return [item for _, item in filter_indexed(items, criteria)]


def filter_indexed(
    items: Iterable[ListingItem], criteria: FilterCriteria
) -> list[tuple[int, ListingItem]]:
    """Like ``filter_items`` but keeps each item's position in ``items``."""

    needle = criteria.text.strip().casefold()
    return [
        (index, item)
        for index, item in enumerate(items)
        if _matches(item, criteria, needle)
    ]


def criteria_for_category(category: Category, criteria: FilterCriteria) -> FilterCriteria:
    """Drop numeric bounds the category page does not offer."""

    if not category.supports_price:
        criteria = replace(criteria, min_price=None, max_price=None)
    if not category.supports_beds:
        criteria = replace(criteria, min_beds=None)
    return criteria


def _matches(item: ListingItem, criteria: FilterCriteria, needle: str) -> bool:
    if needle and not _matches_text(item, needle):
        return False

    if criteria.min_price is not None or criteria.max_price is not None:
        price = extract_price(item.price_text)
        if price is None:
            return False
        if criteria.min_price is not None and price < criteria.min_price:
            return False
        if criteria.max_price is not None and price > criteria.max_price:
            return False

    if criteria.min_beds is not None:
        if item.bed_count is None or item.bed_count < criteria.min_beds:
            return False

    return True


def _matches_text(item: ListingItem, needle: str) -> bool:
    if needle in item.title.casefold():
        return True
    return item.meta is not None and needle in item.meta.casefold()
