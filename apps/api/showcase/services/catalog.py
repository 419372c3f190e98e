"""Business logic for catalog browsing endpoints."""
from __future__ import annotations

from fastapi import HTTPException, status

from ..data import catalog as catalog_data
from ..data.catalog import Category, ListingItem, UnknownCategoryError
from ..schemas import catalog as schemas
from .filters import FilterCriteria, criteria_for_category, extract_price, filter_indexed


def list_categories() -> schemas.CategoryListResponse:
    return schemas.CategoryListResponse(
        categories=[_summary(category) for category in catalog_data.CATEGORIES]
    )


def browse_category(slug: str, criteria: FilterCriteria) -> schemas.CategoryListingResponse:
    """Return the visible subset of a category for the given criteria.

    Recomputed in full on every call; numeric filters the category does not
    offer are ignored.
    """

    category, items = _load(slug)
    applied = criteria_for_category(category, criteria)
    visible = filter_indexed(items, applied)

    return schemas.CategoryListingResponse(
        category=_summary(category),
        filters=schemas.AppliedFilters(
            q=applied.text.strip(),
            min_price=applied.min_price,
            max_price=applied.max_price,
            min_beds=applied.min_beds,
        ),
        results=[_card(index, item) for index, item in visible],
        total=len(items),
    )


def get_listing(slug: str, index: int) -> schemas.ListingCard:
    _, items = _load(slug)
    if index < 0 or index >= len(items):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Listing not found")
    return _card(index, items[index])


def list_services() -> schemas.ServiceListResponse:
    return schemas.ServiceListResponse(services=list(catalog_data.SERVICES))


def _load(slug: str) -> tuple[Category, tuple[ListingItem, ...]]:
    try:
        return catalog_data.get_category(slug), catalog_data.get_items(slug)
    except UnknownCategoryError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown category: {slug}") from exc


def _summary(category: Category) -> schemas.CategorySummary:
    return schemas.CategorySummary(
        slug=category.slug,
        heading=category.heading,
        subtitle=category.subtitle,
        search_placeholder=category.search_placeholder,
        cta=category.cta,
        hero_image=category.hero_image,
        supports_price=category.supports_price,
        supports_beds=category.supports_beds,
        item_count=len(catalog_data.CATALOG.get(category.slug, ())),
    )


def _card(index: int, item: ListingItem) -> schemas.ListingCard:
    return schemas.ListingCard(
        index=index,
        image_ref=item.image_ref,
        title=item.title,
        meta=item.meta,
        price_text=item.price_text,
        bed_count=item.bed_count,
        price=extract_price(item.price_text),
    )
