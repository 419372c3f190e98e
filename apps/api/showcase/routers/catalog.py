"""Catalog browsing endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Query

from ..schemas import catalog as catalog_schema
from ..services import catalog as catalog_service
from ..services.filters import FilterCriteria

router = APIRouter()


@router.get("/catalog", response_model=catalog_schema.CategoryListResponse)
async def list_categories() -> catalog_schema.CategoryListResponse:
    """Return every listing category with its filter options."""

    return catalog_service.list_categories()


@router.get("/catalog/{slug}", response_model=catalog_schema.CategoryListingResponse)
async def browse_category(
    slug: str,
    q: str = Query(default="", max_length=200),
    min_price: int | None = Query(default=None, ge=0),
    max_price: int | None = Query(default=None, ge=0),
    min_beds: int | None = Query(default=None, ge=0),
) -> catalog_schema.CategoryListingResponse:
    """Return the items of a category matching the search and bounds."""

    criteria = FilterCriteria(text=q, min_price=min_price, max_price=max_price, min_beds=min_beds)
    return catalog_service.browse_category(slug, criteria)


@router.get("/catalog/{slug}/{index}", response_model=catalog_schema.ListingCard)
async def get_listing(slug: str, index: int) -> catalog_schema.ListingCard:
    return catalog_service.get_listing(slug, index)


@router.get("/services", response_model=catalog_schema.ServiceListResponse)
async def list_services() -> catalog_schema.ServiceListResponse:
    return catalog_service.list_services()
