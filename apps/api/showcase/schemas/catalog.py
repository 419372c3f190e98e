"""Schemas for catalog browsing."""
from __future__ import annotations

from pydantic import BaseModel, Field


class CategorySummary(BaseModel):
    slug: str
    heading: str
    subtitle: str
    search_placeholder: str
    cta: str
    hero_image: str | None = None
    supports_price: bool = False
    supports_beds: bool = False
    item_count: int


class CategoryListResponse(BaseModel):
    categories: list[CategorySummary]


class ListingCard(BaseModel):
    index: int = Field(description="Position of the item in its category.")
    image_ref: str | None = None
    title: str
    meta: str | None = None
    price_text: str | None = None
    bed_count: int | None = None
    price: int | None = Field(default=None, description="Numeric price parsed from price_text.")


class AppliedFilters(BaseModel):
    q: str = ""
    min_price: int | None = None
    max_price: int | None = None
    min_beds: int | None = None


class CategoryListingResponse(BaseModel):
    category: CategorySummary
    filters: AppliedFilters
    results: list[ListingCard]
    total: int


class ServiceListResponse(BaseModel):
    services: list[str]
