"""Static listing catalog for the storefront."""
from __future__ import annotations

from dataclasses import dataclass


class UnknownCategoryError(LookupError):
    """Raised when a category slug is not part of the catalog."""


@dataclass(frozen=True, slots=True)
class ListingItem:
    """One catalog entry. Only ``title`` is guaranteed."""

    title: str
    image_ref: str | None = None
    meta: str | None = None
    price_text: str | None = None
    bed_count: int | None = None


@dataclass(frozen=True, slots=True)
class Category:
    """Page-level description of a listing category."""

    slug: str
    heading: str
    subtitle: str
    search_placeholder: str
    cta: str
    hero_image: str | None = None
    supports_price: bool = False
    supports_beds: bool = False


CATEGORIES: tuple[Category, ...] = (
    Category(
        slug="properties",
        heading="Properties",
        subtitle="Buy and invest with confidence.",
        search_placeholder="Search properties...",
        cta="View Details",
        hero_image="/assets/property1.jpg",
        supports_price=True,
        supports_beds=True,
    ),
    Category(
        slug="lands",
        heading="Lands for Sale",
        subtitle="Verified plots with proper titles.",
        search_placeholder="Search lands...",
        cta="Enquire",
        hero_image="/assets/land.jpg",
        supports_price=True,
    ),
    Category(
        slug="rentals",
        heading="Houses for Rent",
        subtitle="Self-contain, apartments, duplexes.",
        search_placeholder="Search rentals...",
        cta="Book Inspection",
        hero_image="/assets/rent1.jpg",
        supports_beds=True,
    ),
    Category(
        slug="materials",
        heading="Building Materials",
        subtitle="Quality materials. Fast delivery.",
        search_placeholder="Search materials...",
        cta="Add to Cart",
        hero_image="/assets/materials/wood.jpg",
    ),
    Category(
        slug="artifacts",
        heading="Building Artifacts",
        subtitle="Snapshots from our works and branding.",
        search_placeholder="Search artifacts...",
        cta="View",
        hero_image="/assets/material-blocksm.jpg",
    ),
    Category(
        slug="plans",
        heading="House Drawing Plans",
        subtitle="Ready-made and custom plans.",
        search_placeholder="Search plans...",
        cta="Request PDF",
        hero_image="/assets/plan-1.jpg",
    ),
    Category(
        slug="designs",
        heading="Building Designs",
        subtitle="Modern, contemporary and classic.",
        search_placeholder="Search designs...",
        cta="Request Renders",
        hero_image="/assets/desiggn.jpg",
    ),
    Category(
        slug="construction",
        heading="Construction",
        subtitle="From foundation to finishing.",
        search_placeholder="Search projects...",
        cta="Request Site Visit",
        hero_image="/assets/foundation1.jpg",
    ),
)


CATALOG: dict[str, tuple[ListingItem, ...]] = {
    "properties": (
        ListingItem(
            image_ref="/assets/property1.jpg",
            title="4-Bed Duplex • Benin City",
            meta="4 Beds • 3 Baths • 450 m²",
            price_text="Contact Agent",
            bed_count=4,
        ),
        ListingItem(
            image_ref="/assets/property2.jpg",
            title="3-Bed Terrace • Benin City",
            meta="3 Beds • 2 Baths • 300 m²",
            price_text="Contact Agent",
            bed_count=3,
        ),
        ListingItem(
            image_ref="/assets/property4.jpg",
            title="Upstairs Appartment • Benin City",
            meta="5 Beds • 5 Baths  600 m²",
            price_text="Contact Agent",
            bed_count=3,
        ),
    ),
    "lands": (
        ListingItem(image_ref="/assets/land.jpg", title="Benin City", meta="Survey & Deed", price_text="Contact Agent"),
        ListingItem(image_ref="/assets/land1.jpg", title="Benin City", meta="C of O", price_text="Contact Agent"),
        ListingItem(image_ref="/assets/land3.jpg", title="Benin City", meta="Survey & Deed", price_text="Contact Agent"),
        ListingItem(image_ref="/assets/land4.jpg", title="Benin City", meta="Survey & Deed", price_text="Contact Agent"),
        ListingItem(image_ref="/assets/land5.jpg", title="Benin City", meta="Survey & Deed", price_text="Contact Agent"),
        ListingItem(image_ref="/assets/llland.jpg", title="Benin City", meta="Survey & Deed", price_text="Contact Agent"),
        ListingItem(image_ref="/assets/llandp.jpg", title="Benin City", meta="Survey & Deed", price_text="Contact Agent"),
    ),
    "rentals": (
        ListingItem(
            image_ref="/assets/rent1.jpg",
            title="2-Bedroom Apartment • Benin City",
            meta="Space • Parking",
            price_text="Contact Agent",
            bed_count=2,
        ),
        ListingItem(
            image_ref="/assets/rent2.jpg",
            title="Flats-Bedroom Apartment • Benin City",
            meta="Upstairs • Parking",
            price_text="Contact Agent",
            bed_count=2,
        ),
        ListingItem(
            image_ref="/assets/rent3.jpg",
            title="2Each-Bed Apartment • Benin city",
            meta="Upstairs • Parking",
            price_text="Contact Agent",
            bed_count=2,
        ),
        ListingItem(
            image_ref="/assets/rent4.jpg",
            title="2-Bed Apartment • Sapele Road",
            meta="Self-Contain • Parking",
            price_text="Contact Agent",
            bed_count=2,
        ),
        ListingItem(
            image_ref="/assets/rentage1.jpg",
            title="Flat-Beds Apartment • Benin City",
            meta="Upstairs • Parking",
            price_text="Contact Agent",
            bed_count=2,
        ),
    ),
    "materials": (
        ListingItem(image_ref="/assets/material-cement.jpg", title="Dangote Cement 50kg", price_text="Contact Agent"),
        ListingItem(image_ref="/assets/material-wiremesh.jpg", title="Wire Mesh (Roll)", price_text="Contact Agent"),
        ListingItem(image_ref="/assets/material-woods.jpg", title="Hardwood (Assorted)", price_text="Contact Agent"),
        ListingItem(image_ref="/assets/material-blocks.jpg", title='Hollow Blocks 9"', price_text="contact Agent"),
        ListingItem(image_ref="/assets/material-granite.jpg", title="Granite (30 Tons)", price_text="Contact Agent"),
        ListingItem(image_ref="/assets/materialRod.jpg", title="Rods  (12mm, 16mm, 20mm", price_text="Contact Agent"),
        ListingItem(image_ref="/assets/material-blocksm.jpg", title="Moulding", price_text="Contact Agent"),
    ),
    "artifacts": (
        ListingItem(image_ref="/assets/material-blocksm.jpg", title="Block Production Yard"),
        ListingItem(image_ref="/assets/0ngoingpit.jpg", title="Ongoing Soakaway"),
        ListingItem(image_ref="/assets/AAfact.jpg", title="From Foundation Forming"),
        ListingItem(image_ref="/assets/Afact.jpg", title="WC Level"),
        ListingItem(image_ref="/assets/IMG-20250813-WA0004.jpg", title="Formin"),
        ListingItem(image_ref="/assets/llland.jpg", title="Land for Sale"),
        ListingItem(image_ref="/assets/material-wiremesh.jpg", title="Wiremesh"),
        ListingItem(image_ref="/assets/sitework1.jpg", title="Sitework"),
        ListingItem(image_ref="/assets/sand and gravel.jpg", title="sand and Gravel"),
        ListingItem(image_ref="/assets/logo.jpg", title="Company Flyer"),
    ),
    "plans": (
        ListingItem(image_ref="/assets/plan-1.jpg", title="Residential Plan A"),
        ListingItem(image_ref="/assets/plan-2.jpg", title="5-Bedroom Plan"),
        ListingItem(image_ref="/assets/DrawingP3.jpg", title="Bedroom Plan"),
        ListingItem(image_ref="/assets/DrawingP2.jpg", title="5-Bedroom Plan"),
    ),
    "designs": (
        ListingItem(image_ref="/assets/desiggn.jpg", title="Modern Elevation"),
        ListingItem(image_ref="/assets/ddesign.jpg", title="Classic Elevation"),
        ListingItem(image_ref="/assets/design1.jpg", title="Classic Design"),
        ListingItem(image_ref="/assets/design3.jpg", title="Modern Design"),
        ListingItem(image_ref="/assets/design4.jpg", title="Classic Elevation"),
    ),
    "construction": (
        ListingItem(image_ref="/assets/foundation1.jpg", title="Ongoing Site - Foundation"),
        ListingItem(image_ref="/assets/Finishing.jpg", title="Ongoing Site - Finishing"),
        ListingItem(image_ref="/assets/sitework1.jpg", title="Ongoing Site - WC level"),
        ListingItem(image_ref="/assets/sitework2.jpg", title="Ongoing Site - Men at Work"),
        ListingItem(image_ref="/assets/sitework3.jpg", title="Ongoing Site - Finishing"),
        ListingItem(image_ref="/assets/sitework4.jpg", title="Ongoing Site - Finishing"),
        ListingItem(image_ref="/assets/0ngoingpit.jpg", title="Ongoing Site - Soakaway"),
        ListingItem(image_ref="/assets/upstair1.jpg", title="Ongoing Site - Upstairs"),
        ListingItem(image_ref="/assets/upstair2.jpg", title="Ongoing Site - Finishing"),
    ),
}


SERVICES: tuple[str, ...] = (
    "Land Verification",
    "Survey & Beaconing",
    "Architectural Drawings",
    "3D Designs & Renders",
    "Renovations",
    "General Construction",
)


_CATEGORY_INDEX: dict[str, Category] = {category.slug: category for category in CATEGORIES}


def get_category(slug: str) -> Category:
    """Return the category for ``slug`` or raise ``UnknownCategoryError``."""

    category = _CATEGORY_INDEX.get(slug)
    if category is None:
        raise UnknownCategoryError(slug)
    return category


def get_items(slug: str) -> tuple[ListingItem, ...]:
    get_category(slug)
    return CATALOG.get(slug, ())
