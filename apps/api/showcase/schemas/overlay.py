"""Schemas for the image preview overlay."""
from __future__ import annotations

from pydantic import BaseModel, Field

from ..services.overlay import ClickTarget


class OverlayStateOut(BaseModel):
    visible: bool
    image_ref: str | None = None
    caption: str = ""


class ShowOverlayRequest(BaseModel):
    image_ref: str | None = None
    caption: str = ""


class OverlayClickRequest(BaseModel):
    target: ClickTarget


class OverlayKeyRequest(BaseModel):
    key: str = Field(min_length=1, max_length=32)
