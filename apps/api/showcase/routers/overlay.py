"""Image preview overlay endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from ..core.state import get_keys, get_overlay
from ..schemas import overlay as overlay_schema
from ..services.overlay import KeyEvents, Overlay, OverlayState

router = APIRouter()


def _out(state: OverlayState) -> overlay_schema.OverlayStateOut:
    return overlay_schema.OverlayStateOut(
        visible=state.visible,
        image_ref=state.image_ref,
        caption=state.caption,
    )


@router.get("", response_model=overlay_schema.OverlayStateOut)
async def read_overlay(overlay: Overlay = Depends(get_overlay)) -> overlay_schema.OverlayStateOut:
    return _out(overlay.state)


@router.post("/show", response_model=overlay_schema.OverlayStateOut)
async def show_overlay(
    payload: overlay_schema.ShowOverlayRequest,
    overlay: Overlay = Depends(get_overlay),
) -> overlay_schema.OverlayStateOut:
    """Open the preview, replacing any image already shown."""

    return _out(overlay.show(payload.image_ref, payload.caption))


@router.post("/hide", response_model=overlay_schema.OverlayStateOut)
async def hide_overlay(overlay: Overlay = Depends(get_overlay)) -> overlay_schema.OverlayStateOut:
    return _out(overlay.hide())


@router.post("/click", response_model=overlay_schema.OverlayStateOut)
async def click_overlay(
    payload: overlay_schema.OverlayClickRequest,
    overlay: Overlay = Depends(get_overlay),
) -> overlay_schema.OverlayStateOut:
    """Backdrop and close-button clicks dismiss; image clicks do not."""

    return _out(overlay.handle_click(payload.target))


@router.post("/key", response_model=overlay_schema.OverlayStateOut)
async def press_key(
    payload: overlay_schema.OverlayKeyRequest,
    keys: KeyEvents = Depends(get_keys),
    overlay: Overlay = Depends(get_overlay),
) -> overlay_schema.OverlayStateOut:
    """Deliver a key press to every registered listener."""

    keys.dispatch(payload.key)
    return _out(overlay.state)
