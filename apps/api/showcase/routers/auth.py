"""Sign-in, sign-out and the protected dashboard."""
from __future__ import annotations

from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import RedirectResponse

from ..core.state import get_gate
from ..schemas import auth as auth_schema
from ..services.auth import Identity, Redirect, SessionGate

router = APIRouter()
dashboard_router = APIRouter()

DASHBOARD_SECTIONS = ["Saved Listings", "Orders (Materials)", "Requests & Quotes"]


@router.get(
    "/login",
    response_model=auth_schema.SignInPage,
    responses={307: {"description": "Already signed in; sent on to the destination."}},
)
async def sign_in_page(
    next_path: str | None = Query(default=None, alias="next"),
    gate: SessionGate = Depends(get_gate),
):
    """Describe the sign-in form, or skip it when a user is already signed in."""

    if gate.current_identity() is not None:
        return RedirectResponse(
            gate.post_login_destination(next_path),
            status_code=status.HTTP_307_TEMPORARY_REDIRECT,
        )
    return auth_schema.SignInPage(next=next_path)


@router.post("/login", response_model=auth_schema.LoginResponse)
async def login(
    payload: auth_schema.LoginRequest,
    gate: SessionGate = Depends(get_gate),
) -> auth_schema.LoginResponse:
    """Sign in and report where the client should go next."""

    identity = gate.login(Identity(email=payload.email))
    return auth_schema.LoginResponse(
        email=identity.email,
        redirect_to=gate.post_login_destination(payload.next),
    )


@router.post("/register", response_model=auth_schema.LoginResponse)
async def register(
    payload: auth_schema.RegisterRequest,
    gate: SessionGate = Depends(get_gate),
) -> auth_schema.LoginResponse:
    """Create an account; the new user is signed in straight away."""

    identity = gate.login(Identity(email=payload.email))
    return auth_schema.LoginResponse(
        email=identity.email,
        redirect_to=gate.post_login_destination(payload.next),
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(gate: SessionGate = Depends(get_gate)) -> Response:
    gate.logout()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=auth_schema.MeResponse)
async def me(gate: SessionGate = Depends(get_gate)) -> auth_schema.MeResponse:
    identity = gate.current_identity()
    if identity is None:
        return auth_schema.MeResponse(identity=None)
    return auth_schema.MeResponse(identity=auth_schema.IdentityOut(email=identity.email))


@dashboard_router.get(
    "/dashboard",
    response_model=auth_schema.DashboardResponse,
    responses={307: {"description": "Not signed in; redirected to sign-in."}},
)
async def dashboard(request: Request, gate: SessionGate = Depends(get_gate)):
    """Protected area. Signed-out visitors are sent to sign-in and brought back."""

    def render() -> auth_schema.DashboardResponse:
        identity = gate.current_identity()
        return auth_schema.DashboardResponse(email=identity.email, sections=DASHBOARD_SECTIONS)

    outcome = gate.guard(request.url.path, render)
    if isinstance(outcome, Redirect):
        return _redirect_response(outcome)
    return outcome


def _redirect_response(redirect: Redirect) -> RedirectResponse:
    location = redirect.location
    if redirect.return_to:
        location = f"{location}?{urlencode({'next': redirect.return_to})}"
    return RedirectResponse(location, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
