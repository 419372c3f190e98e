"""Schemas for sign-in and session endpoints."""
from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)
    next: str | None = Field(default=None, description="Path to return to after sign-in.")


class RegisterRequest(LoginRequest):
    first_name: str = Field(min_length=1, max_length=80)
    last_name: str = Field(min_length=1, max_length=80)


class IdentityOut(BaseModel):
    email: str


class LoginResponse(BaseModel):
    email: str
    redirect_to: str


class MeResponse(BaseModel):
    identity: IdentityOut | None = None


class DashboardResponse(BaseModel):
    email: str
    sections: list[str]


class SignInPage(BaseModel):
    title: str = "Sign in"
    subtitle: str = "Access your dashboard, saved listings and orders."
    next: str | None = None
