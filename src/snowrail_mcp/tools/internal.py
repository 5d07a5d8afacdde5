"""Internal callbacks and authentication tools (internal mode only)."""
from __future__ import annotations

from typing import Any, Dict

from ..bridge import RequestSpec
from ..modes import Tier
from ..schemas import BearerArguments, LoginArguments, SignupArguments, X402CallbackArguments
from . import catalog_tool


def _bearer(args: BearerArguments) -> Dict[str, str]:
    return {"Authorization": f"Bearer {args.jwt_token}"}


@catalog_tool(
    "snowrail_x402_callback",
    tier=Tier.INTERNAL,
    arguments=X402CallbackArguments,
    description="Deliver an x402 settlement callback (POST /internal/x402/callback).",
)
def x402_callback(args: X402CallbackArguments) -> RequestSpec:
    headers: Dict[str, str] = {}
    if args.callback_secret:
        headers["X-Callback-Secret"] = args.callback_secret

    body: Dict[str, Any] = {
        "paymentIntentId": args.payment_intent_id,
        "token": args.token,
        "amount": args.amount,
        "txHash": args.tx_hash,
    }
    if args.timestamp:
        body["timestamp"] = args.timestamp

    return args.request("/internal/x402/callback", "POST", headers=headers, body=body)


@catalog_tool(
    "snowrail_auth_signup",
    tier=Tier.INTERNAL,
    arguments=SignupArguments,
    description="Create a SnowRail company account (POST /auth/signup).",
)
def auth_signup(args: SignupArguments) -> RequestSpec:
    body = {
        "email": args.email,
        "password": args.password,
        "companyLegalName": args.company_legal_name,
        "country": args.country,
    }
    return args.request("/auth/signup", "POST", body=body)


@catalog_tool(
    "snowrail_auth_login",
    tier=Tier.INTERNAL,
    arguments=LoginArguments,
    description="Log in and obtain a JWT (POST /auth/login).",
)
def auth_login(args: LoginArguments) -> RequestSpec:
    return args.request("/auth/login", "POST", body={"email": args.email, "password": args.password})


@catalog_tool(
    "snowrail_auth_me",
    tier=Tier.INTERNAL,
    arguments=BearerArguments,
    description="Fetch the authenticated user's profile (GET /auth/me).",
)
def auth_me(args: BearerArguments) -> RequestSpec:
    return args.request("/auth/me", headers=_bearer(args))


@catalog_tool(
    "snowrail_dashboard",
    tier=Tier.INTERNAL,
    arguments=BearerArguments,
    description="Fetch the company dashboard (GET /api/dashboard).",
)
def dashboard(args: BearerArguments) -> RequestSpec:
    return args.request("/api/dashboard", headers=_bearer(args))


__all__ = ["auth_login", "auth_me", "auth_signup", "dashboard", "x402_callback"]
