"""Payment, payroll and agent-to-agent tools.

These forward a caller-supplied ``X-PAYMENT`` credential verbatim; the
adapter never inspects or generates it.
"""
from __future__ import annotations

import math
from typing import Any, Dict
from urllib.parse import quote

from ..bridge import ParsedBody, RequestSpec, parse_json_or_raw
from ..modes import Tier
from ..schemas import (
    AgentMessageArguments,
    PaidArguments,
    PaymentProcessArguments,
    PayrollLookupArguments,
)
from . import catalog_tool

DEFAULT_PAYMENT_DESCRIPTION = "SnowRail MCP payment"


def to_minor_units(amount: float) -> int:
    """Convert a decimal amount to integer cents, rounding half up."""

    return int(math.floor(amount * 100 + 0.5))


def _payment_headers(args: PaidArguments) -> Dict[str, str]:
    return {"X-PAYMENT": args.x_payment}


@catalog_tool(
    "snowrail_payroll_execute",
    tier=Tier.CORE,
    arguments=PaidArguments,
    description="Execute the demo payroll (POST /api/payroll/execute), x402-protected.",
)
def payroll_execute(args: PaidArguments) -> RequestSpec:
    return args.request("/api/payroll/execute", "POST", headers=_payment_headers(args), body={})


@catalog_tool(
    "snowrail_payroll_get_by_id",
    tier=Tier.CORE,
    arguments=PayrollLookupArguments,
    description="Fetch a payroll by id (GET /api/payroll/{id}).",
)
def payroll_get_by_id(args: PayrollLookupArguments) -> RequestSpec:
    return args.request(f"/api/payroll/{quote(args.payroll_id, safe='')}")


def build_customer(args: PaymentProcessArguments) -> Dict[str, Any]:
    customer: Dict[str, Any] = {
        "first_name": args.first_name,
        "last_name": args.last_name,
        "email_address": args.recipient_email,
    }
    if args.telephone is not None:
        customer["telephone_number"] = args.telephone
    customer["mailing_address"] = {
        "address_line1": args.address_line1,
        "city": args.city,
        "state": args.state,
        "postal_code": args.postal_code,
        "country_code": args.country_code,
    }
    return customer


def build_payment_body(args: PaymentProcessArguments) -> Dict[str, Any]:
    return {
        "recipient": args.recipient_email,
        "amount": args.amount,
        "currency": args.currency,
        "customer": build_customer(args),
        "payment": {
            "amount": to_minor_units(args.amount),
            "currency": args.currency,
            "recipient": args.recipient_email,
            "description": args.description if args.description is not None else DEFAULT_PAYMENT_DESCRIPTION,
        },
    }


@catalog_tool(
    "snowrail_payment_process",
    tier=Tier.CORE,
    arguments=PaymentProcessArguments,
    description="Process a fiat payment to a recipient (POST /api/payment/process), x402-protected.",
)
def payment_process(args: PaymentProcessArguments) -> RequestSpec:
    return args.request(
        "/api/payment/process",
        "POST",
        headers=_payment_headers(args),
        body=build_payment_body(args),
    )


@catalog_tool(
    "snowrail_treasury_test",
    tier=Tier.CORE,
    arguments=PaidArguments,
    description="Run the treasury test flow (POST /api/treasury/test), x402-protected.",
)
def treasury_test(args: PaidArguments) -> RequestSpec:
    return args.request("/api/treasury/test", "POST", headers=_payment_headers(args), body={})


def build_agent_message(args: AgentMessageArguments) -> Dict[str, Any]:
    parsed = parse_json_or_raw(args.message_payload)
    payload = parsed.value if isinstance(parsed, ParsedBody) else parsed.text
    message: Dict[str, Any] = {"type": args.message_type, "payload": payload}
    if args.agent_id:
        agent: Dict[str, Any] = {"id": args.agent_id}
        if args.agent_name:
            agent["name"] = args.agent_name
        message["agent"] = agent
    return message


@catalog_tool(
    "snowrail_process_a2a",
    tier=Tier.CORE,
    arguments=AgentMessageArguments,
    description="Send an agent-to-agent message (POST /process), x402-protected.",
)
def process_a2a(args: AgentMessageArguments) -> RequestSpec:
    return args.request(
        "/process",
        "POST",
        headers=_payment_headers(args),
        body={"message": build_agent_message(args)},
    )


__all__ = [
    "build_agent_message",
    "build_customer",
    "build_payment_body",
    "payment_process",
    "payroll_execute",
    "payroll_get_by_id",
    "process_a2a",
    "to_minor_units",
    "treasury_test",
]
