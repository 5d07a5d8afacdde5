"""Low-level x402 facilitator primitives (advanced mode)."""
from __future__ import annotations

from ..bridge import RequestSpec
from ..modes import Tier
from ..schemas import (
    FacilitatorSettleArguments,
    FacilitatorValidateArguments,
    FacilitatorVerifyArguments,
)
from . import catalog_tool


@catalog_tool(
    "snowrail_facilitator_validate",
    tier=Tier.ADVANCED,
    arguments=FacilitatorValidateArguments,
    description="Validate an x402 payment token (POST /facilitator/validate).",
)
def facilitator_validate(args: FacilitatorValidateArguments) -> RequestSpec:
    return args.request("/facilitator/validate", "POST", body={"payment": args.payment})


@catalog_tool(
    "snowrail_facilitator_verify",
    tier=Tier.ADVANCED,
    arguments=FacilitatorVerifyArguments,
    description="Verify an EIP-3009 transfer authorization (POST /facilitator/verify).",
)
def facilitator_verify(args: FacilitatorVerifyArguments) -> RequestSpec:
    body = {
        "from": args.from_,
        "to": args.to,
        "value": args.value,
        "validAfter": args.valid_after,
        "validBefore": args.valid_before,
        "nonce": args.nonce,
        "signature": args.signature,
    }
    return args.request("/facilitator/verify", "POST", body=body)


@catalog_tool(
    "snowrail_facilitator_settle",
    tier=Tier.ADVANCED,
    arguments=FacilitatorSettleArguments,
    description="Settle an x402 payment proof against a meter (POST /facilitator/settle).",
)
def facilitator_settle(args: FacilitatorSettleArguments) -> RequestSpec:
    return args.request(
        "/facilitator/settle",
        "POST",
        body={"paymentProof": args.payment_proof, "meterId": args.meter_id},
    )


__all__ = ["facilitator_settle", "facilitator_validate", "facilitator_verify"]
