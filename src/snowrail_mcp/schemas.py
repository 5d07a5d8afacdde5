"""Pydantic models for tool arguments and the HTTP API."""
from __future__ import annotations

from typing import Annotated, Any, Dict, Mapping, Optional

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, EmailStr, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from common.config import Environment

from .bridge import RequestSpec

_URL_ADAPTER = TypeAdapter(AnyUrl)
_EMAIL_ADAPTER = TypeAdapter(EmailStr)

# Largest amount whose minor-unit value stays an exactly representable integer.
MAX_AMOUNT = 1e13


def _check_url(value: str) -> str:
    # Validate only; the caller's spelling is kept so paths concatenate as given.
    _URL_ADAPTER.validate_python(value)
    return value


def _check_email(value: str) -> str:
    # Validate only; the address is forwarded exactly as the caller wrote it.
    _EMAIL_ADAPTER.validate_python(value)
    return value


UrlStr = Annotated[str, AfterValidator(_check_url), Field(json_schema_extra={"format": "uri"})]
CountryCode = Annotated[str, Field(min_length=2, max_length=2, description="ISO 3166-1 alpha-2 country code")]
Password = Annotated[str, Field(min_length=8)]
Email = Annotated[str, AfterValidator(_check_email), Field(json_schema_extra={"format": "email"})]

X_PAYMENT_DESCRIPTION = "X-PAYMENT header (demo-token or EIP-3009 authorization)"
JWT_DESCRIPTION = "JWT returned by snowrail_auth_login or snowrail_auth_signup"


class ToolArguments(BaseModel):
    """Arguments shared by every tool: target environment and base URL."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    environment: Optional[Environment] = Field(
        default=None,
        description="Target environment: development, staging or production.",
    )
    base_url: Optional[UrlStr] = Field(
        default=None,
        description="Explicit API base URL; wins over environment.",
    )

    def request(
        self,
        path: str,
        method: str = "GET",
        *,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> RequestSpec:
        """Build a request spec carrying this call's environment selection."""

        return RequestSpec(
            path=path,
            method=method,
            headers=dict(headers or {}),
            body=body,
            environment=self.environment,
            base_url_override=self.base_url,
        )


class PaidArguments(ToolArguments):
    x_payment: str = Field(description=X_PAYMENT_DESCRIPTION)


class PayrollLookupArguments(ToolArguments):
    payroll_id: str = Field(description="Payroll identifier, e.g. pay_xxx")


class PaymentProcessArguments(PaidArguments):
    recipient_email: Email
    amount: float = Field(
        gt=0,
        le=MAX_AMOUNT,
        strict=True,
        allow_inf_nan=False,
        description="Amount in fiat currency, e.g. 100.0",
    )
    currency: str = "USD"
    first_name: str
    last_name: str
    telephone: Optional[str] = None
    address_line1: str
    city: str
    state: str
    postal_code: str
    country_code: CountryCode
    description: Optional[str] = None


class AgentMessageArguments(PaidArguments):
    message_type: str = Field(description="Message type, e.g. 'payroll_request'")
    message_payload: str = Field(description="Message payload as a JSON string")
    agent_id: Optional[str] = Field(default=None, description="Sending agent id")
    agent_name: Optional[str] = Field(default=None, description="Sending agent name")


class FacilitatorValidateArguments(ToolArguments):
    payment: str = Field(description="x402 payment token to validate")


class FacilitatorVerifyArguments(ToolArguments):
    from_: str = Field(alias="from", description="Signer address")
    to: str = Field(description="Recipient address")
    value: str = Field(description="Transfer value")
    valid_after: str = Field(description="Signature valid after this timestamp")
    valid_before: str = Field(description="Signature valid before this timestamp")
    nonce: str = Field(description="Unique signature nonce")
    signature: str = Field(description="Full EIP-3009 signature")


class FacilitatorSettleArguments(ToolArguments):
    payment_proof: str = Field(description="x402 payment proof")
    meter_id: str = Field(description="Associated meter id")


class X402CallbackArguments(ToolArguments):
    callback_secret: Optional[str] = Field(default=None, description="X-Callback-Secret header")
    payment_intent_id: str = Field(description="Payment intent id")
    token: str = Field(description="Payment token")
    amount: str = Field(description="Payment amount")
    tx_hash: str = Field(description="On-chain transaction hash")
    timestamp: Optional[str] = Field(default=None, description="Callback timestamp")


class SignupArguments(ToolArguments):
    email: Email
    password: Password
    company_legal_name: str
    country: CountryCode = "US"


class LoginArguments(ToolArguments):
    email: Email
    password: Password


class BearerArguments(ToolArguments):
    jwt_token: str = Field(description=JWT_DESCRIPTION)


class ToolCallRequest(BaseModel):
    """Request payload describing a tool invocation."""

    tool: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


class ToolSummary(BaseModel):
    name: str
    tier: str
    description: str
    input_schema: Dict[str, Any]


__all__ = [
    "AgentMessageArguments",
    "BearerArguments",
    "FacilitatorSettleArguments",
    "FacilitatorValidateArguments",
    "FacilitatorVerifyArguments",
    "LoginArguments",
    "PaidArguments",
    "PaymentProcessArguments",
    "PayrollLookupArguments",
    "SignupArguments",
    "ToolArguments",
    "ToolCallRequest",
    "ToolSummary",
    "X402CallbackArguments",
]
