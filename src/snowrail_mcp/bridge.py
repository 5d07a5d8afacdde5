"""HTTP bridge forwarding tool calls to the SnowRail REST API."""
from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Union

from common.config import AppSettings, Environment

from .environment import resolve_base_url
from .errors import TransportError

LOGGER = logging.getLogger("snowrail_mcp.bridge")

DEFAULT_HEADERS: Mapping[str, str] = {"Content-Type": "application/json"}
NO_BODY_METHODS = frozenset({"GET", "HEAD"})


@dataclass(frozen=True)
class ParsedBody:
    """Response body that decoded as JSON (``None`` for an empty body)."""

    value: Any


@dataclass(frozen=True)
class RawBody:
    """Response body that is not valid JSON, kept verbatim."""

    text: str


Body = Union[ParsedBody, RawBody]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_json_or_raw(text: str) -> Body:
    """Parse ``text`` as strict JSON, falling back to the raw string.

    ``NaN`` and ``Infinity`` are not JSON; bodies using them stay raw.
    """

    if not text:
        return ParsedBody(None)
    try:
        return ParsedBody(json.loads(text, parse_constant=_reject_constant))
    except ValueError:
        return RawBody(text)


def body_value(body: Body) -> Any:
    if isinstance(body, RawBody):
        return body.text
    return body.value


@dataclass(frozen=True)
class RequestSpec:
    """A single backend call as shaped by a tool."""

    path: str
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None
    environment: Optional[Environment] = None
    base_url_override: Optional[str] = None


@dataclass(frozen=True)
class PreparedRequest:
    url: str
    method: str
    headers: Dict[str, str]
    data: Optional[bytes]


@dataclass(frozen=True)
class TransportResponse:
    status: int
    text: str


@dataclass(frozen=True)
class ResponseEnvelope:
    url: str
    status: int
    body: Body

    @property
    def data(self) -> Any:
        return body_value(self.body)

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url, "status": self.status, "data": self.data}


Transport = Callable[[PreparedRequest], TransportResponse]


def _decode(raw: bytes, charset: Optional[str]) -> str:
    return raw.decode(charset or "utf-8", errors="replace")


class UrllibTransport:
    """Send a prepared request with :mod:`urllib.request`.

    HTTP error statuses are returned as regular responses; only failures
    below the HTTP layer raise :class:`TransportError`.
    """

    def __call__(self, prepared: PreparedRequest) -> TransportResponse:
        try:
            request = urllib.request.Request(
                prepared.url,
                data=prepared.data,
                headers=prepared.headers,
                method=prepared.method,
            )
        except ValueError as exc:
            raise TransportError(f"Malformed URL: {prepared.url}", url=prepared.url) from exc

        try:
            with urllib.request.urlopen(request) as response:
                text = _decode(response.read(), response.headers.get_content_charset())
                return TransportResponse(status=response.status, text=text)
        except urllib.error.HTTPError as exc:
            text = _decode(exc.read(), exc.headers.get_content_charset())
            return TransportResponse(status=exc.code, text=text)
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise TransportError(f"Request to {prepared.url} failed: {exc}", url=prepared.url) from exc


class RequestBridge:
    """Resolve, send and normalize one backend request per call."""

    def __init__(self, settings: AppSettings, transport: Optional[Transport] = None) -> None:
        self.settings = settings
        self.transport: Transport = transport or UrllibTransport()

    def prepare(self, spec: RequestSpec) -> PreparedRequest:
        base_url = resolve_base_url(
            spec.environment,
            spec.base_url_override,
            settings=self.settings,
        )
        method = spec.method.upper()
        headers = {**DEFAULT_HEADERS, **spec.headers}
        data: Optional[bytes] = None
        if spec.body is not None and method not in NO_BODY_METHODS:
            data = json.dumps(spec.body).encode("utf-8")
        return PreparedRequest(url=f"{base_url}{spec.path}", method=method, headers=headers, data=data)

    def execute(self, spec: RequestSpec) -> ResponseEnvelope:
        prepared = self.prepare(spec)
        LOGGER.debug("%s %s", prepared.method, prepared.url)
        response = self.transport(prepared)
        LOGGER.info("%s %s -> %s", prepared.method, prepared.url, response.status)
        return ResponseEnvelope(
            url=prepared.url,
            status=response.status,
            body=parse_json_or_raw(response.text),
        )


__all__ = [
    "Body",
    "DEFAULT_HEADERS",
    "NO_BODY_METHODS",
    "ParsedBody",
    "PreparedRequest",
    "RawBody",
    "RequestBridge",
    "RequestSpec",
    "ResponseEnvelope",
    "Transport",
    "TransportResponse",
    "UrllibTransport",
    "body_value",
    "parse_json_or_raw",
]
