"""Base URL resolution across SnowRail environments."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Union

from common.config import AppSettings, Environment

from .errors import ConfigurationError

BASE_URLS: Mapping[Environment, str] = MappingProxyType(
    {
        Environment.DEVELOPMENT: "http://localhost:4000",
        Environment.STAGING: "https://staging-api.snowrail.xyz",
        Environment.PRODUCTION: "https://api.snowrail.xyz",
    }
)


def _coerce_environment(value: Union[Environment, str]) -> Optional[Environment]:
    if isinstance(value, Environment):
        return value
    try:
        return Environment(value)
    except ValueError:
        return None


def resolve_base_url(
    environment: Union[Environment, str, None] = None,
    base_url_override: Optional[str] = None,
    *,
    settings: AppSettings,
) -> str:
    """Return the API base URL for a call.

    Precedence, highest first: the per-call override, ``SNOWRAIL_API_BASE``,
    the table entry for ``environment`` (or the configured default
    environment), then the table entry for the configured default
    environment when ``environment`` has none. Raises
    :class:`ConfigurationError` when none yields a URL.
    """

    if base_url_override:
        return base_url_override

    if settings.api_base:
        return settings.api_base

    selected = environment if environment is not None else settings.env
    resolved = _coerce_environment(selected)
    url = BASE_URLS.get(resolved) if resolved is not None else None
    if not url:
        # Unknown or unmapped environment: use the configured default one.
        url = BASE_URLS.get(settings.env)
    if not url:
        raise ConfigurationError(
            f"SnowRail API base URL not configured for environment {selected!r}. "
            "Set SNOWRAIL_ENV or SNOWRAIL_API_BASE, or pass baseUrl."
        )
    return url


__all__ = ["BASE_URLS", "resolve_base_url"]
