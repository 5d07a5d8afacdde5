"""Shared fixtures for the SnowRail MCP test-suite."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import List

# Ensure the src/ directory is importable before other imports.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

import pytest

from common.config import AppSettings
from snowrail_mcp.bridge import PreparedRequest, RequestBridge, TransportResponse


class RecordingTransport:
    """Transport stub returning a canned response and recording requests."""

    def __init__(self, status: int = 200, text: str = '{"ok": true}') -> None:
        self.status = status
        self.text = text
        self.requests: List[PreparedRequest] = []

    def __call__(self, prepared: PreparedRequest) -> TransportResponse:
        self.requests.append(prepared)
        return TransportResponse(status=self.status, text=self.text)


def make_settings(**overrides) -> AppSettings:
    return AppSettings(_env_file=None, **overrides)


@pytest.fixture(autouse=True)
def _clear_snowrail_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SNOWRAIL_MCP_MODE", "SNOWRAIL_ENV", "SNOWRAIL_API_BASE", "SNOWRAIL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return make_settings()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def bridge(settings: AppSettings, transport: RecordingTransport) -> RequestBridge:
    return RequestBridge(settings, transport=transport)
