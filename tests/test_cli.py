from __future__ import annotations

import json
import os
import subprocess
import sys

import pytest

from snowrail_mcp.__main__ import parse_tool_arguments


PYTHONPATH = os.pathsep.join(filter(None, [os.environ.get("PYTHONPATH"), os.path.abspath("src")]))


def run_cli(*args: str, **env_overrides: str) -> subprocess.CompletedProcess[str]:
    env = {key: value for key, value in os.environ.items() if not key.startswith("SNOWRAIL_")}
    env["PYTHONPATH"] = PYTHONPATH
    env.update(env_overrides)
    cmd = [sys.executable, "-m", "snowrail_mcp", *args]
    return subprocess.run(cmd, check=False, capture_output=True, text=True, env=env)


@pytest.mark.parametrize(
    "mode, count",
    [("core", 11), ("advanced", 14), ("internal", 19)],
)
def test_list_tools_by_mode(mode, count):
    result = run_cli("list-tools", SNOWRAIL_MCP_MODE=mode)
    assert result.returncode == 0, result.stderr
    names = json.loads(result.stdout.strip())
    assert len(names) == count


def test_invalid_mode_is_a_startup_error():
    result = run_cli("list-tools", SNOWRAIL_MCP_MODE="superuser")
    assert result.returncode == 2
    assert "Invalid configuration" in result.stderr


def test_run_tool_validation_error():
    result = run_cli("run-tool", "snowrail_payroll_execute")
    assert result.returncode == 1
    payload = json.loads(result.stdout.strip())
    assert payload["status"] == "error"
    assert payload["error"]["type"] == "ValidationError"


def test_run_tool_unknown():
    result = run_cli("run-tool", "missing")
    assert result.returncode == 1
    payload = json.loads(result.stdout.strip())
    assert payload["status"] == "error"
    assert payload["error"]["type"] == "ToolNotFound"


@pytest.mark.parametrize(
    "tokens, expected",
    [
        (["--xPayment", "demo-token"], {"xPayment": "demo-token"}),
        (["--amount", "19.99"], {"amount": 19.99}),
        (["--xPayment=demo-token", "--amount=5"], {"xPayment": "demo-token", "amount": 5}),
        (["--messagePayload={\"a\": 1}"], {"messagePayload": {"a": 1}}),
        (["--baseUrl=http://localhost:9999/x=y"], {"baseUrl": "http://localhost:9999/x=y"}),
    ],
)
def test_parse_tool_arguments(tokens, expected):
    assert parse_tool_arguments(tokens) == expected


@pytest.mark.parametrize("tokens", [["--xPayment"], ["demo-token"], ["--"], ["--=value"]])
def test_parse_tool_arguments_rejects_malformed_tokens(tokens):
    with pytest.raises(ValueError):
        parse_tool_arguments(tokens)


def test_run_tool_reports_malformed_arguments():
    result = run_cli("run-tool", "snowrail_health", "--environment")
    assert result.returncode == 2
    payload = json.loads(result.stdout.strip())
    assert payload["error"]["type"] == "InvalidParameters"
