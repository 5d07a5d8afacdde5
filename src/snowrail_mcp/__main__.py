"""Command line interface for the SnowRail MCP adapter."""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, Iterable

from pydantic import ValidationError

from common.config import AppSettings
from common.logging import configure_logging, get_logger

from . import core
from .registry import build_registry


def parse_tool_arguments(tokens: Iterable[str]) -> Dict[str, Any]:
    """Turn ``--name value`` or ``--name=value`` tokens into tool arguments.

    Names are passed through unchanged, so the camelCase argument names of
    the tools work as-is (``--xPayment demo-token``). Values that parse as
    JSON are decoded; anything else is kept as text.
    """

    arguments: Dict[str, Any] = {}
    remaining = iter(tokens)
    for token in remaining:
        if not token.startswith("--") or token == "--":
            raise ValueError(f"Expected a --name option, got '{token}'")
        name, sep, value = token[2:].partition("=")
        if not name:
            raise ValueError(f"Missing argument name in '{token}'")
        if not sep:
            value = next(remaining, None)
            if value is None:
                raise ValueError(f"Missing value for argument '{token}'")
        arguments[name] = _json_or_text(value)
    return arguments


def _json_or_text(value: str) -> Any:
    try:
        return json.loads(value)
    except ValueError:
        return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SnowRail MCP adapter")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("serve", help="Serve the MCP protocol over stdio (default)")

    http_parser = subparsers.add_parser("serve-http", help="Serve the tool runner over HTTP")
    http_parser.add_argument("--host", default="127.0.0.1")
    http_parser.add_argument("--port", type=int, default=8000)

    subparsers.add_parser("list-tools", help="Print the tools enabled by the current mode")

    run_parser = subparsers.add_parser("run-tool", help="Execute a registered tool")
    run_parser.add_argument("tool", help="Name of the tool to execute")
    run_parser.add_argument("tool_args", nargs=argparse.REMAINDER, help="Tool-specific parameters")

    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        settings = AppSettings()
    except ValidationError as exc:
        configure_logging()
        get_logger("snowrail_mcp").error("Invalid configuration: %s", exc)
        return 2

    configure_logging(settings.log_level)
    logger = get_logger("snowrail_mcp")

    command = args.command or "serve"

    if command == "serve":
        from .server import run

        try:
            asyncio.run(run(settings))
        except Exception:
            logger.exception("SnowRail MCP server failed to start")
            return 1
        return 0

    if command == "serve-http":
        import uvicorn

        from .http import create_app

        uvicorn.run(create_app(settings), host=args.host, port=args.port)
        return 0

    registry = build_registry(settings)

    if command == "list-tools":
        print(json.dumps(registry.names()), file=sys.stdout)
        return 0

    if command == "run-tool":
        try:
            parameters = parse_tool_arguments(args.tool_args)
        except ValueError as exc:
            print(json.dumps({
                "status": "error",
                "error": {
                    "type": "InvalidParameters",
                    "message": str(exc),
                },
            }), file=sys.stdout)
            return 2

        response = core.run_tool(registry, args.tool, parameters)
        print(json.dumps(response), file=sys.stdout)
        return 0 if response.get("status") == "success" else 1

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
