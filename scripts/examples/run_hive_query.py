#!/usr/bin/env python3
"""
Run a single question through the Hive Intelligence plugin.

The API key is taken from ``--api-key``, then the ``[hive]`` section of
``.secrets/secret.toml``, then ``HIVE_API_KEY``. Without any key the plugin
answers in mocked mode; pass ``--strict`` to refuse that, or ``--verify`` to
only report which mode would be used.

Example usage::

    uv run python scripts/examples/run_hive_query.py \\
        "What is the current price of Ethereum?" --json
    uv run python scripts/examples/run_hive_query.py --verify
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from functools import partial
from typing import List

import anyio

from hive_intelligence import AdapterError, AgentMessage, HivePlugin, load_secrets
from hive_intelligence.core.logging import configure_logging


def build_plugin(api_key: str | None = None, *, strict: bool = False) -> HivePlugin:
    settings = load_secrets().hive
    if api_key:
        settings = replace(settings, api_key=api_key)

    plugin = HivePlugin()
    plugin.initialize(settings, strict=strict)
    return plugin


async def run_query(plugin: HivePlugin, question: str) -> dict[str, str]:
    message = AgentMessage(text=question, user_id="example-user", agent_id="example-agent", room_id="example-room")

    action = plugin.query_action
    if not action.validate(message):
        return {"error": "Question must not be empty."}
    result = await action.handle(message)
    return result.as_dict()


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Query Hive Intelligence through the agent plugin.")
    parser.add_argument("question", nargs="?", default="", help="Natural-language question about blockchain or market data.")
    parser.add_argument("--api-key", help="Override the Hive Intelligence API key.")
    parser.add_argument("--log-level", default=None, help="Logging level, e.g. DEBUG to show request diagnostics.")
    parser.add_argument("--json", action="store_true", help="Emit the result as JSON.")
    parser.add_argument("--verify", action="store_true", help="Report live or mocked mode and exit without querying.")
    parser.add_argument("--strict", action="store_true", help="Fail instead of falling back to mocked mode when no API key is set.")

    args = parser.parse_args(argv)
    configure_logging(args.log_level, force=args.log_level is not None)

    try:
        plugin = build_plugin(args.api_key, strict=args.strict)
    except AdapterError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    if args.verify:
        readiness = plugin.verify()
        if args.json:
            print(json.dumps({"success": readiness.success, "mode": readiness.mode, "message": readiness.message, "details": dict(readiness.details)}, indent=2))
        else:
            print(f"[{readiness.mode}] {readiness.message}")
        return 0 if readiness.success else 1

    if not args.question:
        parser.error("a question is required unless --verify is given.")

    payload = anyio.run(partial(run_query, plugin, args.question))

    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        print(payload.get("response") or payload.get("error"))
    return 0 if "response" in payload else 1


if __name__ == "__main__":
    sys.exit(main())
