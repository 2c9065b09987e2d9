from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from typing import Any, Sequence

from .backend_client import BankingBackend, FakeBankingBackend
from .domain_types import ClientActionRequest
from .errors import BankChatError, ConfigurationError
from .http_backend_client import HttpBackendClient
from .logging_config import setup_logging
from .presenters import render_json, render_messages
from .workspace_actions import messages_to_dicts, normalize_workspace_actions


def _build_client() -> BankingBackend:
    base_url = os.getenv("BANK_CHAT_BASE_URL", "").strip()
    if not base_url:
        return FakeBankingBackend()
    return HttpBackendClient(base_url=base_url)


def _load_json(path: str | None, *, default: Any) -> Any:
    if path is None:
        return default
    try:
        if path == "-":
            return json.load(sys.stdin)
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Cannot read JSON from {path}: {exc}") from exc


def _parse_params(pairs: Sequence[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ConfigurationError(f"Invalid --param {pair!r}, expected KEY=VALUE")
        params[key] = value
    return params


def send_turn(client: BankingBackend, args: argparse.Namespace) -> None:
    context = _load_json(args.context_file, default={})
    if not isinstance(context, dict):
        raise ConfigurationError("Conversation context must be a JSON object")
    response = asyncio.run(client.send_turn(args.text, context))
    print(render_json(response))


def client_action(client: BankingBackend, args: argparse.Namespace) -> None:
    action = ClientActionRequest(name=args.name, parameters=_parse_params(args.param))
    response = asyncio.run(client.execute_client_action(action))
    if response is None:
        print(f"No client action for {args.name}")
        return
    print(render_json(response))


def normalize(args: argparse.Namespace) -> None:
    bag = _load_json(args.file or "-", default={})
    if not isinstance(bag, dict):
        raise ConfigurationError("Workspace actions must be a JSON object keyed by action name")
    messages = normalize_workspace_actions(bag)
    if args.json:
        print(render_json(messages_to_dicts(messages)))
    else:
        print(render_messages(messages))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bank-chat",
        description="Talk to the banking conversation backend. Uses an offline fake unless BANK_CHAT_BASE_URL is set.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    st = sub.add_parser("send-turn", help="Send one user message to /api/message")
    st.add_argument("--text", required=True)
    st.add_argument("--context-file", default=None, help="JSON file holding the conversation context ('-' for stdin)")

    ca = sub.add_parser("client-action", help="Execute a client action lookup")
    ca.add_argument("--name", required=True, help="ValidateAcc, RetrieveZip or ShowStatement")
    ca.add_argument("--param", action="append", default=[], help="Action parameter as KEY=VALUE (repeatable)")

    nm = sub.add_parser("normalize", help="Render a workspace action bag as chat messages")
    nm.add_argument("--file", default=None, help="JSON file with the action bag (default: stdin)")
    nm.add_argument("--json", action="store_true", help="Print UI message dicts instead of text")

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.command == "normalize":
            normalize(args)
            return 0
        client = _build_client()
        if args.command == "send-turn":
            send_turn(client, args)
        elif args.command == "client-action":
            client_action(client, args)
    except BankChatError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
