"""Command-line pre-start checks for the client tree, dotenv config and relay."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import requests
from dotenv import load_dotenv

from enemturbo.config import get_settings
from enemturbo.core.checks import (
    CLIENT_REQUIRED_FILES,
    DEFAULT_DISALLOWED_EXTENSIONS,
    DEFAULT_ROOT_SIBLING,
    Severity,
    check_env_file,
    check_required_files,
    find_root_sibling,
    scan_for_extensions,
)
from enemturbo.core.checks.env import DEFAULT_ENV_NAME, DEFAULT_EXAMPLE_NAME, DEFAULT_REQUIRED_KEY

load_dotenv(Path.cwd() / ".env")

CLIENT_ROOT = Path(__file__).resolve().parents[1] / "client"


def _err(message: str) -> None:
    print(message, file=sys.stderr)


def _cmd_extensions(args: argparse.Namespace) -> int:
    extensions = tuple(args.ext or DEFAULT_DISALLOWED_EXTENSIONS)
    result = scan_for_extensions(args.root, extensions)
    if result.kind == "error":
        _err(f"Scan failed: {result.reason}")
        return 2
    if result.kind == "found":
        _err(f"Found disallowed file in client: {result.path}")
        _err("Rename it or remove it; only plain JavaScript and templates are served.")
        return 1
    print(f"OK: no {'/'.join(extensions)} files found in {args.root}")
    return 0


def _cmd_root_file(args: argparse.Namespace) -> int:
    found = find_root_sibling(args.root, args.name)
    if found is not None:
        _err(f"Danger: found root-level {args.name} at: {found}")
        _err("A bundler or dev server may pick it up as the entrypoint.")
        return 1
    print(f"OK: no root-level {args.name} detected")
    return 0


def _cmd_structure(args: argparse.Namespace) -> int:
    report = check_required_files(args.root, args.require or CLIENT_REQUIRED_FILES)
    for item in report.items:
        if item.present:
            print(f"OK: {item.path}")
        else:
            _err(f"Missing required file: {item.path}")
    if not report.ok:
        return 2
    print("Client structure OK")
    return 0


def _cmd_env(args: argparse.Namespace) -> int:
    outcome = check_env_file(args.root, example=args.example, env=args.env, required_key=args.key)
    *leading, last = outcome.messages
    for message in leading:
        print(message)
    if outcome.severity is Severity.OK:
        print(last)
    else:
        _err(last)
    return outcome.exit_code


def _cmd_server(args: argparse.Namespace) -> int:
    url = args.url or f"http://localhost:{get_settings().port}/"
    try:
        response = requests.get(url, timeout=args.timeout)
    except requests.RequestException as exc:
        _err(f"Error connecting to server: {exc}")
        return 2
    try:
        body = response.json()
    except ValueError as exc:
        _err(f"Server response not JSON: {exc}")
        return 2
    if isinstance(body, dict) and body.get("ok") is True:
        print("Server test OK: received { ok: true }")
        return 0
    _err(f"Unexpected server response: {response.text}")
    return 2


def _cmd_all(args: argparse.Namespace) -> int:
    steps = (
        (_cmd_extensions, {"root": args.root, "ext": None}),
        (_cmd_root_file, {"root": args.root, "name": DEFAULT_ROOT_SIBLING}),
        (_cmd_structure, {"root": args.root, "require": None}),
        (
            _cmd_env,
            {
                "root": args.env_root,
                "example": DEFAULT_EXAMPLE_NAME,
                "env": DEFAULT_ENV_NAME,
                "key": DEFAULT_REQUIRED_KEY,
            },
        ),
    )
    first_failure = 0
    for handler, values in steps:
        code = handler(argparse.Namespace(**values))
        if code and not first_failure:
            first_failure = code
    return first_failure


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="enemturbo-check", description="ENEM Turbo pre-start checks")
    subparsers = parser.add_subparsers(dest="command", required=True)

    extensions = subparsers.add_parser("extensions", help="Fail if disallowed file extensions exist in the client")
    extensions.add_argument("--root", type=Path, default=CLIENT_ROOT)
    extensions.add_argument("--ext", action="append", help="Disallowed suffix (repeatable), default .ts and .tsx")
    extensions.set_defaults(func=_cmd_extensions)

    root_file = subparsers.add_parser("root-file", help="Fail if a stray file sits one level above the client root")
    root_file.add_argument("--root", type=Path, default=CLIENT_ROOT)
    root_file.add_argument("--name", default=DEFAULT_ROOT_SIBLING)
    root_file.set_defaults(func=_cmd_root_file)

    structure = subparsers.add_parser("structure", help="Check the client's required files exist")
    structure.add_argument("--root", type=Path, default=CLIENT_ROOT)
    structure.add_argument("--require", action="append", help="Required relative path (repeatable)")
    structure.set_defaults(func=_cmd_structure)

    env = subparsers.add_parser("env", help="Check .env.example/.env and the Stripe key")
    env.add_argument("--root", type=Path, default=Path.cwd())
    env.add_argument("--example", default=DEFAULT_EXAMPLE_NAME)
    env.add_argument("--env", default=DEFAULT_ENV_NAME)
    env.add_argument("--key", default=DEFAULT_REQUIRED_KEY)
    env.set_defaults(func=_cmd_env)

    server = subparsers.add_parser("server", help="Probe the relay server's liveness endpoint")
    server.add_argument("--url", default=None, help="Defaults to http://localhost:$PORT/")
    server.add_argument("--timeout", type=float, default=3.0)
    server.set_defaults(func=_cmd_server)

    all_cmd = subparsers.add_parser("all", help="Run every filesystem and config check")
    all_cmd.add_argument("--root", type=Path, default=CLIENT_ROOT)
    all_cmd.add_argument("--env-root", type=Path, default=Path.cwd())
    all_cmd.set_defaults(func=_cmd_all)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args) or 0)
    except Exception as exc:
        parser.exit(status=2, message=f"error: {exc}\n")


if __name__ == "__main__":
    raise SystemExit(main())
