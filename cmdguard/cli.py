from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import IO, Any, Dict, List, Optional, Sequence

from cmdguard.guards.destructive import DestructiveCommandGuard
from cmdguard.hooks.output import HOOK_EVENT_NAME
from cmdguard.hooks.runner import run_hook
from cmdguard.settings import GuardSettings, load_settings
from cmdguard.telemetry.logging import configure_logging

log = logging.getLogger("cmdguard.cli")

DEFAULT_HOOK_COMMAND = "cmdguard hook"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cmdguard",
        description="Deny recursive forced removals of dangerous paths proposed by an AI agent.",
    )
    sub = parser.add_subparsers(dest="cmd")

    sub.add_parser("hook", help="read a hook payload on stdin and print a deny decision if needed")

    check = sub.add_parser("check", help="evaluate a command string given on the command line")
    check.add_argument("command", nargs="+", help="command text; quote it or pass it after --")

    cfg = sub.add_parser("hook-config", help="print a settings snippet registering the hook")
    cfg.add_argument("--command", default=DEFAULT_HOOK_COMMAND)
    cfg.add_argument("--matcher", default="Bash")
    return parser


def _hook(stdin: IO[Any], stdout: IO[str], settings: GuardSettings) -> int:
    try:
        # Bytes when available so undecodable input fails open in the parser.
        raw = stdin.buffer.read() if hasattr(stdin, "buffer") else stdin.read()
        rendered = run_hook(raw, settings)
    except Exception:  # the hook fails open on anything unexpected
        log.exception("guard failed; allowing")
        return 0
    if rendered is not None:
        stdout.write(rendered + "\n")
        stdout.flush()
    return 0


def _check(command: str, stdout: IO[str]) -> int:
    decision = DestructiveCommandGuard().evaluate(command)
    if decision["action"] == "deny":
        details = decision["details"]
        stdout.write(
            f"deny: {decision['reason']} (flags={details['flags']} target={details['target']})\n"
        )
        return 1
    stdout.write("allow\n")
    return 0


def hook_config(command: str = DEFAULT_HOOK_COMMAND, matcher: str = "Bash") -> Dict[str, Any]:
    return {
        "hooks": {
            HOOK_EVENT_NAME: [
                {
                    "matcher": matcher,
                    "hooks": [{"type": "command", "command": command}],
                }
            ]
        }
    }


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    settings = load_settings()
    configure_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    if args.cmd == "check":
        words: List[str] = args.command
        return _check(" ".join(words), stdout)
    if args.cmd == "hook-config":
        stdout.write(json.dumps(hook_config(args.command, args.matcher), indent=2) + "\n")
        return 0
    return _hook(stdin, stdout, settings)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
