"""The hook pipeline: parse the payload, evaluate the command, render the decision."""

from __future__ import annotations

from typing import Optional

from cmdguard.guards.base import CommandGuard
from cmdguard.guards.destructive import DestructiveCommandGuard
from cmdguard.settings import GuardSettings

from .output import render_hook_output
from .payload import command_from_payload


def run_hook(
    raw: str | bytes,
    settings: GuardSettings,
    *,
    guard: Optional[CommandGuard] = None,
) -> Optional[str]:
    """Return the deny document for ``raw``, or None when the command is allowed."""
    if not settings.ENABLED:
        return None
    command = command_from_payload(raw)
    decision = (guard or DestructiveCommandGuard()).evaluate(command)
    return render_hook_output(decision)


__all__ = ["run_hook"]
