"""Render guard decisions in the agent runtime's hook output format."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from cmdguard.guards.base import GuardDecision

HOOK_EVENT_NAME = "PreToolUse"


def hook_document(decision: GuardDecision) -> Optional[Dict[str, Any]]:
    # Allow is signalled by silence.
    if decision["action"] != "deny":
        return None
    return {
        "hookSpecificOutput": {
            "hookEventName": HOOK_EVENT_NAME,
            "permissionDecision": "deny",
            "permissionDecisionReason": decision["reason"],
        }
    }


def render_hook_output(decision: GuardDecision) -> Optional[str]:
    document = hook_document(decision)
    if document is None:
        return None
    return json.dumps(document, ensure_ascii=False)


__all__ = ["HOOK_EVENT_NAME", "hook_document", "render_hook_output"]
