"""Base guard definitions."""

from __future__ import annotations

from typing import Any, Dict, Literal, Protocol, TypedDict

Action = Literal["allow", "deny"]


class GuardDecision(TypedDict):
    """Structured decision emitted by command guards."""

    action: Action
    reason: str  # empty on allow
    details: Dict[str, Any]


class CommandGuard(Protocol):
    """Protocol implemented by command guards."""

    def evaluate(self, command: str) -> GuardDecision: ...


class GuardException(Exception):
    """Generic guard failure wrapper."""


def allow_decision() -> GuardDecision:
    return {"action": "allow", "reason": "", "details": {}}


def deny_decision(reason: str, **details: Any) -> GuardDecision:
    return {"action": "deny", "reason": reason, "details": dict(details)}


__all__ = [
    "Action",
    "CommandGuard",
    "GuardDecision",
    "GuardException",
    "allow_decision",
    "deny_decision",
]
