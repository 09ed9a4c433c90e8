"""Guard abstractions for command screening."""

from .base import GuardDecision, GuardException, allow_decision, deny_decision
from .destructive import DENY_REASON, DestructiveCommandGuard, RmMatch, find_destructive_rm

__all__ = [
    "DENY_REASON",
    "DestructiveCommandGuard",
    "GuardDecision",
    "GuardException",
    "RmMatch",
    "allow_decision",
    "deny_decision",
    "find_destructive_rm",
]
