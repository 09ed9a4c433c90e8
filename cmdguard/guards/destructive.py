# cmdguard/guards/destructive.py
"""Destructive-removal guard.

Flags ``rm`` invocations whose single flag cluster combines recursive and
force semantics and whose target is the filesystem root, the home shorthand,
the current directory, or ``$PWD``. This is a syntactic heuristic over raw
text, not a shell parser: quoting, expansion and command substitution are
not resolved.

Split flag groups (``rm -r -f /``), long options (``--recursive --force``),
``--`` separators, absolute binary paths (``/bin/rm``) and globbed targets
(``/*``) do not match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Pattern, Tuple

from cmdguard.telemetry.logging import bind

from .base import GuardDecision, GuardException, allow_decision, deny_decision

DENY_REASON = "blocked by conservative policy: destructive removal target"

DANGEROUS_TARGETS: Tuple[str, ...] = ("/", "~", ".", "$PWD")

# Characters that may open or close a command besides whitespace: separators,
# pipes, subshells and backtick substitution.
_LEADING = ";&|(`"
_TRAILING = ";&|)`"

_DESTRUCTIVE_RM: Pattern[str] = re.compile(
    rf"(?:^|(?<=[\s{_LEADING}]))"
    r"rm\s+"
    r"-(?P<flags>[A-Za-z]*(?:[rR][A-Za-z]*f|f[A-Za-z]*[rR])[A-Za-z]*)"
    r"\s+"
    r"(?P<target>" + "|".join(re.escape(t) for t in DANGEROUS_TARGETS) + r")"
    rf"(?=$|[\s{_TRAILING}])"
)


@dataclass(frozen=True)
class RmMatch:
    flags: str
    target: str
    start: int
    end: int

    @property
    def cluster(self) -> str:
        return f"-{self.flags}"


def find_destructive_rm(command: str) -> Optional[RmMatch]:
    """Return the first recursive forced ``rm`` of a dangerous target, if any."""
    if not command:
        return None
    m = _DESTRUCTIVE_RM.search(command)
    if m is None:
        return None
    return RmMatch(flags=m.group("flags"), target=m.group("target"), start=m.start(), end=m.end())


def is_destructive(command: str) -> bool:
    return find_destructive_rm(command) is not None


class DestructiveCommandGuard:
    """Deny recursive forced removals of root, home, cwd or ``$PWD``; allow everything else."""

    def __init__(self) -> None:
        self._log = bind(component="destructive_guard")

    def evaluate(self, command: str) -> GuardDecision:
        if not isinstance(command, str):
            raise GuardException(f"command must be a string, got {type(command).__name__}")
        match = find_destructive_rm(command)
        if match is None:
            return allow_decision()

        self._log.info(
            "destructive removal denied",
            extra={"flags": match.cluster, "target": match.target},
        )
        return deny_decision(DENY_REASON, flags=match.cluster, target=match.target)


__all__ = [
    "DANGEROUS_TARGETS",
    "DENY_REASON",
    "DestructiveCommandGuard",
    "RmMatch",
    "find_destructive_rm",
    "is_destructive",
]
