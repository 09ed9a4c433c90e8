from __future__ import annotations

import logging

import pytest

from cmdguard.guards import (
    DENY_REASON,
    DestructiveCommandGuard,
    GuardException,
    allow_decision,
    deny_decision,
)


def test_deny_decision_shape():
    decision = DestructiveCommandGuard().evaluate("rm -rf /")
    assert decision["action"] == "deny"
    assert decision["reason"] == DENY_REASON
    assert decision["reason"] == "blocked by conservative policy: destructive removal target"
    assert decision["details"] == {"flags": "-rf", "target": "/"}


def test_allow_decision_shape():
    decision = DestructiveCommandGuard().evaluate("ls -la /")
    assert decision == allow_decision()
    assert decision["reason"] == ""


def test_empty_command_is_allowed():
    assert DestructiveCommandGuard().evaluate("")["action"] == "allow"


def test_evaluate_is_idempotent():
    guard = DestructiveCommandGuard()
    first = guard.evaluate("rm -rf ~")
    second = guard.evaluate("rm -rf ~")
    assert first == second
    assert DestructiveCommandGuard().evaluate("rm -rf ~") == first


def test_non_string_command_raises_guard_exception():
    with pytest.raises(GuardException):
        DestructiveCommandGuard().evaluate(None)  # type: ignore[arg-type]


def test_deny_is_logged_with_context(caplog):
    caplog.set_level(logging.INFO, logger="cmdguard")
    DestructiveCommandGuard().evaluate("rm -rf $PWD")
    records = [r for r in caplog.records if r.getMessage() == "destructive removal denied"]
    assert len(records) == 1
    assert records[0].component == "destructive_guard"
    assert records[0].target == "$PWD"


def test_deny_decision_helper_copies_details():
    details = {"flags": "-rf"}
    decision = deny_decision("nope", **details)
    details["flags"] = "changed"
    assert decision["details"] == {"flags": "-rf"}
