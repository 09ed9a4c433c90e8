from __future__ import annotations

import logging

from cmdguard.settings import GuardSettings, load_settings


def test_defaults():
    s = load_settings()
    assert s.ENABLED is True
    assert s.LOG_LEVEL == "WARNING"
    assert s.LOG_JSON is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CMDGUARD_ENABLED", "0")
    monkeypatch.setenv("CMDGUARD_LOG_LEVEL", "debug")
    monkeypatch.setenv("CMDGUARD_LOG_JSON", "false")
    s = load_settings()
    assert s.ENABLED is False
    assert s.LOG_LEVEL == "debug"
    assert s.LOG_JSON is False


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("CMDGUARD_ENABLED=false\nUNRELATED=1\n", encoding="utf-8")
    assert GuardSettings().ENABLED is False


def test_invalid_values_fall_back_to_defaults(monkeypatch, caplog):
    monkeypatch.setenv("CMDGUARD_ENABLED", "banana")
    with caplog.at_level(logging.WARNING, logger="cmdguard"):
        s = load_settings()
    assert s.ENABLED is True
    assert s.LOG_LEVEL == "WARNING"
    assert any("invalid cmdguard settings" in r.getMessage() for r in caplog.records)


def test_undecodable_dotenv_falls_back_to_defaults(tmp_path, caplog):
    (tmp_path / ".env").write_bytes(b"CMDGUARD_ENABLED=false\nFOO=caf\xe9\n")
    with caplog.at_level(logging.WARNING, logger="cmdguard"):
        s = load_settings()
    assert s.ENABLED is True
    assert any("using defaults" in r.getMessage() for r in caplog.records)
