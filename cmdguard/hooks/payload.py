"""Typed view of the JSON document an agent runtime sends before a tool call."""

from __future__ import annotations

from typing import Optional

from pydantic import Field, ValidationError

from cmdguard.pydantic_base import AppBaseModel


class ToolInput(AppBaseModel):
    command: str = ""


class HookPayload(AppBaseModel):
    # Only the command is validated; every other key the runtime sends is ignored.
    tool_input: ToolInput = Field(default_factory=ToolInput)


def parse_payload(raw: str | bytes) -> Optional[HookPayload]:
    """Parse a hook payload; return None for empty, non-JSON or mistyped input."""
    if not raw or not raw.strip():
        return None
    try:
        return HookPayload.model_validate_json(raw)
    except ValidationError:
        return None


def command_from_payload(raw: str | bytes) -> str:
    payload = parse_payload(raw)
    if payload is None:
        return ""
    return payload.tool_input.command


__all__ = ["HookPayload", "ToolInput", "command_from_payload", "parse_payload"]
