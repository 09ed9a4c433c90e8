"""Agent-runtime hook protocol: payload parsing, decision rendering, and the pipeline."""

from .output import HOOK_EVENT_NAME, render_hook_output
from .payload import HookPayload, ToolInput, command_from_payload, parse_payload
from .runner import run_hook

__all__ = [
    "HOOK_EVENT_NAME",
    "HookPayload",
    "ToolInput",
    "command_from_payload",
    "parse_payload",
    "render_hook_output",
    "run_hook",
]
