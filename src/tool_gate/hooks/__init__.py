"""Third-party hook system for the tool call lifecycle.

Usage:
    runner = HookRunner()
    runner.register(HookStage.BEFORE_TOOL_CALL, my_hook, plugin_id="my-plugin")

    # A hook receives (event, ctx) and returns None, a HookResult, or a
    # mapping such as {"block": True, "blockReason": "..."} or
    # {"params": {"cmd": "ls -la"}}. Sync and async hooks are both accepted.
"""

from .models import BeforeToolCallEvent, HookResult, HookStage, RegisteredHook
from .runner import HookRunner

__all__ = [
    "HookRunner",
    "HookStage",
    "HookResult",
    "BeforeToolCallEvent",
    "RegisteredHook",
]
