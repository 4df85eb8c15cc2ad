#!/usr/bin/env python3
"""
Quick start example for the tool-call gate.

This script wires a toy security coach and one plugin hook into the gate,
wraps a shell tool, and shows an allowed, a rewritten and a blocked call.
"""

import asyncio

from tool_gate import (
    AgentTool,
    CapabilityRegistry,
    HookContext,
    ToolBlockedError,
    init_tool_gate,
    wrap_tool_with_gate,
)
from tool_gate.hooks import HookStage


class DenyRmCoach:
    """Toy coach: blocks anything that looks like a recursive delete."""

    async def before_tool_call(self, event):
        command = event["params"].get("cmd", "")
        if "rm -rf" in command:
            return {"block": True, "blockReason": "Security Coach: recursive delete"}
        return None


def verbose_listing(event, ctx):
    """Plugin hook: always list in long format."""
    if event.tool_name == "exec" and event.params.get("cmd") == "ls":
        return {"params": {"cmd": "ls -la"}}
    return None


async def run_shell(tool_call_id, params, signal, on_update):
    return f"[{tool_call_id}] would run: {params['cmd']}"


async def main():
    registry = CapabilityRegistry()
    gate = init_tool_gate(DenyRmCoach(), registry=registry, setup_logging=True)
    registry.hook_runner.register(HookStage.BEFORE_TOOL_CALL, verbose_listing, plugin_id="demo")

    tool = wrap_tool_with_gate(
        AgentTool(name="Bash", description="Run a shell command", execute=run_shell),
        ctx=HookContext(agent_id="main", session_key="cli:demo"),
        gate=gate,
    )

    print(await tool.execute("call-1", {"cmd": "pwd"}, None, None))
    print(await tool.execute("call-2", {"cmd": "ls"}, None, None))
    try:
        await tool.execute("call-3", {"cmd": "rm -rf /"}, None, None)
    except ToolBlockedError as e:
        print(f"blocked: {e}")


if __name__ == "__main__":
    asyncio.run(main())
