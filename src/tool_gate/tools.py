"""Wrap agent tools so every execution passes the tool-call gate."""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Iterable, Optional

from loguru import logger

from .errors import ToolBlockedError
from .gate import ToolCallGate
from .models import HookContext
from .naming import FALLBACK_TOOL_NAME

# execute(tool_call_id, params, signal, on_update)
ToolExecute = Callable[[str, Any, Any, Optional[Callable[..., Any]]], Awaitable[Any]]


@dataclass(frozen=True)
class AgentTool:
    """
    A tool as exposed to the agent loop.

    Tools without ``execute`` are data-only and are never wrapped.
    """

    name: str
    description: str = ""
    parameters: dict[str, Any] = field(default_factory=dict)
    execute: Optional[ToolExecute] = None


def wrap_tool_with_gate(
    tool: AgentTool,
    ctx: Optional[HookContext] = None,
    gate: Optional[ToolCallGate] = None,
) -> AgentTool:
    """
    Return a copy of ``tool`` whose ``execute`` runs the gate first.

    Blocked calls raise ToolBlockedError and never touch the underlying
    execute, the cancellation signal or the progress callback. Allowed
    calls forward ``signal`` and ``on_update`` untouched.
    """
    execute = tool.execute
    if execute is None:
        return tool

    tool_name = tool.name or FALLBACK_TOOL_NAME
    active_gate = gate if gate is not None else ToolCallGate()

    async def gated_execute(
        tool_call_id: str,
        params: Any,
        signal: Any = None,
        on_update: Optional[Callable[..., Any]] = None,
    ) -> Any:
        decision = await active_gate.evaluate(
            tool_name, params, tool_call_id=tool_call_id, ctx=ctx
        )
        if decision.blocked:
            logger.debug(f"Tool {tool_name} blocked before execution: {decision.reason}")
            raise ToolBlockedError(decision.reason, tool_name=tool_name)
        return await execute(tool_call_id, decision.params, signal, on_update)

    return dataclasses.replace(tool, execute=gated_execute)


def wrap_tools(
    tools: Iterable[AgentTool],
    ctx: Optional[HookContext] = None,
    gate: Optional[ToolCallGate] = None,
) -> list[AgentTool]:
    """Wrap every executable tool in ``tools`` with the gate."""
    return [wrap_tool_with_gate(tool, ctx=ctx, gate=gate) for tool in tools]
