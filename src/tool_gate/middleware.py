"""FastMCP middleware that runs the tool-call gate for every tools/call."""

from typing import Any, Optional

from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import Middleware, MiddlewareContext
from loguru import logger

from .context import build_hook_context
from .gate import ToolCallGate


class ToolGateMiddleware(Middleware):
    """
    Enforce the tool-call gate at the MCP boundary.

    Enforcement paths:
    - Blocked: log, raise ToolError, the tool is never called
    - Allowed: call the tool, with hook-rewritten arguments if any
    """

    def __init__(self, gate: Optional[ToolCallGate] = None):
        self._gate = gate if gate is not None else ToolCallGate()

    async def on_call_tool(self, context: MiddlewareContext, call_next) -> Any:
        """
        Intercept tool calls and run the gate.

        Raises:
            ToolError: If the gate blocks the call
        """
        tool_name = context.message.name
        arguments = context.message.arguments or {}
        hook_ctx = build_hook_context(context.fastmcp_context, tool_name)

        decision = await self._gate.evaluate(tool_name, arguments, ctx=hook_ctx)
        if decision.blocked:
            logger.warning(f"Tool call denied: tool={tool_name} reason={decision.reason}")
            raise ToolError(decision.reason)

        if decision.params is not arguments:
            context.message.arguments = dict(decision.params)

        return await call_next(context)
