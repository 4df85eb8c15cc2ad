"""Hook context helpers for MCP tool invocation."""

from typing import Any, Optional

from .models import HookContext


def build_hook_context(ctx: Any, tool_name: Optional[str] = None) -> HookContext:
    """Build a HookContext from a FastMCP Context (or None)."""
    request_context = getattr(ctx, "request_context", None)

    agent_id = getattr(request_context, "agent_id", None) or getattr(ctx, "agent_id", None)

    session_value = getattr(ctx, "session_id", None)
    session_key = str(session_value) if session_value is not None else None

    return HookContext(
        tool_name=tool_name,
        agent_id=agent_id if isinstance(agent_id, str) else None,
        session_key=session_key,
    )
