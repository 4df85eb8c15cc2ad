"""Tests for the FastMCP tool gate middleware."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastmcp.exceptions import ToolError

from fakes import FakeCoach
from tool_gate.context import build_hook_context
from tool_gate.gate import ToolCallGate
from tool_gate.hooks import HookRunner, HookStage
from tool_gate.middleware import ToolGateMiddleware
from tool_gate.models import HookContext
from tool_gate.registry import CapabilityRegistry


def _context(name="exec", arguments=None, session_id="session-123", agent_id=None):
    fastmcp_context = SimpleNamespace(
        session_id=session_id,
        request_context=SimpleNamespace(agent_id=agent_id),
    )
    return SimpleNamespace(
        message=SimpleNamespace(name=name, arguments=arguments),
        fastmcp_context=fastmcp_context,
    )


def _middleware(coach, runner=None) -> ToolGateMiddleware:
    registry = CapabilityRegistry(security_coach=coach, hook_runner=runner or HookRunner())
    return ToolGateMiddleware(ToolCallGate(registry))


class TestToolGateMiddleware:
    """Tests for ToolGateMiddleware.on_call_tool."""

    @pytest.mark.asyncio
    async def test_allowed_calls_next(self):
        context = _context(arguments={"cmd": "ls"})
        call_next = AsyncMock(return_value="result")

        result = await _middleware(FakeCoach(None)).on_call_tool(context, call_next)

        assert result == "result"
        call_next.assert_awaited_once_with(context)
        assert context.message.arguments == {"cmd": "ls"}

    @pytest.mark.asyncio
    async def test_blocked_raises_tool_error(self):
        context = _context(arguments={"cmd": "rm -rf /"})
        call_next = AsyncMock()
        coach = FakeCoach({"block": True, "blockReason": "Security Coach: destructive"})

        with pytest.raises(ToolError) as exc_info:
            await _middleware(coach).on_call_tool(context, call_next)

        assert "destructive" in str(exc_info.value)
        call_next.assert_not_called()

    @pytest.mark.asyncio
    async def test_uninitialized_coach_denies(self):
        call_next = AsyncMock()
        middleware = ToolGateMiddleware(ToolCallGate(CapabilityRegistry()))

        with pytest.raises(ToolError, match="not yet initialized"):
            await middleware.on_call_tool(_context(arguments={}), call_next)

        call_next.assert_not_called()

    @pytest.mark.asyncio
    async def test_rewritten_arguments_are_forwarded(self):
        runner = HookRunner()
        runner.register(HookStage.BEFORE_TOOL_CALL, lambda e, c: {"params": {"cmd": "ls -la"}})
        context = _context(arguments={"cmd": "ls"})
        call_next = AsyncMock(return_value="ok")

        await _middleware(FakeCoach(None), runner).on_call_tool(context, call_next)

        assert context.message.arguments == {"cmd": "ls -la"}
        call_next.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_arguments_evaluated_as_empty(self):
        coach = FakeCoach(None)
        context = _context(arguments=None)

        await _middleware(coach).on_call_tool(context, AsyncMock())

        assert coach.params_seen() == [{}]
        assert context.message.arguments is None

    @pytest.mark.asyncio
    async def test_session_and_agent_reach_coach(self):
        coach = FakeCoach(None)
        context = _context(arguments={}, session_id="s-9", agent_id="agent-7")

        await _middleware(coach).on_call_tool(context, AsyncMock())

        assert coach.events[0]["session_key"] == "s-9"
        assert coach.events[0]["agent_id"] == "agent-7"


class TestBuildHookContext:
    """Tests for build_hook_context."""

    def test_none_context(self):
        assert build_hook_context(None, "exec") == HookContext(tool_name="exec")

    def test_agent_from_context_attribute(self):
        ctx = SimpleNamespace(agent_id="a", session_id=17)
        assert build_hook_context(ctx) == HookContext(agent_id="a", session_key="17")

    def test_non_string_agent_ignored(self):
        ctx = SimpleNamespace(request_context=SimpleNamespace(agent_id=5), session_id=None)
        assert build_hook_context(ctx).agent_id is None
