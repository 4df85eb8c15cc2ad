"""Tool-call gate: security coach pre-check, plugin hook chain, coach re-check."""

import copy
from typing import Any, Mapping, Optional

from loguru import logger

from .coach.port import evaluate_coach
from .config import Config
from .hooks.models import BeforeToolCallEvent, HookStage
from .models import (
    REASON_COACH_DEFAULT_BLOCK,
    REASON_COACH_INTERNAL_ERROR,
    REASON_COACH_NOT_INITIALIZED,
    REASON_HOOK_DEFAULT_BLOCK,
    REASON_RECHECK_DEFAULT_BLOCK,
    REASON_RECHECK_INTERNAL_ERROR,
    Allowed,
    Blocked,
    GateDecision,
    HookContext,
    ToolInvocation,
)
from .naming import load_tool_aliases, normalize_tool_name
from .params import as_params, is_plain_mapping, merge_params, params_equal
from .registry import CapabilityRegistry, capabilities


class ToolCallGate:
    """
    Decides whether a tool call may execute.

    Stages:
    1. Security coach pre-check (mandatory, fail-closed)
    2. Plugin before_tool_call hooks (optional, fail-open on errors)
    3. Security coach re-check when a hook changed the params

    Failure policy:
    - Coach missing = block
    - Coach error = block
    - Hook chain error = log and continue with the original params
    - Explicit block from coach or hook = block

    The gate holds no locks and no per-call state, so concurrent calls may
    share one instance.
    """

    def __init__(
        self,
        registry: Optional[CapabilityRegistry] = None,
        aliases: Optional[Mapping[str, str]] = None,
    ):
        self._registry = registry if registry is not None else capabilities
        self._aliases = dict(aliases) if aliases else None

    @classmethod
    def from_config(cls, registry: Optional[CapabilityRegistry] = None) -> "ToolCallGate":
        """Build a gate using the aliases file named by Config.TOOL_ALIASES_PATH."""
        return cls(registry=registry, aliases=load_tool_aliases(Config.TOOL_ALIASES_PATH))

    @property
    def registry(self) -> CapabilityRegistry:
        return self._registry

    async def evaluate(
        self,
        tool_name: Any,
        params: Any,
        tool_call_id: Optional[str] = None,
        ctx: Optional[HookContext] = None,
    ) -> GateDecision:
        """
        Run the gate for one tool call.

        Args:
            tool_name: Raw tool name (normalized here)
            params: Caller params; non-mapping values are checked as ``{}``
            tool_call_id: Used only in log lines
            ctx: Agent/session context

        Returns:
            Blocked(reason) or Allowed(params). Allowed carries the caller's
            original ``params`` object unless a hook rewrote it.
        """
        name = normalize_tool_name(tool_name, self._aliases)
        agent_id = ctx.agent_id if ctx else None
        session_key = ctx.session_key if ctx else None
        invocation = ToolInvocation(
            tool_name=name,
            params=as_params(params),
            tool_call_id=tool_call_id,
            agent_id=agent_id,
            session_key=session_key,
        )
        call_label = f"tool={name}" + (f" toolCallId={tool_call_id}" if tool_call_id else "")

        # Coach runs before plugin hooks so no plugin can skip or override it
        coach = self._registry.security_coach
        if coach is None:
            logger.warning(
                f"Security coach not yet initialized, blocking tool call as precaution: {call_label}"
            )
            return Blocked(REASON_COACH_NOT_INITIALIZED)

        try:
            evaluation = await evaluate_coach(coach, invocation)
        except Exception as e:
            logger.warning(f"Security coach before_tool_call failed: {call_label} error={e}")
            return Blocked(REASON_COACH_INTERNAL_ERROR)

        if evaluation.block:
            logger.info(f"Security coach blocked {call_label}")
            return Blocked(evaluation.block_reason or REASON_COACH_DEFAULT_BLOCK)

        hook_runner = self._registry.hook_runner
        if hook_runner is None or not hook_runner.has_hooks(HookStage.BEFORE_TOOL_CALL):
            return Allowed(params)

        # The runner gets a deep copy: only a returned patch may change what
        # executes, and every returned patch goes through the equality check.
        try:
            hook_result = await hook_runner.run_before_tool_call(
                BeforeToolCallEvent(tool_name=name, params=copy.deepcopy(invocation.params)),
                HookContext(tool_name=name, agent_id=agent_id, session_key=session_key),
            )
        except Exception as e:
            logger.warning(f"before_tool_call hook failed: {call_label} error={e}")
            return Allowed(params)

        if hook_result is None:
            return Allowed(params)

        if hook_result.block:
            logger.info(f"Plugin hook blocked {call_label}")
            return Blocked(hook_result.block_reason or REASON_HOOK_DEFAULT_BLOCK)

        if hook_result.params is None or not is_plain_mapping(hook_result.params):
            return Allowed(params)

        try:
            patch = copy.deepcopy(hook_result.params)
        except Exception as e:
            logger.warning(f"before_tool_call hook returned uncopyable params: {call_label} error={e}")
            return Allowed(params)

        modified = merge_params(params, patch)
        if params_equal(modified, params):
            return Allowed(params)

        # The coach must see what will actually execute. coach is never None
        # here: a missing coach already blocked in the pre-check.
        try:
            recheck = await evaluate_coach(coach, invocation.with_params(modified))
        except Exception as e:
            logger.warning(f"Security coach recheck failed after hook rewrite: {call_label} error={e}")
            return Blocked(REASON_RECHECK_INTERNAL_ERROR)

        if recheck.block:
            logger.info(f"Security coach blocked {call_label} on post-hook recheck")
            return Blocked(recheck.block_reason or REASON_RECHECK_DEFAULT_BLOCK)

        return Allowed(modified)


async def run_before_tool_call(
    tool_name: Any,
    params: Any,
    tool_call_id: Optional[str] = None,
    ctx: Optional[HookContext] = None,
) -> GateDecision:
    """Run the gate against the module-level capability registry."""
    return await ToolCallGate().evaluate(tool_name, params, tool_call_id=tool_call_id, ctx=ctx)
