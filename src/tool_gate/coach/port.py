"""Capability boundary to the injected security coach."""

import inspect
from collections.abc import Mapping
from typing import Any, Optional, Protocol, runtime_checkable

from ..models import CoachEvaluation, ToolInvocation, read_field, read_reason


@runtime_checkable
class SecurityCoach(Protocol):
    """
    Injected threat-evaluation capability.

    ``before_tool_call`` receives ``{tool_name, params, agent_id, session_key}``
    and returns ``None`` (no objection), a ``CoachEvaluation``, or a mapping
    with ``block`` and ``block_reason`` / ``blockReason``.
    """

    async def before_tool_call(self, event: dict[str, Any]) -> Any:
        ...


def to_coach_evaluation(result: Any) -> CoachEvaluation:
    """
    Normalize whatever the coach returned into a ``CoachEvaluation``.

    Any truthy ``block`` value is a block.

    Raises:
        TypeError: The result is neither a mapping nor carries a ``block``
            attribute. The gate turns this into a block.
    """
    if result is None:
        return CoachEvaluation()
    if isinstance(result, CoachEvaluation):
        return result
    if not isinstance(result, Mapping) and not hasattr(result, "block"):
        raise TypeError(f"unrecognized security coach result: {type(result).__name__}")
    block = bool(read_field(result, "block"))
    return CoachEvaluation(block=block, block_reason=read_reason(result) if block else None)


async def evaluate_coach(coach: SecurityCoach, invocation: ToolInvocation) -> CoachEvaluation:
    """
    Run one coach check for ``invocation``.

    Exceptions raised by the coach propagate; the gate turns them into a
    block.
    """
    result: Optional[Any] = coach.before_tool_call(invocation.to_event())
    if inspect.isawaitable(result):
        result = await result
    return to_coach_evaluation(result)
