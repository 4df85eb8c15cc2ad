"""Value types passed through the tool-call gate."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Union

# Block reasons surfaced to the operator as the tool's failure result.
REASON_COACH_NOT_INITIALIZED = "Security Coach: not yet initialized, tool blocked"
REASON_COACH_INTERNAL_ERROR = "Security Coach: internal error, tool blocked as precaution"
REASON_COACH_DEFAULT_BLOCK = "Tool call blocked by Security Coach"
REASON_HOOK_DEFAULT_BLOCK = "Tool call blocked by plugin hook"
REASON_RECHECK_DEFAULT_BLOCK = "Blocked by security coach (post-plugin recheck)"
REASON_RECHECK_INTERNAL_ERROR = "Security Coach: internal error on recheck, tool blocked"


@dataclass(frozen=True)
class HookContext:
    """Caller context handed to hooks alongside the event."""

    tool_name: Optional[str] = None
    agent_id: Optional[str] = None
    session_key: Optional[str] = None


@dataclass(frozen=True)
class ToolInvocation:
    """
    A single tool call as seen by the coach and the hook chain.

    ``tool_name`` is always the canonical name. Instances are never
    mutated; a hook rewrite produces a new invocation with new params.
    """

    tool_name: str
    params: dict[str, Any] = field(default_factory=dict)
    tool_call_id: Optional[str] = None
    agent_id: Optional[str] = None
    session_key: Optional[str] = None

    def with_params(self, params: dict[str, Any]) -> "ToolInvocation":
        """Return a copy of this invocation carrying ``params``."""
        return ToolInvocation(
            tool_name=self.tool_name,
            params=params,
            tool_call_id=self.tool_call_id,
            agent_id=self.agent_id,
            session_key=self.session_key,
        )

    def to_event(self) -> dict[str, Any]:
        """Payload handed to the security coach."""
        return {
            "tool_name": self.tool_name,
            "params": self.params,
            "agent_id": self.agent_id,
            "session_key": self.session_key,
        }


@dataclass(frozen=True)
class Blocked:
    """Terminal decision: the tool must not run."""

    reason: str

    @property
    def blocked(self) -> bool:
        return True


@dataclass(frozen=True)
class Allowed:
    """Terminal decision: the tool runs with ``params``."""

    params: Any

    @property
    def blocked(self) -> bool:
        return False


GateDecision = Union[Blocked, Allowed]


@dataclass(frozen=True)
class CoachEvaluation:
    """Outcome of one security coach check."""

    block: bool = False
    block_reason: Optional[str] = None


@dataclass
class HookChainResult:
    """
    Folded outcome of the before_tool_call hook chain.

    ``params`` is only set when at least one hook returned a patch.
    """

    block: bool = False
    block_reason: Optional[str] = None
    params: Optional[dict[str, Any]] = None


def read_field(result: Any, *names: str) -> Any:
    """Read the first present field from a mapping or attribute-style result."""
    for name in names:
        if isinstance(result, Mapping):
            if name in result:
                return result[name]
        elif hasattr(result, name):
            return getattr(result, name)
    return None


def read_reason(result: Any) -> Optional[str]:
    """Block reason from a result, accepting snake_case and camelCase keys."""
    reason = read_field(result, "block_reason", "blockReason")
    if isinstance(reason, str) and reason:
        return reason
    return None
