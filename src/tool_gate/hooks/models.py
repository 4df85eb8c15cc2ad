"""Plugin hook models for the tool call lifecycle."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional


class HookStage(str, Enum):
    """Hook execution stages in the tool call lifecycle."""

    BEFORE_TOOL_CALL = "before_tool_call"


@dataclass(frozen=True)
class BeforeToolCallEvent:
    """Payload handed to before_tool_call hooks."""

    tool_name: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HookResult:
    """
    What a single hook may return.

    ``block`` takes precedence over ``params`` in the same result.
    ``params`` is a partial patch merged over the running params.
    """

    block: bool = False
    block_reason: Optional[str] = None
    params: Optional[dict[str, Any]] = None


@dataclass(frozen=True)
class RegisteredHook:
    """A hook handler as held by the runner."""

    stage: HookStage
    handler: Callable[..., Any]
    plugin_id: Optional[str] = None

    @property
    def label(self) -> str:
        name = getattr(self.handler, "__qualname__", None) or repr(self.handler)
        return f"{self.plugin_id}:{name}" if self.plugin_id else name
