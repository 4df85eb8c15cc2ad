"""Process-wide capability slots read by the tool-call gate."""

from typing import Any, Optional, Protocol

from loguru import logger

from .coach.port import SecurityCoach
from .errors import CapabilityAlreadyRegisteredError
from .hooks.models import BeforeToolCallEvent
from .models import HookChainResult, HookContext


class HookRunnerPort(Protocol):
    """What the gate needs from a hook runner."""

    def has_hooks(self, stage: Any) -> bool:
        ...

    async def run_before_tool_call(
        self, event: BeforeToolCallEvent, ctx: HookContext
    ) -> Optional[HookChainResult]:
        ...


class CapabilityRegistry:
    """
    Write-once holder for the security coach and the hook runner.

    Both slots are filled during gateway startup, before any tool call is
    possible, and only read afterwards. An unset coach slot is the
    "not yet initialized" state and makes the gate block every call.
    """

    def __init__(
        self,
        security_coach: Optional[SecurityCoach] = None,
        hook_runner: Optional[HookRunnerPort] = None,
    ):
        self._security_coach = security_coach
        self._hook_runner = hook_runner

    @property
    def security_coach(self) -> Optional[SecurityCoach]:
        return self._security_coach

    @property
    def hook_runner(self) -> Optional[HookRunnerPort]:
        return self._hook_runner

    @property
    def coach_initialized(self) -> bool:
        return self._security_coach is not None

    def set_security_coach(self, coach: SecurityCoach) -> None:
        """Register the security coach. Raises if one is already registered."""
        if self._security_coach is not None:
            raise CapabilityAlreadyRegisteredError("security_coach")
        self._security_coach = coach
        logger.info(f"Security coach registered: {type(coach).__name__}")

    def set_hook_runner(self, runner: HookRunnerPort) -> None:
        """Register the hook runner. Raises if one is already registered."""
        if self._hook_runner is not None:
            raise CapabilityAlreadyRegisteredError("hook_runner")
        self._hook_runner = runner
        logger.info(f"Hook runner registered: {type(runner).__name__}")


# Module-level default, filled by the gateway's startup sequence
capabilities = CapabilityRegistry()
