"""Gateway startup wiring for the tool-call gate."""

from typing import Optional

from loguru import logger

from .coach.port import SecurityCoach
from .config import Config
from .gate import ToolCallGate
from .hooks.runner import HookRunner
from .log_setup import configure_logging
from .registry import CapabilityRegistry, HookRunnerPort, capabilities


def init_tool_gate(
    security_coach: SecurityCoach,
    hook_runner: Optional[HookRunnerPort] = None,
    registry: Optional[CapabilityRegistry] = None,
    setup_logging: bool = False,
) -> ToolCallGate:
    """
    Fill the capability registry and return a gate bound to it.

    Must run once, before the first tool call. Without an explicit hook
    runner an empty HookRunner is registered, honoring
    Config.HOOK_CATCH_ERRORS, so plugins can register hooks on it later.

    Raises:
        ValueError: If configuration is invalid
        CapabilityAlreadyRegisteredError: If the registry was already filled
    """
    if setup_logging:
        configure_logging()

    Config.validate()

    target = registry if registry is not None else capabilities
    target.set_security_coach(security_coach)
    target.set_hook_runner(
        hook_runner if hook_runner is not None else HookRunner(catch_errors=Config.HOOK_CATCH_ERRORS)
    )

    gate = ToolCallGate.from_config(registry=target)
    logger.info("Tool gate initialized")
    return gate
