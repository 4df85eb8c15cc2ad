"""Exception types raised by the tool gate."""

from typing import Optional


class ToolGateError(Exception):
    """Base class for tool gate errors."""


class ToolBlockedError(ToolGateError):
    """
    Raised at the tool execution boundary when the gate blocks a call.

    The message is the human-readable block reason so the agent loop can
    surface it verbatim as the tool's failure result.
    """

    def __init__(self, reason: str, tool_name: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.tool_name = tool_name


class CapabilityAlreadyRegisteredError(ToolGateError):
    """Raised when a write-once capability slot is written a second time."""

    def __init__(self, slot: str):
        super().__init__(f"Capability '{slot}' is already registered")
        self.slot = slot
