"""Tool-call authorization gate for agent gateways."""

__version__ = "0.1.0"

from .errors import CapabilityAlreadyRegisteredError, ToolBlockedError, ToolGateError
from .bootstrap import init_tool_gate
from .gate import ToolCallGate, run_before_tool_call
from .models import (
    Allowed,
    Blocked,
    CoachEvaluation,
    GateDecision,
    HookChainResult,
    HookContext,
    ToolInvocation,
)
from .naming import load_tool_aliases, normalize_tool_name
from .registry import CapabilityRegistry, capabilities
from .tools import AgentTool, wrap_tool_with_gate, wrap_tools

__all__ = [
    "__version__",
    "ToolCallGate",
    "run_before_tool_call",
    "init_tool_gate",
    "CapabilityRegistry",
    "capabilities",
    "AgentTool",
    "wrap_tool_with_gate",
    "wrap_tools",
    "normalize_tool_name",
    "load_tool_aliases",
    "Allowed",
    "Blocked",
    "GateDecision",
    "CoachEvaluation",
    "HookChainResult",
    "HookContext",
    "ToolInvocation",
    "ToolGateError",
    "ToolBlockedError",
    "CapabilityAlreadyRegisteredError",
]
