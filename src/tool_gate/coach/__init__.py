"""Security coach capability: protocol, adapters and param extractors."""

from .engine import EngineSecurityCoach, ThreatEngine, ThreatMatchInput, build_threat_input
from .extractors import extract_command, extract_file_path, extract_url, redact_secrets
from .port import SecurityCoach, evaluate_coach, to_coach_evaluation

__all__ = [
    "SecurityCoach",
    "evaluate_coach",
    "to_coach_evaluation",
    "EngineSecurityCoach",
    "ThreatEngine",
    "ThreatMatchInput",
    "build_threat_input",
    "extract_command",
    "extract_file_path",
    "extract_url",
    "redact_secrets",
]
