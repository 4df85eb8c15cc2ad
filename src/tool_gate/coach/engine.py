"""Adapter from a threat-evaluation engine to the security coach protocol."""

import inspect
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

from loguru import logger

from ..models import CoachEvaluation, read_field
from ..params import as_params
from .extractors import extract_command, extract_file_path, extract_url, redact_secrets

# User decisions that let a tool call proceed after an alert
ALLOWING_DECISIONS = frozenset({"allow-once", "allow-always", "learn-more"})


@dataclass(frozen=True)
class ThreatMatchInput:
    """What the engine sees of a tool call."""

    tool_name: str
    command: Optional[str] = None
    file_path: Optional[str] = None
    url: Optional[str] = None
    params: dict[str, Any] = field(default_factory=dict)


class ThreatEngine(Protocol):
    """
    Threat detection engine.

    ``evaluate`` returns an object or mapping with:

    - ``allowed``: True when no threat matched or a saved rule allowed it
    - ``alert``: optional alert with ``id``, ``title`` and
      ``requires_decision`` / ``requiresDecision``
    - ``title``: optional threat name used when a saved rule denies

    ``wait_for_decision`` resolves an alert that requires a user decision
    to ``"allow-once"``, ``"allow-always"``, ``"learn-more"``, ``"deny"``,
    or ``None`` when the alert expired. Engines that never raise such
    alerts may omit it.
    """

    async def evaluate(self, match_input: ThreatMatchInput) -> Any:
        ...

    async def wait_for_decision(self, alert_id: str, session_key: Optional[str] = None) -> Optional[str]:
        ...


def build_threat_input(tool_name: str, params: Any) -> ThreatMatchInput:
    """Build the engine input for a tool call."""
    params = as_params(params)
    return ThreatMatchInput(
        tool_name=tool_name,
        command=extract_command(params),
        file_path=extract_file_path(params),
        url=extract_url(params),
        params=params,
    )


class EngineSecurityCoach:
    """
    Security coach backed by a threat engine.

    Detection heuristics live in the engine; this class only maps tool
    calls onto engine input and engine verdicts onto coach evaluations.

    Verdict handling:
    - allowed and no alert = pass
    - alert not requiring a decision = pass (informational)
    - alert requiring a decision = wait for it; deny or expiry = block
    - anything else, including a missing verdict = block

    Alert broadcasting, throttling and audit records are the engine's job.
    """

    def __init__(self, engine: ThreatEngine):
        self._engine = engine

    async def before_tool_call(self, event: dict[str, Any]) -> CoachEvaluation:
        match_input = build_threat_input(event.get("tool_name") or "tool", event.get("params"))
        session_key = event.get("session_key")
        call_label = (
            f"tool={match_input.tool_name} command={redact_secrets(match_input.command)} "
            f"agent={event.get('agent_id')} session={session_key}"
        )

        verdict = self._engine.evaluate(match_input)
        if inspect.isawaitable(verdict):
            verdict = await verdict

        alert = read_field(verdict, "alert")
        if not alert:
            if read_field(verdict, "allowed") is True:
                return CoachEvaluation()
            title = read_field(verdict, "title")
            reason = f"Security Coach: {title}" if title else "Security Coach: blocked by saved rule"
            logger.info(f"Security coach blocked {call_label}")
            return CoachEvaluation(block=True, block_reason=reason)

        title = read_field(alert, "title") or "threat detected"
        if not read_field(alert, "requires_decision", "requiresDecision"):
            logger.info(f"Security coach alert (non-blocking) '{title}' {call_label}")
            return CoachEvaluation()

        decision = await self._wait_for_decision(read_field(alert, "id"), session_key)
        if decision in ALLOWING_DECISIONS:
            logger.info(f"Security coach alert '{title}' resolved with {decision} {call_label}")
            return CoachEvaluation()

        logger.info(f"Security coach blocked {call_label} decision={decision or 'expired'}")
        return CoachEvaluation(block=True, block_reason=f"Security Coach: {title}")

    async def _wait_for_decision(self, alert_id: Any, session_key: Optional[str]) -> Optional[str]:
        wait = getattr(self._engine, "wait_for_decision", None)
        if wait is None:
            # Nobody can answer; same as an expired alert
            return None
        decision = wait(alert_id, session_key=session_key)
        if inspect.isawaitable(decision):
            decision = await decision
        return decision
