"""Centralized configuration for the tool gate."""

import os


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """
    Tool gate configuration with environment variable overrides.

    Values are read once at import time. Tests may patch the class
    attributes directly.
    """

    # ========================================================================
    # Logging
    # ========================================================================
    LOG_LEVEL: str = os.getenv("TOOL_GATE_LOG_LEVEL", "INFO").upper()
    LOG_FILE: str = os.getenv("TOOL_GATE_LOG_FILE", "")
    LOG_ROTATION: str = os.getenv("TOOL_GATE_LOG_ROTATION", "10 MB")
    LOG_RETENTION: str = os.getenv("TOOL_GATE_LOG_RETENTION", "7 days")

    # ========================================================================
    # Tool naming
    # ========================================================================
    TOOL_ALIASES_PATH: str = os.getenv("TOOL_ALIASES_PATH", "")

    # ========================================================================
    # Hook runner
    # ========================================================================
    # When true, a failing hook is logged and skipped inside the runner
    # instead of failing the whole chain.
    HOOK_CATCH_ERRORS: bool = _parse_bool(os.getenv("HOOK_CATCH_ERRORS", "false"))

    VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration consistency.

        Returns:
            True if validation passes

        Raises:
            ValueError: If validation fails
        """
        errors = []

        if cls.LOG_LEVEL not in cls.VALID_LOG_LEVELS:
            errors.append(
                f"TOOL_GATE_LOG_LEVEL must be one of {sorted(cls.VALID_LOG_LEVELS)}, "
                f"got {cls.LOG_LEVEL!r}"
            )

        if cls.TOOL_ALIASES_PATH and not os.path.isfile(cls.TOOL_ALIASES_PATH):
            errors.append(f"TOOL_ALIASES_PATH does not exist: {cls.TOOL_ALIASES_PATH}")

        if errors:
            raise ValueError(f"Config validation failed: {'; '.join(errors)}")

        return True
