"""Canonical tool names shared by the security coach and hook filters."""

from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from loguru import logger

FALLBACK_TOOL_NAME = "tool"

TOOL_NAME_ALIASES: dict[str, str] = {
    "bash": "exec",
    "apply-patch": "apply_patch",
}


def normalize_tool_name(raw: Any, aliases: Optional[Mapping[str, str]] = None) -> str:
    """
    Map a raw tool identifier to its canonical form.

    Trims, lower-cases and resolves aliases. Never raises: empty, blank or
    non-string input falls back to ``"tool"``.

    Args:
        raw: Raw tool identifier
        aliases: Extra aliases, consulted before the built-in ones

    Returns:
        Canonical tool name
    """
    if not isinstance(raw, str):
        return FALLBACK_TOOL_NAME
    normalized = raw.strip().lower()
    if not normalized:
        return FALLBACK_TOOL_NAME
    if aliases and normalized in aliases:
        return aliases[normalized]
    return TOOL_NAME_ALIASES.get(normalized, normalized)


def load_tool_aliases(path: Optional[str]) -> dict[str, str]:
    """
    Load extra tool name aliases from a YAML file.

    Expected shape::

        aliases:
          shell: exec
          Read-File: read

    Keys and values are normalized (trimmed, lower-cased). A missing or
    malformed file yields an empty mapping.
    """
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        logger.debug(f"Tool alias file not found at {path}, using built-in aliases")
        return {}

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse tool alias file {path}: {e}")
        return {}

    if not data:
        return {}

    raw_aliases = data.get("aliases") if isinstance(data, dict) else None
    if not isinstance(raw_aliases, dict):
        logger.error(f"Tool alias file {path} has no 'aliases' mapping")
        return {}

    aliases: dict[str, str] = {}
    for key, value in raw_aliases.items():
        if not isinstance(key, str) or not isinstance(value, str):
            logger.warning(f"Skipping non-string tool alias {key!r}: {value!r}")
            continue
        source = key.strip().lower()
        target = value.strip().lower()
        if source and target:
            aliases[source] = target

    logger.info(f"Loaded {len(aliases)} tool aliases from {path}")
    return aliases
