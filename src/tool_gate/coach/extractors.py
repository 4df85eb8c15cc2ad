"""Pull the security-relevant fields out of loosely shaped tool params."""

import re
from typing import Any, Mapping, Optional

COMMAND_KEYS = (
    "command",
    "cmd",
    "script",
    "shell_command",
    "exec",
    "shell",
    "bash_command",
    "run",
    "execute",
    "sh",
)

FILE_PATH_KEYS = (
    "file_path",
    "filePath",
    "path",
    "filename",
    "file",
    "target_path",
    "source_path",
    "dest",
    "destination",
    "src",
    "target",
    "filepath",
)

URL_KEYS = (
    "url",
    "uri",
    "href",
    "endpoint",
    "target_url",
    "link",
    "address",
    "remote",
    "server",
)

_SHELL_META = re.compile(r"[|><;`]|\$\(")


def _first_string(params: Mapping[str, Any], keys: tuple[str, ...]) -> Optional[str]:
    for key in keys:
        value = params.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def extract_command(params: Mapping[str, Any]) -> Optional[str]:
    """
    Command string from exec/shell style params.

    Falls back to the first string value containing shell metacharacters.
    """
    command = _first_string(params, COMMAND_KEYS)
    if command:
        return command
    for value in params.values():
        if isinstance(value, str) and value and _SHELL_META.search(value):
            return value
    return None


def extract_file_path(params: Mapping[str, Any]) -> Optional[str]:
    """File path from read/write/edit style params, or the first absolute/home path value."""
    path = _first_string(params, FILE_PATH_KEYS)
    if path:
        return path
    for value in params.values():
        if isinstance(value, str) and value and value.startswith(("/", "~")):
            return value
    return None


def extract_url(params: Mapping[str, Any]) -> Optional[str]:
    """URL from fetch/http style params, or the first http(s) value."""
    url = _first_string(params, URL_KEYS)
    if url:
        return url
    for value in params.values():
        if isinstance(value, str) and value.startswith(("http://", "https://")):
            return value
    return None


_REDACTIONS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"(Bearer\s+)[^\s\"']+", re.IGNORECASE), r"\1[REDACTED]"),
    (
        re.compile(r"((?:--header|-H)\s+[\"']?Authorization:\s*)[^\s\"']+", re.IGNORECASE),
        r"\1[REDACTED]",
    ),
    (
        re.compile(r"((?:--header|-H)\s+[\"']?X[-_]API[-_]KEY:\s*)[^\s\"']+", re.IGNORECASE),
        r"\1[REDACTED]",
    ),
    (
        re.compile(
            r"((?:API_KEY|SECRET|TOKEN|PASSWORD|CREDENTIAL|AUTH|ACCESS_KEY|PRIVATE_KEY)\s*=\s*)[^\s;]+",
            re.IGNORECASE,
        ),
        r"\1[REDACTED]",
    ),
    (re.compile(r"(--password[=\s]+)\S+", re.IGNORECASE), r"\1[REDACTED]"),
    (re.compile(r"\bAKIA[0-9A-Z]{16}\b"), "[REDACTED_AWS_KEY]"),
    (re.compile(r"(?<![A-Za-z0-9+/=_-])[A-Za-z0-9+/_-]{40,}={0,2}(?![A-Za-z0-9+/=_-])"), "[REDACTED_TOKEN]"),
]


def redact_secrets(text: Optional[str]) -> Optional[str]:
    """Mask bearer tokens, API keys and secret-looking assignments before logging."""
    if not text:
        return text
    for pattern, replacement in _REDACTIONS:
        text = pattern.sub(replacement, text)
    return text
