"""Helpers for tool parameter payloads."""

from collections.abc import Mapping
from typing import Any


def is_plain_mapping(value: Any) -> bool:
    """Return True for a key/value parameter mapping (not a list, string or scalar)."""
    return isinstance(value, Mapping)


def as_params(value: Any) -> dict[str, Any]:
    """Return ``value`` as a dict, or an empty dict when it is not a mapping."""
    if isinstance(value, dict):
        return value
    if is_plain_mapping(value):
        return dict(value)
    return {}


def merge_params(base: Any, patch: Mapping[str, Any]) -> dict[str, Any]:
    """
    Shallow-merge ``patch`` over ``base`` into a new dict.

    Neither input is modified. When ``base`` is not a mapping the patch
    alone becomes the new parameter set.
    """
    if is_plain_mapping(base):
        return {**base, **patch}
    return dict(patch)


def params_equal(left: Any, right: Any) -> bool:
    """
    Canonical deep equality for JSON-like payloads.

    Key order is irrelevant, sequences compare element-wise, and values of
    different JSON types never compare equal (``True`` vs ``1``, ``1`` vs
    ``"1"``). Integers and floats compare numerically (``1 == 1.0``).
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right

    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right

    if is_plain_mapping(left) or is_plain_mapping(right):
        if not (is_plain_mapping(left) and is_plain_mapping(right)):
            return False
        if left.keys() != right.keys():
            return False
        return all(params_equal(left[key], right[key]) for key in left)

    if isinstance(left, (list, tuple)) or isinstance(right, (list, tuple)):
        if not (isinstance(left, (list, tuple)) and isinstance(right, (list, tuple))):
            return False
        if len(left) != len(right):
            return False
        return all(params_equal(a, b) for a, b in zip(left, right))

    if type(left) is not type(right):
        return False
    return left == right
