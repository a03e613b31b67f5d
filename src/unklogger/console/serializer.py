"""Console – value classification and serialization.

Every log argument is classified into one of a closed set of kinds, each
with its own rendering rule:

* ``ERROR_LIKE`` – exception instances, rendered as their full traceback.
* ``TEXT`` – strings, passed through.
* ``PRIMITIVE`` – ``None``, booleans, numbers and bytes, rendered as literals.
* ``CALLABLE`` – functions, methods and classes, rendered as source text.
* ``COMPOSITE`` – everything else, rendered as indented JSON.

Serialization never raises.  Composites that can't be dumped as-is (cycles,
odd keys) go through a cycle-breaking fallback that replaces back-references
with :data:`CIRCULAR_MARKER`.
"""
from __future__ import annotations

import enum
import inspect
import json
import numbers
import traceback
from collections.abc import Mapping, Set
from typing import Any

__all__ = ["CIRCULAR_MARKER", "INDENT", "ValueKind", "classify", "serialize"]

CIRCULAR_MARKER = "[Circular]"
INDENT = 4

_JSON_KEY_TYPES = (str, int, float, bool, type(None))


class ValueKind(str, enum.Enum):
    TEXT = "text"
    ERROR_LIKE = "error_like"
    PRIMITIVE = "primitive"
    CALLABLE = "callable"
    COMPOSITE = "composite"


def classify(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` that decides how *value* is rendered."""
    if isinstance(value, BaseException):
        return ValueKind.ERROR_LIKE
    if isinstance(value, str):
        return ValueKind.TEXT
    if value is None or isinstance(value, (bool, numbers.Number, bytes, bytearray)):
        return ValueKind.PRIMITIVE
    if callable(value):
        return ValueKind.CALLABLE
    return ValueKind.COMPOSITE


def serialize(value: Any) -> str:
    """Convert one log argument into its printable form."""
    kind = classify(value)
    if kind is ValueKind.ERROR_LIKE:
        return _serialize_error(value)
    if kind is ValueKind.TEXT:
        return value
    if kind is ValueKind.PRIMITIVE:
        return str(value)
    if kind is ValueKind.CALLABLE:
        return _serialize_callable(value)
    return _serialize_composite(value)


# ---------------------------------------------------------------------------
# Per-kind rules
# ---------------------------------------------------------------------------


def _serialize_error(exc: BaseException) -> str:
    text = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return text.rstrip("\n")


def _serialize_callable(fn: Any) -> str:
    try:
        return inspect.getsource(fn).strip()
    except (OSError, TypeError):
        return _safe_repr(fn)


def _serialize_composite(value: Any) -> str:
    try:
        return json.dumps(value, indent=INDENT, ensure_ascii=False, default=_json_default)
    except Exception:  # noqa: BLE001 – retried by the cycle-breaking render below
        pass
    try:
        return json.dumps(
            _break_cycles(value, ()),
            indent=INDENT,
            ensure_ascii=False,
            default=_safe_repr,
        )
    except Exception:  # noqa: BLE001
        return _safe_repr(value)


def _json_default(obj: Any) -> Any:
    """``json.dumps`` hook for values JSON has no native form for."""
    if isinstance(obj, (tuple, Set)):
        return list(obj)
    if isinstance(obj, Mapping):
        return dict(obj)
    if isinstance(obj, (bytes, bytearray)) or callable(obj) or isinstance(obj, BaseException):
        return serialize(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    return _safe_repr(obj)


# ---------------------------------------------------------------------------
# Cycle-breaking fallback
# ---------------------------------------------------------------------------


def _break_cycles(value: Any, ancestors: tuple[int, ...]) -> Any:
    """Copy *value* into plain JSON containers, marking back-references.

    Only references to an enclosing container count as circular; the same
    object appearing twice side by side is rendered twice.
    """
    if isinstance(value, (str, int, float, bool, type(None))):
        return value
    if id(value) in ancestors:
        return CIRCULAR_MARKER

    path = (*ancestors, id(value))
    if isinstance(value, Mapping):
        return {_json_key(k): _break_cycles(v, path) for k, v in value.items()}
    if isinstance(value, (list, tuple, Set)):
        return [_break_cycles(item, path) for item in value]
    if classify(value) is ValueKind.COMPOSITE and hasattr(value, "__dict__"):
        return {_json_key(k): _break_cycles(v, path) for k, v in vars(value).items()}
    return serialize(value)


def _json_key(key: Any) -> Any:
    return key if isinstance(key, _JSON_KEY_TYPES) else _safe_repr(key)


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:  # noqa: BLE001 – user __repr__ must not break logging
        return object.__repr__(value)
