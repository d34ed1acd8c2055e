"""Display-string helpers for node labels.

JSON primitives render the way they are written in JSON text: booleans as
``true``/``false`` and ``None`` as ``null``. Arrays and objects that end up
as labels (nested arrays in LEAF mode) render as compact JSON.
"""

from __future__ import annotations

import json
from typing import Any

ELLIPSIS = "..."


def display_string(value: Any) -> str:
    """Return the display form of a JSON value.

    Args:
        value: Any JSON value.

    Returns:
        The string shown in a node box.

    Raises:
        TypeError: If an array or object holds a non-JSON value or a
            non-string key.
    """
    # bool before everything else: bool subclasses int.
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return compact_json(value)
    return str(value)


def compact_json(value: Any) -> str:
    """Serialise ``value`` as JSON text without whitespace.

    Same output as ``json.dumps(value, separators=(",", ":"),
    ensure_ascii=False)``, but containers are expanded with an explicit
    stack so nesting depth is unbounded, and tuples or non-string keys are
    rejected instead of being coerced.
    """
    parts: list[str] = []
    # (is_literal, item): literal items are punctuation already rendered.
    stack: list[tuple[bool, Any]] = [(False, value)]
    while stack:
        literal, item = stack.pop()
        if literal:
            parts.append(item)
            continue
        if isinstance(item, dict):
            tokens: list[tuple[bool, Any]] = [(True, "{")]
            for i, (key, val) in enumerate(item.items()):
                if not isinstance(key, str):
                    raise TypeError(f"JSON object keys must be str, got {type(key)!r}")
                prefix = "," if i else ""
                tokens.append((True, prefix + json.dumps(key, ensure_ascii=False) + ":"))
                tokens.append((False, val))
            tokens.append((True, "}"))
            stack.extend(reversed(tokens))
        elif isinstance(item, list):
            tokens = [(True, "[")]
            for i, element in enumerate(item):
                if i:
                    tokens.append((True, ","))
                tokens.append((False, element))
            tokens.append((True, "]"))
            stack.extend(reversed(tokens))
        elif item is None or isinstance(item, (str, int, float, bool)):
            parts.append(json.dumps(item, ensure_ascii=False))
        else:
            raise TypeError(f"Unsupported JSON value type: {type(item)!r}")
    return "".join(parts)


def truncate_label(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, marking the cut with ``...``.

    Strings of length ``limit`` or shorter are returned unchanged.
    """
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text
