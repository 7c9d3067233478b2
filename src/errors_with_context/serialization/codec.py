"""Dict / JSON codec for error chains.

Wire shape, recursively::

    {"message": "Failed to start the program", "cause": {"message": ..., "cause": null}}
"""

from __future__ import annotations

import json
from typing import Any

from errors_with_context.kernel.errors.message import ErrorMessage
from errors_with_context.serialization.tree import ErrorTree, to_tree


def to_dict(node: ErrorMessage) -> dict[str, Any]:
    return to_tree(node).to_dict()


def to_json(node: ErrorMessage, indent: int | None = None) -> str:
    """Encode *node* as JSON.

    The ``json`` encoder recurses once per level, so a chain deeper than the
    interpreter recursion limit (about 1000 levels by default) raises
    ``RecursionError``. Flat text rendering has no such limit.
    """
    return json.dumps(to_dict(node), ensure_ascii=False, indent=indent)


def tree_from_dict(data: Any) -> ErrorTree:
    """Parse the wire shape into an :class:`ErrorTree`.

    Raises:
        ErrorMessage: the payload does not have the two-key shape.
    """
    levels: list[str] = []
    current: Any = data
    while current is not None:
        if not isinstance(current, dict):
            raise ErrorMessage(
                f"Expected an object at depth {len(levels)}, got {type(current).__name__}"
            )
        try:
            message = current["message"]
        except KeyError as exc:
            raise ErrorMessage(f"Missing 'message' at depth {len(levels)}", exc) from exc
        if not isinstance(message, str):
            raise ErrorMessage(
                f"Field 'message' at depth {len(levels)} must be a string",
                TypeError(f"got {type(message).__name__}"),
            )
        levels.append(message)
        current = current.get("cause")

    tree: ErrorTree | None = None
    for message in reversed(levels):
        tree = ErrorTree(message, tree)
    assert tree is not None
    return tree


def from_dict(data: Any) -> ErrorMessage:
    return tree_from_dict(data).to_error()


def from_json(text: str | bytes) -> ErrorMessage:
    """Decode a chain written by :func:`to_json`.

    Raises:
        ErrorMessage: the text is not JSON, is nested too deeply for the
            ``json`` module, or does not have the wire shape.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise ErrorMessage("Failed to decode error chain JSON", exc) from exc
    try:
        return from_dict(data)
    except ErrorMessage as exc:
        raise ErrorMessage("Invalid error chain payload", exc) from exc


__all__ = ["from_dict", "from_json", "to_dict", "to_json", "tree_from_dict"]
