"""ErrorTree: the homogeneous structured form of a chain."""

from __future__ import annotations

import dataclasses
from typing import Any, Iterator

from errors_with_context.kernel.errors.cause import ForeignCause
from errors_with_context.kernel.errors.message import ErrorMessage


@dataclasses.dataclass(frozen=True)
class ErrorTree:
    """One level of a chain: a message and either ``None`` or another tree.

    A foreign leaf is folded into ``ErrorTree(str(error), None)`` so every
    ``cause`` slot has the same shape.
    """

    message: str
    cause: ErrorTree | None = None

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.iter_levels())

    def iter_levels(self) -> Iterator[ErrorTree]:
        tree: ErrorTree | None = self
        while tree is not None:
            yield tree
            tree = tree.cause

    def messages(self) -> list[str]:
        return [level.message for level in self.iter_levels()]

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] | None = None
        for level in reversed(list(self.iter_levels())):
            result = {"message": level.message, "cause": result}
        assert result is not None
        return result

    def to_error(self) -> ErrorMessage:
        """Rebuild a chain of causeless-leaf :class:`ErrorMessage` nodes."""
        node: ErrorMessage | None = None
        for level in reversed(list(self.iter_levels())):
            node = ErrorMessage(level.message, node)
        assert node is not None
        return node


def to_tree(node: ErrorMessage) -> ErrorTree:
    nodes = list(node.iter_chain())
    leaf = nodes[-1].tagged_cause
    tree: ErrorTree | None = None
    if isinstance(leaf, ForeignCause):
        tree = ErrorTree(leaf.display_text())
    for current in reversed(nodes):
        tree = ErrorTree(current.message, tree)
    assert tree is not None
    return tree


__all__ = ["ErrorTree", "to_tree"]
