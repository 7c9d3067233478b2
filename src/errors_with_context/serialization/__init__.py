"""Structured forms of an error chain: ErrorTree and the dict / JSON codec."""
from errors_with_context.serialization.codec import (
    from_dict,
    from_json,
    to_dict,
    to_json,
    tree_from_dict,
)
from errors_with_context.serialization.tree import ErrorTree, to_tree

__all__ = ["ErrorTree", "from_dict", "from_json", "to_dict", "to_json", "to_tree", "tree_from_dict"]
