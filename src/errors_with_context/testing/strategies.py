"""Testing – Hypothesis strategies for error chains.

Requires the ``hypothesis`` package:

    pip install hypothesis
    # or
    pip install "errors-with-context[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]

    from errors_with_context.kernel.errors import ErrorMessage


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


_FOREIGN_TYPES: tuple[type[Exception], ...] = (
    ValueError, KeyError, RuntimeError, FileNotFoundError, PermissionError, TimeoutError,
)


def messages() -> "SearchStrategy[str]":
    """Non-empty, single-line message texts.

    Newlines are excluded so counting ``caused by`` lines stays exact.
    """
    st = _require_hypothesis()
    return st.text(
        alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="\n\r"),
        min_size=1,
        max_size=40,
    ).filter(lambda s: "caused by:" not in s)


def foreign_errors() -> "SearchStrategy[Exception]":
    """Plain exceptions as they would come from I/O, parsing and so on."""
    st = _require_hypothesis()
    return st.builds(
        lambda cls, text: cls(text),
        cls=st.sampled_from(_FOREIGN_TYPES),
        text=messages(),
    )


def error_chains(max_depth: int = 8, *, foreign_leaf: bool | None = None) -> "SearchStrategy[ErrorMessage]":
    """Chains of 1..max_depth nodes, optionally ending in a foreign error.

    Args:
        max_depth: Largest number of :class:`ErrorMessage` nodes.
        foreign_leaf: ``True`` always wraps a foreign error at the bottom,
            ``False`` never does, ``None`` lets Hypothesis choose.

    Example::

        @given(error_chains(max_depth=5))
        def test_chain_renders(err):
            assert str(err).startswith(err.message)
    """
    from errors_with_context.kernel.errors import ErrorMessage

    st = _require_hypothesis()
    leaf_st: Any
    if foreign_leaf is None:
        leaf_st = st.none() | foreign_errors()
    elif foreign_leaf:
        leaf_st = foreign_errors()
    else:
        leaf_st = st.none()

    def build(texts: list[str], leaf: Exception | None) -> ErrorMessage:
        node: BaseException | None = leaf
        for text in reversed(texts):
            node = ErrorMessage(text, node)
        return node  # type: ignore[return-value]

    return st.builds(
        build,
        texts=st.lists(messages(), min_size=1, max_size=max_depth),
        leaf=leaf_st,
    )


__all__ = ["error_chains", "foreign_errors", "messages"]
