"""Testing helpers – Hypothesis strategies for error chains."""
from errors_with_context.testing.strategies import error_chains, foreign_errors, messages

__all__ = ["error_chains", "foreign_errors", "messages"]
