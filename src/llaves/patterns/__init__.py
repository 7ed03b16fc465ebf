"""Pattern engine and the built-in pattern catalog."""

from llaves.patterns.catalog import build_patterns
from llaves.patterns.engine import (
    AllOf,
    Children,
    Equals,
    MatchResult,
    Pattern,
    Satisfies,
    TokenTest,
    make_test,
    match_pattern,
    run_test,
)

__all__ = [
    "AllOf",
    "Children",
    "Equals",
    "MatchResult",
    "Pattern",
    "Satisfies",
    "TokenTest",
    "build_patterns",
    "make_test",
    "match_pattern",
    "run_test",
]
