"""Pattern test engine.

A pattern is an ordered list of tests plus a transform. Each test is
anchored on one token, either by a shift relative to the candidate index or
by an absolute position (negative positions count from the end), and holds
named checks against that token's fields.

Checks are tagged predicates evaluated by a single dispatcher:

- Equals: the field equals a literal (bool, int or str)
- Satisfies: a callable returns a truthy value for the field
- AllOf: every callable returns a truthy value
- Children: tests run against the token's child stream, either at fixed
  positions or by scanning for the first child index where all of them hold

Testing never mutates tokens. A check of any other shape is a broken
pattern definition and raises PatternError.

Example:
    >>> test = make_test(shift=0, type="inline", content=str.isupper)
    >>> test.checks[0]
    ('type', Equals(value='inline'))

"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NamedTuple

from llaves.config import DEFAULT_CONFIG
from llaves.errors import PatternError

if TYPE_CHECKING:
    from llaves.config import AttrsConfig
    from llaves.tokens import Token


@dataclass(frozen=True, slots=True)
class Equals:
    """Field must equal a literal."""

    value: bool | int | str


@dataclass(frozen=True, slots=True)
class Satisfies:
    """Field must satisfy a callable."""

    func: Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class AllOf:
    """Field must satisfy every callable."""

    funcs: tuple[Callable[[Any], Any], ...]


@dataclass(frozen=True, slots=True)
class Children:
    """Child stream must satisfy a list of child tests."""

    tests: tuple[TokenTest, ...]


Predicate = Equals | Satisfies | AllOf | Children


@dataclass(frozen=True, slots=True)
class TokenTest:
    """Checks against the token at one anchor.

    Attributes:
        checks: (field name, predicate) pairs, evaluated in order
        shift: Offset from the candidate index
        position: Absolute index; negative counts from the end

    """

    checks: tuple[tuple[str, Predicate], ...]
    shift: int | None = None
    position: int | None = None

    def __post_init__(self) -> None:
        if (self.shift is None) == (self.position is None):
            raise PatternError(None, "a test needs exactly one of shift or position")


class MatchResult(NamedTuple):
    """Outcome of a test: match flag and the resolved child index, if any."""

    matched: bool
    child_index: int | None = None


NO_MATCH = MatchResult(False)

TransformFn = Callable[[list, int, int | None], None]


@dataclass(frozen=True, slots=True)
class Pattern:
    """A named token-shape test paired with the mutation it triggers.

    Attributes:
        name: Human-readable pattern name (used in logs and errors)
        tests: Tests that must all hold at the candidate index
        transform: Called as ``transform(tokens, index, child_index)``
        retry: Re-test this pattern at the same index after it fires

    """

    name: str
    tests: tuple[TokenTest, ...]
    transform: TransformFn
    retry: bool = False


def as_predicate(key: str, value: Any) -> Predicate:
    """Coerce a plain check value into a tagged predicate.

    Raises:
        PatternError: For values of unsupported shape
    """
    if isinstance(value, (Equals, Satisfies, AllOf, Children)):
        return value
    if isinstance(value, (bool, int, str)):
        return Equals(value)
    if callable(value):
        return Satisfies(value)
    if isinstance(value, (list, tuple)) and value:
        if key == "children" and all(isinstance(v, TokenTest) for v in value):
            return Children(tuple(value))
        if all(callable(v) for v in value):
            return AllOf(tuple(value))
    raise PatternError(
        None,
        f"Unknown type of pattern test (key: {key}). Test should be of type "
        "boolean, number, string, function or list of functions.",
    )


def make_test(
    *,
    shift: int | None = None,
    position: int | None = None,
    **checks: Any,
) -> TokenTest:
    """Build a TokenTest from keyword checks, in keyword order."""
    return TokenTest(
        checks=tuple((key, as_predicate(key, value)) for key, value in checks.items()),
        shift=shift,
        position=position,
    )


def _token_at(tokens: Sequence[Token], index: int, test: TokenTest) -> Token | None:
    if test.shift is not None:
        idx = index + test.shift
    else:
        idx = test.position if test.position >= 0 else len(tokens) + test.position
    if idx < 0 or idx >= len(tokens):
        return None
    return tokens[idx]


def _check(key: str, predicate: Predicate, actual: Any) -> bool:
    if isinstance(predicate, Equals):
        # True must not match 1, nor 0 match False
        if isinstance(actual, bool) != isinstance(predicate.value, bool):
            return False
        return actual == predicate.value
    if isinstance(predicate, Satisfies):
        return bool(predicate.func(actual))
    if isinstance(predicate, AllOf):
        return all(func(actual) for func in predicate.funcs)
    raise PatternError(None, f"Unsupported predicate {predicate!r} for key {key!r}")


def _match_children(
    children: Sequence[Token],
    tests: tuple[TokenTest, ...],
    config: AttrsConfig,
) -> int | None:
    """Return the matching child index, or None."""
    if not children:
        return None

    if all(test.position is not None for test in tests):
        if not all(run_test(children, 0, test, config).matched for test in tests):
            return None
        last = tests[-1].position
        return last if last >= 0 else len(children) + last

    for j in range(len(children)):
        if all(run_test(children, j, test, config).matched for test in tests):
            return j
    return None


def run_test(
    tokens: Sequence[Token],
    index: int,
    test: TokenTest,
    config: AttrsConfig | None = None,
) -> MatchResult:
    """Evaluate one test anchored relative to index.

    A missing anchor token, an ignored token or a token lacking one of the
    checked fields is a plain non-match.
    """
    if config is None:
        config = DEFAULT_CONFIG
    token = _token_at(tokens, index, test)
    if token is None or (config.ignore is not None and config.ignore(token)):
        return NO_MATCH

    child_index = None
    for key, predicate in test.checks:
        actual = getattr(token, key, None)
        if actual is None:
            return NO_MATCH

        if isinstance(predicate, Children):
            if key != "children":
                raise PatternError(None, f"child tests are only valid on 'children', not {key!r}")
            child_index = _match_children(actual, predicate.tests, config)
            if child_index is None:
                return NO_MATCH
            continue

        if not _check(key, predicate, actual):
            return NO_MATCH

    return MatchResult(True, child_index)


def match_pattern(
    tokens: Sequence[Token],
    index: int,
    pattern: Pattern,
    config: AttrsConfig | None = None,
) -> MatchResult:
    """Evaluate all of a pattern's tests at index, stopping at the first miss."""
    child_index = None
    try:
        for test in pattern.tests:
            result = run_test(tokens, index, test, config)
            if not result.matched:
                return NO_MATCH
            if result.child_index is not None:
                child_index = result.child_index
    except PatternError as exc:
        if exc.pattern_name is None:
            raise PatternError(pattern.name, str(exc)) from exc
        raise
    return MatchResult(True, child_index)
