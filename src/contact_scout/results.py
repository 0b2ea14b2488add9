"""Explicit success/failure values and the combinators that chain them.

Every component in the pipeline reports its outcome as a value instead of
raising: a :class:`Success` wrapping the produced data, or a :class:`Failure`
naming what went wrong. The extraction fallback chain and the contact-path
fuzzer are both built from :func:`first_success`, so each decision point can be
tested on its own.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


class FailureKind(str, Enum):
    """Named reasons a component produced nothing."""

    FETCH = "fetch"
    EXTRACTION = "extraction"
    PARSE = "parse"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Success(Generic[T]):
    """A component produced ``value``."""

    value: T


@dataclass(frozen=True)
class Failure:
    """A component produced nothing, for the given reason."""

    kind: FailureKind
    reason: str = ""


Result = Union[Success[T], Failure]


def and_then(result: Result[T], step: Callable[[T], Result[U]]) -> Result[U]:
    """Feed a successful value into ``step``; pass failures through untouched."""
    if isinstance(result, Success):
        return step(result.value)
    return result


def first_success(
    attempts: Iterable[Callable[[], Result[T]]],
    accept: Callable[[T], bool] = bool,
) -> Result[T]:
    """Run attempts in order and return the first accepted success.

    Attempts after the accepted one are never called. When nothing is
    accepted the last outcome is returned, so callers can still inspect why
    the final attempt came up empty.
    """
    last: Result[T] = Failure(FailureKind.NOT_FOUND, "no attempts")
    for attempt in attempts:
        outcome = attempt()
        if isinstance(outcome, Success) and accept(outcome.value):
            return outcome
        last = outcome
    return last


def value_or(result: Result[T], default: T) -> T:
    """Unwrap a success or fall back to ``default``."""
    if isinstance(result, Success):
        return result.value
    return default
