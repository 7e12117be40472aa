"""Ordered keyword rules for classifying free-text labels.

A classifier is a list of ``KeywordRule`` objects evaluated top to bottom
against a case-folded label. The first rule that matches wins, and a
classifier-specific default is returned when nothing matches. Keeping the
rules as data lets tests pin their order and lets new rules be added without
touching the matching loop.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class KeywordRule(Generic[T]):
    """Maps a label to ``result`` when any keyword is found in it.

    ``contains`` keywords match anywhere in the label; ``exact`` keywords must
    equal the whole label.
    """

    result: T
    contains: tuple[str, ...] = ()
    exact: tuple[str, ...] = ()

    def matches(self, label: str) -> bool:
        if label in self.exact:
            return True
        return any(keyword in label for keyword in self.contains)


def rule(result: T, *contains: str, exact: Iterable[str] = ()) -> KeywordRule[T]:
    """Shorthand for building a ``KeywordRule``."""
    return KeywordRule(result=result, contains=tuple(contains), exact=tuple(exact))


def first_match(rules: Sequence[KeywordRule[T]], label: str, default: T) -> T:
    """Return the result of the first matching rule, or ``default``."""
    for candidate in rules:
        if candidate.matches(label):
            return candidate.result
    return default
