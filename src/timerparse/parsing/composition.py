"""Pattern composition engine.

Builds the ordered list of whole-string patterns the date-time grammar tries.
Every date grammar is paired with every time grammar. Each pair of fragments
yields two orderings, "date [at] time" and "time [on] date"; when one side
is the empty grammar only the other side is emitted.

Candidate order is the disambiguation mechanism for overlapping fragments:

1. date-only patterns (time grammar fixed to empty)
2. time-only patterns (date grammar fixed to empty)
3. the full cross product

Duplicates keep their first position. Tables are compiled once per date
order and cached.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterator
from dataclasses import dataclass

import regex

from ..constants import MAX_PATTERN_CACHE_SIZE, PATTERN_FLAGS
from ..enums import DateOrder
from .dates import DATE_GRAMMARS, EMPTY_DATE_GRAMMAR, DateToken
from .grammar import Grammar
from .times import EMPTY_TIME_GRAMMAR, TIME_GRAMMARS, TimeToken

__all__ = [
    "PatternDefinition",
    "clear_pattern_cache",
    "compose_pattern_sources",
    "get_pattern_definitions",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PatternDefinition:
    """A compiled whole-string pattern and the grammars that built it."""

    date_grammar: Grammar[DateToken]
    time_grammar: Grammar[TimeToken]
    pattern: regex.Pattern[str]

    @property
    def name(self) -> str:
        return f"{self.date_grammar.name}+{self.time_grammar.name}"


def _pair_sources(
    date_grammar: Grammar[DateToken],
    time_grammar: Grammar[TimeToken],
    order: DateOrder,
) -> Iterator[str]:
    if not (
        date_grammar.is_compatible_with(time_grammar)
        and time_grammar.is_compatible_with(date_grammar)
    ):
        return

    for date_pattern in date_grammar.get_patterns(order):
        for time_pattern in time_grammar.get_patterns(order):
            if date_grammar.is_empty:
                yield rf"^(?:{time_pattern})$"
            elif time_grammar.is_empty:
                yield rf"^(?:{date_pattern})$"
            else:
                yield rf"^(?:{date_pattern})\s+(?:at\s+)?(?:{time_pattern})$"
                yield rf"^(?:{time_pattern})\s+(?:on\s+)?(?:{date_pattern})$"


def _grammar_pairs() -> Iterator[tuple[Grammar[DateToken], Grammar[TimeToken]]]:
    for date_grammar in DATE_GRAMMARS:
        yield date_grammar, EMPTY_TIME_GRAMMAR
    for time_grammar in TIME_GRAMMARS:
        yield EMPTY_DATE_GRAMMAR, time_grammar
    for date_grammar in DATE_GRAMMARS:
        for time_grammar in TIME_GRAMMARS:
            yield date_grammar, time_grammar


def compose_pattern_sources(
    order: DateOrder,
) -> list[tuple[Grammar[DateToken], Grammar[TimeToken], str]]:
    """Pattern sources in match priority order, duplicates removed.

    Args:
        order: Locale date order

    Returns:
        (date grammar, time grammar, pattern text) triples
    """
    seen: set[str] = set()
    sources: list[tuple[Grammar[DateToken], Grammar[TimeToken], str]] = []
    for date_grammar, time_grammar in _grammar_pairs():
        for source in _pair_sources(date_grammar, time_grammar, order):
            if source in seen:
                continue
            seen.add(source)
            sources.append((date_grammar, time_grammar, source))
    return sources


@functools.lru_cache(maxsize=MAX_PATTERN_CACHE_SIZE)
def get_pattern_definitions(order: DateOrder) -> tuple[PatternDefinition, ...]:
    """Compiled date-time patterns for a date order.

    Thread-safe via lru_cache internal locking; compiled patterns are
    immutable and shared.
    """
    definitions = tuple(
        PatternDefinition(
            date_grammar=date_grammar,
            time_grammar=time_grammar,
            pattern=regex.compile(source, PATTERN_FLAGS),
        )
        for date_grammar, time_grammar, source in compose_pattern_sources(order)
    )
    logger.debug("Compiled %d date-time patterns for %s", len(definitions), order)
    return definitions


def clear_pattern_cache() -> None:
    """Clear compiled date-time pattern tables."""
    get_pattern_definitions.cache_clear()
