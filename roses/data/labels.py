"""Per-contestant labels derived from weekly status codes.

``weeks`` is always the sequence of week 1..N codes for one contestant, with
``""`` for weeks in which no code was recorded.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from ..config import (
    CODE_ELIMINATED,
    CODE_ELIMINATED_DATE,
    CODE_ELIMINATED_UNSCHEDULED,
    CODE_FIRED,
    CODE_QUIT,
    CODE_WIN,
    FATE_DATE,
    FATE_FIRED,
    FATE_LATER_CEREMONY,
    FATE_QUIT,
    FATE_UNSCHEDULED,
    FATE_WEEK1_CEREMONY,
    FATE_WON,
    PLACE_LABELS,
    PLACE_OTHER,
    TERMINAL_CODES,
    WINNER_ELIMINATION_INDEX,
)

Weeks = Sequence[str]


def _any_week_equals(code: str, start_week: int = 1) -> Callable[[Weeks], bool]:
    def predicate(weeks: Weeks) -> bool:
        return any(c == code for c in weeks[start_week - 1 :])

    return predicate


def _week1_equals(code: str) -> Callable[[Weeks], bool]:
    def predicate(weeks: Weeks) -> bool:
        return len(weeks) > 0 and weeks[0] == code

    return predicate


def _any_week_contains(code: str) -> Callable[[Weeks], bool]:
    def predicate(weeks: Weeks) -> bool:
        return any(code in c for c in weeks)

    return predicate


# Evaluated top to bottom; the first matching predicate decides the fate.
FATE_RULES: List[Tuple[Callable[[Weeks], bool], str]] = [
    (_week1_equals(CODE_ELIMINATED), FATE_WEEK1_CEREMONY),
    (_any_week_equals(CODE_ELIMINATED, start_week=2), FATE_LATER_CEREMONY),
    (_any_week_equals(CODE_ELIMINATED_DATE), FATE_DATE),
    (_any_week_equals(CODE_ELIMINATED_UNSCHEDULED), FATE_UNSCHEDULED),
    (_any_week_equals(CODE_FIRED), FATE_FIRED),
    (_any_week_equals(CODE_QUIT), FATE_QUIT),
    (_any_week_contains(CODE_WIN), FATE_WON),
]

FATE_ORDER = [label for _, label in FATE_RULES]


def classify_fate(weeks: Weeks) -> Optional[str]:
    """Return the fate label for one contestant, or None if no rule matches."""

    for predicate, label in FATE_RULES:
        if predicate(weeks):
            return label
    return None


def elimination_index(weeks: Weeks, fate: Optional[str]) -> Optional[int]:
    """1-based index of the last week holding a terminal code.

    Winners get WINNER_ELIMINATION_INDEX regardless of where their code sits.
    """

    if fate == FATE_WON:
        return WINNER_ELIMINATION_INDEX

    last = None
    for i, code in enumerate(weeks, start=1):
        if code in TERMINAL_CODES:
            last = i
    return last


def place_for_ranking(ranking: int) -> str:
    if ranking < 1:
        raise ValueError(f"ranking must be >= 1, got {ranking}")
    if ranking <= len(PLACE_LABELS):
        return PLACE_LABELS[ranking - 1]
    return PLACE_OTHER
