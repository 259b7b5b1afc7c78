"""Presentation-side ordering, filtering and summary of ranked matches.

The engine always returns every neighbourhood ordered by overall score. These helpers
reproduce what the results screen offers on top of that: alternative sort modes, a
minimum-score filter, a top-N limit and the "quick summary" panel.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import reduce

from ..domain.ranking import MatchResult
from ..exceptions import SortModeError

SORT_MODES = ("match", "price", "safety")

_SORT_KEYS: dict[str, tuple[Callable[[MatchResult], float], bool]] = {
    "match": (lambda match: match.overall_score, True),
    "price": (lambda match: match.record.housing.median_rent, False),
    "safety": (lambda match: match.record.safety.safety_score, True),
}


@dataclass(frozen=True)
class MatchSummary:
    """Headline picks from a list of matches."""

    best_overall: MatchResult
    most_affordable: MatchResult
    safest: MatchResult


def sort_matches(matches: Sequence[MatchResult], sort_by: str = "match") -> list[MatchResult]:
    """Return matches in the requested order. Ties keep their incoming order."""
    mode = sort_by.strip().lower()
    if mode not in _SORT_KEYS:
        raise SortModeError(sort_by, SORT_MODES)
    key, descending = _SORT_KEYS[mode]
    return sorted(matches, key=key, reverse=descending)


def filter_matches(matches: Sequence[MatchResult], min_score: int) -> list[MatchResult]:
    """Keep matches whose overall score is at least ``min_score``."""
    return [match for match in matches if match.overall_score >= min_score]


def limit_matches(matches: Sequence[MatchResult], limit: int | None) -> list[MatchResult]:
    if limit is None:
        return list(matches)
    return list(matches[:limit])


def summarise_matches(matches: Sequence[MatchResult]) -> MatchSummary | None:
    """Pick the best overall, most affordable and safest matches.

    Ties on rent or safety go to the later match, as the results screen does.
    """
    if not matches:
        return None
    most_affordable = reduce(
        lambda prev, curr: prev
        if prev.record.housing.median_rent < curr.record.housing.median_rent
        else curr,
        matches,
    )
    safest = reduce(
        lambda prev, curr: prev
        if prev.record.safety.safety_score > curr.record.safety.safety_score
        else curr,
        matches,
    )
    return MatchSummary(best_overall=matches[0], most_affordable=most_affordable, safest=safest)
