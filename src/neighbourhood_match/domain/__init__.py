"""Domain modules for neighbourhood matching."""

from .ranking import MatchResult, find_matches
from .scoring import CategoryScores, normalise_score

__all__ = ["CategoryScores", "MatchResult", "find_matches", "normalise_score"]
