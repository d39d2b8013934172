"""Post ranking score."""

from anaso_algorithm.schemas import ScoreBreakdown, ScoringInput

from .scorer import (
    TWELVE_HOURS,
    explain_score,
    popularity_term,
    recency_term,
    score,
    score_post,
)

__all__ = [
    "TWELVE_HOURS",
    "ScoreBreakdown",
    "ScoringInput",
    "explain_score",
    "popularity_term",
    "recency_term",
    "score",
    "score_post",
]
