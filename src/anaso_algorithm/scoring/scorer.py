from __future__ import annotations

import logging
import math

from anaso_algorithm.schemas import ScoreBreakdown, ScoringInput

logger = logging.getLogger(__name__)

TWELVE_HOURS = 43200


def recency_term(time_posted: int) -> int:
    """Whole twelve-hour periods since the epoch, truncated toward zero."""
    periods = abs(time_posted) // TWELVE_HOURS
    return -periods if time_posted < 0 else periods


def popularity_term(likes: int) -> int:
    """Base-10 order of magnitude of ``likes + 1``.

    Like counts of zero or below all contribute nothing: the value passed to
    the logarithm must be at least one.
    """
    normalized = max(likes + 1, 1)
    magnitude = int(math.log10(normalized))

    # log10 on floats can land on either side of an exact power of ten.
    if 10**magnitude > normalized:
        magnitude -= 1
    elif 10 ** (magnitude + 1) <= normalized:
        magnitude += 1
    return magnitude


def explain_score(data: ScoringInput) -> ScoreBreakdown:
    recency = recency_term(data.time_posted)
    popularity = popularity_term(data.likes)
    return ScoreBreakdown(
        recency=recency,
        popularity=popularity,
        score=recency + popularity,
    )


def score_post(data: ScoringInput) -> int:
    """The static score value to associate with a post.

    Meant to be recomputed whenever a like is added or removed and stored in a
    score column next to the post; listings order by that column, descending.
    Newer posts gain one point every twelve hours and each order of magnitude
    of likes adds one more.
    """
    return score(data.time_posted, data.likes)


def score(time_posted: int, likes: int) -> int:
    value = recency_term(time_posted) + popularity_term(likes)
    logger.debug(
        "score computed time_posted=%d likes=%d score=%d",
        time_posted,
        likes,
        value,
    )
    return value
