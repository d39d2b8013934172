"""Anaso post ranking package."""

from .config import AppConfig, default_config, load_config
from .schemas import ScoreBreakdown, ScoringInput
from .scoring import score, score_post

__all__ = [
    "AppConfig",
    "ScoreBreakdown",
    "ScoringInput",
    "default_config",
    "load_config",
    "score",
    "score_post",
]
