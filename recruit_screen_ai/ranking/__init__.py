"""Ranking: rule-based qualification engine."""

from recruit_screen_ai.ranking.qualification_engine import score, score_candidate

__all__ = ["score_candidate", "score"]
