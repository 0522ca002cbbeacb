"""Public re-exports of all model types."""

from models.criteria import UNBOUNDED, MatchCriteria

__all__ = [
    "MatchCriteria",
    "UNBOUNDED",
]
