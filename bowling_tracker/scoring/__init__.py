"""Scoring engines for ten-pin bowling."""

from . import bowling
from .tracker import ScoreTracker, TrackerState

__all__ = [
    "bowling",
    "ScoreTracker",
    "TrackerState",
]
