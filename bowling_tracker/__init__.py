"""Ten-pin bowling score tracking."""

from .scoring import ScoreTracker, TrackerState

__all__ = ["ScoreTracker", "TrackerState"]
