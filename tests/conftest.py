import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from bowling_tracker.scoring import ScoreTracker  # noqa: E402


@pytest.fixture
def tracker():
    """A tracker with the standard tenth-frame rules, independent of the environment."""
    return ScoreTracker(tenth_frame_bonus=True, strict_tenth_frame=False)


