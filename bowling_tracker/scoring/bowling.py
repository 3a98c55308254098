"""Ten-pin bowling scoring engine.

Keeps the game in a JSON-friendly dict so it can be stored between rolls;
each event is replayed through a :class:`ScoreTracker` seeded from that dict.
"""
from typing import Dict, List, Optional, Sequence

from .. import config as settings
from ..services.validation import validate_roll_sequence
from .tracker import ScoreTracker, TrackerState


def init_state(config: Dict) -> Dict:
    fresh = TrackerState()
    return {
        "config": {
            "tenthFrameBonus": bool(
                config.get("tenthFrameBonus", settings.BOWLING_TENTH_FRAME_BONUS)
            ),
            "strictTenthFrame": bool(
                config.get("strictTenthFrame", settings.BOWLING_STRICT_TENTH_FRAME)
            ),
        },
        "frames": fresh.frames,
        "current_frame": fresh.current_frame,
        "roll_number": fresh.roll_number,
        "last_recorded_frame": fresh.last_recorded_frame,
    }


def _tracker(state: Dict) -> ScoreTracker:
    cfg = state["config"]
    seed = TrackerState(
        frames=[list(frame) for frame in state["frames"]],
        current_frame=state["current_frame"],
        roll_number=state["roll_number"],
        last_recorded_frame=state["last_recorded_frame"],
    )
    return ScoreTracker(
        seed,
        tenth_frame_bonus=cfg.get("tenthFrameBonus", True),
        strict_tenth_frame=cfg.get("strictTenthFrame", False),
    )


def apply(event: Dict, state: Dict) -> Dict:
    if event.get("type") != "ROLL":
        raise ValueError("invalid bowling event")
    tracker = _tracker(state)
    tracker.add_roll(event.get("pins", 0))
    updated = tracker.get_state()
    state["frames"] = updated.frames
    state["current_frame"] = updated.current_frame
    state["roll_number"] = updated.roll_number
    state["last_recorded_frame"] = updated.last_recorded_frame
    return state


def summary(state: Dict) -> Dict:
    return _tracker(state).summary().model_dump()


def record_rolls(rolls: Sequence[int], state: Optional[Dict] = None):
    """Generate roll events for ``rolls`` and apply them in order.

    Returns ``(events, state)``.  The sequence is validated up front, so a bad
    pin count is rejected before any roll is applied.
    """

    state = state or init_state({})
    events: List[Dict] = []
    for pins in validate_roll_sequence(rolls):
        ev = {"type": "ROLL", "pins": pins}
        state = apply(ev, state)
        events.append(ev)
    return events, state
