"""Ten-pin bowling score tracker.

Rolls are recorded one at a time into a score card of eleven frames.  Frame
``0`` is a sentinel that always holds zeros; frames ``1``-``10`` are playable.
Each frame is a triple ``[roll1, roll2, extra]`` where ``extra`` holds the
strike/spare bonus for frames 1-9 and the third roll for frame 10.

Bonus pins are credited to earlier frames as soon as the roll that earns them
lands, so the final score is a plain sum over the card.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .. import config
from ..exceptions import GameOver, InvalidFrame, ScoringError
from ..schemas import GameSummary
from ..services.validation import MAX_PINS, validate_pins

logger = logging.getLogger(__name__)

LAST_FRAME = 10
FINISHED = LAST_FRAME + 1


def _empty_frames() -> List[List[int]]:
    return [[0, 0, 0] for _ in range(LAST_FRAME + 1)]


@dataclass
class TrackerState:
    frames: List[List[int]] = field(default_factory=_empty_frames)
    current_frame: int = 1
    roll_number: int = 1
    last_recorded_frame: int = 0

    def __post_init__(self) -> None:
        if len(self.frames) != LAST_FRAME + 1:
            raise ValueError("frames must hold the sentinel plus ten playable frames")
        if any(len(frame) != 3 for frame in self.frames):
            raise ValueError("each frame must hold exactly three values")
        if not 1 <= self.current_frame <= FINISHED:
            raise ValueError("current_frame out of range")
        max_roll = 3 if self.current_frame == LAST_FRAME else 2
        if not 1 <= self.roll_number <= max_roll:
            raise ValueError("roll_number out of range")
        if not 0 <= self.last_recorded_frame <= min(self.current_frame, LAST_FRAME):
            raise ValueError("last_recorded_frame out of range")
        self.frames = [[int(v) for v in frame] for frame in self.frames]


class ScoreTracker:
    """Score card and roll cursor for a single game.

    ``state`` seeds a game that is already in progress.  ``tenth_frame_bonus``
    and ``strict_tenth_frame`` default to the values in :mod:`bowling_tracker.config`.
    """

    def __init__(
        self,
        state: Optional[TrackerState] = None,
        *,
        tenth_frame_bonus: Optional[bool] = None,
        strict_tenth_frame: Optional[bool] = None,
    ) -> None:
        self._state = copy.deepcopy(state) if state is not None else TrackerState()
        self.tenth_frame_bonus = (
            config.BOWLING_TENTH_FRAME_BONUS
            if tenth_frame_bonus is None
            else bool(tenth_frame_bonus)
        )
        self.strict_tenth_frame = (
            config.BOWLING_STRICT_TENTH_FRAME
            if strict_tenth_frame is None
            else bool(strict_tenth_frame)
        )
        if not self.tenth_frame_bonus and self._state.roll_number > 2:
            raise ValueError("roll_number out of range without tenth frame bonus rolls")

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    def get_current_frame(self) -> int:
        return self._state.current_frame

    def get_previous_frame(self) -> int:
        return self._state.current_frame - 1

    def get_roll_number(self) -> int:
        return self._state.roll_number

    def is_first_roll(self) -> bool:
        return self._state.roll_number == 1

    def is_finished(self) -> bool:
        return self._state.current_frame == FINISHED

    def get_score_card(self) -> Dict[int, List[int]]:
        """Return a copy of every frame recorded so far, sentinel included."""
        frames = self._state.frames
        return {i: list(frames[i]) for i in range(self._state.last_recorded_frame + 1)}

    def get_state(self) -> TrackerState:
        return copy.deepcopy(self._state)

    def previous_frame_is_spare(self) -> bool:
        first, second, _ = self._state.frames[self.get_previous_frame()]
        return first < MAX_PINS and first + second == MAX_PINS

    def previous_frame_is_strike(self) -> bool:
        return self._frame_is_strike(self.get_previous_frame())

    @staticmethod
    def is_strike(pins: int) -> bool:
        return pins == MAX_PINS

    def _frame_is_strike(self, index: int) -> bool:
        return index >= 1 and self.is_strike(self._state.frames[index][0])

    def _bonus_rolls_in_last_frame(self) -> bool:
        return self.tenth_frame_bonus and self._state.current_frame == LAST_FRAME

    # ------------------------------------------------------------------
    # Cursor primitives
    # ------------------------------------------------------------------
    def next_frame(self) -> None:
        if self.is_finished():
            raise GameOver()
        self._state.current_frame += 1
        self._state.roll_number = 1

    def change_roll_number(self) -> None:
        max_roll = 3 if self._bonus_rolls_in_last_frame() else 2
        if self._state.roll_number < max_roll:
            self._state.roll_number += 1

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------
    def add_roll(self, pins: int) -> None:
        """Record ``pins`` for the next roll of the game.

        Raises :class:`InvalidRoll`, :class:`GameOver` or :class:`InvalidFrame`
        (checked in that order) without touching the score card.
        """
        try:
            pins = validate_pins(pins)
            if self.is_finished():
                raise GameOver()
            self._check_frame_total(pins)
        except ScoringError as exc:
            logger.debug(
                "Rejected roll of %r pins in frame %d: %s",
                pins,
                self._state.current_frame,
                exc,
            )
            raise

        self._record(pins)
        self._credit_bonus(pins)
        self._advance(pins)

        if self.is_finished():
            logger.info("Game finished with a score of %d", self.calculate_final_score())

    def _check_frame_total(self, pins: int) -> None:
        state = self._state
        first, second, _ = state.frames[state.current_frame]

        if not self._bonus_rolls_in_last_frame():
            if state.roll_number == 2 and first + pins > MAX_PINS:
                raise InvalidFrame()
            return

        # Frame 10 resets the rack after a strike or spare; only strict mode
        # checks the pins that are actually standing.
        if not self.strict_tenth_frame:
            return
        if state.roll_number == 2 and first < MAX_PINS and first + pins > MAX_PINS:
            raise InvalidFrame()
        if (
            state.roll_number == 3
            and first == MAX_PINS
            and second < MAX_PINS
            and second + pins > MAX_PINS
        ):
            raise InvalidFrame()

    def _record(self, pins: int) -> None:
        state = self._state
        state.frames[state.current_frame][state.roll_number - 1] = pins
        state.last_recorded_frame = state.current_frame

    def _credit_bonus(self, pins: int) -> None:
        state = self._state
        current = state.current_frame
        slot = state.roll_number - 1
        if slot == 2:
            # third roll of frame 10 only counts towards frame 10
            return

        previous = self.get_previous_frame()
        if self.previous_frame_is_strike():
            state.frames[previous][2] += pins
            # a strike followed by a strike collects this roll as its second bonus
            if slot == 0 and self._frame_is_strike(current - 2):
                state.frames[current - 2][2] += pins
        elif slot == 0 and self.previous_frame_is_spare():
            state.frames[previous][2] += pins

    def _advance(self, pins: int) -> None:
        state = self._state
        if not self._bonus_rolls_in_last_frame():
            if state.roll_number == 1 and not self.is_strike(pins):
                self.change_roll_number()
            else:
                self.next_frame()
            return

        first, second, _ = state.frames[LAST_FRAME]
        earned_third = self.is_strike(first) or first + second == MAX_PINS
        if state.roll_number == 1 or (state.roll_number == 2 and earned_third):
            self.change_roll_number()
        else:
            self.next_frame()

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------
    def calculate_final_score(self) -> int:
        frames = self._state.frames
        return sum(sum(frames[i]) for i in range(1, LAST_FRAME + 1))

    def frame_scores(self) -> List[Optional[int]]:
        """Running totals for frames 1-10; frames not reached yet are ``None``."""
        scores: List[Optional[int]] = []
        total = 0
        for i in range(1, LAST_FRAME + 1):
            if i > self._state.last_recorded_frame:
                scores.append(None)
                continue
            total += sum(self._state.frames[i])
            scores.append(total)
        return scores

    def summary(self) -> GameSummary:
        return GameSummary(
            frames=[list(frame) for frame in self._state.frames[1:]],
            scores=self.frame_scores(),
            total=self.calculate_final_score(),
            current_frame=self._state.current_frame,
            roll_number=self._state.roll_number,
            finished=self.is_finished(),
        )
