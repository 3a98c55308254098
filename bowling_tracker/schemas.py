from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class GameSummary(BaseModel):
    frames: List[List[int]]
    scores: List[Optional[int]]
    total: int
    current_frame: int = Field(..., ge=1, le=11)
    roll_number: int = Field(..., ge=1, le=3)
    finished: bool

    @field_validator("frames")
    @classmethod
    def _validate_frames(cls, value: List[List[int]]) -> List[List[int]]:
        if len(value) != 10:
            raise ValueError("frames must cover the ten playable frames")
        if any(len(frame) != 3 for frame in value):
            raise ValueError("each frame must hold exactly three values")
        return value
