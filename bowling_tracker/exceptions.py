from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code


class ScoringError(DomainException, ValueError):
    """A roll the score card cannot accept."""


class InvalidRoll(ScoringError):
    def __init__(
        self, detail: str = "You cannot knock more than 10 pins in one roll."
    ) -> None:
        super().__init__(
            status_code=422,
            title="Invalid roll",
            detail=detail,
            code="invalid_roll",
        )


class InvalidFrame(ScoringError):
    def __init__(
        self, detail: str = "You cannot knock more than 10 pins in one frame."
    ) -> None:
        super().__init__(
            status_code=422,
            title="Invalid frame",
            detail=detail,
            code="invalid_frame",
        )


class GameOver(ScoringError):
    def __init__(self) -> None:
        super().__init__(
            status_code=409,
            title="Game over",
            detail="The game has finished.",
            code="game_over",
        )


def problem_from_exception(
    exc: DomainException, *, instance: Optional[str] = None
) -> ProblemDetail:
    """Build the problem document describing ``exc``."""

    return ProblemDetail(
        type=exc.type,
        title=exc.title,
        detail=exc.detail,
        status=exc.status_code,
        instance=instance,
        code=exc.code,
    )
