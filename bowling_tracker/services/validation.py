from collections.abc import Sequence
from typing import Any, List

from ..exceptions import InvalidRoll

MAX_PINS = 10


def validate_pins(raw: Any) -> int:
    """Normalise a single pin count.

    Rules:
    - booleans are rejected (bool is a subclass of int in Python)
    - the value must be an integer, or something that converts to one exactly
    - the value must lie within ``0..MAX_PINS``
    """

    if isinstance(raw, bool):
        raise InvalidRoll("Pins must be an integer (not a boolean).")
    try:
        value = int(raw)
    except (TypeError, ValueError, OverflowError):
        raise InvalidRoll("Pins must be an integer.")
    # int() truncates floats, decimals and fractions
    if not isinstance(raw, str) and raw != value:
        raise InvalidRoll("Pins must be an integer.")

    if value < 0:
        raise InvalidRoll("You cannot knock down a negative number of pins.")
    if value > MAX_PINS:
        raise InvalidRoll()
    return value


def validate_roll_sequence(rolls: Sequence[Any]) -> List[int]:
    if not isinstance(rolls, Sequence) or isinstance(rolls, (str, bytes)):
        raise InvalidRoll("Rolls must be provided as a sequence of integers.")

    normalized: List[int] = []
    for index, raw in enumerate(rolls, start=1):
        try:
            normalized.append(validate_pins(raw))
        except InvalidRoll as exc:
            raise InvalidRoll(f"Roll #{index}: {exc.detail}") from exc
    return normalized
