from .validation import validate_pins, validate_roll_sequence, MAX_PINS

__all__ = ["validate_pins", "validate_roll_sequence", "MAX_PINS"]
