import logging
import os

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _parse_flag(env_var: str, default: bool) -> bool:
    """
    Read a boolean flag from the environment:
      - unset/empty values fall back to ``default``
      - accepts 1/0, true/false, yes/no, on/off (case-insensitive)
      - anything else logs a warning and falls back to ``default``
    """
    raw_value = (os.getenv(env_var) or "").strip().lower()
    if not raw_value:
        return default
    if raw_value in _TRUTHY:
        return True
    if raw_value in _FALSY:
        return False
    logger.warning(
        "%s is not a valid boolean (got %r); defaulting to %s",
        env_var,
        raw_value,
        default,
    )
    return default


BOWLING_TENTH_FRAME_BONUS = _parse_flag("BOWLING_TENTH_FRAME_BONUS", True)
BOWLING_STRICT_TENTH_FRAME = _parse_flag("BOWLING_STRICT_TENTH_FRAME", False)
