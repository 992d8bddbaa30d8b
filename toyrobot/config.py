"""
Central configuration for toy robot tunables and shared constants.
"""

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("TOYROBOT_TRACE", "0")).lower() in ("1", "true", "yes", "on")

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip().lower()
    if s in ("1", "true", "yes", "on"):
        return True
    if s in ("0", "false", "no", "off"):
        return False
    logger.warning("Ignoring unrecognized value %r for %s", raw, name)
    return default


# Upper-case the direction given to PLACE before storing it
NORMALIZE_DIRECTION: bool = _env_bool("TOYROBOT_NORMALIZE_DIRECTION", True)

# Answer REPORT only after a valid PLACE
REPORT_REQUIRES_PLACE: bool = _env_bool("TOYROBOT_REPORT_REQUIRES_PLACE", True)

# Arguments used by a bare PLACE
DEFAULT_POSITION: tuple[int, int] = (0, 0)
DEFAULT_DIRECTION: str = "EAST"

LOG_LEVEL_DEFAULT: str = os.getenv("TOYROBOT_LOG_LEVEL", "WARNING").upper()
