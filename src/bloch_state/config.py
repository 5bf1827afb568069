####### Imports #######

import logging
import os


####### Defaults #######

# |0⟩, north pole of the sphere
DEFAULT_STATE = (0.0, 0.0, 1.0)

# slider range of the axis controls, in degrees
ANGLE_MIN = -180.0
ANGLE_MAX = 180.0

# transitions drawn between two states
ANIMATION_STEPS = 30
ANIMATION_INTERVAL_MS = 25

# states kept in a session history, oldest dropped first
HISTORY_LIMIT = 1000


####### Logging #######

LOG_LEVEL = os.environ.get("BLOCH_STATE_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

def configure_logging(level=None) -> None:
    """Basic console logging for scripts and examples. The library itself never adds handlers."""
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
