"""Environment-driven settings for the double-slit simulator."""

import os
from typing import Optional

from double_slit.constants import NUM_PARTICLES as _DEFAULT_NUM_PARTICLES

# Logging settings
LOG_LEVEL = os.getenv("DOUBLE_SLIT_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv(
    "DOUBLE_SLIT_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Sampling settings (unset seed -> fresh entropy every session)
_seed = os.getenv("DOUBLE_SLIT_SEED")
RANDOM_SEED: Optional[int] = int(_seed) if _seed else None
NUM_PARTICLES = int(os.getenv("DOUBLE_SLIT_NUM_PARTICLES", str(_DEFAULT_NUM_PARTICLES)))

# Animation settings
FPS = int(os.getenv("DOUBLE_SLIT_FPS", "30"))
FRAMES_PER_RUN = int(os.getenv("DOUBLE_SLIT_FRAMES_PER_RUN", "300"))

__all__ = [
    "LOG_LEVEL",
    "LOG_FORMAT",
    "RANDOM_SEED",
    "NUM_PARTICLES",
    "FPS",
    "FRAMES_PER_RUN",
]
