"""Engine configuration and logging setup."""

import logging
import os
from typing import Optional

from pydantic import BaseModel

logger = logging.getLogger("VectorMotion.core.settings")

# Absolute tolerance for "this scale factor is zero"
DEFAULT_SCALE_EPSILON = 1e-9
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

ENV_SCALE_EPSILON = "VMOTION_SCALE_EPSILON"
ENV_LOG_LEVEL = "VMOTION_LOG_LEVEL"


class EngineSettings(BaseModel):
    """Tunables shared by the painter and the frame driver."""
    scale_epsilon: float = DEFAULT_SCALE_EPSILON
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from ``VMOTION_*`` environment variables."""
        settings = cls()

        raw_eps = os.environ.get(ENV_SCALE_EPSILON)
        if raw_eps:
            try:
                eps = float(raw_eps)
            except ValueError:
                logger.warning(f"Ignoring invalid {ENV_SCALE_EPSILON}={raw_eps!r}")
            else:
                if eps < 0:
                    logger.warning(f"Ignoring negative {ENV_SCALE_EPSILON}={raw_eps!r}")
                else:
                    settings.scale_epsilon = eps

        level = os.environ.get(ENV_LOG_LEVEL)
        if level:
            settings.log_level = level.upper()
        return settings


def is_degenerate(value: float, epsilon: float = DEFAULT_SCALE_EPSILON) -> bool:
    return abs(value) <= epsilon


def configure_logging(settings: Optional[EngineSettings] = None):
    """Configure root logging the same way for scripts and notebooks."""
    settings = settings or EngineSettings.from_env()
    logging.basicConfig(level=settings.log_level, format=settings.log_format)
