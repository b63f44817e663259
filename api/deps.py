"""
FastAPI dependency providers.

Reads demo settings from the environment once and reuses them across
requests. ``.env`` files are honoured via python-dotenv.

Environment:
    PRIMITIVES_DEMO_TIME_SCALE   Multiplier for every demo delay (default 1.0).
"""

import logging
import os

from dotenv import load_dotenv

from core.config import DemoConfig
from demos.registry import DemoRegistry, get_registry

logger = logging.getLogger(__name__)

_demo_config: DemoConfig | None = None


def get_demo_config() -> DemoConfig:
    """
    Return a cached ``DemoConfig`` built from the environment.

    Raises:
        ValueError: If ``PRIMITIVES_DEMO_TIME_SCALE`` is not a positive number.
    """
    global _demo_config  # noqa: PLW0603
    if _demo_config is None:
        load_dotenv()
        raw = os.environ.get("PRIMITIVES_DEMO_TIME_SCALE", "1.0")
        _demo_config = DemoConfig(time_scale=float(raw))
        logger.info("Demo config loaded (time_scale=%s)", _demo_config.time_scale)
    return _demo_config


def get_demo_registry() -> DemoRegistry:
    """Return the auto-discovered demo registry singleton."""
    return get_registry()
