"""
Shared fixtures for the test suite.

Centralizes reusable test infrastructure so individual test files
don't need to repeat override/timing boilerplate.
"""

import asyncio

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from api.deps import get_demo_config
from api.main import app
from core.config import DemoConfig

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

FAST_DEMO_CONFIG = DemoConfig(time_scale=0.05)
"""Demo delays at 5%; the slowest combinator demo takes 100 ms."""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def demo_config() -> DemoConfig:
    """Fast demo timings."""
    return FAST_DEMO_CONFIG


@pytest_asyncio.fixture()
async def loop_errors():
    """Capture contexts passed to the running loop's exception handler."""
    captured: list[dict] = []
    loop = asyncio.get_running_loop()
    previous = loop.get_exception_handler()
    loop.set_exception_handler(lambda _loop, context: captured.append(context))
    yield captured
    loop.set_exception_handler(previous)


@pytest.fixture()
def api_client():
    """FastAPI ``TestClient`` with demo timings sped up."""
    app.dependency_overrides[get_demo_config] = lambda: FAST_DEMO_CONFIG

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
