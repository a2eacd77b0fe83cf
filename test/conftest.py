"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a controllable clock, a cache bound
to it, a renderer that counts calls, and a web server wired with them.
"""

import sys
from pathlib import Path

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging
import pytest
from fastapi.testclient import TestClient

from radarchart.cache import MemoryImageCache
from radarchart.chart_params import ChartRequest
from radarchart.exceptions import RenderError
from radarchart.render import ChartRendererBase
from radarchart.settings import reset_settings
from radarchart.web_server import ChartWebServer

FAKE_PNG = b"\x89PNG\r\n\x1a\nfake-image"

# A query in the legacy format, as produced by existing dashboards
LEGACY_QUERY = (
    "cht=r&chs=225x225&chd=t:69.12,77,58,61.5,72|-1,-1,-1,-1,72,73,85,50,69.12"
    "&chxl=0:|note|mus|reg|ent|pab|jock|dist|sais"
)


class FakeClock:
    """Monotonic clock the tests move by hand"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingRenderer(ChartRendererBase):
    """Renderer double that records calls and returns distinct bytes per call"""

    def __init__(self, fail: bool = False):
        self.calls: list[tuple[ChartRequest, int]] = []
        self.fail = fail

    def render(self, data: ChartRequest, note: int) -> bytes:
        self.calls.append((data, note))
        if self.fail:
            raise RenderError("renderer exploded")
        return FAKE_PNG + str(len(self.calls)).encode()


@pytest.fixture(autouse=True)
def clean_settings():
    """Make sure no test sees settings loaded by another"""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(scope="function")
def logger():
    """
    Provide a ConsoleLogger instance for test logging.

    Returns:
        ConsoleLogger: Logger configured for testing
    """
    from radarchart.logger import ConsoleLogger

    return ConsoleLogger(name="test", level=logging.INFO)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def image_cache(fake_clock):
    """MemoryImageCache with the default TTL and sweep interval on a fake clock"""
    return MemoryImageCache(ttl_seconds=300, sweep_interval_seconds=600, clock=fake_clock)


@pytest.fixture
def counting_renderer():
    return CountingRenderer()


@pytest.fixture
def server(image_cache, counting_renderer):
    """ChartWebServer wired with the fake-clock cache and counting renderer"""
    return ChartWebServer(cache=image_cache, renderer=counting_renderer)


@pytest.fixture
def client(server):
    return TestClient(server.app)
