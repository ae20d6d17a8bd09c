"""Pytest 配置"""

import pytest

from fakes import FakeMultiplexer
from panetree.engine import PanetreeEngine
from panetree.telemetry import metrics


@pytest.fixture(autouse=True)
def reset_metrics():
    """每个测试的计数器从零开始"""
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def fake_host():
    return FakeMultiplexer()


@pytest.fixture
def engine(fake_host):
    return PanetreeEngine(fake_host, settle_delay=0, poll_interval=0, settle_timeout=0.05)
