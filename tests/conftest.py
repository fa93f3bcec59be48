"""Pytest configuration and fixtures."""

from __future__ import annotations

from datetime import timedelta

import pytest

from healthcheck.config import HealthCheckConfig, reset_config
from healthcheck.models import CheckResult

HINT_BASE_URL = "http://test.com/"


class ResultCollector:
    """Observer que guarda os resultados e opcionalmente repassa a outro."""

    def __init__(self, forward=None) -> None:
        self.results: list[CheckResult] = []
        self.forward = forward

    def __call__(self, result: CheckResult) -> None:
        self.results.append(result)
        if self.forward is not None:
            self.forward(result)

    @property
    def terminal(self) -> list[CheckResult]:
        return [r for r in self.results if not r.retry]

    @property
    def retries(self) -> list[CheckResult]:
        return [r for r in self.results if r.retry]


@pytest.fixture(autouse=True)
def _reset_global_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def fast_config() -> HealthCheckConfig:
    """Config com janela de retry curta para os testes."""
    return HealthCheckConfig(
        retry_window=timedelta(milliseconds=1),
        timeout=timedelta(seconds=5),
    )


@pytest.fixture
def collector() -> ResultCollector:
    return ResultCollector()


@pytest.fixture
def make_collector() -> type[ResultCollector]:
    return ResultCollector


@pytest.fixture
def hint_base_url() -> str:
    return HINT_BASE_URL
