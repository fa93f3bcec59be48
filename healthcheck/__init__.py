"""healthcheck - engine de health checks sequenciais com categorias."""

from __future__ import annotations

__version__ = "0.3.1"
__author__ = "Bruno"

import healthcheck.utils.logging  # noqa: F401
from healthcheck.category import Category, Checker, new_category, new_category_with_context, retry_for
from healthcheck.config import HealthCheckConfig, configure, get_config, reset_config
from healthcheck.context import ExecutionContext
from healthcheck.engine import HealthChecker
from healthcheck.exceptions import (
    CategoryError,
    CheckPendingError,
    HealthCheckError,
    ResourceError,
    is_category_error,
)
from healthcheck.models import CategoryID, CheckObserver, CheckResult, HealthCheckState, Runner
from healthcheck.outcomes import Failure, Ok, Outcome, Skip, VerboseSuccess
from healthcheck.reporter import Reporter, SimpleReporter

__all__ = [
    "Category",
    "CategoryError",
    "CategoryID",
    "CheckObserver",
    "CheckPendingError",
    "CheckResult",
    "Checker",
    "ExecutionContext",
    "Failure",
    "HealthCheckConfig",
    "HealthCheckError",
    "HealthCheckState",
    "HealthChecker",
    "Ok",
    "Outcome",
    "Reporter",
    "ResourceError",
    "Runner",
    "SimpleReporter",
    "Skip",
    "VerboseSuccess",
    "configure",
    "get_config",
    "is_category_error",
    "new_category",
    "new_category_with_context",
    "reset_config",
    "retry_for",
    "__version__",
]
