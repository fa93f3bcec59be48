"""Checks do ambiente local."""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path

from healthcheck.category import Checker
from healthcheck.context import ExecutionContext
from healthcheck.exceptions import InvalidConfigurationError
from healthcheck.models import HealthCheckState
from healthcheck.outcomes import Outcome, fail, ok, skip, verbose


def _parse_version(version: str) -> tuple[int, ...]:
    try:
        return tuple(int(part) for part in version.split("."))
    except ValueError:
        raise InvalidConfigurationError(
            "min_python_version", f"expected dotted numbers like 3.11, got {version!r}"
        ) from None


def python_version_checker(minimum: str, **policy: object) -> Checker:
    required = _parse_version(minimum)

    def check(ctx: ExecutionContext, state: HealthCheckState) -> Outcome:
        current = sys.version_info[: len(required)]
        running = ".".join(str(p) for p in sys.version_info[:3])
        state.set("python_version", running)
        if tuple(current) < required:
            return fail(f"Python {running} is older than required {minimum}")
        return verbose(f"Python {running}")

    return Checker(
        description=f"python is at least {minimum}",
        hint_anchor="python-version",
        check=check,
        **policy,  # type: ignore[arg-type]
    )


def disk_space_checker(path: str | Path, min_free_bytes: int, **policy: object) -> Checker:
    def check(ctx: ExecutionContext, state: HealthCheckState) -> Outcome:
        try:
            usage = shutil.disk_usage(path)
        except FileNotFoundError:
            return fail(f"{path} does not exist")

        free_gb = usage.free / 1024**3
        if usage.free < min_free_bytes:
            return fail(
                f"only {free_gb:.2f} GB free on {path}, "
                f"need {min_free_bytes / 1024**3:.2f} GB"
            )
        return verbose(f"{free_gb:.2f} GB free")

    return Checker(
        description=f"enough free disk space on {path}",
        hint_anchor="disk-space",
        check=check,
        **policy,  # type: ignore[arg-type]
    )


def env_var_checker(name: str, required: bool = False, **policy: object) -> Checker:
    """Verifica se uma variavel de ambiente esta definida.

    Quando ``required`` e False e a variavel nao existe o check e ignorado.
    """

    def check(ctx: ExecutionContext, state: HealthCheckState) -> Outcome:
        value = os.environ.get(name)
        if value is None:
            if not required:
                return skip(f"{name} not set")
            return fail(f"environment variable {name} is not set")
        if not value.strip():
            return fail(f"environment variable {name} is empty")
        state.set(f"env:{name}", value)
        return ok()

    return Checker(
        description=f"{name} is set",
        hint_anchor="env-vars",
        check=check,
        **policy,  # type: ignore[arg-type]
    )


def state_key_checker(key: str, description: str | None = None, **policy: object) -> Checker:
    """Falha se um check anterior nao gravou ``key`` no estado compartilhado."""

    def check(ctx: ExecutionContext, state: HealthCheckState) -> Outcome:
        if key not in state:
            return fail(f"{key} was not recorded by a previous check")
        return ok()

    return Checker(
        description=description or f"{key} is available",
        hint_anchor="state",
        check=check,
        **policy,  # type: ignore[arg-type]
    )
