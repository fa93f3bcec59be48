"""Configuracao global do healthcheck."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import timedelta

from healthcheck.constants import EngineSettings
from healthcheck.exceptions import InvalidConfigurationError

_config: HealthCheckConfig | None = None


def _default_retry_window() -> timedelta:
    return timedelta(seconds=EngineSettings().retry_window_seconds)


def _default_timeout() -> timedelta:
    return timedelta(seconds=EngineSettings().timeout_seconds)


@dataclass
class HealthCheckConfig:
    """Parametros de execucao do engine.

    ``timeout`` limita uma unica tentativa de um check; ``retry_window`` e o
    intervalo entre tentativas de um check que ainda esta dentro do seu
    ``retry_deadline``.
    """

    retry_window: timedelta = field(default_factory=_default_retry_window)
    timeout: timedelta = field(default_factory=_default_timeout)

    def validate(self) -> HealthCheckConfig:
        if self.retry_window < timedelta(0):
            raise InvalidConfigurationError(
                "retry_window", f"must not be negative, got {self.retry_window}"
            )
        if self.timeout <= timedelta(0):
            raise InvalidConfigurationError("timeout", f"must be positive, got {self.timeout}")
        return self

    @classmethod
    def from_seconds(
        cls,
        retry_window: float | None = None,
        timeout: float | None = None,
    ) -> HealthCheckConfig:
        config = cls()
        if retry_window is not None:
            config.retry_window = timedelta(seconds=retry_window)
        if timeout is not None:
            config.timeout = timedelta(seconds=timeout)
        return config.validate()


def get_config() -> HealthCheckConfig:
    global _config
    if _config is None:
        _config = HealthCheckConfig().validate()
    return _config


def reset_config() -> None:
    global _config
    _config = None


def configure(
    retry_window: float | timedelta | None = None,
    timeout: float | timedelta | None = None,
) -> None:
    """
    Ajusta a configuracao padrao usada por engines criados sem config.

    Args:
        retry_window: Intervalo entre tentativas (segundos ou timedelta)
        timeout: Limite de uma tentativa (segundos ou timedelta)

    Example:
        healthcheck.configure(retry_window=1, timeout=10)
    """
    global _config
    config = replace(get_config())

    if retry_window is not None:
        config.retry_window = (
            retry_window if isinstance(retry_window, timedelta) else timedelta(seconds=retry_window)
        )
    if timeout is not None:
        config.timeout = timeout if isinstance(timeout, timedelta) else timedelta(seconds=timeout)

    _config = config.validate()


__all__ = [
    "HealthCheckConfig",
    "get_config",
    "reset_config",
    "configure",
]
