"""Constantes e configuracoes do healthcheck."""

from __future__ import annotations

from enum import StrEnum

from pydantic_settings import BaseSettings

JSON_OUTPUT = "json"
TABLE_OUTPUT = "table"
WIDE_OUTPUT = "wide"
SHORT_OUTPUT = "short"

OUTPUT_FORMATS = (TABLE_OUTPUT, WIDE_OUTPUT, SHORT_OUTPUT, JSON_OUTPUT)

WAITING_FOR_CHECK = "waiting for check to complete"

DEFAULT_HINT_BASE_URL = "https://docs.portworx.com/troubleshoot/healthcheck#"


class CheckResultStr(StrEnum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class EngineSettings(BaseSettings):
    retry_window_seconds: float = 5.0
    timeout_seconds: float = 30.0

    log_level: str = "INFO"
    log_json: bool = True

    class Config:
        env_prefix = "HEALTHCHECK_"


class ProbeSettings(BaseSettings):
    http_slow_threshold_ms: float = 2000.0
    min_free_disk_bytes: int = 1024 * 1024 * 1024
    min_python_version: str = "3.11"

    class Config:
        env_prefix = "HEALTHCHECK_PROBE_"
