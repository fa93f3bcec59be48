"""Logging estruturado do healthcheck (structlog sobre o logging da stdlib).

Os eventos vao para stderr: ``healthcheck check -o json`` escreve o relatorio
em stdout e ele precisa sair limpo.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog
from structlog.types import Processor

from healthcheck.exceptions import InvalidConfigurationError

DEFAULT_LEVEL = "WARNING"


def resolve_level(level: str | int) -> int:
    """Converte ``"debug"``/``"INFO"``/``10`` no nivel numerico do logging."""
    if isinstance(level, int):
        return level

    levels = logging.getLevelNamesMapping()
    try:
        return levels[level.strip().upper()]
    except KeyError:
        raise InvalidConfigurationError(
            "log_level",
            f"unknown level {level!r}, expected one of "
            f"{', '.join(name for name in levels if name != 'NOTSET')}",
        ) from None


def _processors(json_format: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    return processors


def configure_logging(
    level: str | int = "INFO",
    json_format: bool = True,
    log_file: Path | str | None = None,
) -> int:
    """Configura structlog e o logger raiz.

    Args:
        level: Nome ou numero do nivel; nomes invalidos levantam
            InvalidConfigurationError
        json_format: JSON por linha (True) ou saida de console legivel
        log_file: Arquivo que recebe uma copia dos eventos

    Returns:
        Nivel numerico aplicado
    """
    numeric_level = resolve_level(level)

    structlog.configure(
        processors=_processors(json_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
    root.setLevel(numeric_level)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        root.addHandler(file_handler)

    return numeric_level


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


configure_logging(level=DEFAULT_LEVEL, json_format=True)
