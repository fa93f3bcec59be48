from __future__ import annotations

import importlib
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

import structlog

from healthcheck.category import Category, new_category
from healthcheck.checks import (
    disk_space_checker,
    dns_checker,
    http_endpoint_checker,
    python_version_checker,
)
from healthcheck.constants import DEFAULT_HINT_BASE_URL, ProbeSettings
from healthcheck.exceptions import InvalidConfigurationError

logger = structlog.get_logger()

SYSTEM_CATEGORY = "system"
NETWORK_CATEGORY = "network"


def build_local_suite(
    urls: Sequence[str] = (),
    hosts: Sequence[str] = (),
    hint_base_url: str = DEFAULT_HINT_BASE_URL,
    disk_path: str | Path = ".",
) -> list[Category]:
    """
    Monta a suite padrao do ``healthcheck check``.

    Args:
        urls: Endpoints HTTP que devem responder
        hosts: Hosts que devem resolver via DNS
        hint_base_url: Prefixo das URLs de dica
        disk_path: Caminho cujo disco livre e verificado

    Returns:
        Lista de categorias, na ordem de execucao
    """
    settings = ProbeSettings()

    system = new_category(
        SYSTEM_CATEGORY,
        [
            python_version_checker(settings.min_python_version, fatal=True),
            disk_space_checker(disk_path, settings.min_free_disk_bytes, warning=True),
        ],
        True,
        hint_base_url,
    )

    network_checkers = [dns_checker(host) for host in hosts]
    network_checkers.extend(
        http_endpoint_checker(f"{url} is reachable", url, hint_anchor="http-endpoint")
        for url in urls
    )
    network = new_category(
        NETWORK_CATEGORY,
        network_checkers,
        bool(network_checkers),
        hint_base_url,
    )

    return [system, network]


def load_suite(path: str) -> list[Category]:
    """
    Carrega categorias a partir de ``"pacote.modulo:atributo"``.

    O atributo pode ser uma lista de categorias ou uma funcao sem argumentos
    que retorna uma.
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise InvalidConfigurationError("suite", f"expected 'module:attribute', got {path!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise InvalidConfigurationError("suite", f"cannot import {module_name}: {e}") from e

    try:
        target: Callable[[], Iterable[Category]] | Iterable[Category] = getattr(module, attr)
    except AttributeError as e:
        raise InvalidConfigurationError("suite", f"{module_name} has no attribute {attr}") from e

    categories = target() if callable(target) else target
    try:
        categories = list(categories)
    except TypeError as e:
        raise InvalidConfigurationError(
            "suite", f"{path} produced {type(categories).__name__}, expected a list of Category"
        ) from e
    for category in categories:
        if not isinstance(category, Category):
            raise InvalidConfigurationError(
                "suite", f"{path} produced {type(category).__name__}, expected Category"
            )

    logger.debug("suite_loaded", suite=path, categories=[c.id for c in categories])
    return categories
