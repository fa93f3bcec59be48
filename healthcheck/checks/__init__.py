"""Checkers prontos para compor categorias."""

from __future__ import annotations

from .http import http_endpoint_checker, probe_http
from .network import dns_checker, probe_dns, probe_tcp, tcp_checker
from .system import (
    disk_space_checker,
    env_var_checker,
    python_version_checker,
    state_key_checker,
)

__all__: list[str] = [
    "disk_space_checker",
    "dns_checker",
    "env_var_checker",
    "http_endpoint_checker",
    "probe_dns",
    "probe_http",
    "probe_tcp",
    "python_version_checker",
    "state_key_checker",
    "tcp_checker",
]
