"""Checks de rede: resolucao DNS e conexao TCP."""

from __future__ import annotations

import socket

from healthcheck.category import Checker
from healthcheck.checks.http import attempt_timeout
from healthcheck.context import ExecutionContext
from healthcheck.models import HealthCheckState
from healthcheck.outcomes import Outcome, fail, ok, verbose

DEFAULT_TCP_TIMEOUT = 5.0


def probe_dns(ctx: ExecutionContext, host: str, state: HealthCheckState | None = None) -> Outcome:
    """Resolve ``host``; os IPs resolvidos ficam em ``state['dns:<host>']``.

    ``socket.getaddrinfo`` nao aceita timeout: o prazo de ``ctx`` so e
    verificado antes da consulta, e um resolver travado pode passar do
    timeout da tentativa.
    """
    if ctx.done():
        return fail(ctx.error() or "context finished")

    try:
        addrs = socket.getaddrinfo(host, None)
    except socket.gaierror as e:
        return fail(f"DNS resolution failed for {host}: {e}")

    ips = sorted({a[4][0] for a in addrs})
    if not ips:
        return fail(f"DNS resolution returned no addresses for {host}")
    if state is not None:
        state.set(f"dns:{host}", ips)
    return verbose(f"Resolved to {', '.join(ips[:3])}")


def probe_tcp(ctx: ExecutionContext, host: str, port: int) -> Outcome:
    if ctx.done():
        return fail(ctx.error() or "context finished")

    timeout = attempt_timeout(ctx, DEFAULT_TCP_TIMEOUT)
    try:
        with socket.create_connection((host, port), timeout=timeout):
            pass
    except OSError as e:
        return fail(f"TCP connect to {host}:{port} failed: {type(e).__name__}: {e}")
    return ok()


def dns_checker(host: str, hint_anchor: str = "dns", **policy: object) -> Checker:
    def check(ctx: ExecutionContext, state: HealthCheckState) -> Outcome:
        return probe_dns(ctx, host, state)

    return Checker(
        description=f"can resolve {host}",
        hint_anchor=hint_anchor,
        check=check,
        **policy,  # type: ignore[arg-type]
    )


def tcp_checker(host: str, port: int, hint_anchor: str = "tcp", **policy: object) -> Checker:
    def check(ctx: ExecutionContext, state: HealthCheckState) -> Outcome:
        return probe_tcp(ctx, host, port)

    return Checker(
        description=f"can connect to {host}:{port}",
        hint_anchor=hint_anchor,
        check=check,
        **policy,  # type: ignore[arg-type]
    )
