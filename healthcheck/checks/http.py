"""Checks de endpoints HTTP(S)."""

from __future__ import annotations

import time

import httpx
import structlog

from healthcheck.category import Checker
from healthcheck.constants import ProbeSettings
from healthcheck.context import ExecutionContext
from healthcheck.models import HealthCheckState
from healthcheck.outcomes import Outcome, fail, ok, verbose

logger = structlog.get_logger()

DEFAULT_HTTP_TIMEOUT = 10.0


def attempt_timeout(ctx: ExecutionContext, default: float) -> float:
    """Timeout de uma operacao de rede limitado ao tempo restante do contexto."""
    remaining = ctx.remaining()
    if remaining is None:
        return default
    return min(default, remaining)


def probe_http(
    ctx: ExecutionContext,
    url: str,
    method: str = "GET",
    expected_status: int | None = None,
    verbose_latency: bool = False,
    headers: dict[str, str] | None = None,
) -> Outcome:
    """
    Faz uma requisicao e classifica a resposta.

    Args:
        ctx: Contexto da tentativa (limita o timeout)
        url: Endpoint verificado
        method: Metodo HTTP
        expected_status: Status exigido; None aceita qualquer status < 400
        verbose_latency: Anexa a latencia a descricao em caso de sucesso
        headers: Headers adicionais

    Returns:
        Outcome do check
    """
    if ctx.done():
        return fail(ctx.error() or "context finished")

    timeout = attempt_timeout(ctx, DEFAULT_HTTP_TIMEOUT)
    start = time.perf_counter()

    try:
        with httpx.Client(timeout=timeout, headers=headers, follow_redirects=True) as client:
            response = client.request(method, url)
    except httpx.TimeoutException:
        return fail(f"{method} {url}: timeout after {timeout:.1f}s")
    except httpx.HTTPError as e:
        return fail(f"{method} {url}: {type(e).__name__}: {e}")

    latency_ms = (time.perf_counter() - start) * 1000

    if expected_status is not None and response.status_code != expected_status:
        return fail(f"{method} {url}: expected HTTP {expected_status}, got {response.status_code}")
    if expected_status is None and response.status_code >= 400:
        return fail(f"{method} {url}: HTTP {response.status_code}")

    logger.debug("http_probe_ok", url=url, status=response.status_code, latency_ms=latency_ms)

    slow_threshold = ProbeSettings().http_slow_threshold_ms
    if verbose_latency or latency_ms > slow_threshold:
        note = " (slow)" if latency_ms > slow_threshold else ""
        return verbose(f"HTTP {response.status_code} in {latency_ms:.0f}ms{note}")
    return ok()


def http_endpoint_checker(
    description: str,
    url: str,
    hint_anchor: str = "",
    method: str = "GET",
    expected_status: int | None = None,
    verbose_latency: bool = False,
    **policy: object,
) -> Checker:
    """Cria um Checker que verifica se ``url`` responde.

    ``policy`` aceita os demais campos de ``Checker`` (fatal, warning,
    retry_deadline, surface_error_on_retry).
    """

    def check(ctx: ExecutionContext, state: HealthCheckState) -> Outcome:
        return probe_http(
            ctx,
            url,
            method=method,
            expected_status=expected_status,
            verbose_latency=verbose_latency,
        )

    return Checker(description=description, hint_anchor=hint_anchor, check=check, **policy)  # type: ignore[arg-type]
