"""CLI do healthcheck usando Typer."""

from __future__ import annotations

import typer

from healthcheck import __version__
from healthcheck.config import HealthCheckConfig
from healthcheck.constants import OUTPUT_FORMATS, TABLE_OUTPUT, EngineSettings
from healthcheck.exceptions import InvalidConfigurationError
from healthcheck.utils.logging import configure_logging

app = typer.Typer(
    name="healthcheck",
    help="Executa suites de health checks e reporta o resultado",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"healthcheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    _version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Mostra a versao e sai",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """healthcheck - diagnostico de deployments."""
    pass


@app.command("check")
def check(
    suite: str | None = typer.Option(
        None, "--suite", "-s", help="Suite customizada (modulo:atributo)"
    ),
    urls: list[str] = typer.Option([], "--url", "-u", help="Endpoint HTTP a verificar"),
    hosts: list[str] = typer.Option([], "--host", help="Host que deve resolver via DNS"),
    output: str = typer.Option(
        TABLE_OUTPUT, "--output", "-o", help="Formato: table, wide, short, json"
    ),
    timeout: float | None = typer.Option(None, "--timeout", help="Timeout por tentativa (s)"),
    retry_window: float | None = typer.Option(
        None, "--retry-window", help="Intervalo entre tentativas (s)"
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Nivel de log"),
) -> None:
    """Executa os health checks e imprime o relatorio."""
    from healthcheck import doctor
    from healthcheck.engine import HealthChecker
    from healthcheck.reporter import render

    if output not in OUTPUT_FORMATS:
        typer.echo(f"Erro: formato invalido {output!r} ({', '.join(OUTPUT_FORMATS)})", err=True)
        raise typer.Exit(2)

    settings = EngineSettings()
    try:
        configure_logging(level=log_level or settings.log_level, json_format=settings.log_json)
        config = HealthCheckConfig.from_seconds(retry_window=retry_window, timeout=timeout)
        if suite:
            categories = doctor.load_suite(suite)
        else:
            categories = doctor.build_local_suite(urls=urls, hosts=hosts)
    except InvalidConfigurationError as e:
        typer.echo(f"Erro: {e}", err=True)
        raise typer.Exit(2) from None

    reporter = HealthChecker(categories, config).run()
    render(reporter, output)

    if not reporter.successful():
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
