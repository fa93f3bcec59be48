"""
Coleta e renderizacao dos resultados de health check.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

import structlog
import typer
from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    JSON_OUTPUT,
    OUTPUT_FORMATS,
    SHORT_OUTPUT,
    WIDE_OUTPUT,
    CheckResultStr,
)
from .exceptions import InvalidConfigurationError
from .models import CategoryID, CheckObserver, CheckResult

logger = structlog.get_logger()

OK_STATUS = typer.style("√", fg=typer.colors.GREEN, bold=True)
WARN_STATUS = typer.style("‼", fg=typer.colors.YELLOW, bold=True)
FAIL_STATUS = typer.style("×", fg=typer.colors.RED, bold=True)


class Check(BaseModel):
    """Versao de ``CheckResult`` exposta na saida JSON."""

    description: str
    hint: str | None = None
    error: str | None = None
    result: CheckResultStr


class CheckCategory(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: CategoryID = Field(alias="categoryName")
    checks: list[Check] = Field(default_factory=list)


class CheckOutput(BaseModel):
    success: bool
    warning: bool
    categories: list[CheckCategory] = Field(default_factory=list)


class Reporter(Protocol):
    def has_warning(self) -> bool: ...

    def successful(self) -> bool: ...

    def to_json(self) -> str: ...

    def print(self, w: TextIO | None = None, output: str = ...) -> None: ...

    def get_results(self) -> list[CheckResult]: ...

    def replay(self, observer: CheckObserver) -> tuple[bool, bool]: ...


class SimpleReporter:
    """Acumula os CheckResults emitidos pelo engine, na ordem de emissao."""

    def __init__(self) -> None:
        self.results: list[CheckResult] = []
        self._success: bool | None = None
        self._warning: bool | None = None

    def observer(self, result: CheckResult) -> None:
        self.results.append(result)

    def record(self, success: bool, warning: bool) -> None:
        """Guarda o (success, warning) retornado pelo engine."""
        self._success = success
        self._warning = warning

    def has_warning(self) -> bool:
        if self._warning is None:
            return self.replay(lambda _: None)[1]
        return self._warning

    def successful(self) -> bool:
        if self._success is None:
            return self.replay(lambda _: None)[0]
        return self._success

    def get_results(self) -> list[CheckResult]:
        return self.results

    def replay(self, observer: CheckObserver) -> tuple[bool, bool]:
        """
        Reenvia os resultados finais (sem os de retry) a outro observer.

        Args:
            observer: Callback chamado para cada resultado final

        Returns:
            Tupla (success, warning) recalculada a partir dos resultados finais
        """
        success = True
        warning = False
        for result in self.results:
            if result.retry:
                continue
            if result.err is not None:
                if result.warning:
                    warning = True
                else:
                    success = False
            observer(result)
        return success, warning

    def to_output(self) -> CheckOutput:
        categories: list[CheckCategory] = []

        def collect(result: CheckResult) -> None:
            if not categories or categories[-1].name != result.category:
                categories.append(CheckCategory(name=result.category))

            check = Check(description=result.description, result=result.status)
            if result.err is not None:
                check.error = str(result.err)
                if result.hint_url:
                    check.hint = result.hint_url
            categories[-1].checks.append(check)

        success, warning = self.replay(collect)
        return CheckOutput(success=success, warning=warning, categories=categories)

    def to_json(self, indent: int | None = None) -> str:
        """Converte os resultados para JSON."""
        return self.to_output().model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    def to_dict(self) -> dict:
        return self.to_output().model_dump(by_alias=True, exclude_none=True, mode="json")

    def print(self, w: TextIO | None = None, output: str = "table") -> None:
        """
        Imprime os resultados para leitura humana.

        Args:
            w: Destino (stdout se None)
            output: 'table', 'wide' ou 'short'
        """
        w = w or sys.stdout

        def printer(result: CheckResult) -> None:
            status = result.status
            if output == SHORT_OUTPUT and status == CheckResultStr.SUCCESS:
                return

            icon = {
                CheckResultStr.SUCCESS: OK_STATUS,
                CheckResultStr.WARNING: WARN_STATUS,
                CheckResultStr.ERROR: FAIL_STATUS,
            }[status]
            w.write(f"[{icon}] {result.category}/{result.description}\n")

            if result.err is not None:
                w.write(typer.style(f"\tErr: {result.err}\n", fg=typer.colors.RED))
            if result.hint_url and (result.err is not None or output == WIDE_OUTPUT):
                w.write(f"\tSee: {result.hint_url}\n")

        success, warning = self.replay(printer)

        if success and not warning:
            w.write(typer.style("Ok", fg=typer.colors.GREEN, bold=True) + "\n")
        elif success:
            w.write(typer.style("Warning", fg=typer.colors.YELLOW, bold=True) + "\n")
        else:
            w.write(typer.style("Error", fg=typer.colors.RED, bold=True) + "\n")


def render(reporter: Reporter, output: str, w: TextIO | None = None) -> None:
    """Escreve o relatorio no formato pedido."""
    if output not in OUTPUT_FORMATS:
        raise InvalidConfigurationError(
            "output", f"unsupported format {output!r}, expected one of {', '.join(OUTPUT_FORMATS)}"
        )

    w = w or sys.stdout
    if output == JSON_OUTPUT:
        w.write(reporter.to_json() + "\n")
    else:
        reporter.print(w, output=output)

    logger.debug("health_report_rendered", output=output, results=len(reporter.get_results()))
