"""Modelos de dados do engine de health checks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NewType, Protocol

from .constants import CheckResultStr

CategoryID = NewType("CategoryID", str)


@dataclass
class HealthCheckState:
    """
    Estado compartilhado entre todos os checks de um engine.

    Um check pode gravar dados que checks posteriores (da mesma categoria ou
    de categorias seguintes) leem. Nao ha sincronizacao: os checks rodam em
    sequencia.
    """

    data: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self.data


@dataclass(frozen=True)
class CheckResult:
    """Resultado (transitorio ou final) de uma execucao de check."""

    category: CategoryID
    description: str
    hint_url: str = ""
    retry: bool = False
    warning: bool = False
    err: BaseException | None = None

    @property
    def status(self) -> CheckResultStr:
        if self.err is None:
            return CheckResultStr.SUCCESS
        if self.warning:
            return CheckResultStr.WARNING
        return CheckResultStr.ERROR


CheckObserver = Callable[[CheckResult], None]


class Runner(Protocol):
    """Qualquer executor de health checks disparavel com ``run_checks()``."""

    def run_checks(self, observer: CheckObserver) -> tuple[bool, bool]: ...
