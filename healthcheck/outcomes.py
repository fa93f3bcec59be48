"""Resultados que um check pode retornar ao engine.

Um check retorna exatamente uma das variantes abaixo (``None`` equivale a
``Ok``). Uma instancia de ``Exception`` retornada diretamente e tratada como
``Failure``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from healthcheck.exceptions import HealthCheckError


@dataclass(frozen=True)
class Ok:
    pass


@dataclass(frozen=True)
class Skip:
    """O check nao se aplica: nenhum resultado e reportado."""

    reason: str = ""


@dataclass(frozen=True)
class VerboseSuccess:
    """Sucesso com detalhe extra anexado a descricao do check."""

    message: str


@dataclass(frozen=True)
class Failure:
    cause: BaseException | str

    def error(self) -> BaseException:
        if isinstance(self.cause, BaseException):
            return self.cause
        return HealthCheckError(self.cause)


Outcome: TypeAlias = Ok | Skip | VerboseSuccess | Failure


def ok() -> Ok:
    return Ok()


def skip(reason: str = "") -> Skip:
    return Skip(reason)


def verbose(message: str) -> VerboseSuccess:
    return VerboseSuccess(message)


def fail(cause: BaseException | str) -> Failure:
    return Failure(cause)


def as_outcome(value: object) -> Outcome:
    """Normaliza o retorno de um check para uma das variantes de ``Outcome``."""
    if value is None:
        return Ok()
    if isinstance(value, (Ok, Skip, VerboseSuccess, Failure)):
        return value
    if isinstance(value, BaseException):
        return Failure(value)
    raise TypeError(f"check returned unsupported value of type {type(value).__name__}")
