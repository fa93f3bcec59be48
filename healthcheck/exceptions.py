"""Excecoes tipadas do healthcheck."""

from __future__ import annotations

from dataclasses import dataclass

from healthcheck.constants import WAITING_FOR_CHECK


class HealthCheckError(Exception):
    """Base para todas as excecoes do healthcheck."""

    pass


class CategoryError(HealthCheckError):
    """Falha de um check, marcada com a categoria que a emitiu.

    Permite distinguir erros de categorias diferentes sem comparar strings.
    A mensagem e a da causa original.
    """

    def __init__(self, category: str, err: BaseException) -> None:
        self.category = category
        self.err = err
        super().__init__(str(err))
        self.__cause__ = err

    def __str__(self) -> str:
        return str(self.err)


def is_category_error(err: BaseException | None, category: str) -> bool:
    """Retorna True se ``err`` (ou algo na sua cadeia de causas) e um
    ``CategoryError`` da categoria informada."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        if isinstance(err, CategoryError):
            return err.category == category
        err = err.__cause__ or err.__context__
    return False


class CheckPendingError(HealthCheckError):
    """Erro generico exibido enquanto um check ainda sera re-executado."""

    def __init__(self, message: str = WAITING_FOR_CHECK) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Resource:
    """Objeto identificado por kind, group e nome."""

    kind: str
    name: str
    group: str = ""

    def __str__(self) -> str:
        group_kind = f"{self.kind}.{self.group}" if self.group else self.kind
        return f"{group_kind.lower()}/{self.name}"


class ResourceError(HealthCheckError):
    """Recursos encontrados que nao deveriam existir."""

    def __init__(self, resource_name: str, resources: list[Resource]) -> None:
        self.resource_name = resource_name
        self.resources = list(resources)
        names = " ".join(r.name for r in self.resources)
        super().__init__(f"{resource_name} found but should not exist: {names}")


class InvalidConfigurationError(HealthCheckError):
    """Configuracao do engine ou da suite de checks invalida."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration for {field}: {reason}")


class CancelledError(HealthCheckError):
    """O contexto de execucao foi cancelado."""

    def __init__(self) -> None:
        super().__init__("context canceled")


class DeadlineExceededError(HealthCheckError):
    """O prazo do contexto de execucao expirou."""

    def __init__(self) -> None:
        super().__init__("context deadline exceeded")
