"""Checkers e categorias de health checks."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone

from .context import ExecutionContext
from .models import CategoryID, HealthCheckState
from .outcomes import Outcome

Probe = Callable[[ExecutionContext, HealthCheckState], "Outcome | BaseException | None"]


def retry_for(seconds: float | timedelta) -> datetime:
    """Retorna um ``retry_deadline`` a ``seconds`` de agora."""
    delta = seconds if isinstance(seconds, timedelta) else timedelta(seconds=seconds)
    return datetime.now(timezone.utc) + delta


@dataclass(frozen=True)
class Checker:
    """
    Um check individual e sua politica de execucao.

    Attributes:
        description: Descricao curta exibida quando o check roda
        hint_anchor: Sufixo concatenado ao ``hint_base_url`` da categoria
        fatal: Aborta todos os checks restantes se este falhar
        warning: A falha e reportada mas nao afeta o resultado geral
        retry_deadline: Ate quando o check e re-executado em caso de falha
            (None: sem retries)
        surface_error_on_retry: Exibe o erro real nas tentativas intermediarias
        check: Funcao executada; None faz o check ser ignorado
    """

    description: str
    hint_anchor: str = ""
    fatal: bool = False
    warning: bool = False
    retry_deadline: datetime | None = None
    surface_error_on_retry: bool = False
    check: Probe | None = None

    def should_retry(self, now: datetime | None = None) -> bool:
        if self.retry_deadline is None:
            return False
        if now is None:
            now = datetime.now(self.retry_deadline.tzinfo)
        return now < self.retry_deadline


@dataclass(frozen=True)
class Category:
    """Grupo ordenado de checkers com uma URL base de dicas em comum."""

    id: CategoryID
    checkers: tuple[Checker, ...] = ()
    enabled: bool = True
    hint_base_url: str = ""
    context: ExecutionContext = field(default_factory=ExecutionContext.background)

    def with_context(self, ctx: ExecutionContext) -> Category:
        return replace(self, context=ctx)

    def hint_url(self, checker: Checker) -> str:
        return f"{self.hint_base_url}{checker.hint_anchor}"


def new_category(
    id: str,
    checkers: Iterable[Checker],
    enabled: bool,
    hint_base_url: str,
) -> Category:
    """Cria uma categoria com contexto de background (sem prazo)."""
    return new_category_with_context(
        id, checkers, enabled, hint_base_url, ExecutionContext.background()
    )


def new_category_with_context(
    id: str,
    checkers: Iterable[Checker],
    enabled: bool,
    hint_base_url: str,
    ctx: ExecutionContext,
) -> Category:
    """
    Cria uma categoria de health checks.

    Args:
        id: Identificador da categoria
        checkers: Checkers, na ordem em que devem rodar
        enabled: Categorias desabilitadas nao rodam nem reportam nada
        hint_base_url: Prefixo das URLs de dica dos checkers
        ctx: Escopo de cancelamento/prazo da categoria

    Returns:
        Category
    """
    return Category(
        id=CategoryID(id),
        checkers=tuple(checkers),
        enabled=enabled,
        hint_base_url=hint_base_url,
        context=ctx,
    )
