"""Engine de health checks: executa categorias e checkers em sequencia.

O engine percorre as categorias habilitadas na ordem de registro e, dentro
de cada uma, os checkers na ordem fornecida. Cada checker passa por uma
maquina de estados propria (tentativa -> retry -> resultado final) e cada
resultado e entregue ao observer assim que produzido.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import structlog

from .category import Category, Checker, Probe
from .config import HealthCheckConfig, get_config
from .exceptions import CategoryError, CheckPendingError
from .models import CheckObserver, CheckResult, HealthCheckState
from .outcomes import Failure, Outcome, Skip, VerboseSuccess, as_outcome

if TYPE_CHECKING:
    from .reporter import SimpleReporter

logger = structlog.get_logger()


class HealthChecker:
    """
    Executor sequencial de health checks.

    O estado compartilhado (``state``) e criado junto com o engine e passado
    por referencia a todos os checks de todas as execucoes deste engine.
    """

    def __init__(
        self,
        categories: Iterable[Category] | None = None,
        config: HealthCheckConfig | None = None,
    ):
        self.categories: list[Category] = list(categories or [])
        self.config = (config or get_config()).validate()
        self._state = HealthCheckState()

    @property
    def state(self) -> HealthCheckState:
        return self._state

    def append_categories(self, *categories: Category) -> HealthChecker:
        """Adiciona categorias ao final da lista e retorna o proprio engine."""
        self.categories.extend(categories)
        return self

    def get_categories(self) -> list[Category]:
        return self.categories

    def run_checks(self, observer: CheckObserver) -> tuple[bool, bool]:
        """
        Executa todos os checkers configurados, passando cada resultado ao
        observer.

        Se um check marcado como fatal falha, os checks restantes nao rodam.
        Falhas de checks marcados como warning nao afetam ``success``.

        Args:
            observer: Callback chamado para cada CheckResult, em ordem

        Returns:
            Tupla (success, warning)
        """
        success = True
        warning = False

        for category in self.categories:
            if not category.enabled:
                logger.debug("category_disabled", category=category.id)
                continue

            for checker in category.checkers:
                probe = checker.check
                if probe is None:
                    continue

                if self._run_check(category, checker, probe, observer):
                    continue

                if checker.warning:
                    warning = True
                else:
                    success = False

                if checker.fatal:
                    logger.warning(
                        "fatal_check_failed",
                        category=category.id,
                        check=checker.description,
                    )
                    return success, warning

        logger.info("run_checks_finished", success=success, warning=warning)
        return success, warning

    def run(self) -> SimpleReporter:
        """Executa os checks com um ``SimpleReporter`` como observer."""
        from .reporter import SimpleReporter

        reporter = SimpleReporter()
        success, warning = self.run_checks(reporter.observer)
        reporter.record(success, warning)
        return reporter

    def _attempt(self, category: Category, checker: Checker, probe: Probe) -> Outcome:
        with category.context.with_timeout(self.config.timeout) as ctx:
            try:
                return as_outcome(probe(ctx, self._state))
            except Exception as e:
                logger.warning(
                    "check_raised",
                    category=category.id,
                    check=checker.description,
                    error=str(e),
                    exc_info=True,
                )
                return Failure(e)

    def _run_check(
        self,
        category: Category,
        checker: Checker,
        probe: Probe,
        observer: CheckObserver,
    ) -> bool:
        attempt = 0
        while True:
            attempt += 1
            outcome = self._attempt(category, checker, probe)

            if isinstance(outcome, Skip):
                logger.debug(
                    "check_skipped",
                    category=category.id,
                    check=checker.description,
                    reason=outcome.reason,
                )
                return True

            description = checker.description
            err: BaseException | None = None
            if isinstance(outcome, VerboseSuccess):
                description = f"{description}\n{outcome.message}"
            elif isinstance(outcome, Failure):
                err = CategoryError(category.id, outcome.error())

            if err is not None and self._should_retry(category, checker):
                logger.debug(
                    "check_retry_scheduled",
                    category=category.id,
                    check=checker.description,
                    attempt=attempt,
                    error=str(err),
                )
                observer(
                    CheckResult(
                        category=category.id,
                        description=description,
                        hint_url=category.hint_url(checker),
                        retry=True,
                        warning=checker.warning,
                        err=err if checker.surface_error_on_retry else CheckPendingError(),
                    )
                )
                category.context.wait(self.config.retry_window)
                continue

            observer(
                CheckResult(
                    category=category.id,
                    description=description,
                    hint_url=category.hint_url(checker),
                    retry=False,
                    warning=checker.warning,
                    err=err,
                )
            )
            return err is None

    @staticmethod
    def _should_retry(category: Category, checker: Checker) -> bool:
        if category.context.done():
            return False
        return checker.should_retry()
