"""Escopo de cancelamento e prazo passado aos checks.

Um ``ExecutionContext`` e uma arvore: cada filho herda o cancelamento e o
prazo do pai e so pode restringi-los. Os checks devem consultar o contexto
(``done()``, ``remaining()``) e retornar rapido quando ele terminar; o engine
nao interrompe checks a forca.
"""

from __future__ import annotations

import threading
import time
from datetime import timedelta

from healthcheck.exceptions import CancelledError, DeadlineExceededError, HealthCheckError


class ExecutionContext:
    """Escopo de cancelamento/prazo de uma categoria ou de uma tentativa."""

    def __init__(
        self,
        parent: ExecutionContext | None = None,
        deadline: float | None = None,
    ) -> None:
        self._parent = parent
        self._deadline = deadline
        self._cancelled = threading.Event()
        self._children: list[ExecutionContext] = []
        self._lock = threading.Lock()

        if parent is not None:
            if parent.deadline is not None and (deadline is None or parent.deadline < deadline):
                self._deadline = parent.deadline
            parent._add_child(self)

    @classmethod
    def background(cls) -> ExecutionContext:
        """Contexto sem prazo que nunca e cancelado por conta propria."""
        return cls()

    def _add_child(self, child: ExecutionContext) -> None:
        with self._lock:
            self._children.append(child)
        if self.cancelled:
            child.cancel()

    def _remove_child(self, child: ExecutionContext) -> None:
        with self._lock:
            if child in self._children:
                self._children.remove(child)

    @property
    def deadline(self) -> float | None:
        """Prazo em segundos de ``time.monotonic()``, ou None."""
        return self._deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def done(self) -> bool:
        return self.cancelled or self.expired

    def error(self) -> HealthCheckError | None:
        if self.cancelled:
            return CancelledError()
        if self.expired:
            return DeadlineExceededError()
        return None

    def remaining(self) -> float | None:
        """Segundos ate o prazo (minimo 0), ou None se nao ha prazo."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def cancel(self) -> None:
        """Cancela este contexto e todos os seus descendentes."""
        self._cancelled.set()
        with self._lock:
            children = list(self._children)
        for child in children:
            child.cancel()

    def release(self) -> None:
        """Desliga este contexto do pai; usado ao fim de cada tentativa."""
        if self._parent is not None:
            self._parent._remove_child(self)

    def with_deadline(self, deadline: float) -> ExecutionContext:
        return ExecutionContext(parent=self, deadline=deadline)

    def with_timeout(self, timeout: float | timedelta) -> ExecutionContext:
        seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
        return self.with_deadline(time.monotonic() + seconds)

    def with_cancel(self) -> ExecutionContext:
        return ExecutionContext(parent=self)

    def wait(self, timeout: float | timedelta) -> bool:
        """
        Espera ate ``timeout`` segundos ou ate o contexto terminar.

        Args:
            timeout: Tempo maximo de espera

        Returns:
            True se o contexto terminou (cancelado ou expirado) durante a espera
        """
        seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
        remaining = self.remaining()
        if remaining is not None and remaining < seconds:
            self._cancelled.wait(remaining)
            return True
        self._cancelled.wait(seconds)
        return self.done()

    def __enter__(self) -> ExecutionContext:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __repr__(self) -> str:
        return (
            f"ExecutionContext(deadline={self._deadline!r}, cancelled={self.cancelled}, "
            f"expired={self.expired})"
        )
