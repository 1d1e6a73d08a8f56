from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from icecream import ic

from client.api import FetchError, FetchOperation
from client.services.base import ServiceBase
from core.models.network import NOT_STARTED, OperationSnapshot

logger = logging.getLogger(__name__)


class UsersService(ServiceBase):
    """Holds the users fetch currently observed by the screen."""

    def __init__(self, *args) -> None:
        super().__init__(*args)
        self.current: FetchOperation | None = None
        self.on_change_callbacks: list[Callable[[OperationSnapshot], Any]] = []

    def register_change_callback(self, cb: Callable[[OperationSnapshot], Any]) -> None:
        self.on_change_callbacks.append(cb)

    def unregister_change_callback(self, cb: Callable[[OperationSnapshot], Any]) -> None:
        if cb in self.on_change_callbacks:
            self.on_change_callbacks.remove(cb)

    # ——— Estado ———
    @property
    def snapshot(self) -> OperationSnapshot:
        if self.current is None:
            return NOT_STARTED
        return self.current.snapshot()

    @property
    def is_loading(self) -> bool:
        return self.current is not None and not self.current.done

    # ——— Métodos de ação ———
    def initialize(self) -> FetchOperation:
        if self.current is not None:
            logger.warning("UsersService already initialized, keeping current operation.")
            return self.current
        return self._replace(self.api_client.fetch_users())

    def reload(self) -> FetchOperation:
        return self._replace(self.api_client.fetch_users())

    def simulate_error(self) -> FetchOperation:
        return self._replace(self.api_client.fetch_users_failing())

    def _replace(self, operation: FetchOperation) -> FetchOperation:
        # a anterior não é cancelada nem aguardada: só deixa de ser observada
        previous = self.current
        self.current = operation
        ic(operation, previous)

        operation.add_settle_callback(self._on_settled)
        self._notify(operation.snapshot())
        return operation

    def _on_settled(self, operation: FetchOperation) -> None:
        # lê o resultado sempre, senão o asyncio avisa "exception was never retrieved"
        snapshot = operation.snapshot()

        if operation is not self.current:
            logger.debug(f"Discarding stale {operation!r}")
            return

        ic(operation)
        if snapshot.has_error:
            error = operation.exception()
            if error is not None and not isinstance(error, FetchError):
                logger.error(f"Unexpected error in {operation!r}", exc_info=error)
        self._notify(snapshot)

    def _notify(self, snapshot: OperationSnapshot) -> None:
        for cb in list(self.on_change_callbacks):
            try:
                cb(snapshot)
            except Exception:
                logger.exception("Error in users change callback")
