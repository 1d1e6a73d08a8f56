"""
API service for asynchronous communication with the users server
using asyncio tasks so the Pygame loop is never blocked
"""

import asyncio
import logging
import random
import time
import uuid
from collections.abc import Callable, Coroutine
from typing import Any

import httpx

from client.mock_server import MockUsersServer
from core.config import Settings
from core.constants import CONNECTION_ERROR_MESSAGE
from core.models.network import OperationSnapshot, OperationState
from core.models.user import User
from core.types import OperationKind

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """A fetch that could not produce the users list."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FetchOperation:
    """
    One asynchronous fetch attempt.

    The operation is never mutated once created: settling is the wrapped
    task finishing, and every state query reads it from the task.
    """

    def __init__(
        self, kind: OperationKind, coro: Coroutine[Any, Any, tuple[User, ...]]
    ) -> None:
        self.id = str(uuid.uuid4())
        self.kind: OperationKind = kind
        self.started_at = time.time()
        self._task = asyncio.create_task(coro, name=f"{kind}-{self.id[:8]}")

    def __repr__(self) -> str:
        return f"<FetchOperation {self.kind} {self.id[:8]} {self.state.value}>"

    @property
    def done(self) -> bool:
        return self._task.done()

    @property
    def state(self) -> OperationState:
        return self.snapshot().state

    def snapshot(self) -> OperationSnapshot:
        if not self._task.done():
            return OperationSnapshot(state=OperationState.PENDING, timestamp=self.started_at)

        if self._task.cancelled():
            return OperationSnapshot(
                state=OperationState.FAILED, timestamp=self.started_at, error="cancelled"
            )

        error = self._task.exception()
        if error is not None:
            return OperationSnapshot(
                state=OperationState.FAILED, timestamp=self.started_at, error=str(error)
            )

        return OperationSnapshot(
            state=OperationState.SUCCEEDED, timestamp=self.started_at, data=self._task.result()
        )

    def exception(self) -> BaseException | None:
        if not self._task.done() or self._task.cancelled():
            return None
        return self._task.exception()

    def add_settle_callback(self, callback: Callable[["FetchOperation"], Any]) -> None:
        """
        Call `callback` with this operation once it settles.

        Args:
            callback: Called on the event loop thread
        """
        self._task.add_done_callback(lambda _task: callback(self))

    async def wait(self) -> OperationSnapshot:
        """Wait for settlement without raising the operation's error."""
        await asyncio.wait({self._task})
        return self.snapshot()


class APIClient:
    """Async API client for the users endpoints."""

    def __init__(self, base_url: str, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """
        Initialize a new instance of the APIClient class.

        Args:
            base_url: Base URL of the API
            transport: Transport used by httpx (the in-process mock server in the app)
        """
        self.client = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            headers={"User-Agent": "Pygame Client :D"},
        )

        # Strong references: asyncio only keeps weak ones to running tasks
        self.pending_requests: dict[str, FetchOperation] = {}

    @classmethod
    def from_settings(cls, settings: Settings, rng: random.Random | None = None) -> "APIClient":
        server = MockUsersServer(
            delay_unit=settings.fetch_delay_unit,
            failure_rate=settings.fetch_failure_rate,
            rng=rng or random.Random(settings.fetch_seed),
        )
        return cls(settings.api_base_url, transport=server.transport())

    async def _get_users(self, endpoint: str) -> tuple[User, ...]:
        """
        GET a users list and validate it.

        Args:
            endpoint: API Endpoint

        Raises:
            FetchError: on transport failure, non-2xx status or invalid payload
        """
        try:
            response = await self.client.get(endpoint)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            message = self._get_error_message(e.response)
            logger.error(f"GET {endpoint} failed with {e.response.status_code}: {message}")
            raise FetchError(message) from e
        except httpx.TransportError as e:
            logger.error(f"GET {endpoint} transport error: {e}")
            raise FetchError(CONNECTION_ERROR_MESSAGE) from e
        except ValueError as e:
            logger.error(f"GET {endpoint} returned invalid JSON: {e}")
            raise FetchError(f"invalid response from server: {e}") from e

        if not isinstance(payload, list):
            raise FetchError("invalid response from server: expected a list of users")

        try:
            return tuple(User.model_validate(item) for item in payload)
        except ValueError as e:
            logger.error(f"GET {endpoint} returned malformed users: {e}")
            raise FetchError(f"invalid response from server: {e}") from e

    def request(self, endpoint: str, kind: OperationKind) -> FetchOperation:
        operation = FetchOperation(kind, self._get_users(endpoint))

        # Registra requisição pendente
        self.pending_requests[operation.id] = operation
        operation.add_settle_callback(lambda op: self.remove_request(op.id))

        return operation

    def fetch_users(self) -> FetchOperation:
        return self.request("/users", "users")

    def fetch_users_failing(self) -> FetchOperation:
        return self.request("/users/failing", "users_failing")

    def remove_request(self, request_id: str) -> None:
        """
        Remove a request from the dictionary.

        Args:
            request_id: ID of the request
        """
        self.pending_requests.pop(request_id, None)

    async def aclose(self) -> None:
        await self.client.aclose()

    def _get_error_message(self, response: httpx.Response) -> str:
        try:
            err = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
        if isinstance(err, dict):
            if "message" in err:
                return err["message"]
            if "detail" in err:
                return err["detail"]
        return str(err)
