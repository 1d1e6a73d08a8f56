"""
In-process users API mounted on an httpx.MockTransport.

Nothing here opens a socket: the handler answers the APIClient requests
after sleeping the simulated network latency on the running event loop.
"""

import asyncio
import logging
import random

import httpx

from core.constants import (
    CONNECTION_ERROR_MESSAGE,
    INTENTIONAL_ERROR_MESSAGE,
    USERS_DELAY_UNITS,
    USERS_FAILING_DELAY_UNITS,
)

logger = logging.getLogger(__name__)

SAMPLE_USERS: list[dict] = [
    {"id": 1, "nombre": "Ana García", "email": "ana@ejemplo.com", "rol": "Desarrolladora Flutter"},
    {"id": 2, "nombre": "Carlos Ruiz", "email": "carlos@ejemplo.com", "rol": "Diseñador UI/UX"},
    {"id": 3, "nombre": "María López", "email": "maria@ejemplo.com", "rol": "Product Manager"},
    {"id": 4, "nombre": "Juan Pérez", "email": "juan@ejemplo.com", "rol": "Backend Developer"},
]


class MockUsersServer:
    """Fake users endpoint with latency and an injectable failure draw."""

    def __init__(
        self,
        delay_unit: float = 1.0,
        failure_rate: float = 0.2,
        rng: random.Random | None = None,
        users: list[dict] | None = None,
    ) -> None:
        """
        Initialize a new instance of the MockUsersServer class.

        Args:
            delay_unit: Seconds per simulated time-unit
            failure_rate: Probability that GET /users answers 503
            rng: Random source for the failure draw
            users: Payload served on success (defaults to SAMPLE_USERS)
        """
        self.delay_unit = delay_unit
        self.failure_rate = failure_rate
        self.rng = rng or random.Random()
        self.users = SAMPLE_USERS if users is None else users

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        logger.debug(f"{request.method} {path}")

        if request.method != "GET":
            return httpx.Response(405, json={"detail": "Method Not Allowed"})

        # /users/failing tem que vir antes de /users
        if path.endswith("/users/failing"):
            return await self._get_users_failing()
        if path.endswith("/users"):
            return await self._get_users()

        return httpx.Response(404, json={"detail": "Not Found"})

    def should_fail(self) -> bool:
        return self.rng.random() < self.failure_rate

    async def _get_users(self) -> httpx.Response:
        await asyncio.sleep(USERS_DELAY_UNITS * self.delay_unit)

        if self.should_fail():
            return httpx.Response(503, json={"message": CONNECTION_ERROR_MESSAGE})

        return httpx.Response(200, json=self.users)

    async def _get_users_failing(self) -> httpx.Response:
        await asyncio.sleep(USERS_FAILING_DELAY_UNITS * self.delay_unit)
        return httpx.Response(500, json={"message": INTENTIONAL_ERROR_MESSAGE})
