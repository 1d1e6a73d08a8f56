import asyncio
from abc import ABC, abstractmethod

from core.config import Settings


class App(ABC):
    settings: Settings

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def run(self) -> None:
        """Run the app on a fresh asyncio event loop until it stops."""
        asyncio.run(self.main())

    @abstractmethod
    async def main(self) -> None:
        raise NotImplementedError
