"""
Cliente da demo de usuários - Factory da Aplicação
"""

import asyncio
import logging
import random

import pygame

from client.api import APIClient
from client.config_manager import ConfigManager
from client.scenes import UsersScene
from client.services import UsersService
from core.abstract import App
from core.config import Settings

logger = logging.getLogger(__name__)


class ClientApp(App):
    """Users demo client"""

    screen: pygame.Surface
    clock: pygame.time.Clock
    running: bool = False
    users_service: UsersService

    def __init__(
        self,
        settings: Settings,
        rng: random.Random | None = None,
        config_manager: ConfigManager | None = None,
    ) -> None:
        super().__init__(settings)
        self.api_client = APIClient.from_settings(settings, rng)
        self.users_service = UsersService(self)
        self.config_manager = config_manager or ConfigManager()

    async def main(self) -> None:
        pygame.init()

        pygame.display.set_caption(self.settings.client_title)
        self.screen = pygame.display.set_mode(
            [self.settings.client_width, self.settings.client_height]
        )

        self.clock = pygame.time.Clock()
        self.running = True

        # a primeira operação nasce antes do primeiro render
        self.users_service.initialize()
        scene = UsersScene(self)
        frame_time = 1 / self.settings.client_fps

        try:
            while self.running:
                self.clock.tick()

                # a scene is responsible to update the current state and handle actions
                scene.update()

                pygame.display.flip()

                # cede o loop: as requisições em andamento progridem aqui
                await asyncio.sleep(frame_time)
        finally:
            in_flight = len(self.api_client.pending_requests)
            logger.info(f"Shutting down with {in_flight} request(s) in flight")
            await self.api_client.aclose()
            pygame.quit()
