import math

import pygame

from client.components.base import BaseComponent
from core.constants import GREY_600, PRIMARY


class State(BaseComponent):
    """Loading indicator: spinning arc over a label with cycling dots."""

    SPINNER_SIZE = 48

    def __init__(self, window, position, label, size="md", text_type="text") -> None:
        self.value: str = ""
        # os pontos do rótulo são animados
        self.holder = label.rstrip(".")
        self.sprites = ["", ".", "..", "..."]
        self.time = {"elapsed_time": 0, "last_tick": pygame.time.get_ticks()}
        self.angle = 0.0
        super().__init__(window, position, self.holder, size=size, text_type=text_type, hover=False)

    def _init_surface(self) -> pygame.Surface:
        (width, height), _ = self._get_size()
        spinner = self.SPINNER_SIZE
        surface = self._create_surface((width, spinner + 16 + height))

        # spinner
        rect = pygame.Rect(0, 0, spinner, spinner)
        rect.midtop = (width // 2, 0)
        start = math.radians(self.angle)
        pygame.draw.arc(surface, PRIMARY, rect, start, start + math.radians(270), 4)

        # label, com largura fixa para os pontos não deslocarem o texto
        font = self._get_font()
        base = font.render(self.holder + "...", True, GREY_600)
        text_surface = font.render(self.label, True, GREY_600)
        text_rect = base.get_rect(midtop=(width // 2, spinner + 16))
        surface.blit(text_surface, text_rect.topleft)

        return surface

    def _update(self) -> None:
        t1 = pygame.time.get_ticks()
        elapsed = t1 - self.time["last_tick"]
        self.time["last_tick"] = t1
        self.time["elapsed_time"] += elapsed
        self.angle = (self.angle - elapsed * 0.36) % 360

        if self.time["elapsed_time"] > 500:
            self.time["elapsed_time"] = 0
            index = (self.sprites.index(self.value) + 1) % len(self.sprites)
            self.value = self.sprites[index]
        self.label = self.holder + self.value
