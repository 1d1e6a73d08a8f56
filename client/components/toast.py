import time

import pygame

from client.components.base import BaseComponent
from core.constants import TOAST_BG, WHITE


class Toast(BaseComponent):
    """Transient message at the bottom of the screen (a snackbar)."""

    def __init__(self, window, position, label, duration: float = 2.0, size="md") -> None:
        self.duration = duration
        self.shown_at = time.monotonic()
        super().__init__(window, position, label, size=size, text_type="text", hover=False)

    @property
    def expired(self) -> bool:
        return time.monotonic() - self.shown_at >= self.duration

    def _init_surface(self) -> pygame.Surface:
        (width, height), _ = self._get_size()
        surface = self._create_surface((width, height))
        pygame.draw.rect(surface, TOAST_BG, surface.get_rect(), border_radius=6)

        font = self._get_font()
        text_surface = font.render(self.label, True, WHITE)
        surface.blit(text_surface, text_surface.get_rect(midleft=(16, height // 2)))

        return surface
