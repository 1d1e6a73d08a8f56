from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Literal

import pygame

from core.constants import FONT_SIZE_MAP, SIZE_MAP, VARIANT_MAP
from core.types import (
    ComponentSize,
    ComponentType,
    ComponentVariant,
    Coordinate,
    FontSize,
    Thickness,
)


class BaseComponent(ABC):
    """
    Widget drawn centered on `position`, rebuilt from `_init_surface` every frame.

    Subclasses only draw; hover tracking and left-click / Enter activation
    live here.
    """

    def __init__(
        self,
        window: pygame.Surface,
        position: Coordinate,
        label: str,
        variant: ComponentVariant = "standard",
        size: ComponentSize = "md",
        text_type: FontSize = "standard",
        hover: bool = True,
        *,
        callback: Callable[[], object] = lambda: None,
    ) -> None:
        """
        Args:
            window: Surface the component is blitted on.
            position: Center of the component.
            label: Text shown by the component.
            variant: Colour set from VARIANT_MAP.
            size: Row of SIZE_MAP / FONT_SIZE_MAP to use.
            text_type: Font family entry in FONT_SIZE_MAP.
            hover: Whether the pointer focuses the component.
            callback: Called on activation.
        """
        self.window = window
        self.position = position
        self.label = label
        self.variant: ComponentVariant = variant
        self.size: ComponentSize = size
        self.text_type: FontSize = text_type
        self.hover = hover
        self.callback = callback
        self.is_focused = False
        # ! O nome da classe precisa existir em "ComponentType"
        self.type: ComponentType = self.__class__.__name__.lower()  # type: ignore
        self.surface = self._init_surface()
        self.rect = self.surface.get_rect(center=self.position)

    @abstractmethod
    def _init_surface(self) -> pygame.Surface:
        raise NotImplementedError("Subclasses must implement this method.")

    def _create_surface(self, size: Coordinate) -> pygame.Surface:
        return pygame.Surface(size, flags=pygame.SRCALPHA)

    def _get_color(self, surface_part: Literal["bg", "text", "border"]) -> pygame.Color:
        return VARIANT_MAP[self.is_focused][self.variant][surface_part]

    def _get_font(self) -> pygame.font.Font:
        return pygame.font.Font(None, FONT_SIZE_MAP[self.text_type][self.size])

    def _get_size(self) -> tuple[Coordinate, Thickness]:
        return SIZE_MAP[self.type][self.size]

    def _update(self) -> None:
        """Per-frame state change before the surface is rebuilt."""

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEMOTION and self.hover:
            self.is_focused = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN and self.is_focused:
            self.callback()

    def render(self) -> None:
        self._update()
        self.surface = self._init_surface()
        self.rect = self.surface.get_rect(center=self.position)
        self.window.blit(self.surface, self.rect)
