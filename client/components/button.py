import pygame

from client.components.base import BaseComponent
from client.components.icons import draw_icon
from core.types import IconName


class Button(BaseComponent):
    def __init__(self, *args, icon: IconName | None = None, **kwargs) -> None:
        self.icon = icon
        super().__init__(*args, **kwargs)

    def _init_surface(self) -> pygame.Surface:
        """
        Initialize the surface of the button.
        """
        cordinate, thickness = self._get_size()
        middle = (cordinate[0] // 2, cordinate[1] // 2)
        radius = 8

        # Create main surface and rect
        surface = self._create_surface(cordinate)
        rect = surface.get_rect()

        # Create the text surface
        font = self._get_font()
        text_surface = font.render(self.label, True, self._get_color("text"))

        # draw background
        pygame.draw.rect(surface, self._get_color("bg"), rect, border_radius=radius)

        # draw the border
        if thickness:
            pygame.draw.rect(
                surface, self._get_color("border"), rect, border_radius=radius, width=thickness
            )

        if self.icon is None:
            surface.blit(text_surface, text_surface.get_rect(center=middle))
            return surface

        # icon + label, centered together
        icon_size = cordinate[1] // 2
        gap = 6 if self.label else 0
        total = icon_size + gap + text_surface.get_width()
        left = (cordinate[0] - total) // 2
        icon_center = (left + icon_size // 2, middle[1])
        draw_icon(surface, self.icon, icon_center, icon_size, self._get_color("text"))
        surface.blit(
            text_surface,
            text_surface.get_rect(midleft=(left + icon_size + gap, middle[1])),
        )

        return surface


class Fab(Button):
    """Floating action button: a circle with an icon."""

    def _init_surface(self) -> pygame.Surface:
        cordinate, thickness = self._get_size()
        middle = (cordinate[0] // 2, cordinate[1] // 2)
        radius = cordinate[0] // 2

        surface = self._create_surface(cordinate)
        pygame.draw.circle(surface, self._get_color("bg"), middle, radius)
        if thickness:
            pygame.draw.circle(surface, self._get_color("border"), middle, radius, thickness)
        if self.icon is not None:
            draw_icon(surface, self.icon, middle, radius, self._get_color("text"))

        return surface
