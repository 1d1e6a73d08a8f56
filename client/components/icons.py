"""Tiny vector icons drawn with pygame primitives (no asset files)."""

import math

import pygame

from core.types import Coordinate, IconName


def _refresh(surface: pygame.Surface, center: Coordinate, size: int, color) -> None:
    cx, cy = center
    radius = size // 2 - max(2, size // 10)
    width = max(2, size // 10)
    rect = pygame.Rect(0, 0, radius * 2, radius * 2)
    rect.center = center
    pygame.draw.arc(surface, color, rect, math.radians(30), math.radians(330), width)

    # ponta da seta no fim do arco
    angle = math.radians(30)
    tip = (cx + radius * math.cos(angle), cy - radius * math.sin(angle))
    head = size // 4
    pygame.draw.polygon(
        surface,
        color,
        [tip, (tip[0] - head, tip[1] - head // 3), (tip[0] - head // 3, tip[1] + head)],
    )


def _error_outline(surface: pygame.Surface, center: Coordinate, size: int, color) -> None:
    cx, cy = center
    width = max(2, size // 12)
    pygame.draw.circle(surface, color, center, size // 2, width)
    pygame.draw.line(surface, color, (cx, cy - size // 4), (cx, cy + size // 16), width)
    pygame.draw.circle(surface, color, (cx, cy + size // 5), max(1, width // 2 + 1))


def _check_circle(surface: pygame.Surface, center: Coordinate, size: int, color) -> None:
    cx, cy = center
    pygame.draw.circle(surface, color, center, size // 2)
    width = max(2, size // 8)
    points = [
        (cx - size // 4, cy),
        (cx - size // 16, cy + size // 6),
        (cx + size // 4, cy - size // 6),
    ]
    pygame.draw.lines(surface, (255, 255, 255), False, points, width)


def _inbox(surface: pygame.Surface, center: Coordinate, size: int, color) -> None:
    cx, cy = center
    width = max(2, size // 16)
    rect = pygame.Rect(0, 0, size * 3 // 4, size * 3 // 4)
    rect.center = center
    pygame.draw.rect(surface, color, rect, width, border_radius=size // 10)
    tray_y = cy + size // 10
    pygame.draw.lines(
        surface,
        color,
        False,
        [
            (rect.left, tray_y),
            (cx - size // 8, tray_y),
            (cx - size // 12, tray_y + size // 8),
            (cx + size // 12, tray_y + size // 8),
            (cx + size // 8, tray_y),
            (rect.right, tray_y),
        ],
        width,
    )


def _cloud_off(surface: pygame.Surface, center: Coordinate, size: int, color) -> None:
    cx, cy = center
    width = max(2, size // 16)
    pygame.draw.circle(surface, color, (cx - size // 6, cy + size // 12), size // 5, width)
    pygame.draw.circle(surface, color, (cx + size // 10, cy - size // 16), size // 4, width)
    pygame.draw.circle(surface, color, (cx + size // 4, cy + size // 10), size // 6, width)
    pygame.draw.line(
        surface,
        color,
        (cx - size // 2 + width, cy - size // 2 + width),
        (cx + size // 2 - width, cy + size // 2 - width),
        width + 1,
    )


ICONS = {
    "refresh": _refresh,
    "error_outline": _error_outline,
    "check_circle": _check_circle,
    "inbox": _inbox,
    "cloud_off": _cloud_off,
}


def draw_icon(
    surface: pygame.Surface, name: IconName, center: Coordinate, size: int, color
) -> None:
    ICONS[name](surface, center, size, color)
