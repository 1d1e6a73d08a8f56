from pathlib import Path

import pygame

from core.types import (
    ComponentSize,
    ComponentType,
    ComponentVariant,
    Coordinate,
    FontSize,
    IsFocused,
    Thickness,
)

ROOT = Path(__file__).parent.parent

CLIENT_CONFIG_FILE = ROOT / "client_config.json"

# Simulated server
USERS_DELAY_UNITS = 3
USERS_FAILING_DELAY_UNITS = 2
CONNECTION_ERROR_MESSAGE = "connection error: could not reach server"
INTENTIONAL_ERROR_MESSAGE = "intentional error for demonstrating error handling"

# Textos da interface (em espanhol)
APP_BAR_TITLE = "FutureBuilder Demo"
BANNER_TEXT = "Esta app demuestra cómo se observan estados asíncronos"
NO_DATA_LABEL = "Sin datos"
LOADING_LABEL = "Cargando usuarios..."
ERROR_TITLE = "¡Ups! Algo salió mal"
RETRY_LABEL = "Reintentar"
EMPTY_LABEL = "No hay usuarios"
COUNT_HEADER_TEMPLATE = "{count} usuarios cargados"
ROW_ACK_TEMPLATE = "Clic en {name}"
RELOAD_TOOLTIP = "Recargar"
SIMULATE_ERROR_TOOLTIP = "Simular error"

# Legendas didáticas com o estado observado
CAPTION_NONE = "ConnectionState.none"
CAPTION_WAITING = "ConnectionState.waiting"
CAPTION_ERROR = "snapshot.hasError == true"
CAPTION_DATA = "snapshot.hasData == true"

# Layout
APP_BAR_HEIGHT = 64
BANNER_HEIGHT = 56
HEADER_HEIGHT = 48
ROW_HEIGHT = 96
ROW_MARGIN = 8
ROW_PADDING = 16
AVATAR_RADIUS = 22
FAB_RADIUS = 28
ICON_SIZE = 64

# Material-like palette
BACKGROUND = pygame.Color(250, 250, 250)
SURFACE = pygame.Color(255, 255, 255)
PRIMARY = pygame.Color(33, 150, 243)  # Colors.blue
PRIMARY_DARK = pygame.Color(13, 71, 161)  # Colors.blue.shade900
PRIMARY_LIGHT = pygame.Color(227, 242, 253)  # Colors.blue.shade50
SUCCESS = pygame.Color(76, 175, 80)  # Colors.green
SUCCESS_DARK = pygame.Color(27, 94, 32)
SUCCESS_LIGHT = pygame.Color(232, 245, 233)
DANGER = pygame.Color(244, 67, 54)  # Colors.red
GREY = pygame.Color(158, 158, 158)
GREY_600 = pygame.Color(117, 117, 117)
GREY_400 = pygame.Color(189, 189, 189)
SHADOW = pygame.Color(224, 224, 224)
TOAST_BG = pygame.Color(50, 50, 50)
WHITE = pygame.Color(255, 255, 255)
BLACK = pygame.Color(33, 33, 33)



# Constants for the components
FOCUSED = True
NOT_FOCUSED = False

SIZE_MAP: dict[ComponentType, dict[ComponentSize, tuple[Coordinate, Thickness]]] = {
    "button": {
        "sm": ((120, 36), 1),
        "md": ((160, 44), 2),
        "lg": ((200, 52), 2),
    },
    "fab": {
        "sm": ((48, 48), 0),
        "md": ((56, 56), 0),
        "lg": ((64, 64), 0),
    },
    "state": {
        "sm": ((180, 30), 0),
        "md": ((240, 40), 0),
        "lg": ((300, 50), 0),
    },
    "toast": {
        "sm": ((300, 40), 0),
        "md": ((440, 48), 0),
        "lg": ((460, 56), 0),
    },
}

# foco (hover) só muda as cores
VARIANT_MAP: dict[IsFocused, dict[ComponentVariant, dict[str, pygame.Color]]] = {
    NOT_FOCUSED: {
        "standard": {"bg": BACKGROUND, "text": GREY_600, "border": BACKGROUND},
        "primary": {"bg": PRIMARY, "text": WHITE, "border": PRIMARY},
        "secondary": {"bg": PRIMARY_LIGHT, "text": PRIMARY_DARK, "border": PRIMARY},
        "outline": {"bg": PRIMARY, "text": WHITE, "border": WHITE},
        "danger": {"bg": DANGER, "text": WHITE, "border": DANGER},
    },
    FOCUSED: {
        "standard": {"bg": BACKGROUND, "text": BLACK, "border": BACKGROUND},
        "primary": {"bg": PRIMARY_DARK, "text": WHITE, "border": PRIMARY_DARK},
        "secondary": {"bg": PRIMARY_LIGHT, "text": PRIMARY_DARK, "border": PRIMARY_DARK},
        "outline": {"bg": PRIMARY_DARK, "text": WHITE, "border": WHITE},
        "danger": {"bg": DANGER, "text": WHITE, "border": BLACK},
    },
}

FONT_SIZE_MAP: dict[FontSize, dict[ComponentSize, int]] = {
    "standard": {"sm": 18, "md": 22, "lg": 26},
    "title": {"sm": 22, "md": 26, "lg": 32},
    "subtitle": {"sm": 16, "md": 20, "lg": 24},
    "text": {"sm": 14, "md": 18, "lg": 22},
}
