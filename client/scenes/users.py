import logging

import pygame

from client.components import Button, Fab, State, Toast
from client.components.icons import draw_icon
from client.presentation import (
    EmptyView,
    ErrorView,
    LoadingView,
    PlaceholderView,
    UserListView,
    UserRow,
    View,
    present,
)
from client.scenes.base import BaseScene
from core.constants import (
    APP_BAR_HEIGHT,
    APP_BAR_TITLE,
    AVATAR_RADIUS,
    BANNER_HEIGHT,
    BANNER_TEXT,
    BLACK,
    DANGER,
    FAB_RADIUS,
    GREY,
    GREY_400,
    GREY_600,
    HEADER_HEIGHT,
    ICON_SIZE,
    PRIMARY,
    PRIMARY_DARK,
    PRIMARY_LIGHT,
    RELOAD_TOOLTIP,
    ROW_HEIGHT,
    ROW_MARGIN,
    ROW_PADDING,
    SHADOW,
    SIMULATE_ERROR_TOOLTIP,
    SUCCESS,
    SUCCESS_DARK,
    SUCCESS_LIGHT,
    SURFACE,
    WHITE,
)
from core.models.network import OperationSnapshot

logger = logging.getLogger(__name__)


class UsersScene(BaseScene):
    """Tela única: lista de usuários que acompanha a operação atual."""

    def __init__(self, app) -> None:
        super().__init__(app)
        self.width, self.height = self.app.screen.get_size()
        self.body_rect = pygame.Rect(
            0,
            APP_BAR_HEIGHT + BANNER_HEIGHT,
            self.width,
            self.height - APP_BAR_HEIGHT - BANNER_HEIGHT,
        )

        # Estado
        self.view: View | None = None
        self.toast: Toast | None = None
        self.scroll = 0
        self.hovered_row: int | None = None
        self.fonts: dict[tuple[int, bool], pygame.font.Font] = {}

        service = app.users_service
        self.actions = {
            "reload": service.reload,
            "simulate_error": service.simulate_error,
        }

        # Componentes fixos: ações da app bar e botão flutuante
        bar_y = APP_BAR_HEIGHT // 2
        self.reload_button = Button(
            app.screen,
            (self.width - 200, bar_y),
            RELOAD_TOOLTIP,
            "outline",
            "sm",
            "text",
            icon="refresh",
            callback=service.reload,
        )
        self.error_button = Button(
            app.screen,
            (self.width - 72, bar_y),
            SIMULATE_ERROR_TOOLTIP,
            "outline",
            "sm",
            "text",
            icon="error_outline",
            callback=service.simulate_error,
        )
        self.fab = Fab(
            app.screen,
            (self.width - 24 - FAB_RADIUS, self.height - 24 - FAB_RADIUS),
            "",
            "primary",
            "md",
            icon="refresh",
            callback=service.reload,
        )
        for component in (self.reload_button, self.error_button, self.fab):
            self.add_component(component)

        # Componentes que dependem da view atual (loading, reintentar)
        self.body_components = []

        service.register_change_callback(self._on_operation_changed)
        self._on_operation_changed(service.snapshot)

    # ——— Observação da operação ———
    def _on_operation_changed(self, snapshot: OperationSnapshot) -> None:
        self.view = present(snapshot)
        self.scroll = 0
        self.hovered_row = None
        self._build_body_components()

    def _build_body_components(self) -> None:
        for component in self.body_components:
            self.remove_component(component)
        self.body_components = []

        cx, cy = self.body_rect.center
        match self.view:
            case LoadingView(label=label):
                self.body_components.append(
                    State(self.app.screen, (cx, cy - 20), label, size="md", text_type="text")
                )
            case ErrorView(retry_label=retry_label, retry_action=retry_action):
                self.body_components.append(
                    Button(
                        self.app.screen,
                        (cx, cy + 120),
                        retry_label,
                        "primary",
                        "md",
                        "text",
                        icon="refresh",
                        callback=self.actions[retry_action],
                    )
                )

        # abaixo da FAB e do toast
        for component in self.body_components:
            self.components.insert(0, component)

    def show_toast(self, message: str) -> None:
        if self.toast is not None:
            self.remove_component(self.toast)
        self.toast = Toast(
            self.app.screen,
            (self.width // 2, self.height - 40),
            message,
            duration=self.app.settings.toast_duration,
        )
        self.add_component(self.toast)

    # ——— Eventos ———
    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self._handle_keyboard(event)
            return

        if not isinstance(self.view, UserListView):
            return

        if event.type == pygame.MOUSEWHEEL:
            self._scroll_by(-event.y * ROW_HEIGHT // 2)
        elif event.type == pygame.MOUSEMOTION:
            self.hovered_row = self._row_at(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # clique em botão não atravessa para a linha de baixo
            if any(c.rect.collidepoint(event.pos) for c in self.components if c is not self.toast):
                return
            index = self._row_at(event.pos)
            if index is not None:
                self.show_toast(self.view.rows[index].ack_message)

    def _handle_keyboard(self, event: pygame.event.Event) -> None:
        config = self.app.config_manager
        if config.is_key_for_action(event.key, "reload"):
            self.actions["reload"]()
        elif config.is_key_for_action(event.key, "simulate_error"):
            self.actions["simulate_error"]()
        elif config.is_key_for_action(event.key, "quit"):
            self.app.running = False

    def _scroll_by(self, delta: int) -> None:
        if not isinstance(self.view, UserListView):
            return
        content = HEADER_HEIGHT + len(self.view.rows) * (ROW_HEIGHT + ROW_MARGIN) + ROW_MARGIN
        max_scroll = max(0, content - self.body_rect.height)
        self.scroll = max(0, min(max_scroll, self.scroll + delta))

    def row_rect(self, index: int) -> pygame.Rect:
        top = (
            self.body_rect.top
            + HEADER_HEIGHT
            + ROW_MARGIN
            + index * (ROW_HEIGHT + ROW_MARGIN)
            - self.scroll
        )
        return pygame.Rect(16, top, self.width - 32, ROW_HEIGHT)

    def _row_at(self, pos) -> int | None:
        if not isinstance(self.view, UserListView):
            return None
        list_area = self.body_rect.copy()
        list_area.top += HEADER_HEIGHT
        list_area.height -= HEADER_HEIGHT
        if not list_area.collidepoint(pos):
            return None
        for index in range(len(self.view.rows)):
            if self.row_rect(index).collidepoint(pos):
                return index
        return None

    # ——— Renderização ———
    def render(self) -> None:
        if self.toast is not None and self.toast.expired:
            self.remove_component(self.toast)
            self.toast = None

        self._render_body()
        self._render_app_bar()
        self._render_banner()

    def _font(self, size: int, bold: bool = False) -> pygame.font.Font:
        key = (size, bold)
        if key not in self.fonts:
            font = pygame.font.Font(None, size)
            font.set_bold(bold)
            self.fonts[key] = font
        return self.fonts[key]

    def _blit_text(self, text: str, size: int, color, bold: bool = False, **anchor) -> pygame.Rect:
        surface = self._font(size, bold).render(text, True, color)
        rect = surface.get_rect(**anchor)
        self.app.screen.blit(surface, rect)
        return rect

    def _wrap(self, text: str, size: int, max_width: int) -> list[str]:
        font = self._font(size)
        lines: list[str] = []
        line = ""
        for word in text.split():
            candidate = f"{line} {word}".strip()
            if line and font.size(candidate)[0] > max_width:
                lines.append(line)
                line = word
            else:
                line = candidate
        if line:
            lines.append(line)
        return lines

    def _render_app_bar(self) -> None:
        bar = pygame.Rect(0, 0, self.width, APP_BAR_HEIGHT)
        pygame.draw.rect(self.app.screen, PRIMARY, bar)
        self._blit_text(APP_BAR_TITLE, 26, WHITE, bold=True, midleft=(16, bar.centery))

    def _render_banner(self) -> None:
        banner = pygame.Rect(0, APP_BAR_HEIGHT, self.width, BANNER_HEIGHT)
        pygame.draw.rect(self.app.screen, PRIMARY_LIGHT, banner)
        self._blit_text(BANNER_TEXT, 18, PRIMARY_DARK, center=banner.center)

    def _render_caption(self, caption: str, top: int) -> None:
        self._blit_text(caption, 16, GREY_400, midtop=(self.body_rect.centerx, top))

    def _render_body(self) -> None:
        screen = self.app.screen
        cx, cy = self.body_rect.center

        match self.view:
            case LoadingView(caption=caption):
                # spinner e rótulo vêm do componente State
                self._render_caption(caption, cy + 50)

            case ErrorView(title=title, message=message, caption=caption, icon=icon):
                draw_icon(screen, icon, (cx, cy - 110), ICON_SIZE, DANGER)
                self._blit_text(title, 28, BLACK, bold=True, center=(cx, cy - 45))
                top = cy - 20
                for line in self._wrap(message, 20, self.width - 64):
                    top = self._blit_text(line, 20, GREY_600, midtop=(cx, top)).bottom + 2
                self._render_caption(caption, top + 12)

            case EmptyView(label=label, caption=caption, icon=icon):
                draw_icon(screen, icon, (cx, cy - 50), ICON_SIZE, GREY)
                self._blit_text(label, 24, GREY_600, center=(cx, cy + 10))
                self._render_caption(caption, cy + 36)

            case UserListView():
                self._render_user_list(self.view)

            case PlaceholderView(label=label, caption=caption, icon=icon):
                draw_icon(screen, icon, (cx, cy - 50), ICON_SIZE, GREY)
                self._blit_text(label, 24, GREY_600, center=(cx, cy + 10))
                self._render_caption(caption, cy + 36)

    def _render_user_list(self, view: UserListView) -> None:
        screen = self.app.screen
        previous_clip = screen.get_clip()

        # linhas rolam por baixo do cabeçalho
        list_area = self.body_rect.copy()
        list_area.top += HEADER_HEIGHT
        list_area.height -= HEADER_HEIGHT
        screen.set_clip(list_area)
        for index, row in enumerate(view.rows):
            rect = self.row_rect(index)
            if rect.bottom < list_area.top or rect.top > list_area.bottom:
                continue
            self._render_row(rect, row, index == self.hovered_row)
        screen.set_clip(previous_clip)

        header = pygame.Rect(self.body_rect.left, self.body_rect.top, self.width, HEADER_HEIGHT)
        pygame.draw.rect(screen, SUCCESS_LIGHT, header)
        text = self._font(20, True).render(view.header, True, SUCCESS_DARK)
        total = 20 + 8 + text.get_width()
        left = header.centerx - total // 2
        draw_icon(screen, view.icon, (left + 10, header.centery), 20, SUCCESS)
        screen.blit(text, text.get_rect(midleft=(left + 28, header.centery)))

    def _render_row(self, rect: pygame.Rect, row: UserRow, hovered: bool) -> None:
        screen = self.app.screen

        # card com sombra
        pygame.draw.rect(screen, SHADOW, rect.move(0, 2), border_radius=6)
        pygame.draw.rect(screen, PRIMARY_LIGHT if hovered else SURFACE, rect, border_radius=6)

        avatar_center = (rect.left + ROW_PADDING + AVATAR_RADIUS, rect.centery)
        pygame.draw.circle(screen, PRIMARY, avatar_center, AVATAR_RADIUS)
        self._blit_text(row.initial, 26, WHITE, bold=True, center=avatar_center)

        text_left = rect.left + ROW_PADDING * 2 + AVATAR_RADIUS * 2
        self._blit_text(row.name, 22, BLACK, bold=True, topleft=(text_left, rect.top + 14))
        self._blit_text(row.email, 19, GREY_600, topleft=(text_left, rect.top + 40))
        self._blit_text(row.role, 17, PRIMARY, topleft=(text_left, rect.top + 64))

        # seta (arrow_forward_ios)
        ax = rect.right - ROW_PADDING - 6
        points = [(ax - 6, rect.centery - 8), (ax + 2, rect.centery), (ax - 6, rect.centery + 8)]
        pygame.draw.lines(screen, GREY, False, points, 2)
