from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING

import pygame

from client.components import BaseComponent
from core.constants import BACKGROUND

if TYPE_CHECKING:
    from client.app import ClientApp


class BaseScene(ABC):
    """Classe base para as cenas do cliente."""

    def __init__(self, app: "ClientApp") -> None:
        """
        Initialize a new instance of the BaseScene class.

        Args:
            app: Client App
        """

        self.app = app
        self.components: list[BaseComponent] = []

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> None:
        """
        Handle events.

        Args:
            event: Event to be processed
        """
        raise NotImplementedError

    @abstractmethod
    def render(self) -> None:
        """
        Render the scene (draw on the screen).
        """
        raise NotImplementedError

    def _handle_event(self, event) -> None:
        """
        Handle events for the scene.
        """
        if event.type == pygame.QUIT:
            self.app.running = False

        self.handle_event(event)

        # cópia: callbacks podem trocar os componentes da cena
        for component in list(self.components):
            component.handle_event(event)

    def _render(self) -> None:
        """
        Render the scene.
        """
        self.app.screen.fill(BACKGROUND)

        # Render the scene
        self.render()

        # Render components
        for component in self.components:
            component.render()

    def update(self, events: Iterable[pygame.event.Event] | None = None) -> None:
        """Update the scene logic."""

        for event in pygame.event.get() if events is None else events:
            self._handle_event(event)

        self._render()

    def add_component(self, component: BaseComponent) -> None:
        """
        Add a component to the scene.

        Args:
            component: Component to be added
        """
        self.components.append(component)

    def remove_component(self, component: BaseComponent) -> None:
        """
        Remove a component from the scene.

        Args:
            component: Component to be removed
        """
        if component in self.components:
            self.components.remove(component)
