from client.components.base import BaseComponent
from client.components.button import Button, Fab
from client.components.state import State
from client.components.toast import Toast

__all__ = ["BaseComponent", "Button", "Fab", "State", "Toast"]
