from client.scenes.base import BaseScene
from client.scenes.users import UsersScene

__all__ = ["BaseScene", "UsersScene"]
