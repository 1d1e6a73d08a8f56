from client.services.users import UsersService

__all__ = ["UsersService"]
