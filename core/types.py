from typing import Literal, TypeAlias

Coordinate: TypeAlias = tuple[int, int]
Thickness: TypeAlias = int
IsFocused: TypeAlias = bool
ComponentType: TypeAlias = Literal["button", "fab", "state", "toast"]
ComponentSize: TypeAlias = Literal["sm", "md", "lg"]
ComponentVariant: TypeAlias = Literal["standard", "primary", "secondary", "outline", "danger"]
FontSize: TypeAlias = Literal["standard", "title", "subtitle", "text"]
OperationKind: TypeAlias = Literal["users", "users_failing"]
ViewAction: TypeAlias = Literal["reload", "simulate_error"]
IconName: TypeAlias = Literal["cloud_off", "error_outline", "inbox", "check_circle", "refresh"]

__all__ = [
    "ComponentSize",
    "ComponentType",
    "ComponentVariant",
    "Coordinate",
    "FontSize",
    "IconName",
    "IsFocused",
    "OperationKind",
    "Thickness",
    "ViewAction",
]
