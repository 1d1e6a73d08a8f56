"""
Presentation switch: operation snapshot -> view descriptor.

`present` is a pure function. The scene keeps the last view it produced and
draws it every frame; it only calls `present` again when the users service
reports a change.
"""

from dataclasses import dataclass
from typing import TypeAlias

from core.constants import (
    CAPTION_DATA,
    CAPTION_ERROR,
    CAPTION_NONE,
    CAPTION_WAITING,
    COUNT_HEADER_TEMPLATE,
    EMPTY_LABEL,
    ERROR_TITLE,
    LOADING_LABEL,
    NO_DATA_LABEL,
    RETRY_LABEL,
    ROW_ACK_TEMPLATE,
)
from core.models.network import OperationSnapshot, OperationState
from core.models.user import User
from core.types import IconName, ViewAction


@dataclass(frozen=True)
class PlaceholderView:
    label: str
    caption: str
    icon: IconName = "cloud_off"


@dataclass(frozen=True)
class LoadingView:
    label: str
    caption: str


@dataclass(frozen=True)
class ErrorView:
    title: str
    message: str
    caption: str
    retry_label: str
    retry_action: ViewAction = "reload"
    icon: IconName = "error_outline"


@dataclass(frozen=True)
class EmptyView:
    label: str
    caption: str
    icon: IconName = "inbox"


@dataclass(frozen=True)
class UserRow:
    user_id: int
    initial: str
    name: str
    email: str
    role: str
    ack_message: str


@dataclass(frozen=True)
class UserListView:
    header: str
    rows: tuple[UserRow, ...]
    caption: str
    icon: IconName = "check_circle"


View: TypeAlias = PlaceholderView | LoadingView | ErrorView | EmptyView | UserListView


def user_row(user: User) -> UserRow:
    return UserRow(
        user_id=user.id,
        initial=user.initial,
        name=user.name,
        email=user.email,
        role=user.role,
        ack_message=ROW_ACK_TEMPLATE.format(name=user.name),
    )


def present(snapshot: OperationSnapshot) -> View:
    """
    Map an operation snapshot to the view that represents it.

    Pending is checked first (a pending operation has neither data nor error),
    then failure before success.

    Args:
        snapshot: State of the observed operation

    Returns:
        The view descriptor to draw
    """
    if snapshot.state is OperationState.PENDING:
        return LoadingView(label=LOADING_LABEL, caption=CAPTION_WAITING)

    if snapshot.state is OperationState.FAILED or snapshot.has_error:
        return ErrorView(
            title=ERROR_TITLE,
            message=snapshot.error or "",
            caption=CAPTION_ERROR,
            retry_label=RETRY_LABEL,
        )

    if snapshot.state is OperationState.SUCCEEDED and snapshot.data is not None:
        users = snapshot.data
        if not users:
            return EmptyView(label=EMPTY_LABEL, caption=CAPTION_DATA)

        return UserListView(
            header=COUNT_HEADER_TEMPLATE.format(count=len(users)),
            rows=tuple(user_row(user) for user in users),
            caption=CAPTION_DATA,
        )

    return PlaceholderView(label=NO_DATA_LABEL, caption=CAPTION_NONE)
