"""Event data for sent notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

__all__ = [
    "NotificationSeverity",
    "NotificationSentEventArgs",
    "ShellNotificationSentEventArgs",
]


class NotificationSeverity(Enum):
    """How important a notification is."""

    INFORMATIONAL = auto()
    SUCCESS = auto()
    WARNING = auto()
    ERROR = auto()


@dataclass(frozen=True)
class NotificationSentEventArgs:
    """An in-app notification with an optional action."""

    message: str
    severity: NotificationSeverity
    action: str = ""
    action_param: str = ""


@dataclass(frozen=True, init=False)
class ShellNotificationSentEventArgs(NotificationSentEventArgs):
    """A desktop notification, which also carries a title."""

    title: str = field(default="")

    def __init__(
        self,
        title: str,
        message: str,
        severity: NotificationSeverity,
        action: str = "",
        action_param: str = "",
    ) -> None:
        super().__init__(message, severity, action, action_param)
        object.__setattr__(self, "title", title)