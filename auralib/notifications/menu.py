"""A context menu model for a notification-area icon."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import Enum, auto

__all__ = [
    "NotifyIconMenuItemType",
    "NotifyIconMenuItem",
    "NotifyIconSeparatorMenuItem",
    "NotifyIconActionMenuItem",
    "NotifyIconMenu",
]


class NotifyIconMenuItemType(Enum):
    """Kinds of menu entries."""

    ACTION = auto()
    SEPARATOR = auto()


class NotifyIconMenuItem:
    """Base of all menu entries."""

    def __init__(self, item_type: NotifyIconMenuItemType) -> None:
        self._type = item_type

    @property
    def type(self) -> NotifyIconMenuItemType:
        """The kind of this entry."""
        return self._type


class NotifyIconSeparatorMenuItem(NotifyIconMenuItem):
    """A separator line."""

    def __init__(self) -> None:
        super().__init__(NotifyIconMenuItemType.SEPARATOR)


class NotifyIconActionMenuItem(NotifyIconMenuItem):
    """A labelled entry that runs a callback when chosen."""

    def __init__(self, label: str, action: Callable[[], object] | None = None) -> None:
        super().__init__(NotifyIconMenuItemType.ACTION)
        self._label = label
        self._action = action

    @property
    def label(self) -> str:
        """The text shown for this entry."""
        return self._label

    def invoke(self) -> None:
        """Run the callback, if there is one."""
        if self._action is not None:
            self._action()

    def __call__(self) -> None:
        self.invoke()


class NotifyIconMenu:
    """An ordered list of menu entries."""

    def __init__(self) -> None:
        self._items: list[NotifyIconMenuItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[NotifyIconMenuItem]:
        return iter(self._items)

    def get(self, index: int) -> NotifyIconMenuItem | None:
        """The entry at index, or None when index is out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def __getitem__(self, index: int) -> NotifyIconMenuItem:
        item = self.get(index)
        if item is None:
            raise IndexError(f"menu index {index} out of range")
        return item

    def add_separator(self) -> int:
        """Append a separator and return its index."""
        self._items.append(NotifyIconSeparatorMenuItem())
        return len(self._items) - 1

    def insert_separator(self, index: int) -> None:
        """Insert a separator before index (index may equal the length)."""
        self._check_insert_index(index)
        self._items.insert(index, NotifyIconSeparatorMenuItem())

    def remove_separator(self, index: int) -> None:
        """Remove the separator at index."""
        self._remove(index, NotifyIconMenuItemType.SEPARATOR)

    def add_action(self, label: str, action: Callable[[], object] | None = None) -> int:
        """Append an action and return its index."""
        self._items.append(NotifyIconActionMenuItem(label, action))
        return len(self._items) - 1

    def insert_action(
        self, index: int, label: str, action: Callable[[], object] | None = None
    ) -> None:
        """Insert an action before index (index may equal the length)."""
        self._check_insert_index(index)
        self._items.insert(index, NotifyIconActionMenuItem(label, action))

    def remove_action(self, index: int) -> None:
        """Remove the action at index."""
        self._remove(index, NotifyIconMenuItemType.ACTION)

    def _check_insert_index(self, index: int) -> None:
        if not 0 <= index <= len(self._items):
            raise IndexError(f"menu index {index} out of range")

    def _remove(self, index: int, kind: NotifyIconMenuItemType) -> None:
        item = self[index]
        if item.type is not kind:
            raise ValueError(f"menu item at {index} is not of type {kind.name}")
        del self._items[index]