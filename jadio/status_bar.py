"""Items shown in the status bar at the bottom of the IDE."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional


class StatusBarActionKind(Enum):
    """What clicking a status bar item does."""

    OPEN_SETTINGS = "open_settings"
    OPEN_GIT = "open_git"
    CUSTOM = "custom"


@dataclass(frozen=True)
class StatusBarAction:
    """A click action; ``command`` is set for custom actions."""

    kind: StatusBarActionKind
    command: Optional[str] = None

    @classmethod
    def custom(cls, command: str) -> StatusBarAction:
        return cls(StatusBarActionKind.CUSTOM, command)


@dataclass
class StatusBarItem:
    """One labelled value in the status bar."""

    label: str
    value: str
    tooltip: Optional[str] = None
    clickable: bool = False
    on_click: Optional[StatusBarAction] = None


@dataclass
class StatusBar:
    """The items of the status bar, in display order."""

    items: list[StatusBarItem] = field(default_factory=list)

    def set_items(self, items: Iterable[StatusBarItem]) -> None:
        """Replace all items."""
        self.items = list(items)

    def _find(self, label: str) -> Optional[StatusBarItem]:
        return next((item for item in self.items if item.label == label), None)

    def update_item(self, label: str, value: str) -> None:
        """Set the value of the first item with ``label``; unknown labels are ignored."""
        item = self._find(label)
        if item is not None:
            item.value = value

    def handle_click(self, label: str) -> Optional[StatusBarAction]:
        """Return the click action of the first item with ``label``, if any."""
        item = self._find(label)
        return item.on_click if item is not None else None