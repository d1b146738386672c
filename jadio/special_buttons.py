"""The configurable shortcut buttons of the top bar."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from itertools import islice
from typing import Iterable, Optional

MAX_BUTTONS = 5


class ActionKind(Enum):
    """What a special button does."""

    RUN_SCRIPT = "run_script"
    OPEN_FILE = "open_file"
    CUSTOM = "custom"


@dataclass(frozen=True)
class SpecialButtonAction:
    """An action with its argument: script name, file path or custom command."""

    kind: ActionKind
    target: str

    @classmethod
    def run_script(cls, script: str) -> SpecialButtonAction:
        return cls(ActionKind.RUN_SCRIPT, script)

    @classmethod
    def open_file(cls, path: str) -> SpecialButtonAction:
        return cls(ActionKind.OPEN_FILE, path)

    @classmethod
    def custom(cls, command: str) -> SpecialButtonAction:
        return cls(ActionKind.CUSTOM, command)


@dataclass
class SpecialButton:
    """A shortcut button and its action."""

    label: str
    tooltip: str
    action: SpecialButtonAction
    shortcut: Optional[str] = None  # e.g. "Ctrl+Alt+1"


@dataclass
class SpecialButtons:
    """Up to five special shortcut buttons."""

    buttons: list[SpecialButton] = field(default_factory=list)

    def set_buttons(self, buttons: Iterable[SpecialButton]) -> None:
        """Replace the buttons, keeping at most the first five."""
        self.buttons = list(islice(buttons, MAX_BUTTONS))

    def trigger(self, index: int) -> Optional[SpecialButtonAction]:
        """Return the action of the button at ``index``, or None if there is none."""
        if 0 <= index < len(self.buttons):
            return self.buttons[index].action
        return None