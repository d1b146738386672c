"""The list of open shell terminals and which one is active."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ShellTerminal:
    """One open shell terminal."""

    name: str
    process: Optional[subprocess.Popen] = None
    cwd: str = ""


@dataclass
class ShellTerminalList:
    """Open terminals, with the index of the active one if any."""

    terminals: list[ShellTerminal] = field(default_factory=list)
    active_index: Optional[int] = None

    def add_terminal(
        self, name: str, process: Optional[subprocess.Popen] = None, cwd: str = ""
    ) -> ShellTerminal:
        """Append a terminal and make it active."""
        terminal = ShellTerminal(name, process, cwd)
        self.terminals.append(terminal)
        self.active_index = len(self.terminals) - 1
        return terminal

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self.terminals)

    def remove_terminal(self, index: int) -> None:
        """Remove the terminal at ``index``; out-of-range indices are ignored."""
        if not self._valid(index):
            return
        del self.terminals[index]
        if self.active_index is None:
            return
        if self.active_index == index:
            self.active_index = None
        elif self.active_index > index:
            self.active_index -= 1

    def switch_terminal(self, index: int) -> None:
        """Make the terminal at ``index`` active; out-of-range indices are ignored."""
        if self._valid(index):
            self.active_index = index

    def active_terminal(self) -> Optional[ShellTerminal]:
        """Return the active terminal, or None."""
        if self.active_index is None or not self._valid(self.active_index):
            return None
        return self.terminals[self.active_index]