"""Tab state of the terminal panel menu."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TerminalMenuTab(Enum):
    """Tabs available in the terminal panel."""

    PROBLEMS = "Problems"
    OUTPUT = "Output"
    DEBUG = "Debug"
    PORTS = "Ports"
    TERMINAL = "Terminal"


@dataclass
class TerminalMenu:
    """Holds the active terminal panel tab."""

    active_tab: TerminalMenuTab = TerminalMenuTab.TERMINAL

    def switch_tab(self, tab: TerminalMenuTab) -> None:
        """Make ``tab`` the active tab."""
        self.active_tab = TerminalMenuTab(tab)