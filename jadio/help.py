"""Pages of the built-in help panel."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

PANEL_TITLE = "❓ Help & Documentation"


class HelpCategory(Enum):
    """Help topics, with the label shown in the sidebar."""

    GETTING_STARTED = "Getting Started"
    KEYBOARD_SHORTCUTS = "Shortcuts"
    CODE_AGENT = "Code Agent"
    FEATURES = "Features"
    TROUBLESHOOTING = "Troubleshooting"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class HelpPage:
    """A heading and sections of lines; monospace pages show fixed-width text."""

    title: str
    sections: tuple[tuple[str, ...], ...]
    monospace: bool = False


_PAGES = {
    HelpCategory.GETTING_STARTED: HelpPage(
        "Welcome to JadioAI IDE!",
        (
            ("This is a modern, lightweight IDE.",),
            (
                "Quick Start:",
                "• Use the File menu to open or create projects",
                "• The Explorer shows your project files",
                "• The Code Agent provides AI assistance",
                "• The Terminal runs commands and shows output",
            ),
        ),
    ),
    HelpCategory.KEYBOARD_SHORTCUTS: HelpPage(
        "Keyboard Shortcuts",
        (
            (
                "Ctrl+N     - New File",
                "Ctrl+O     - Open File",
                "Ctrl+S     - Save File",
                "Ctrl+Shift+P - Command Palette",
                "Ctrl+`     - Toggle Terminal",
                "Ctrl+Shift+E - Toggle Explorer",
                "F5         - Run/Debug",
            ),
        ),
        monospace=True,
    ),
    HelpCategory.CODE_AGENT: HelpPage(
        "AI Code Agent",
        (
            (
                "The Code Agent is your AI programming assistant.",
                "Features:",
                "• Code review and suggestions",
                "• Bug detection and fixes",
                "• Code explanation and documentation",
                "• Refactoring assistance",
                "• Natural language to code conversion",
            ),
        ),
    ),
    HelpCategory.FEATURES: HelpPage(
        "IDE Features",
        (
            (
                "🎨 Syntax highlighting for multiple languages",
                "🔍 Global search and replace",
                "🌿 Git integration",
                "🔌 Plugin system",
                "🖥️ Integrated terminal",
                "🤖 AI-powered coding assistance",
                "⚡ Script runner",
                "🌐 Development server management",
            ),
        ),
    ),
    HelpCategory.TROUBLESHOOTING: HelpPage(
        "Common Issues",
        (
            ("Q: The Code Agent isn't responding", "A: Check your API key in AI Settings"),
            ("Q: Syntax highlighting not working", "A: Ensure the file extension is recognized"),
            ("Q: Terminal commands not executing", "A: Check your system PATH configuration"),
        ),
    ),
}


def help_page(category: HelpCategory) -> HelpPage:
    """Return the page for ``category``."""
    return _PAGES[HelpCategory(category)]


def render_help(category: HelpCategory) -> str:
    """Return the page for ``category`` as plain text, sections separated by blank lines."""
    page = help_page(category)
    blocks = [page.title, *("\n".join(section) for section in page.sections)]
    return "\n\n".join(blocks)