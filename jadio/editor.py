"""Open files, tabs and unsaved changes of the code editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

WELCOME_FILE = "main.rs"
WELCOME_TEXT = (
    "// Welcome to JadioAI IDE\n"
    "// Start coding here!\n"
    "\n"
    "fn main() {\n"
    '    println!("Hello, World!");\n'
    "}"
)
UNSAVED_MARK = "● "

_LANGUAGES = {
    "rs": "rust",
    "py": "python",
    "js": "javascript",
    "ts": "typescript",
    "html": "html",
    "css": "css",
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
    "toml": "toml",
    "md": "markdown",
}


def detect_language(filename: str) -> str:
    """Guess a file's language from the text after its last dot."""
    return _LANGUAGES.get(filename.split(".")[-1], "text")


@dataclass
class FileContent:
    """The text of one file held by the editor."""

    content: str
    language: str
    cursor_position: int = 0
    scroll_offset: tuple[float, float] = (0.0, 0.0)

    @property
    def line_count(self) -> int:
        return len(self.content.splitlines())

    @property
    def byte_length(self) -> int:
        return len(self.content.encode("utf-8"))


@dataclass
class Editor:
    """Files known to the editor, the tabs open on them and the active tab."""

    files: dict[str, FileContent] = field(default_factory=dict)
    open_files: list[str] = field(default_factory=list)
    active_file: Optional[str] = None
    unsaved_changes: set[str] = field(default_factory=set)

    @classmethod
    def with_welcome(cls) -> Editor:
        """Return an editor with the welcome file open."""
        editor = cls()
        editor.files[WELCOME_FILE] = FileContent(WELCOME_TEXT, "rust")
        editor.open_files.append(WELCOME_FILE)
        editor.active_file = WELCOME_FILE
        return editor

    @property
    def active(self) -> Optional[FileContent]:
        """The content of the active file, if any."""
        return self.files.get(self.active_file) if self.active_file is not None else None

    def open_file(self, filename: str, content: str) -> None:
        """Load ``content`` under ``filename``, open a tab for it and make it active."""
        self.files[filename] = FileContent(content, detect_language(filename))
        if filename not in self.open_files:
            self.open_files.append(filename)
        self.active_file = filename

    def close_file(self, filename: str) -> None:
        """Close the tab of ``filename``; the first remaining tab becomes active if needed."""
        if filename not in self.open_files:
            return
        self.open_files.remove(filename)
        if self.active_file == filename:
            self.active_file = self.open_files[0] if self.open_files else None

    def save_file(self, filename: str) -> None:
        """Mark ``filename`` as saved."""
        self.unsaved_changes.discard(filename)

    def edit(self, filename: str, content: str) -> None:
        """Replace the text of a loaded file, marking it unsaved if it changed."""
        file = self.files[filename]
        if file.content != content:
            file.content = content
            self.unsaved_changes.add(filename)

    def new_tab(self) -> str:
        """Open an empty untitled file and return its name."""
        filename = f"untitled_{len(self.open_files) + 1}.txt"
        self.open_file(filename, "")
        return filename

    def activate(self, filename: str) -> None:
        """Make the open tab ``filename`` active."""
        if filename not in self.open_files:
            raise ValueError(f"file is not open: {filename}")
        self.active_file = filename

    def tab_labels(self) -> list[str]:
        """Tab captions in order, with unsaved files marked."""
        return [
            f"{UNSAVED_MARK}{name}" if name in self.unsaved_changes else name
            for name in self.open_files
        ]