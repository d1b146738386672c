"""A shell subprocess with captured output and a bounded message history."""

from __future__ import annotations

import os
import queue
import subprocess
import sys
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import IO, Optional, Union

MAX_HISTORY = 1000

_SCRIPT_RUNNERS = {
    "rs": "cargo run --manifest-path {}",
    "py": "python {}",
    "js": "node {}",
    "sh": "bash {}",
    "bash": "bash {}",
    "ps1": "powershell -File {}",
}


class MessageType(Enum):
    """Where a terminal message came from."""

    OUTPUT = "output"
    ERROR = "error"
    INPUT = "input"
    SYSTEM = "system"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class TerminalMessage:
    """One line of terminal history."""

    content: str
    message_type: MessageType
    timestamp: datetime = field(default_factory=_now)


class TerminalError(RuntimeError):
    """Raised when the shell cannot be started or written to."""


def default_shell() -> str:
    """Return the shell started when none is given."""
    return "powershell.exe" if sys.platform == "win32" else "/bin/bash"


def _pump(stream: IO[str], kind: MessageType, sink: "queue.Queue[TerminalMessage]") -> None:
    try:
        for line in stream:
            sink.put(TerminalMessage(line.rstrip("\r\n"), kind))
    except (OSError, ValueError):
        pass


def _current_dir() -> Path:
    try:
        return Path.cwd()
    except OSError:
        return Path()


class TerminalHandler:
    """Runs a shell process, forwards commands to it and collects its output."""

    def __init__(self, max_history: int = MAX_HISTORY):
        self.max_history = max_history
        self.history: deque[TerminalMessage] = deque(maxlen=max_history)
        self.current_directory: Path = _current_dir()
        self._process: Optional[subprocess.Popen] = None
        self._output: Optional["queue.Queue[TerminalMessage]"] = None

    def __enter__(self) -> TerminalHandler:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def working_directory(self) -> Path:
        return self.current_directory

    def start_shell(self, shell_command: Optional[str] = None) -> None:
        """Stop any running shell and start ``shell_command`` (or the default shell)."""
        self.stop_shell()
        shell = shell_command or default_shell()
        try:
            process = subprocess.Popen(
                [shell],
                cwd=self.current_directory,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
            )
        except OSError as exc:
            raise TerminalError(f"Failed to start shell {shell}: {exc}") from exc

        output: "queue.Queue[TerminalMessage]" = queue.Queue()
        for stream, kind in ((process.stdout, MessageType.OUTPUT), (process.stderr, MessageType.ERROR)):
            threading.Thread(target=_pump, args=(stream, kind, output), daemon=True).start()

        self._process = process
        self._output = output
        self._add(f"Started shell: {shell}", MessageType.SYSTEM)

    def stop_shell(self) -> None:
        """Kill the running shell, if any, and note that the shell stopped."""
        process, self._process = self._process, None
        if process is not None:
            try:
                process.kill()
            except OSError:
                pass
            process.wait()
            if process.stdin is not None:
                try:
                    process.stdin.close()
                except OSError:
                    pass
        self._output = None
        self._add("Shell stopped", MessageType.SYSTEM)

    def send_command(self, command: str) -> None:
        """Write ``command`` to the shell's input and record it."""
        if self._process is None or self._process.stdin is None:
            raise TerminalError("No active shell process")
        try:
            self._process.stdin.write(command + "\n")
            self._process.stdin.flush()
        except (OSError, ValueError) as exc:
            raise TerminalError(f"Failed to send command: {exc}") from exc
        self._add(f"$ {command}", MessageType.INPUT)

    def execute_command(self, command: str) -> None:
        """Run a built-in command (cd, pwd, clear, exit) or send it to the shell."""
        if not self._handle_builtin(command):
            self.send_command(command)

    def _handle_builtin(self, command: str) -> bool:
        parts = command.split()
        if not parts:
            return False
        name = parts[0]
        if name == "cd":
            target = Path(parts[1]) if len(parts) > 1 else Path.home()
            try:
                os.chdir(target)
            except OSError as exc:
                self._add(f"cd: {exc.strerror or exc}", MessageType.ERROR)
            else:
                self.current_directory = _current_dir()
                self._add(f"Changed directory to: {self.current_directory}", MessageType.SYSTEM)
            return True
        if name == "pwd":
            self._add(str(self.current_directory), MessageType.OUTPUT)
            return True
        if name == "clear":
            self.history.clear()
            return True
        if name == "exit":
            self.stop_shell()
            return True
        return False

    def update(self) -> None:
        """Move any output the shell produced into the history."""
        if self._output is None:
            return
        while True:
            try:
                message = self._output.get_nowait()
            except queue.Empty:
                break
            self.history.append(message)

    def recent_output(self, count: int) -> list[TerminalMessage]:
        """Return up to ``count`` messages, newest first."""
        return list(reversed(self.history))[:count]

    def clear_history(self) -> None:
        self.history.clear()

    def set_working_directory(self, path: Union[str, Path]) -> None:
        """Set the directory new shells start in, and change into it if possible."""
        self.current_directory = Path(path)
        try:
            os.chdir(self.current_directory)
        except OSError:
            return
        self._add(f"Working directory set to: {self.current_directory}", MessageType.SYSTEM)

    def is_running(self) -> bool:
        return self._process is not None

    def run_script(self, script_path: Union[str, Path]) -> None:
        """Run a script with the interpreter its extension calls for."""
        path = Path(script_path)
        if not path.exists():
            raise TerminalError(f"Script not found: {path}")
        runner = _SCRIPT_RUNNERS.get(path.suffix[1:])
        self.execute_command(runner.format(path) if runner else str(path))

    def close(self) -> None:
        """Stop the shell."""
        self.stop_shell()

    def _add(self, content: str, kind: MessageType) -> None:
        self.history.append(TerminalMessage(content, kind))