"""Development servers shown in the server panel, with templates for new ones."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional, Union

DEFAULT_PORT = 8080
MAX_PORT = 65535
RECENT_LOG_COUNT = 5

_PORT_PATTERN = re.compile(r"\+?[0-9]+")


class ServerState(Enum):
    """Lifecycle states of a development server."""

    STOPPED = "stopped"
    STARTING = "starting"
    RUNNING = "running"
    STOPPING = "stopping"
    ERROR = "error"


@dataclass(frozen=True)
class ServerStatus:
    """A server state; ``message`` explains an error state."""

    state: ServerState
    message: Optional[str] = None

    @classmethod
    def stopped(cls) -> ServerStatus:
        return cls(ServerState.STOPPED)

    @classmethod
    def running(cls) -> ServerStatus:
        return cls(ServerState.RUNNING)

    @classmethod
    def error(cls, message: str) -> ServerStatus:
        return cls(ServerState.ERROR, message)

    @property
    def is_busy(self) -> bool:
        """True while the server is starting or stopping."""
        return self.state in (ServerState.STARTING, ServerState.STOPPING)


_ICONS = {
    ServerState.STOPPED: "⏹️",
    ServerState.STARTING: "🔄",
    ServerState.RUNNING: "✅",
    ServerState.STOPPING: "🔄",
    ServerState.ERROR: "❌",
}


def status_icon(status: Union[ServerStatus, ServerState]) -> str:
    """Return the icon shown next to a server in the given status."""
    state = status.state if isinstance(status, ServerStatus) else ServerState(status)
    return _ICONS[state]


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _pseudo_pid() -> int:
    nanos = time.time_ns() % 0xFFFFFFFF
    return nanos % 10000 + 1000


@dataclass
class Server:
    """A configured development server."""

    name: str
    port: int
    command: str
    status: ServerStatus = field(default_factory=ServerStatus.stopped)
    pid: Optional[int] = None
    start_time: Optional[datetime] = None
    logs: list[str] = field(default_factory=list)
    auto_restart: bool = False

    def uptime(self, now: Optional[datetime] = None) -> Optional[timedelta]:
        """Time since the server started, or None if it is not running."""
        if self.start_time is None:
            return None
        return (now or _now()) - self.start_time

    def recent_logs(self, count: int = RECENT_LOG_COUNT) -> list[str]:
        """The last ``count`` log lines, oldest first."""
        return self.logs[-count:] if count > 0 else []

    @property
    def url(self) -> str:
        return f"http://localhost:{self.port}"


@dataclass(frozen=True)
class ServerTemplate:
    """A preset for creating a new server."""

    name: str
    description: str
    default_port: int
    command: str
    icon: str


def default_templates() -> dict[str, ServerTemplate]:
    """Return the built-in server templates keyed by name."""
    templates = [
        ServerTemplate("Rust Web Server", "Cargo web server (cargo run)", 8080, "cargo run", "🦀"),
        ServerTemplate("Python HTTP Server", "Simple Python HTTP server", 8000, "python -m http.server", "🐍"),
        ServerTemplate("Node.js Server", "Node.js development server", 3000, "npm start", "📜"),
        ServerTemplate("Live Server", "Static file server with live reload", 5500, "live-server", "🌐"),
        ServerTemplate("Webpack Dev Server", "Webpack development server", 8080, "npx webpack serve", "📦"),
    ]
    return {template.name: template for template in templates}


def _parse_port(port: Union[str, int]) -> int:
    if isinstance(port, int) and not isinstance(port, bool):
        value = port
    elif isinstance(port, str) and _PORT_PATTERN.fullmatch(port):
        value = int(port)
    else:
        return DEFAULT_PORT
    return value if 0 <= value <= MAX_PORT else DEFAULT_PORT


@dataclass
class ServerPanel:
    """Configured servers, templates and the draft of a new server."""

    servers: list[Server] = field(default_factory=list)
    templates: dict[str, ServerTemplate] = field(default_factory=default_templates)
    show_new_server_dialog: bool = False
    new_server_name: str = ""
    new_server_port: str = ""
    new_server_command: str = ""
    selected_template: Optional[str] = None

    @classmethod
    def with_examples(cls) -> ServerPanel:
        """Return a panel holding three example servers."""
        panel = cls()
        panel.servers = [
            Server("Main App", 8080, "cargo run", auto_restart=True),
            Server(
                "API Server",
                3000,
                "npm run dev",
                status=ServerStatus.running(),
                pid=12345,
                start_time=_now() - timedelta(minutes=30),
                logs=["Server starting...", "Listening on port 3000", "✅ API server ready"],
            ),
            Server(
                "Static Files",
                8000,
                "python -m http.server 8000",
                status=ServerStatus.error("Port already in use"),
                logs=["Starting static file server...", "❌ Error: Port 8000 already in use"],
            ),
        ]
        return panel

    def _get(self, index: int) -> Optional[Server]:
        return self.servers[index] if 0 <= index < len(self.servers) else None

    def start_server(self, index: int) -> None:
        """Mark the server at ``index`` as running; unknown indices are ignored."""
        server = self._get(index)
        if server is None:
            return
        server.status = ServerStatus(ServerState.STARTING)
        server.logs.append(f"Starting server: {server.name}")
        server.status = ServerStatus.running()
        server.start_time = _now()
        server.pid = _pseudo_pid()
        server.logs.append(f"✅ Server started on port {server.port}")

    def stop_server(self, index: int) -> None:
        """Mark the server at ``index`` as stopped; unknown indices are ignored."""
        server = self._get(index)
        if server is None:
            return
        server.status = ServerStatus(ServerState.STOPPING)
        server.logs.append("Stopping server...")
        server.status = ServerStatus.stopped()
        server.start_time = None
        server.pid = None
        server.logs.append("🛑 Server stopped")

    def restart_server(self, index: int) -> None:
        """Stop then start the server at ``index``."""
        self.stop_server(index)
        self.start_server(index)

    def open_new_server_dialog(self) -> None:
        """Show the new-server dialog with an empty draft."""
        self.show_new_server_dialog = True
        self.new_server_name = ""
        self.new_server_port = ""
        self.new_server_command = ""
        self.selected_template = None

    def apply_template(self, name: str) -> ServerTemplate:
        """Fill the draft from the template ``name``; the draft name is kept if set."""
        template = self.templates[name]
        self.selected_template = name
        self.new_server_port = str(template.default_port)
        self.new_server_command = template.command
        if not self.new_server_name:
            self.new_server_name = name
        return template

    def create_server(
        self,
        name: Optional[str] = None,
        port: Union[str, int, None] = None,
        command: Optional[str] = None,
    ) -> Server:
        """Add a stopped server; missing arguments come from the draft.

        An unparsable port falls back to 8080. A blank name or command raises ValueError.
        """
        name = self.new_server_name if name is None else name
        port = self.new_server_port if port is None else port
        command = self.new_server_command if command is None else command
        if not name.strip() or not command.strip():
            raise ValueError("a server needs a name and a command")
        server = Server(name, _parse_port(port), command)
        self.servers.append(server)
        self.show_new_server_dialog = False
        return server