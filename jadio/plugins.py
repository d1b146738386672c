"""Installed and available plugins shown in the plugin manager."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Plugin:
    """A plugin with its install and enable state."""

    name: str
    description: str
    version: str
    enabled: bool = False
    installed: bool = False


def _default_plugins() -> list[Plugin]:
    return [
        Plugin("Rust Language Server", "Enhanced Rust support with IntelliSense", "1.0.0", True, True),
        Plugin("Git Integration Plus", "Advanced Git features and visual diff", "2.1.3", True, True),
        Plugin("Theme Pack", "Additional color themes for the IDE", "1.5.2", False, True),
        Plugin("Docker Helper", "Docker container management and deployment", "3.0.1", False, False),
        Plugin("Database Explorer", "Connect and query databases directly", "1.2.7", False, False),
    ]


@dataclass
class PluginPanel:
    """The plugin list and its search filter."""

    search_text: str = ""
    plugins: list[Plugin] = field(default_factory=list)

    @classmethod
    def with_defaults(cls) -> PluginPanel:
        """Return a panel listing the bundled plugins."""
        return cls(plugins=_default_plugins())

    def visible(self, query: Optional[str] = None) -> list[Plugin]:
        """Plugins whose name contains ``query`` (or the search text), ignoring case."""
        needle = (self.search_text if query is None else query).lower()
        return [p for p in self.plugins if not needle or needle in p.name.lower()]

    def _get(self, name: str) -> Plugin:
        for plugin in self.plugins:
            if plugin.name == name:
                return plugin
        raise KeyError(name)

    def install(self, name: str) -> None:
        """Mark the plugin ``name`` as installed."""
        self._get(name).installed = True

    def uninstall(self, name: str) -> None:
        """Mark the plugin ``name`` as not installed, which also disables it."""
        plugin = self._get(name)
        plugin.installed = False
        plugin.enabled = False

    def set_enabled(self, name: str, enabled: bool) -> None:
        """Enable or disable an installed plugin."""
        plugin = self._get(name)
        if not plugin.installed:
            raise ValueError(f"plugin is not installed: {name}")
        plugin.enabled = bool(enabled)