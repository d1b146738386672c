"""Persistent IDE settings grouped by category, stored as pretty-printed JSON."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping, Union

from platformdirs import user_config_dir

APP_DIR_NAME = "jadio-ide"
SETTINGS_FILE_NAME = "settings.json"

RGB = tuple[int, int, int]


class SettingsError(ValueError):
    """Raised when settings data cannot be decoded."""


class Theme(Enum):
    """Built-in UI themes."""

    DARK = "Dark"
    LIGHT = "Light"
    HIGH_CONTRAST = "HighContrast"


@dataclass
class CustomTheme:
    """A user-defined colour palette."""

    name: str
    background: RGB
    foreground: RGB
    accent: RGB
    panel: RGB
    border: RGB


class AIProvider(Enum):
    """Known AI providers; a custom provider is given by its name as a plain string."""

    ANTHROPIC = "Anthropic"
    OPENAI = "OpenAI"
    LOCAL = "Local"


class CursorStyle(Enum):
    """Terminal cursor shapes."""

    BLOCK = "Block"
    LINE = "Line"
    UNDERLINE = "Underline"


def _default_shell() -> str:
    return "powershell.exe" if sys.platform == "win32" else "/bin/bash"


@dataclass
class EditorSettings:
    """Editor configuration: fonts, tabs and formatting."""

    font_family: str = "Fira Code"
    font_size: float = 14.0
    line_height: float = 1.4
    tab_size: int = 4
    use_spaces: bool = True
    word_wrap: bool = False
    show_line_numbers: bool = True
    highlight_current_line: bool = True
    auto_save: bool = True
    auto_save_delay: int = 5  # seconds
    format_on_save: bool = True
    trim_whitespace_on_save: bool = True


@dataclass
class UISettings:
    """Layout and theme configuration."""

    theme: Union[Theme, CustomTheme] = Theme.DARK
    window_size: tuple[float, float] = (1200.0, 800.0)
    window_position: Union[tuple[float, float], None] = None
    show_explorer: bool = True
    show_terminal: bool = True
    show_code_agent: bool = True
    show_status_bar: bool = True
    explorer_width: float = 250.0
    code_agent_width: float = 300.0
    terminal_height: float = 200.0


@dataclass
class AISettings:
    """AI integration and model configuration."""

    provider: Union[AIProvider, str] = AIProvider.ANTHROPIC
    api_key: str = ""
    model: str = "claude-3-sonnet-20240229"
    temperature: float = 0.7
    max_tokens: int = 4096
    enable_auto_complete: bool = True
    enable_code_suggestions: bool = True
    enable_code_review: bool = False


@dataclass
class TerminalSettings:
    """Terminal emulator configuration."""

    shell: str = field(default_factory=_default_shell)
    font_family: str = "Consolas"
    font_size: float = 12.0
    cursor_style: CursorStyle = CursorStyle.BLOCK
    scroll_back_limit: int = 10000


@dataclass
class GitSettings:
    """Git integration configuration."""

    user_name: str = ""
    user_email: str = ""
    auto_fetch: bool = False
    auto_push: bool = False
    show_diff_in_editor: bool = True


# --- encoding -------------------------------------------------------------


def _encode_theme(theme: Union[Theme, CustomTheme]) -> Any:
    if isinstance(theme, CustomTheme):
        return {"Custom": _encode_section(theme)}
    return theme.value


def _encode_provider(provider: Union[AIProvider, str]) -> Any:
    if isinstance(provider, AIProvider):
        return provider.value
    return {"Custom": provider}


_ENCODERS: dict[str, Callable[[Any], Any]] = {
    "theme": _encode_theme,
    "provider": _encode_provider,
}


def _encode_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return list(value)
    return value


def _encode_section(section: Any) -> dict[str, Any]:
    return {
        f.name: _ENCODERS.get(f.name, _encode_value)(getattr(section, f.name))
        for f in fields(section)
    }


# --- decoding -------------------------------------------------------------


def _primitive(name: str, raw: Any, kind: str) -> Any:
    is_bool = isinstance(raw, bool)
    if kind == "bool" and is_bool:
        return raw
    if kind == "int" and isinstance(raw, int) and not is_bool and raw >= 0:
        return raw
    if kind == "float" and isinstance(raw, (int, float)) and not is_bool:
        return float(raw)
    if kind == "str" and isinstance(raw, str):
        return raw
    raise SettingsError(f"invalid value for `{name}`: {raw!r}")


def _variant(enum_cls: type[Enum], raw: Any) -> Any:
    try:
        return enum_cls(raw)
    except ValueError:
        raise SettingsError(f"unknown {enum_cls.__name__} variant: {raw!r}") from None


def _custom_payload(raw: Any, what: str) -> Any:
    if isinstance(raw, dict) and set(raw) == {"Custom"}:
        return raw["Custom"]
    raise SettingsError(f"invalid {what}: {raw!r}")


def _decode_rgb(raw: Any) -> RGB:
    if (
        isinstance(raw, list)
        and len(raw) == 3
        and all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in raw)
    ):
        return (raw[0], raw[1], raw[2])
    raise SettingsError(f"invalid colour: {raw!r}")


def _decode_pair(raw: Any) -> tuple[float, float]:
    if isinstance(raw, list) and len(raw) == 2:
        return (_primitive("pair", raw[0], "float"), _primitive("pair", raw[1], "float"))
    raise SettingsError(f"invalid pair: {raw!r}")


def _decode_optional_pair(raw: Any) -> Union[tuple[float, float], None]:
    return None if raw is None else _decode_pair(raw)


def _decode_theme(raw: Any) -> Union[Theme, CustomTheme]:
    if isinstance(raw, str):
        return _variant(Theme, raw)
    payload = _custom_payload(raw, "theme")
    return _decode_section(
        CustomTheme,
        payload,
        {name: _decode_rgb for name in ("background", "foreground", "accent", "panel", "border")},
    )


def _decode_provider(raw: Any) -> Union[AIProvider, str]:
    if isinstance(raw, str):
        return _variant(AIProvider, raw)
    return _primitive("provider", _custom_payload(raw, "provider"), "str")


def _decode_section(
    cls: type,
    data: Any,
    decoders: Mapping[str, Callable[[Any], Any]] = {},
    optional: frozenset[str] = frozenset(),
) -> Any:
    if not isinstance(data, dict):
        raise SettingsError(f"{cls.__name__}: expected an object, got {data!r}")
    values = {}
    for f in fields(cls):
        if f.name not in data:
            if f.name in optional:
                values[f.name] = None
                continue
            raise SettingsError(f"missing field `{f.name}` in {cls.__name__}")
        raw = data[f.name]
        decode = decoders.get(f.name)
        values[f.name] = decode(raw) if decode else _primitive(f.name, raw, str(f.type))
    return cls(**values)


@dataclass
class IDESettings:
    """All IDE settings grouped by category."""

    editor: EditorSettings = field(default_factory=EditorSettings)
    ui: UISettings = field(default_factory=UISettings)
    ai: AISettings = field(default_factory=AISettings)
    terminal: TerminalSettings = field(default_factory=TerminalSettings)
    git: GitSettings = field(default_factory=GitSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of every section."""
        return {f.name: _encode_section(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Any) -> IDESettings:
        """Build settings from a mapping; raise SettingsError on bad data."""
        if not isinstance(data, dict):
            raise SettingsError(f"settings must be an object, got {data!r}")
        sections = {
            "editor": (EditorSettings, {}, frozenset()),
            "ui": (
                UISettings,
                {
                    "theme": _decode_theme,
                    "window_size": _decode_pair,
                    "window_position": _decode_optional_pair,
                },
                frozenset({"window_position"}),
            ),
            "ai": (AISettings, {"provider": _decode_provider}, frozenset()),
            "terminal": (
                TerminalSettings,
                {"cursor_style": lambda raw: _variant(CursorStyle, raw)},
                frozenset(),
            ),
            "git": (GitSettings, {}, frozenset()),
        }
        values = {}
        for name, (section_cls, decoders, optional) in sections.items():
            if name not in data:
                raise SettingsError(f"missing field `{name}` in IDESettings")
            values[name] = _decode_section(section_cls, data[name], decoders, optional)
        return cls(**values)


def _dumps(settings: IDESettings) -> str:
    return json.dumps(settings.to_dict(), indent=2, ensure_ascii=False)


def _loads(text: str) -> IDESettings:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SettingsError(f"invalid settings JSON: {exc}") from exc
    return IDESettings.from_dict(data)


def default_settings_path() -> Path:
    """Return the settings file in the user's config directory, creating the directory."""
    directory = Path(user_config_dir(APP_DIR_NAME))
    directory.mkdir(parents=True, exist_ok=True)
    return directory / SETTINGS_FILE_NAME


class SettingsManager:
    """Loads, updates and saves IDE settings on disk."""

    def __init__(self, path: Union[str, Path], settings: Union[IDESettings, None] = None):
        self.path = Path(path)
        self.settings = settings if settings is not None else IDESettings()

    @classmethod
    def load(cls, path: Union[str, Path, None] = None) -> SettingsManager:
        """Read settings from ``path``, writing defaults there if the file is missing."""
        settings_path = Path(path) if path is not None else default_settings_path()
        if settings_path.exists():
            settings = _loads(settings_path.read_text(encoding="utf-8"))
        else:
            settings = IDESettings()
            settings_path.write_text(_dumps(settings), encoding="utf-8")
        return cls(settings_path, settings)

    def save_settings(self) -> None:
        """Write the current settings to disk."""
        self.path.write_text(_dumps(self.settings), encoding="utf-8")

    def update_editor_settings(self, updater: Callable[[EditorSettings], Any]) -> None:
        updater(self.settings.editor)
        self.save_settings()

    def update_ui_settings(self, updater: Callable[[UISettings], Any]) -> None:
        updater(self.settings.ui)
        self.save_settings()

    def update_ai_settings(self, updater: Callable[[AISettings], Any]) -> None:
        updater(self.settings.ai)
        self.save_settings()

    def update_terminal_settings(self, updater: Callable[[TerminalSettings], Any]) -> None:
        updater(self.settings.terminal)
        self.save_settings()

    def update_git_settings(self, updater: Callable[[GitSettings], Any]) -> None:
        updater(self.settings.git)
        self.save_settings()

    def reset_to_defaults(self) -> None:
        """Restore every setting to its default and save."""
        self.settings = IDESettings()
        self.save_settings()

    def export_settings(self, path: Union[str, Path]) -> None:
        """Write the current settings to another file."""
        Path(path).write_text(_dumps(self.settings), encoding="utf-8")

    def import_settings(self, path: Union[str, Path]) -> None:
        """Replace the current settings with those in ``path`` and save."""
        self.settings = _loads(Path(path).read_text(encoding="utf-8"))
        self.save_settings()