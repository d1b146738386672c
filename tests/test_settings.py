import json
from unittest.mock import patch

import pytest

from jadio.settings import (
    AIProvider,
    CursorStyle,
    CustomTheme,
    IDESettings,
    SettingsError,
    SettingsManager,
    Theme,
    default_settings_path,
)


def _custom_theme():
    return CustomTheme(
        name="Ocean",
        background=(0, 10, 20),
        foreground=(250, 250, 250),
        accent=(0, 128, 255),
        panel=(5, 15, 25),
        border=(60, 60, 60),
    )


def test_defaults_match_documented_values():
    settings = IDESettings()
    assert settings.editor.font_family == "Fira Code"
    assert settings.editor.font_size == 14.0
    assert settings.editor.tab_size == 4
    assert settings.ui.theme is Theme.DARK
    assert settings.ui.window_size == (1200.0, 800.0)
    assert settings.ui.window_position is None
    assert settings.ai.provider is AIProvider.ANTHROPIC
    assert settings.ai.model == "claude-3-sonnet-20240229"
    assert settings.ai.max_tokens == 4096
    assert settings.terminal.cursor_style is CursorStyle.BLOCK
    assert settings.terminal.scroll_back_limit == 10000
    assert settings.git.show_diff_in_editor is True


def test_to_dict_shape():
    data = IDESettings().to_dict()
    assert list(data) == ["editor", "ui", "ai", "terminal", "git"]
    assert data["ui"]["theme"] == "Dark"
    assert data["ui"]["window_size"] == [1200.0, 800.0]
    assert data["ui"]["window_position"] is None
    assert data["ai"]["provider"] == "Anthropic"
    assert data["terminal"]["cursor_style"] == "Block"


def test_default_round_trip():
    settings = IDESettings()
    assert IDESettings.from_dict(settings.to_dict()) == settings


def test_custom_variants_round_trip():
    settings = IDESettings()
    settings.ui.theme = _custom_theme()
    settings.ui.window_position = (10.0, 20.0)
    settings.ai.provider = "my-provider"
    data = settings.to_dict()
    assert data["ui"]["theme"]["Custom"]["accent"] == [0, 128, 255]
    assert data["ai"]["provider"] == {"Custom": "my-provider"}
    assert IDESettings.from_dict(json.loads(json.dumps(data))) == settings


def test_window_position_may_be_missing():
    data = IDESettings().to_dict()
    data["ui"]["window_position"] = [1.0, 2.0]
    del data["ui"]["window_position"]
    assert IDESettings.from_dict(data).ui.window_position is None


def test_unknown_keys_are_ignored():
    data = IDESettings().to_dict()
    data["editor"]["extra"] = 1
    data["other"] = {}
    assert IDESettings.from_dict(data) == IDESettings()


def test_missing_field_raises():
    data = IDESettings().to_dict()
    del data["editor"]["font_size"]
    with pytest.raises(SettingsError):
        IDESettings.from_dict(data)


def test_missing_section_raises():
    data = IDESettings().to_dict()
    del data["git"]
    with pytest.raises(SettingsError):
        IDESettings.from_dict(data)


@pytest.mark.parametrize(
    "section, key, value",
    [
        ("editor", "font_size", "big"),
        ("editor", "tab_size", -1),
        ("editor", "use_spaces", 1),
        ("ui", "theme", "Purple"),
        ("ai", "provider", {"Other": "x"}),
        ("terminal", "cursor_style", "Beam"),
        ("ui", "window_size", [1.0]),
    ],
)
def test_invalid_values_raise(section, key, value):
    data = IDESettings().to_dict()
    data[section][key] = value
    with pytest.raises(SettingsError):
        IDESettings.from_dict(data)


def test_colour_out_of_range_raises():
    settings = IDESettings()
    settings.ui.theme = _custom_theme()
    data = settings.to_dict()
    data["ui"]["theme"]["Custom"]["border"] = [256, 0, 0]
    with pytest.raises(SettingsError):
        IDESettings.from_dict(data)


def test_load_creates_default_file(tmp_path):
    path = tmp_path / "settings.json"
    manager = SettingsManager.load(path)
    assert path.exists()
    assert manager.settings == IDESettings()
    assert IDESettings.from_dict(json.loads(path.read_text())) == IDESettings()


def test_load_reads_existing_file(tmp_path):
    path = tmp_path / "settings.json"
    data = IDESettings().to_dict()
    data["editor"]["tab_size"] = 2
    path.write_text(json.dumps(data))
    assert SettingsManager.load(path).settings.editor.tab_size == 2


def test_load_invalid_json_raises(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    with pytest.raises(SettingsError):
        SettingsManager.load(path)


def test_updates_are_persisted(tmp_path):
    path = tmp_path / "settings.json"
    manager = SettingsManager.load(path)

    def hide_explorer(ui):
        ui.show_explorer = False

    manager.update_ui_settings(hide_explorer)
    manager.update_editor_settings(lambda editor: setattr(editor, "word_wrap", True))
    manager.update_ai_settings(lambda ai: setattr(ai, "provider", AIProvider.LOCAL))
    manager.update_terminal_settings(lambda t: setattr(t, "cursor_style", CursorStyle.LINE))
    manager.update_git_settings(lambda g: setattr(g, "user_email", "dev@example.com"))

    reloaded = SettingsManager.load(path).settings
    assert reloaded.ui.show_explorer is False
    assert reloaded.editor.word_wrap is True
    assert reloaded.ai.provider is AIProvider.LOCAL
    assert reloaded.terminal.cursor_style is CursorStyle.LINE
    assert reloaded.git.user_email == "dev@example.com"


def test_reset_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    manager = SettingsManager.load(path)
    manager.update_editor_settings(lambda e: setattr(e, "font_size", 20.0))
    manager.reset_to_defaults()
    assert manager.settings == IDESettings()
    assert SettingsManager.load(path).settings == IDESettings()


def test_export_then_import(tmp_path):
    source = SettingsManager.load(tmp_path / "a.json")
    source.update_ui_settings(lambda ui: setattr(ui, "theme", _custom_theme()))
    exported = tmp_path / "export.json"
    source.export_settings(exported)

    target = SettingsManager.load(tmp_path / "b.json")
    target.import_settings(exported)
    assert target.settings == source.settings
    assert SettingsManager.load(tmp_path / "b.json").settings.ui.theme == _custom_theme()


def test_import_invalid_keeps_current(tmp_path):
    manager = SettingsManager.load(tmp_path / "settings.json")
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"editor": {}}))
    with pytest.raises(SettingsError):
        manager.import_settings(bad)
    assert manager.settings == IDESettings()


def test_import_missing_file_raises(tmp_path):
    manager = SettingsManager.load(tmp_path / "settings.json")
    with pytest.raises(FileNotFoundError):
        manager.import_settings(tmp_path / "absent.json")


def test_default_settings_path(tmp_path):
    config_dir = tmp_path / "cfg" / "jadio-ide"
    with patch("jadio.settings.user_config_dir", return_value=str(config_dir)) as mocked:
        path = default_settings_path()
    mocked.assert_called_once_with("jadio-ide")
    assert path == config_dir / "settings.json"
    assert config_dir.is_dir()