# jadio

This package holds the state and logic behind a small IDE as a plain Python
library. It has no user interface. You build your own front end on top of it.
That front end can be a GUI, a TUI or a test harness.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `jadio.settings` holds the IDE settings, grouped by category. The groups
  are `EditorSettings`, `UISettings`, `AISettings`, `TerminalSettings` and
  `GitSettings`, and `IDESettings` gathers them together. They are
  dataclasses with defaults. `IDESettings.to_dict()` and
  `IDESettings.from_dict()` convert them to and from JSON-ready data.
  Malformed data raises `SettingsError`.
  - `SettingsManager.load(path)` reads a pretty-printed JSON file. If the file
    is missing, it writes the defaults there first.
  - With no path, `load()` uses `default_settings_path()`, which is
    `settings.json` in the user's `jadio-ide` config directory.
  - Each `update_*_settings(updater)` calls your function on one section and
    then saves.
  - `reset_to_defaults()`, `export_settings(path)` and `import_settings(path)`
    do what their names say.
- `jadio.terminal` provides `TerminalHandler`.
  - `start_shell()` runs a shell subprocess. The default shell comes from
    `default_shell()`.
  - `send_command()` forwards lines to the shell. `update()` collects the
    shell's stdout and stderr into a history capped at 1000 messages.
  - `execute_command()` handles `cd`, `pwd`, `clear` and `exit` itself.
  - `run_script(path)` picks a runner from the file extension: `.rs`, `.py`,
    `.js`, `.sh`/`.bash` or `.ps1`.
  - Failures raise `TerminalError`.
  - The handler is a context manager: leaving it calls `close()`, which stops
    the shell.
- `jadio.terminal_list` provides `ShellTerminalList`, which tracks the open
  terminals and which one is active.
- `jadio.terminal_menu` provides `TerminalMenu`, which tracks the active
  `TerminalMenuTab`.
- `jadio.editor` provides `Editor`, which manages open files and tabs and
  marks unsaved edits. `tab_labels()` prefixes unsaved files with `●`.
  `new_tab()` opens an empty untitled file. `detect_language()` maps a file
  extension to a language name.
- `jadio.servers` provides `ServerPanel`, a list of development server
  entries.
  - `default_templates()` gives the built-in presets, and `apply_template()`
    fills the new-server draft from one of them.
  - `create_server()` adds a stopped entry. A port it cannot parse falls back
    to 8080.
  - `start_server()`, `stop_server()` and `restart_server()` update the
    entry's status, log and uptime.
- `jadio.special_buttons` provides `SpecialButtons`, which keeps at most five
  shortcut buttons. `jadio.status_bar` provides `StatusBar`, whose items can
  be updated and clicked by label.
- `jadio.code_agent` provides `CodeAgent`, the assistant chat and its quick
  actions.
- `jadio.ai_settings` provides `AiSettingsForm`. It clamps the temperature to
  0.0–2.0 in steps of 0.1, and max tokens to 100–8192 in steps of 100.
- `jadio.plugins` provides `PluginPanel`, the plugin list with
  case-insensitive name search and install, uninstall and enable.
- `jadio.help` provides the help pages: `help_page()` and `render_help()` for
  each `HelpCategory`.

## Example

```python
from pathlib import Path

from jadio.settings import SettingsManager
from jadio.editor import Editor
from jadio.terminal import TerminalHandler

manager = SettingsManager.load(Path("settings.json"))
manager.update_ui_settings(lambda ui: setattr(ui, "show_terminal", False))

editor = Editor.with_welcome()
editor.open_file("notes.md", "# Notes\n")
print(editor.tab_labels())

with TerminalHandler() as terminal:
    terminal.execute_command("pwd")
    print(terminal.recent_output(1)[0].content)
```

## What it does not do

- There is no window, screen or command-line program. Everything here is
  state for a front end to drive.
- There is no file explorer or project/workspace handling.
- `Editor.save_file()` only clears the unsaved mark. It does not write to
  disk.
- `ServerPanel` never launches a process. Starting a server only marks the
  entry as running and gives it a made-up PID.
- `CodeAgent` does not contact any AI service. Its replies are fixed texts
  that echo your message.
- `PluginPanel` only flips install and enable flags. It does not download or
  load anything.