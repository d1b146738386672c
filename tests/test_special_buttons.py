from jadio.special_buttons import (
    MAX_BUTTONS,
    ActionKind,
    SpecialButton,
    SpecialButtonAction,
    SpecialButtons,
)


def _button(n):
    return SpecialButton(f"b{n}", f"tip {n}", SpecialButtonAction.custom(f"cmd{n}"))


def test_set_buttons_keeps_first_five():
    bar = SpecialButtons()
    bar.set_buttons(_button(n) for n in range(7))
    assert len(bar.buttons) == MAX_BUTTONS == 5
    assert [b.label for b in bar.buttons] == [f"b{n}" for n in range(5)]


def test_set_buttons_replaces_previous():
    bar = SpecialButtons()
    bar.set_buttons([_button(1), _button(2)])
    bar.set_buttons([_button(3)])
    assert [b.label for b in bar.buttons] == ["b3"]


def test_trigger_returns_action():
    bar = SpecialButtons()
    script = SpecialButton("Run", "Run build", SpecialButtonAction.run_script("build"), "Ctrl+Alt+1")
    opener = SpecialButton("Open", "Open notes", SpecialButtonAction.open_file("notes.md"))
    bar.set_buttons([script, opener])
    assert bar.trigger(0) == SpecialButtonAction(ActionKind.RUN_SCRIPT, "build")
    assert bar.trigger(1).kind is ActionKind.OPEN_FILE
    assert bar.trigger(1).target == "notes.md"


def test_trigger_out_of_range_returns_none():
    bar = SpecialButtons()
    bar.set_buttons([_button(0)])
    assert bar.trigger(1) is None
    assert bar.trigger(-1) is None
    assert SpecialButtons().trigger(0) is None