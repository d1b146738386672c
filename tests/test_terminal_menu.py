import pytest

from jadio.terminal_menu import TerminalMenu, TerminalMenuTab


def test_default_tab_is_terminal():
    assert TerminalMenu().active_tab is TerminalMenuTab.TERMINAL


@pytest.mark.parametrize("tab", list(TerminalMenuTab))
def test_switch_tab(tab):
    menu = TerminalMenu()
    menu.switch_tab(tab)
    assert menu.active_tab is tab


def test_switch_tab_by_value():
    menu = TerminalMenu()
    menu.switch_tab("Problems")
    assert menu.active_tab is TerminalMenuTab.PROBLEMS


def test_switch_to_unknown_tab_raises():
    menu = TerminalMenu()
    with pytest.raises(ValueError):
        menu.switch_tab("Nope")
    assert menu.active_tab is TerminalMenuTab.TERMINAL


def test_tab_order():
    menu = TerminalMenu()
    visited = []
    for tab in TerminalMenuTab:
        menu.switch_tab(tab.value)
        visited.append(menu.active_tab.value)
    assert visited == [
        "Problems",
        "Output",
        "Debug",
        "Ports",
        "Terminal",
    ]