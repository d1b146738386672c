import pytest

from jadio.help import HelpCategory, help_page, render_help


@pytest.mark.parametrize("category", list(HelpCategory))
def test_every_category_has_a_page(category):
    page = help_page(category)
    assert page.title
    assert all(section for section in page.sections)


@pytest.mark.parametrize("category", list(HelpCategory))
def test_render_starts_with_title_and_holds_every_line(category):
    text = render_help(category)
    page = help_page(category)
    assert text.startswith(page.title)
    for section in page.sections:
        for line in section:
            assert line in text


def test_shortcuts_page_is_monospace():
    page = help_page(HelpCategory.KEYBOARD_SHORTCUTS)
    assert page.monospace is True
    assert "Ctrl+N     - New File" in page.sections[0]


def test_only_shortcuts_page_is_monospace():
    mono = [c for c in HelpCategory if help_page(c).monospace]
    assert mono == [HelpCategory.KEYBOARD_SHORTCUTS]


def test_troubleshooting_pairs_questions_with_answers():
    page = help_page(HelpCategory.TROUBLESHOOTING)
    for question, answer in page.sections:
        assert question.startswith("Q: ")
        assert answer.startswith("A: ")


def test_sidebar_labels():
    assert HelpCategory.KEYBOARD_SHORTCUTS.label == "Shortcuts"
    assert HelpCategory("Getting Started") is HelpCategory.GETTING_STARTED


def test_unknown_category_raises():
    with pytest.raises(ValueError):
        help_page("Nope")