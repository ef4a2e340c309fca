import io

import pytest

from termarcade.menu import Menu, MenuChoice


def _menu(text):
    out = io.StringIO()
    return Menu(io.StringIO(text), out), out


def test_first_choice_selects_space_invaders():
    menu, out = _menu("1\n")
    assert menu.run() == MenuChoice.SPACE_INVADERS
    assert "Start Screen:" in out.getvalue()
    assert "Invalid choice" not in out.getvalue()


def test_invalid_then_valid_choice():
    menu, out = _menu("7\n\n2\n")
    assert menu.run() == MenuChoice.FROGGER
    text = out.getvalue()
    assert "Invalid choice. Please try again." in text
    assert "Press any key to continue..." in text
    assert text.count("Enter your choice: ") == 2


def test_non_numeric_input_is_rejected():
    menu, out = _menu("abc\n\n3\n")
    assert menu.run() == MenuChoice.QUIT
    assert out.getvalue().count("Invalid choice") == 1


def test_first_token_is_used():
    menu, _ = _menu("  2 extra words\n")
    assert menu.run() == MenuChoice.FROGGER


def test_end_of_input_raises():
    menu, _ = _menu("")
    with pytest.raises(EOFError):
        menu.run()


def test_end_of_input_after_invalid_raises():
    menu, _ = _menu("9\n")
    with pytest.raises(EOFError):
        menu.run()


@pytest.mark.parametrize("text, expected", [("1\n", 1), ("2\n", 2), ("3\n", 3)])
def test_choices_match_game_states(text, expected):
    menu, _ = _menu(text)
    assert int(menu.run()) == expected