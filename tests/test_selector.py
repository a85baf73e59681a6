"""Tests for the interactive selector."""

import termios

import pytest

from sshauth.selector import interactive_select

UP = "\x1b[A"
DOWN = "\x1b[B"
ENTER = "\r"
ESC = "\x1b"


@pytest.fixture
def keys(mocker):
    """Feed keypresses to the selector without a terminal."""
    mocker.patch("sshauth.selector.Live")

    def feed(*presses):
        return mocker.patch("sshauth.selector.get_key", side_effect=list(presses))

    return feed


class TestInteractiveSelect:
    def test_empty_returns_none(self, keys):
        get_key = keys()
        assert interactive_select([]) is None
        get_key.assert_not_called()

    def test_enter_selects_first(self, keys):
        keys(ENTER)
        assert interactive_select(["a", "b", "c"]) == 0

    def test_arrow_navigation(self, keys):
        keys(DOWN, DOWN, UP, ENTER)
        assert interactive_select(["a", "b", "c"]) == 1

    def test_vim_keys(self, keys):
        keys("j", "j", "k", "\n")
        assert interactive_select(["a", "b", "c"]) == 1

    def test_wraps_around(self, keys):
        keys(UP, ENTER)
        assert interactive_select(["a", "b", "c"]) == 2

    def test_starts_at_default(self, keys):
        keys(DOWN, ENTER)
        assert interactive_select(["a", "b", "c"], default=1) == 2

    def test_default_clamped(self, keys):
        keys(ENTER)
        assert interactive_select(["a", "b"], default=9) == 1

    @pytest.mark.parametrize("cancel", ["q", ESC, "\x03"])
    def test_cancel(self, keys, cancel):
        keys(DOWN, cancel)
        assert interactive_select(["a", "b"]) is None

    def test_ignores_other_keys(self, keys):
        keys("x", " ", DOWN, ENTER)
        assert interactive_select(["a", "b"]) == 1

    @pytest.mark.parametrize(
        "error",
        [termios.error(25, "Inappropriate ioctl for device"), OSError("fileno")],
    )
    def test_no_terminal_returns_none(self, keys, error):
        """A stdin that isn't a TTY behaves like a cancel."""
        keys(error)
        assert interactive_select(["a", "b"]) is None
