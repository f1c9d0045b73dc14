"""Tests for the ttk theme (no display needed: ttk.Style is mocked)."""

from unittest.mock import MagicMock, patch

import pytest

pytest.importorskip("tkinter")

from hashbox.ui import theme  # noqa: E402


def test_apply_theme_configures_only_styles_the_window_uses() -> None:
    """Clam theme plus the styles the main window widgets reference."""
    style = MagicMock()
    with patch.object(theme.ttk, "Style", return_value=style):
        theme.apply_theme(MagicMock())
    style.theme_use.assert_called_once_with("clam")
    configured = {c.args[0] for c in style.configure.call_args_list}
    assert configured == {
        "TFrame",
        "Caption.TLabel",
        "TEntry",
        "TRadiobutton",
        "TCheckbutton",
        "Vertical.TScrollbar",
    }


def test_indicator_colors_differ() -> None:
    assert len({theme.COLOR_MATCH, theme.COLOR_MISMATCH, theme.COLOR_SURFACE}) == 3
