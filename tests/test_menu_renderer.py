"""Tests for the MenuRenderer module."""

import pytest

from gopher_shell.core.menu_renderer import MenuRenderer
from gopher_shell.core.selector import Selector, SelectorList


class TestMenuRenderer:
    """Tests for MenuRenderer."""

    @pytest.fixture
    def renderer(self):
        """Create a MenuRenderer instance."""
        return MenuRenderer()

    @pytest.fixture
    def sample_menu(self):
        """Sample menu with info, menu, text and error lines."""
        return SelectorList(
            [
                Selector(type="i", name="Welcome"),
                Selector(type="1", name="Documents", path="/docs"),
                Selector(type="0", name="Readme", path="/readme.txt"),
                Selector(type="3", name="Broken"),
            ]
        )

    def test_empty_menu(self, renderer):
        """Empty menu renders an empty marker."""
        assert renderer.render(SelectorList()) == "(empty)"

    def test_numbered_lines(self, renderer, sample_menu):
        """Navigable entries show their index."""
        lines = renderer.render(sample_menu).split("\n")
        assert lines[1] == "   2 | Documents"
        assert lines[2] == "   3 | Readme"

    def test_info_lines_unnumbered(self, renderer, sample_menu):
        """Info and error lines have no number."""
        lines = renderer.render(sample_menu).split("\n")
        assert lines[0] == "     | Welcome"
        assert lines[3] == "     | Broken"

    def test_filter_by_name(self, renderer, sample_menu):
        """A filter keeps only matching lines."""
        result = renderer.render(sample_menu, "readme")
        assert result == "   3 | Readme"

    def test_filter_by_path(self, renderer, sample_menu):
        """A filter matches on the selector path as well."""
        result = renderer.render(sample_menu, "/docs")
        assert result == "   2 | Documents"

    def test_filter_without_match(self, renderer, sample_menu):
        """A filter matching nothing renders the empty marker."""
        assert renderer.render(sample_menu, "nothing") == "(empty)"

    def test_long_names_truncated(self):
        """Names are cut to the terminal width."""
        renderer = MenuRenderer(columns=20)
        menu = SelectorList([Selector(type="0", name="x" * 50)])
        line = renderer.render(menu)
        assert len(line) == 20
