"""Tests for the Paginator module."""

import pytest

from gopher_shell.core.paginator import Paginator


class TestPaginator:
    """Tests for Paginator."""

    @pytest.fixture
    def paginator(self):
        """Create a Paginator with the default terminal size."""
        return Paginator(lines=24, columns=80)

    @pytest.fixture
    def small_paginator(self):
        """Create a small Paginator for testing."""
        return Paginator(lines=4, columns=10)

    def test_short_content_single_page(self, paginator):
        """Short content returns a single page."""
        pages = paginator.paginate("Hello world")
        assert pages == ["Hello world"]

    def test_empty_content_returns_empty_list(self, paginator):
        """Empty content returns empty list."""
        assert paginator.paginate("") == []

    def test_whitespace_only_returns_empty_list(self, paginator):
        """Whitespace-only content returns empty list."""
        assert paginator.paginate("   \n  \t  ") == []

    def test_pages_reserve_prompt_line(self, small_paginator):
        """Each page holds lines - 1 lines."""
        content = "\n".join(str(n) for n in range(7))
        pages = small_paginator.paginate(content)
        assert pages == ["0\n1\n2", "3\n4\n5", "6"]

    def test_long_lines_wrapped(self, small_paginator):
        """Lines longer than columns are wrapped."""
        lines = small_paginator.wrap("A" * 25)
        assert lines == ["A" * 10, "A" * 10, "A" * 5]

    def test_word_boundary_wrapping(self, small_paginator):
        """Wrapping prefers spaces."""
        lines = small_paginator.wrap("greetings to all")
        assert lines == ["greetings", "to all"]

    def test_wrapped_lines_respect_columns(self, small_paginator):
        """No wrapped line exceeds the column limit."""
        for line in small_paginator.wrap("the quick brown fox jumps over the lazy dog " * 3):
            assert len(line) <= small_paginator.columns

    def test_blank_lines_kept(self, paginator):
        """Blank lines inside the text are preserved."""
        assert paginator.wrap("a\n\nb") == ["a", "", "b"]

    def test_carriage_returns_removed(self, paginator):
        """CRLF line endings do not leave carriage returns."""
        assert paginator.wrap("a\r\nb\r\n") == ["a", "b"]

    def test_too_few_lines_raises(self):
        """A terminal of one line cannot be paged."""
        with pytest.raises(ValueError):
            Paginator(lines=1).paginate("text")
