"""Paginator for splitting text into terminal-sized pages."""

from dataclasses import dataclass


@dataclass
class Paginator:
    """Wraps text to a line length and groups lines into pages."""

    lines: int = 24
    columns: int = 80

    def paginate(self, content: str) -> list[str]:
        """
        Split content into pages that fit the terminal.

        One line of every screen is reserved for the pager prompt.

        Args:
            content: The text to split.

        Returns:
            List of pages, each a newline-joined block of lines.
        """
        if not content.strip():
            return []

        per_page = self.lines - 1
        if per_page <= 0:
            raise ValueError("lines must be > 1")

        wrapped = self.wrap(content)
        return [
            "\n".join(wrapped[start : start + per_page])
            for start in range(0, len(wrapped), per_page)
        ]

    def wrap(self, content: str) -> list[str]:
        """Wrap every line of content to at most columns characters."""
        result = []
        for line in content.expandtabs().rstrip("\n").split("\n"):
            line = line.rstrip("\r")
            if not line:
                result.append("")
                continue
            while line:
                if len(line) <= self.columns:
                    result.append(line)
                    break
                split_point = self._find_split_point(line, self.columns)
                result.append(line[:split_point].rstrip())
                line = line[split_point:].lstrip()
        return result

    def _find_split_point(self, text: str, max_len: int) -> int:
        """
        Find the best point to split text at or before max_len.

        Prefers splitting at spaces, falls back to a hard split.
        """
        if len(text) <= max_len:
            return len(text)

        last_space = text[:max_len].rfind(" ")
        if last_space > max_len // 2:
            return last_space + 1

        return max_len
