"""Menu renderer for selector lists."""

from .selector import Selector, SelectorList

GUTTER = "     | "


class MenuRenderer:
    """Renders selectors as numbered menu lines."""

    def __init__(self, columns: int = 80):
        self.columns = columns

    def render_line(self, sel: Selector) -> str:
        """Render one selector; informational lines carry no number."""
        width = max(self.columns - len(GUTTER), 1)
        name = sel.name[:width]
        if not sel.is_navigable():
            return f"{GUTTER}{name}"
        return f"{sel.index:4d} | {name}"

    def render(self, selectors: SelectorList, filter_text: str | None = None) -> str:
        """
        Render a list of selectors as a numbered menu.

        Args:
            selectors: Selectors to render, in display order.
            filter_text: Keep only selectors whose name or path contains it.

        Returns:
            Formatted menu string, "(empty)" when nothing is left.
        """
        lines = [self.render_line(sel) for sel in selectors.filter(filter_text)]
        if not lines:
            return "(empty)"
        return "\n".join(lines)
