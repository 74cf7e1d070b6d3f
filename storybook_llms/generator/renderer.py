"""Render extracted Markdown into HTML for the per-item pages."""

from __future__ import annotations

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

MARKDOWN_EXTENSIONS = ["fenced_code", "codehilite", "tables", "sane_lists"]


class HtmlContentRenderer:
    """Render Markdown with highlighted code blocks."""

    def __init__(self, pygments_style: str = "default") -> None:
        """Initialize a renderer.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults
            to ``"default"``, which suits the light item pages.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render ``text`` into HTML; blank input renders as an empty string."""
        if not text.strip():
            return ""
        md = Markdown(
            extensions=MARKDOWN_EXTENSIONS,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
            output_format="html",
        )
        return md.convert(text)


__all__ = ["MARKDOWN_EXTENSIONS", "HtmlContentRenderer"]
