"""Render documentable items into llms.txt, per-item pages, and a sitemap."""

from .item_docs import generate_item_html, generate_item_text
from .renderer import HtmlContentRenderer
from .sitemap import generate_sitemap
from .summary import generate_summary_html, generate_summary_text
from .writer import LlmsDocsWriter

__all__ = [
    "HtmlContentRenderer",
    "LlmsDocsWriter",
    "generate_item_html",
    "generate_item_text",
    "generate_sitemap",
    "generate_summary_html",
    "generate_summary_text",
]
