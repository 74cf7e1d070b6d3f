"""Write the generated documentation into a Storybook build.

``LlmsDocsWriter`` lays files out as::

    <dist>/llms.txt
    <dist>/llms/<id>.txt
    <dist>/llms/<id>.html
    <dist>/llms/index.html
    <dist>/llms/sitemap.xml

The ``llms`` directory is recreated on every run, so stale pages from removed
components disappear. The HTML index and sitemap are written after the
per-item pages.
"""

from __future__ import annotations

import logging
import shutil
import typing as typ

from storybook_llms._constants import (
    ITEM_HTML_TEMPLATE,
    ITEM_TEXT_TEMPLATE,
    LLMS_DIRNAME,
    SITEMAP_FILENAME,
    SUMMARY_HTML_FILENAME,
    SUMMARY_TEXT_FILENAME,
)

from .item_docs import generate_item_html, generate_item_text
from .renderer import HtmlContentRenderer
from .sitemap import generate_sitemap
from .summary import generate_summary_html, generate_summary_text

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt
    from pathlib import Path

    from storybook_llms.config import RunConfiguration
    from storybook_llms.models import DocumentableItem

logger = logging.getLogger(__name__)


class LlmsDocsWriter:
    """Persist summary, per-item, index, and sitemap files."""

    def __init__(
        self,
        config: RunConfiguration,
        renderer: HtmlContentRenderer | None = None,
        *,
        today: dt.date | None = None,
    ) -> None:
        """Initialize the writer.

        Parameters
        ----------
        config : RunConfiguration
            Run settings; ``dist_path`` is the output root.
        renderer : HtmlContentRenderer, optional
            Markdown renderer for prose pages.
        today : date, optional
            Fixed ``lastmod`` for the sitemap, mainly for tests.
        """
        self.config = config
        self.renderer = renderer or HtmlContentRenderer()
        self.today = today

    @property
    def llms_dir(self) -> Path:
        return self.config.dist_path / LLMS_DIRNAME

    def run(self, items: cabc.Sequence[DocumentableItem]) -> list[Path]:
        """Write every output file and return their paths in write order."""
        written = [
            self._write(
                self.config.dist_path / SUMMARY_TEXT_FILENAME,
                generate_summary_text(self.config, items),
            )
        ]
        logger.info("LLMs docs summary written to %s", written[0])

        shutil.rmtree(self.llms_dir, ignore_errors=True)
        self.llms_dir.mkdir(parents=True, exist_ok=True)

        for item in items:
            written.append(
                self._write(
                    self.llms_dir / ITEM_TEXT_TEMPLATE.format(id=item.id),
                    generate_item_text(item),
                    terminate=False,
                )
            )
            written.append(
                self._write(
                    self.llms_dir / ITEM_HTML_TEMPLATE.format(id=item.id),
                    generate_item_html(item, self.renderer),
                )
            )

        written.append(
            self._write(
                self.llms_dir / SUMMARY_HTML_FILENAME,
                generate_summary_html(self.config, items),
            )
        )
        written.append(
            self._write(
                self.llms_dir / SITEMAP_FILENAME,
                generate_sitemap(self.config, items, today=self.today),
            )
        )
        logger.info("Wrote %d item pages to %s", len(items), self.llms_dir)
        return written

    @staticmethod
    def _write(path: Path, content: str, *, terminate: bool = True) -> Path:
        """Write ``content`` as UTF-8; item text is written exactly as generated."""
        if terminate and content and not content.endswith("\n"):
            content += "\n"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path


__all__ = ["LlmsDocsWriter"]
