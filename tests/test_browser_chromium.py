"""Run extraction in real Chromium against a miniature Storybook 7 build.

Skipped unless Chromium is installed (``playwright install chromium``).
"""

from __future__ import annotations

import typing as typ

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from storybook_llms.config import RunConfiguration
from storybook_llms.pipeline import generate_llms_docs

if typ.TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.playwright

IFRAME_HTML = """<!DOCTYPE html>
<html>
<head><script src="./assets/preview.js"></script></head>
<body><div id="storybook-root"></div></body>
</html>
"""

PREVIEW_JS = """
const Button = () => null;
Button.__docgenInfo = {
  description: '',
  props: {
    size: {
      type: { name: 'enum', value: [{ value: '"sm"' }, { value: '"lg"' }] },
      required: false,
      defaultValue: { value: '"sm"' },
      description: 'Button size',
    },
  },
};
const csfFiles = {
  './Button.stories.tsx': {
    meta: {
      id: 'button',
      title: 'Button',
      component: Button,
      parameters: {
        fileName: './Button.stories.tsx',
        docs: { description: { component: 'Clickable button.' } },
      },
    },
    stories: {
      'button--small': {
        id: 'button--small',
        name: 'Small',
        parameters: { docs: { source: { originalSource: '<Button size="sm" />' } } },
      },
    },
  },
  './Intro.mdx': {
    meta: { id: 'intro', title: 'Intro', parameters: { fileName: './Intro.mdx' } },
    stories: {
      'intro--page': { id: 'intro--page', name: 'Page', parameters: { docsOnly: true } },
    },
  },
};
const params = new URLSearchParams(window.location.search);
if (params.get('id') === 'intro--docs') {
  window.addEventListener('DOMContentLoaded', () => {
    const content = document.createElement('div');
    content.className = 'sbdocs-content';
    content.innerHTML = '<h1>Welcome</h1><p>Read <em>this</em> first.</p>';
    document.body.appendChild(content);
  });
}
window.__STORYBOOK_PREVIEW__ = {
  storyStore: {
    cachedCSFFiles: null,
    async cacheAllCSFFiles() {
      this.cachedCSFFiles = csfFiles;
    },
  },
};
"""


@pytest.fixture(scope="module")
def chromium() -> None:
    with sync_playwright() as playwright:
        try:
            browser = playwright.chromium.launch()
        except PlaywrightError as exc:
            pytest.skip(f"Chromium is not available: {exc}")
        browser.close()


def test_generates_docs_from_real_build(tmp_path: Path, chromium: None) -> None:
    dist = tmp_path / "storybook-static"
    (dist / "assets").mkdir(parents=True)
    (dist / "iframe.html").write_text(IFRAME_HTML, encoding="utf-8")
    (dist / "assets" / "preview.js").write_text(PREVIEW_JS, encoding="utf-8")

    generate_llms_docs(RunConfiguration(dist_path=dist))

    button = (dist / "llms" / "button.txt").read_text(encoding="utf-8")
    assert "# Button" in button
    assert '| `size` | `"sm" "lg"` | No | "sm" | Button size |' in button
    assert '<Button size="sm" />' in button
    intro = (dist / "llms" / "intro.txt").read_text(encoding="utf-8")
    assert intro == "# Welcome\n\nRead _this_ first."
    summary = (dist / "llms.txt").read_text(encoding="utf-8")
    assert "- [Button](/llms/button.html): Clickable button." in summary
