"""Common literal values used across storybook_llms.

These constants keep output filenames, Storybook URLs, and selectors
centralized so the extractor, generators, and tests import the same values
without drifting. Intended for internal use within the storybook_llms package.

Examples
--------
>>> from storybook_llms import _constants
>>> _constants.ITEM_TEXT_TEMPLATE.format(id="button--docs")
'button--docs.txt'
>>> _constants.ENTRY_URL
'http://localhost/iframe.html'
"""

SUMMARY_TEXT_FILENAME = "llms.txt"
LLMS_DIRNAME = "llms"
SUMMARY_HTML_FILENAME = "index.html"
SITEMAP_FILENAME = "sitemap.xml"
ITEM_TEXT_TEMPLATE = "{id}.txt"
ITEM_HTML_TEMPLATE = "{id}.html"

SITE_ORIGIN = "http://localhost"
ENTRY_DOCUMENT = "iframe.html"
ENTRY_URL = f"{SITE_ORIGIN}/{ENTRY_DOCUMENT}"
INDEX_DOCUMENT = "index.html"

PREVIEW_GLOBAL = "__STORYBOOK_PREVIEW__"
DOCS_CONTENT_SELECTOR = ".sbdocs-content"
STORY_ID_SUFFIX = "--page"
DOCS_ID_SUFFIX = "--docs"
PROSE_PAGE_SUFFIXES = (".mdx",)

LLMSTXT_URL = "https://llmstxt.org/"
SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
