"""JavaScript evaluated inside the Storybook preview iframe.

Every extraction script ends by mapping registry entries through
``normalizeEntry`` so that only plain JSON crosses the Playwright bridge::

    {
      "id": str, "title": str, "fileName": str, "description": str,
      "component": {"description": str, "props": {...}} | null,
      "subcomponents": {name: {"description": str, "props": {...}} | null},
      "stories": [{"id", "name", "docsOnly", "description", "sourceCode"}] | null
    }

Scripts return ``null`` when their data source is absent, letting the next
strategy try.
"""

from __future__ import annotations

WAIT_FOR_PREVIEW = "() => Boolean(window.__STORYBOOK_PREVIEW__)"

STORYBOOK_GLOBALS = (
    "() => Object.keys(window).filter((key) => key.startsWith('__STORYBOOK'))"
)

PROBE_REGISTRY = """
() => {
  const preview = window.__STORYBOOK_PREVIEW__;
  if (!preview) {
    return null;
  }
  const storeKey =
    ['storyStore', 'storyStoreValue'].find((key) => Boolean(preview[key])) || null;
  const store = storeKey ? preview[storeKey] : null;
  return {
    previewKeys: Object.keys(preview),
    hasExtract: typeof preview.extract === 'function',
    storeKey,
    storeKeys: store ? Object.keys(store) : [],
    hasCacheAllCsfFiles: Boolean(store) && typeof store.cacheAllCSFFiles === 'function',
    hasCachedCsfFiles: Boolean(store && store.cachedCSFFiles),
    hasCache: Boolean(store && store.cache),
    hasStories: Boolean(store && store.stories),
  };
}
"""

NORMALIZE_ENTRY = """
  const docgenOf = (component) => {
    const info = component && component.__docgenInfo;
    if (!info) {
      return null;
    }
    return JSON.parse(
      JSON.stringify({ description: info.description || '', props: info.props || {} }),
    );
  };
  const normalizeStory = (story) => {
    const params = story.parameters || {};
    const docs = params.docs || {};
    return {
      id: String(story.id),
      name: String(story.name || story.story || story.id),
      docsOnly: Boolean(params.docsOnly),
      description: (docs.description && docs.description.story) || '',
      sourceCode: (docs.source && docs.source.originalSource) || '',
    };
  };
  const normalizeEntry = (entry) => {
    const meta = (entry && entry.meta) || {};
    const parameters = meta.parameters || {};
    const docs = parameters.docs || {};
    const subcomponents = {};
    for (const [name, sub] of Object.entries(meta.subcomponents || {})) {
      subcomponents[name] = docgenOf(sub);
    }
    return {
      id: String(meta.id || ''),
      title: String(meta.title || ''),
      fileName: String(parameters.fileName || ''),
      description: (docs.description && docs.description.component) || '',
      component: docgenOf(meta.component),
      subcomponents,
      stories: entry && entry.stories ? Object.values(entry.stories).map(normalizeStory) : null,
    };
  };
"""


def _with_normalizer(body: str) -> str:
    """Wrap ``body`` in an async function receiving the store attribute name."""
    return "async (storeKey) => {\n" + NORMALIZE_ENTRY + body + "}\n"


PREVIEW_EXTRACT = _with_normalizer(
    """
  const preview = window.__STORYBOOK_PREVIEW__;
  const extracted = (await preview.extract()) || {};
  const grouped = new Map();
  for (const story of Object.values(extracted)) {
    const componentId =
      story.componentId || (story.id ? String(story.id).split('--')[0] : 'unknown');
    if (!grouped.has(componentId)) {
      const parameters = story.parameters || {};
      grouped.set(componentId, {
        meta: {
          id: componentId,
          title: story.title || story.kind || 'Unknown',
          component: story.component,
          subcomponents: story.subcomponents,
          parameters: { fileName: parameters.fileName || '', docs: parameters.docs || {} },
        },
        stories: {},
      });
    }
    grouped.get(componentId).stories[story.id] = story;
  }
  if (grouped.size === 0) {
    return null;
  }
  return Array.from(grouped.values()).map(normalizeEntry);
"""
)

CACHE_ALL_CSF_FILES = _with_normalizer(
    """
  const store = window.__STORYBOOK_PREVIEW__[storeKey];
  await store.cacheAllCSFFiles();
  if (!store.cachedCSFFiles) {
    return null;
  }
  return Object.values(store.cachedCSFFiles).map(normalizeEntry);
"""
)


def _read_store_map(member: str) -> str:
    return _with_normalizer(
        f"""
  const store = window.__STORYBOOK_PREVIEW__[storeKey];
  const entries = store.{member};
  if (!entries) {{
    return null;
  }}
  return Object.values(entries).map(normalizeEntry);
"""
    )


CACHED_CSF_FILES = _read_store_map("cachedCSFFiles")
STORE_CACHE = _read_store_map("cache")
STORE_STORIES = _read_store_map("stories")

__all__ = [
    "CACHED_CSF_FILES",
    "CACHE_ALL_CSF_FILES",
    "PREVIEW_EXTRACT",
    "PROBE_REGISTRY",
    "STORE_CACHE",
    "STORE_STORIES",
    "STORYBOOK_GLOBALS",
    "WAIT_FOR_PREVIEW",
]
