"""Generate llms.txt documentation from a built Storybook.

This package exposes the CLI entry points used by the ``storybook-llms``
console script and the pipeline functions for programmatic use.

Exports
-------
- ``app``: Cyclopts application holding the ``generate`` command.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``generate_llms_docs``: Extract and write all docs for a run configuration.

Examples
--------
>>> from storybook_llms import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .pipeline import extract_storybook_data, generate_llms_docs

__all__ = ["app", "extract_storybook_data", "generate_llms_docs", "main"]
