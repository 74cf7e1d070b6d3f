"""Load and validate run configuration for storybook-llms.

This subpackage reads the optional ``llms.yaml`` file, merges command-line
overrides on top of it, and produces the :class:`RunConfiguration` dataclass
that the extractor and generators consume. The primary entry point is
:func:`load_run_config`.

Examples
--------
>>> from pathlib import Path
>>> from storybook_llms.config import load_run_config
>>> config = load_run_config(Path("llms.yaml"))  # doctest: +SKIP
>>> config.dist_path  # doctest: +SKIP
PosixPath('storybook-static')
"""

from .helpers import DEFAULT_CONFIG_NAME, parse_ref_spec
from .loader import ConfigOverrides, load_run_config
from .models import BrowserConfig, ConfigError, RefConfig, RunConfiguration

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "BrowserConfig",
    "ConfigError",
    "ConfigOverrides",
    "RefConfig",
    "RunConfiguration",
    "load_run_config",
    "parse_ref_spec",
]
