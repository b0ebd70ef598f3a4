"""Configs for glob-discovered standalone JS and CSS files."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..discovery import FileResolver, glob_files
from ..options import VanillaOptions
from ..schemas import ConfigFragment
from ..transformers import make_css_transformer, make_js_transformer

logger = logging.getLogger(__name__)


def _resolve_files(
    resolver: FileResolver,
    patterns: Sequence[str],
    base_dir: str,
    ignore: Sequence[str],
) -> List[str]:
    filenames: List[str] = []
    for pattern in patterns:
        filenames.extend(f"./{filename}" for filename in resolver(pattern, base_dir=base_dir, ignore=ignore))
    return filenames


def get_vanilla_config(
    options: VanillaOptions,
    *,
    resolver: Optional[FileResolver] = None,
) -> List[ConfigFragment]:
    """Build one config per discovered file.

    Every JS file yields an unminified and a minified config, every CSS
    file a single one. Order: unminified JS, minified JS, then CSS.
    """

    resolve = resolver or glob_files
    js_files = _resolve_files(
        resolve,
        options.js_patterns,
        options.working_directory,
        options.js_ignore_patterns,
    )
    css_files = _resolve_files(
        resolve,
        options.css_patterns,
        options.working_directory,
        options.css_ignore_patterns,
    )

    unminified = make_js_transformer(options.js_build_directory, False)
    minified = make_js_transformer(options.js_build_directory, True)
    stylesheet = make_css_transformer(
        options.css_build_directory,
        options.is_production,
        working_directory=options.working_directory,
    )

    configs = [
        *(unminified(filename) for filename in js_files),
        *(minified(filename) for filename in js_files),
        *(stylesheet(filename) for filename in css_files),
    ]
    logger.debug(
        "Built %d vanilla config(s) from %d JS and %d CSS file(s)",
        len(configs),
        len(js_files),
        len(css_files),
    )
    return configs


__all__ = ["get_vanilla_config"]
