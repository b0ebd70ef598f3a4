"""Per-file configuration for plain CSS sources."""

from __future__ import annotations

import os
from typing import Callable, Optional

from ..naming import base_name
from ..plugins import MINI_CSS_EXTRACT_LOADER, clean_after_build, copy_files, css_minimizer, mini_css_extract
from ..schemas import ConfigFragment, MatchPattern, ModuleSpec, OptimizationSpec, OutputSpec, RuleSpec

WORK_FILENAME = "[name].work"
MINIFIED_FILENAME = "[name].min.css"


def make_css_transformer(
    destination: str,
    is_production: bool,
    *,
    working_directory: Optional[str] = None,
    copy_source: bool = True,
) -> Callable[[str], ConfigFragment]:
    """Return a function building one config per CSS source file.

    The bundler emits a ``.work`` marker file, the extraction plugin writes
    ``<name>.min.css`` next to it and the cleanup plugin removes every
    ``.work`` file under ``working_directory`` (the process cwd by default)
    once the build is done. With ``copy_source`` the untouched source is
    copied to ``destination`` as well.
    """

    cleanup_root = working_directory or os.getcwd()
    devtool = False if is_production else "source-map"

    def transform(filename: str) -> ConfigFragment:
        plugins = [
            mini_css_extract(MINIFIED_FILENAME),
            clean_after_build([os.path.join(cleanup_root, "**/*.work")]),
        ]
        if copy_source:
            plugins.append(copy_files(filename, destination))

        return ConfigFragment(
            entry={base_name(filename): filename},
            output=OutputSpec(filename=WORK_FILENAME, path=destination),
            plugins=plugins,
            module=ModuleSpec(
                rules=[
                    RuleSpec(
                        test=MatchPattern(source=r"\.css$", flags="i"),
                        use=[MINI_CSS_EXTRACT_LOADER, "css-loader"],
                    )
                ]
            ),
            devtool=devtool,
            optimization=OptimizationSpec(
                minimize=True,
                minimizer=[css_minimizer(MatchPattern(source=r"\.min\.css$", flags="i"))],
            ),
        )

    return transform


__all__ = ["make_css_transformer"]
