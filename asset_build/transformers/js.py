"""Per-file configuration for plain JavaScript sources."""

from __future__ import annotations

from typing import Callable

from ..naming import base_name
from ..plugins import terser
from ..schemas import ConfigFragment, OptimizationSpec, OutputSpec
from ..variants import BuildVariant


def make_js_transformer(destination: str, minimize: bool = False) -> Callable[[str], ConfigFragment]:
    """Return a function building one config per JS source file.

    Output lands in ``destination`` as ``<name>.js`` or ``<name>.min.js``.
    """

    variant = BuildVariant.from_flag(minimize)

    def transform(filename: str) -> ConfigFragment:
        name = base_name(filename)
        return ConfigFragment(
            entry={name: filename},
            output=OutputSpec(
                filename=f"{name}{variant.suffix}.js",
                path=destination,
                # Plain scripts: no IIFE wrapper around the emitted bundle.
                iife=False,
            ),
            optimization=OptimizationSpec(
                minimize=variant.minimize,
                minimizer=[terser()] if variant.minimize else [],
            ),
        )

    return transform


__all__ = ["make_js_transformer"]
