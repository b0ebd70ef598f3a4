"""Configs for React based library bundles (blocks, editors)."""

from __future__ import annotations

import copy
import logging
from typing import List, Sequence, Tuple, Union

from ..exceptions import InvalidArgumentError
from ..naming import camel_case_dash
from ..options import ReactifiedOptions
from ..plugins import MINI_CSS_EXTRACT_LOADER, mini_css_extract, terser
from ..schemas import (
    ConfigFragment,
    ExternalReference,
    ExternalsMap,
    LoaderSpec,
    MatchPattern,
    ModuleSpec,
    OptimizationSpec,
    OutputSpec,
    ResolveSpec,
    RuleSpec,
)
from ..variants import BuildVariant, SassOutputStyle

logger = logging.getLogger(__name__)

WORDPRESS_SCOPE = "@wordpress"
WORDPRESS_GLOBAL = "wp"

_SCRIPT_FILENAMES = {
    BuildVariant.MINIFIED: "./js/build/[name].min.js",
    BuildVariant.UNMINIFIED: "./js/build/[name].js",
}
_STYLE_FILENAMES = {
    BuildVariant.MINIFIED: "./css/build/style.min.css",
    BuildVariant.UNMINIFIED: "./css/build/style.css",
}


def build_externals(wp_dependencies: Sequence[str], additional_externals: ExternalsMap) -> ExternalsMap:
    """Map imported module names to the runtime globals they are read from.

    WordPress packages are added last and replace any caller entry using the
    same ``@wordpress/<name>`` key.
    """

    externals: ExternalsMap = {"react": "React"}
    externals.update(additional_externals)
    for name in wp_dependencies:
        externals[f"{WORDPRESS_SCOPE}/{name}"] = ExternalReference(this=[WORDPRESS_GLOBAL, camel_case_dash(name)])
    return externals


def build_sass_rules(
    load_paths: Sequence[str],
    output_style: Union[SassOutputStyle, str],
    is_production: bool,
) -> List[RuleSpec]:
    """Return the SASS rule for ``load_paths``, or nothing when none are given."""

    try:
        style = SassOutputStyle(output_style)
    except ValueError:
        accepted = ", ".join(repr(item.value) for item in SassOutputStyle)
        raise InvalidArgumentError(f"outputStyle must be one of {accepted}, got {output_style!r}") from None

    if not load_paths:
        return []

    return [
        RuleSpec(
            test=MatchPattern(source=r"\.s?css$"),
            use=[
                MINI_CSS_EXTRACT_LOADER,
                "css-loader",
                LoaderSpec(
                    loader="sass-loader",
                    options={
                        "sassOptions": {
                            "loadPaths": list(load_paths),
                            "outputStyle": style.value,
                            "sourceMap": not is_production,
                        }
                    },
                ),
            ],
        )
    ]


def _transpilation_rule() -> RuleSpec:
    return RuleSpec(
        test=MatchPattern(source=r"\.js$"),
        exclude=MatchPattern(source="node_modules"),
        use=["babel-loader"],
    )


def _optimization(variant: BuildVariant) -> OptimizationSpec:
    if variant.minimize:
        return OptimizationSpec(minimize=True, minimizer=[terser(strip_comments=True)])
    return OptimizationSpec(minimize=False)


def _build_variant(options: ReactifiedOptions, variant: BuildVariant, externals: ExternalsMap) -> ConfigFragment:
    return ConfigFragment(
        entry=options.entry_points,
        output=OutputSpec(
            filename=_SCRIPT_FILENAMES[variant],
            path=options.output_path,
            library=[options.library_name],
            library_target="this",
        ),
        externals=copy.deepcopy(externals),
        resolve=ResolveSpec(modules=[options.output_path, "node_modules"]),
        module=ModuleSpec(
            rules=[
                _transpilation_rule(),
                *build_sass_rules(options.sass_load_paths, variant.sass_output_style, options.is_production),
            ]
        ),
        plugins=[mini_css_extract(_STYLE_FILENAMES[variant])],
        devtool=False if options.is_production else "source-map",
        optimization=_optimization(variant),
    )


def get_reactified_config(options: ReactifiedOptions) -> Tuple[ConfigFragment, ConfigFragment]:
    """Return the ``(minified, unminified)`` configs for a library bundle."""

    externals = build_externals(options.wp_dependencies, options.additional_externals)
    configs = (
        _build_variant(options, BuildVariant.MINIFIED, externals),
        _build_variant(options, BuildVariant.UNMINIFIED, externals),
    )
    logger.debug(
        "Built reactified configs for %s with %d entry point(s) and %d external(s)",
        options.library_name,
        len(options.entry_points),
        len(externals),
    )
    return configs


__all__ = ["build_externals", "build_sass_rules", "get_reactified_config"]
