"""Factories for the plugin and loader invocations placed in configs.

Each call returns a new spec so no two configs share plugin state.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from .schemas import MatchPattern, PluginSpec

MINI_CSS_EXTRACT_LOADER = "mini-css-extract-plugin/dist/loader"


def mini_css_extract(filename: str) -> PluginSpec:
    return PluginSpec(
        name="MiniCssExtractPlugin",
        package="mini-css-extract-plugin",
        options={"filename": filename},
    )


def terser(*, strip_comments: bool = False) -> PluginSpec:
    """Return a JS minifier invocation that never writes LICENSE side files."""

    options: Dict[str, Any] = {}
    if strip_comments:
        options["terserOptions"] = {"format": {"comments": False}}
    options["extractComments"] = False
    return PluginSpec(name="TerserPlugin", package="terser-webpack-plugin", options=options)


def css_minimizer(test: Optional[MatchPattern] = None) -> PluginSpec:
    options: Dict[str, Any] = {}
    if test is not None:
        options["test"] = test
    return PluginSpec(name="CssMinimizerPlugin", package="css-minimizer-webpack-plugin", options=options)


def clean_after_build(patterns: Sequence[str]) -> PluginSpec:
    return PluginSpec(
        name="CleanWebpackPlugin",
        package="clean-webpack-plugin",
        options={
            "dry": False,
            "verbose": False,
            "cleanOnceBeforeBuildPatterns": [],
            "cleanAfterEveryBuildPatterns": list(patterns),
        },
    )


def copy_files(source: str, destination: str) -> PluginSpec:
    return PluginSpec(
        name="CopyPlugin",
        package="copy-webpack-plugin",
        options={"patterns": [{"from": source, "to": destination}]},
    )


__all__ = [
    "MINI_CSS_EXTRACT_LOADER",
    "clean_after_build",
    "copy_files",
    "css_minimizer",
    "mini_css_extract",
    "terser",
]
