"""Bundler configuration builders for vanilla and React based assets."""

__version__ = "0.1.0"
from .configs import get_reactified_config, get_vanilla_config
from .discovery import glob_files
from .exceptions import AssetBuildError, InvalidArgumentError, OptionsError
from .naming import base_name, camel_case_dash
from .options import (
    ReactifiedOptions,
    VanillaOptions,
    is_production_env,
    load_reactified_options,
    load_vanilla_options,
)
from .render import dump_config, dump_configs, write_configs
from .schemas import ConfigFragment
from .transformers import make_css_transformer, make_js_transformer
from .variants import BuildVariant, SassOutputStyle

__all__ = [
    "__version__",
    "AssetBuildError",
    "BuildVariant",
    "ConfigFragment",
    "InvalidArgumentError",
    "OptionsError",
    "ReactifiedOptions",
    "SassOutputStyle",
    "VanillaOptions",
    "base_name",
    "camel_case_dash",
    "dump_config",
    "dump_configs",
    "get_reactified_config",
    "get_vanilla_config",
    "glob_files",
    "is_production_env",
    "load_reactified_options",
    "load_vanilla_options",
    "make_css_transformer",
    "make_js_transformer",
    "write_configs",
]
