"""Config assemblers."""

from .reactified import build_externals, build_sass_rules, get_reactified_config
from .vanilla import get_vanilla_config

__all__ = [
    "build_externals",
    "build_sass_rules",
    "get_reactified_config",
    "get_vanilla_config",
]
