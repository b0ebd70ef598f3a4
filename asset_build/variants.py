"""Minified/unminified build variants."""

from __future__ import annotations

from enum import Enum


class SassOutputStyle(str, Enum):
    """Output style passed to the SASS compiler."""

    COMPRESSED = "compressed"
    EXPANDED = "expanded"


class BuildVariant(str, Enum):
    """Output flavour chosen once per builder call."""

    MINIFIED = "minified"
    UNMINIFIED = "unminified"

    @classmethod
    def from_flag(cls, minimize: bool) -> "BuildVariant":
        return cls.MINIFIED if minimize else cls.UNMINIFIED

    @property
    def minimize(self) -> bool:
        return self is BuildVariant.MINIFIED

    @property
    def suffix(self) -> str:
        return ".min" if self.minimize else ""

    @property
    def sass_output_style(self) -> SassOutputStyle:
        return SassOutputStyle.COMPRESSED if self.minimize else SassOutputStyle.EXPANDED


__all__ = ["BuildVariant", "SassOutputStyle"]
