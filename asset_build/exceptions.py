"""Exceptions raised by asset-build."""

from __future__ import annotations


class AssetBuildError(RuntimeError):
    """Base class for asset-build failures."""


class InvalidArgumentError(AssetBuildError, ValueError):
    """Raised when a builder receives a value outside its accepted set."""


class OptionsError(AssetBuildError, ValueError):
    """Raised when an options file cannot be read or validated."""


__all__ = ["AssetBuildError", "InvalidArgumentError", "OptionsError"]
