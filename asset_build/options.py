"""Option models for the config assemblers and helpers to load them from disk."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .exceptions import OptionsError
from .schemas import EntryMap, ExternalsMap

logger = logging.getLogger(__name__)

PRODUCTION_ENV = "NODE_ENV"


class _OptionsModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


def _fspath(value: Any) -> Any:
    if isinstance(value, os.PathLike):
        return os.fspath(value)
    return value


class VanillaOptions(_OptionsModel):
    """Inputs for :func:`asset_build.configs.get_vanilla_config`."""

    working_directory: str
    js_patterns: List[str] = Field(default_factory=lambda: ["**/*.js"])
    js_ignore_patterns: List[str] = Field(default_factory=list)
    css_patterns: List[str] = Field(default_factory=lambda: ["**/*.css"])
    css_ignore_patterns: List[str] = Field(default_factory=list)
    js_build_directory: str
    css_build_directory: str
    is_production: bool

    @field_validator("working_directory", "js_build_directory", "css_build_directory", mode="before")
    @classmethod
    def _coerce_path(cls, value: Any) -> Any:
        return _fspath(value)


class ReactifiedOptions(_OptionsModel):
    """Inputs for :func:`asset_build.configs.get_reactified_config`."""

    entry_points: EntryMap
    output_path: str
    library_name: str
    is_production: bool
    wp_dependencies: List[str]
    additional_externals: ExternalsMap = Field(default_factory=dict)
    sass_load_paths: List[str] = Field(default_factory=list)

    @field_validator("output_path", mode="before")
    @classmethod
    def _coerce_path(cls, value: Any) -> Any:
        return _fspath(value)

    @field_validator("sass_load_paths", mode="before")
    @classmethod
    def _coerce_paths(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [_fspath(item) for item in value]
        return value


def is_production_env(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get(PRODUCTION_ENV) == "production"


def _read_payload(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise OptionsError(f"Unable to read options file {path}: {exc}") from exc

    try:
        if path.suffix.lower() == ".json":
            payload = json.loads(text)
        else:
            payload = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise OptionsError(f"Invalid options file {path}: {exc}") from exc

    if payload is None:
        return {}
    if not isinstance(payload, dict):
        logger.warning("Unexpected options payload type in %s: %s", path, type(payload).__name__)
        raise OptionsError(f"Options file {path} must contain a mapping, got {type(payload).__name__}")
    return payload


def _normalise_keys(model: Type[BaseModel], payload: Mapping[str, Any]) -> Dict[str, Any]:
    aliases = {field.alias: name for name, field in model.model_fields.items() if field.alias}
    return {aliases.get(key, key): value for key, value in payload.items()}


_OptionsT = TypeVar("_OptionsT", bound=_OptionsModel)


def _load(model: Type[_OptionsT], path: Path, defaults: Mapping[str, Any], overrides: Mapping[str, Any]) -> _OptionsT:
    payload = dict(defaults)
    payload.update(_normalise_keys(model, _read_payload(path)))
    payload.update(_normalise_keys(model, overrides))
    payload.setdefault("is_production", is_production_env())
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise OptionsError(f"Invalid options in {path}: {exc}") from exc


def load_vanilla_options(path: Path, **overrides: Any) -> VanillaOptions:
    """Load vanilla options from a YAML or JSON file.

    A missing ``working_directory`` defaults to the file's directory and a
    missing ``is_production`` follows ``NODE_ENV``.
    """

    path = Path(path)
    return _load(VanillaOptions, path, {"working_directory": str(path.parent)}, overrides)


def load_reactified_options(path: Path, **overrides: Any) -> ReactifiedOptions:
    path = Path(path)
    return _load(ReactifiedOptions, path, {}, overrides)


__all__ = [
    "PRODUCTION_ENV",
    "ReactifiedOptions",
    "VanillaOptions",
    "is_production_env",
    "load_reactified_options",
    "load_vanilla_options",
]
