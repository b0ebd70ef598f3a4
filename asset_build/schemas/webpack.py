"""Pydantic models describing bundler configuration fragments."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_REGEX_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
}


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MatchPattern(_FrozenModel):
    """Regular expression in the bundler's notation (source plus flag letters)."""

    source: str
    flags: str = ""

    def compile(self) -> re.Pattern[str]:
        flags = 0
        for letter in self.flags:
            flags |= _REGEX_FLAGS.get(letter, 0)
        return re.compile(self.source, flags)

    def matches(self, path: str) -> bool:
        return self.compile().search(path) is not None


class LoaderSpec(_FrozenModel):
    loader: str
    options: Dict[str, Any] = Field(default_factory=dict)


Loader = Union[str, LoaderSpec]


class RuleSpec(_FrozenModel):
    test: MatchPattern
    exclude: Optional[MatchPattern] = None
    use: List[Loader] = Field(default_factory=list)

    def loader_names(self) -> List[str]:
        return [entry if isinstance(entry, str) else entry.loader for entry in self.use]


class ModuleSpec(_FrozenModel):
    rules: List[RuleSpec] = Field(default_factory=list)


class PluginSpec(_FrozenModel):
    """One plugin or minimizer invocation, instantiated on the bundler side."""

    name: str = Field(..., description="Constructor exported by the package.")
    package: str = Field(..., description="npm package providing the constructor.")
    options: Dict[str, Any] = Field(default_factory=dict)


class OutputSpec(_FrozenModel):
    filename: str
    path: str
    iife: Optional[bool] = None
    library: Optional[List[str]] = None
    library_target: Optional[str] = None


class OptimizationSpec(_FrozenModel):
    minimize: bool
    minimizer: List[PluginSpec] = Field(default_factory=list)


class ResolveSpec(_FrozenModel):
    modules: List[str] = Field(default_factory=list)


class ExternalReference(_FrozenModel):
    """Runtime global reached through a property path, e.g. ``wp.blockEditor``."""

    this: List[str]


EntryMap = Dict[str, Union[str, List[str]]]
# Values are any runtime binding descriptor: a global name, a property path
# list, an ExternalReference or a per-target mapping such as {"root": ...}.
ExternalsMap = Dict[str, Any]


class ConfigFragment(_FrozenModel):
    """A complete configuration object handed to the bundler."""

    entry: EntryMap
    output: OutputSpec
    externals: Optional[ExternalsMap] = None
    resolve: Optional[ResolveSpec] = None
    module: Optional[ModuleSpec] = None
    plugins: List[PluginSpec] = Field(default_factory=list)
    devtool: Union[Literal[False], str] = False
    optimization: Optional[OptimizationSpec] = None

    def find_rule(self, source: str) -> Optional[RuleSpec]:
        """Return the first module rule whose test pattern source equals ``source``."""

        if self.module is None:
            return None
        for rule in self.module.rules:
            if rule.test.source == source:
                return rule
        return None
