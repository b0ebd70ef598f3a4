"""Schema models for generated bundler configuration."""

from .webpack import (
    ConfigFragment,
    EntryMap,
    ExternalReference,
    ExternalsMap,
    Loader,
    LoaderSpec,
    MatchPattern,
    ModuleSpec,
    OptimizationSpec,
    OutputSpec,
    PluginSpec,
    ResolveSpec,
    RuleSpec,
)

__all__ = [
    "ConfigFragment",
    "EntryMap",
    "ExternalReference",
    "ExternalsMap",
    "Loader",
    "LoaderSpec",
    "MatchPattern",
    "ModuleSpec",
    "OptimizationSpec",
    "OutputSpec",
    "PluginSpec",
    "ResolveSpec",
    "RuleSpec",
]
