"""JSON export of generated configs for the Node side of the build."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .schemas import ConfigFragment

logger = logging.getLogger(__name__)


def dump_config(fragment: ConfigFragment) -> Dict[str, Any]:
    """Return ``fragment`` as JSON-ready data using the bundler's key names."""

    return fragment.model_dump(mode="json", by_alias=True, exclude_none=True)


def dump_configs(fragments: Iterable[ConfigFragment]) -> List[Dict[str, Any]]:
    return [dump_config(fragment) for fragment in fragments]


def write_configs(fragments: Iterable[ConfigFragment], path: Path) -> Path:
    """Write configs to ``path`` as a JSON array."""

    path = Path(path)
    payload = dump_configs(fragments)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    logger.info("Wrote %d config(s) to %s", len(payload), path)
    return path


__all__ = ["dump_config", "dump_configs", "write_configs"]
