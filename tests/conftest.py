from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import pytest


class FakeResolver:
    """Glob stand-in returning canned results per pattern and recording calls."""

    def __init__(self, results: Dict[str, List[str]] | None = None) -> None:
        self.results = results or {}
        self.calls: List[Tuple[str, str, Tuple[str, ...]]] = []

    def __call__(self, pattern: str, *, base_dir: str, ignore: Sequence[str]) -> List[str]:
        self.calls.append((pattern, base_dir, tuple(ignore)))
        return list(self.results.get(pattern, []))


@pytest.fixture
def fake_resolver() -> FakeResolver:
    return FakeResolver()
