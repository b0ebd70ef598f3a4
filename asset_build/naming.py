"""Path and name helpers shared by the config builders."""

from __future__ import annotations

import re
from pathlib import PurePath

_DASH_LETTER = re.compile(r"-([a-z])")


def base_name(path: str) -> str:
    """Return the final path segment without its extension."""

    return PurePath(path).stem


def camel_case_dash(name: str) -> str:
    """Convert dash separators to their camelCase equivalent.

    Only a lowercase letter directly after a dash is uppercased, so
    ``"a-1b"`` is returned unchanged where a generic camel-caser would
    capitalize the ``b``.
    """

    return _DASH_LETTER.sub(lambda match: match.group(1).upper(), name)


__all__ = ["base_name", "camel_case_dash"]
