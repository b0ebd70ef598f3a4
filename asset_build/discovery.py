"""Glob based source discovery."""

from __future__ import annotations

import glob
import logging
import os
import re
from functools import lru_cache
from pathlib import PurePath
from typing import List, Protocol, Sequence

logger = logging.getLogger(__name__)


class FileResolver(Protocol):
    def __call__(self, pattern: str, *, base_dir: str, ignore: Sequence[str]) -> List[str]:  # pragma: no cover - interface
        ...


@lru_cache(maxsize=256)
def _compile_ignore(pattern: str) -> re.Pattern[str]:
    """Translate an ignore glob into a regex where ``*`` stays inside one segment."""

    parts: List[str] = []
    index = 0
    while index < len(pattern):
        if pattern.startswith("**/", index):
            # Zero or more whole directories.
            parts.append("(?:.*/)?")
            index += 3
        elif pattern.startswith("**", index):
            parts.append(".*")
            index += 2
        elif pattern[index] == "*":
            parts.append("[^/]*")
            index += 1
        elif pattern[index] == "?":
            parts.append("[^/]")
            index += 1
        elif pattern[index] == "[" and "]" in pattern[index + 2 :]:
            end = pattern.index("]", index + 2)
            body = pattern[index + 1 : end]
            if body.startswith("!"):
                body = "^" + body[1:]
            parts.append(f"[{body.replace(chr(92), chr(92) * 2)}]")
            index = end + 1
        else:
            parts.append(re.escape(pattern[index]))
            index += 1
    return re.compile("".join(parts))


def _is_ignored(path: str, ignore: Sequence[str]) -> bool:
    return any(_compile_ignore(pattern).fullmatch(path) for pattern in ignore)


def glob_files(pattern: str, *, base_dir: str, ignore: Sequence[str] = ()) -> List[str]:
    """Return files under ``base_dir`` matching ``pattern`` as sorted relative POSIX paths."""

    matches: List[str] = []
    for candidate in glob.glob(pattern, root_dir=base_dir, recursive=True):
        if not os.path.isfile(os.path.join(base_dir, candidate)):
            continue
        relative = PurePath(candidate).as_posix()
        if _is_ignored(relative, ignore):
            continue
        matches.append(relative)
    matches.sort()
    logger.debug("Pattern %s matched %d file(s) in %s", pattern, len(matches), base_dir)
    return matches


__all__ = ["FileResolver", "glob_files"]
