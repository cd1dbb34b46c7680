"""Source-file bookkeeping for a publish pass."""

from __future__ import annotations

import posixpath
from typing import Dict, Iterator, List, Optional

from .models import SourceFile


class SourceFiles:
    """Resolved source paths in order of first appearance, without duplicates."""

    def __init__(self) -> None:
        self._files: Dict[str, SourceFile] = {}

    def add(self, resolved: Optional[str]) -> None:
        if not resolved or resolved in self._files:
            return
        self._files[resolved] = SourceFile(resolved=resolved, shortened=None)

    def get(self, resolved: str) -> Optional[SourceFile]:
        return self._files.get(resolved)

    @property
    def paths(self) -> List[str]:
        return list(self._files)

    def __iter__(self) -> Iterator[SourceFile]:
        return iter(self._files.values())

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, resolved: object) -> bool:
        return resolved in self._files


def common_prefix(paths: List[str]) -> str:
    """Return the deepest directory shared by every path ("" when none)."""
    if not paths:
        return ""
    directories = [posixpath.dirname(path) for path in paths]
    try:
        return posixpath.commonpath(directories)
    except ValueError:
        # mixed absolute and relative paths
        return ""


def shorten_source_paths(source_files: SourceFiles) -> SourceFiles:
    """Fill ``shortened`` with each path relative to the common source directory."""
    prefix = common_prefix(source_files.paths)
    for source in source_files:
        if prefix:
            source.shortened = posixpath.relpath(source.resolved, prefix)
        else:
            source.shortened = source.resolved
    return source_files


__all__ = ["SourceFiles", "common_prefix", "shorten_source_paths"]
