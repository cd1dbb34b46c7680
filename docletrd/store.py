"""In-memory doclet record set loaded from a parser's JSON dump."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, List, Mapping

from .helpers import sort_key
from .logging import get_logger
from .models import Doclet

logger = get_logger("store")


class DocletError(ValueError):
    """Raised when a doclet dump does not have the expected shape."""


class DocletStore:
    """Ordered, queryable collection of doclets."""

    def __init__(self, doclets: Iterable[Doclet] | None = None) -> None:
        self._doclets: List[Doclet] = list(doclets or [])

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "DocletStore":
        doclets: List[Doclet] = []
        for index, record in enumerate(records):
            if isinstance(record, Doclet):
                doclets.append(record)
            elif isinstance(record, Mapping):
                doclets.append(Doclet.from_dict(record))
            else:
                raise DocletError(f"Doclet #{index} is not a mapping: {type(record).__name__}")
        return cls(doclets)

    @classmethod
    def from_json(cls, path: Path) -> "DocletStore":
        """Load the array produced by ``jsdoc -X`` (or anything shaped like it)."""
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DocletError(f"Failed to parse {path.name}: {exc}") from exc
        if not isinstance(payload, list):
            raise DocletError(f"{path.name} must contain a JSON array of doclets")
        store = cls.from_records(payload)
        logger.debug("Loaded %d doclets from %s", len(store), path)
        return store

    def __iter__(self) -> Iterator[Doclet]:
        return iter(list(self._doclets))

    def __len__(self) -> int:
        return len(self._doclets)

    def find(self, **criteria: Any) -> List[Doclet]:
        """Return doclets whose attributes equal every given criterion."""
        return [
            doclet
            for doclet in self._doclets
            if all(getattr(doclet, key, None) == value for key, value in criteria.items())
        ]

    def remove(self, predicate: Callable[[Doclet], bool]) -> int:
        """Drop matching doclets in place; return how many were removed."""
        kept = [doclet for doclet in self._doclets if not predicate(doclet)]
        removed = len(self._doclets) - len(kept)
        self._doclets = kept
        return removed

    def sort(self) -> "DocletStore":
        """Sort in place by longname, version and since, keeping input order on ties."""
        self._doclets.sort(key=sort_key)
        return self


def prune(store: DocletStore, *, include_private: bool = False) -> DocletStore:
    """Remove undocumented, ignored and anonymous-member doclets.

    Private doclets are removed too unless ``include_private`` is set.
    """
    removed = store.remove(lambda doclet: doclet.undocumented)
    removed += store.remove(lambda doclet: doclet.ignore)
    removed += store.remove(lambda doclet: doclet.memberof == "<anonymous>")
    if not include_private:
        removed += store.remove(lambda doclet: doclet.access == "private")
    logger.debug("Pruned %d doclets, %d remain", removed, len(store))
    return store


__all__ = ["DocletError", "DocletStore", "prune"]
