"""Filename allocation and longname-to-URL bookkeeping."""

from __future__ import annotations

import re
from typing import Any, Dict, Optional

from .models import Doclet

# Kinds that get a page of their own rather than an anchor on their parent's page.
CONTAINER_KINDS = frozenset(
    {"class", "module", "namespace", "external", "mixin", "interface", "event"}
)

_NAMESPACE_PREFIX = re.compile(r"^(module|external|event):")
_UNSAFE_CHARS = re.compile(r"[\\/?*:|'\"<>#]")
_EDGE_DOT = re.compile(r"^\.|\.$")


class LinkRegistry:
    """Hands out unique filenames and remembers which URL each longname maps to."""

    def __init__(self, link_extension: str = ".html") -> None:
        self.link_extension = link_extension
        self._files: Dict[str, str] = {}
        self._links: Dict[str, str] = {}
        self._tutorials: Any = None

    def get_unique_filename(self, key: str) -> str:
        """Return a sanitized filename for ``key`` that no earlier call has claimed."""
        basename = _NAMESPACE_PREFIX.sub(r"\1-", key or "")
        basename = _UNSAFE_CHARS.sub("_", basename)
        basename = basename.replace("~", "-").replace("()", "")
        basename = _EDGE_DOT.sub("", basename)
        filename = f"{basename}{self.link_extension}" if basename else "_"

        lookup = filename.lower()
        while lookup in self._files:
            filename += "_"
            lookup = filename.lower()
        self._files[lookup] = key
        return filename

    def register_link(self, longname: str, url: str) -> None:
        self._links[longname] = url

    def url_for(self, longname: str) -> Optional[str]:
        return self._links.get(longname)

    def create_link(self, doclet: Doclet) -> str:
        """Return the canonical URL for a doclet, registering it on first use."""
        existing = self._links.get(doclet.longname)
        if existing:
            return existing

        if doclet.kind in CONTAINER_KINDS or not doclet.memberof:
            url = self.get_unique_filename(doclet.longname)
        else:
            parent = self._links.get(doclet.memberof) or self.get_unique_filename(doclet.memberof)
            self._links.setdefault(doclet.memberof, parent)
            url = f"{parent}#{doclet.name}"

        self.register_link(doclet.longname, url)
        return url

    def set_tutorials(self, tutorials: Any) -> None:
        self._tutorials = tutorials

    @property
    def tutorials(self) -> Any:
        return self._tutorials


__all__ = ["CONTAINER_KINDS", "LinkRegistry"]
