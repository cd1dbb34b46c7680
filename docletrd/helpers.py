"""Pure doclet helpers shared by the renderer and the template layer."""

from __future__ import annotations

import posixpath
import re
from typing import Any, Iterable, List, Optional, Tuple

from .models import Doclet, DocletMeta, Example, TypeSpec

# A blank line in any of the three line-ending conventions; runs of blank
# lines count as a single paragraph break.
_PARAGRAPH_BREAK = re.compile(r"(?:\r\n|\r(?!\n)|\n){2,}")

# Leading <caption>...</caption>, then a line break, then the code body.
# Nested caption tags are not supported.
_CAPTION_PATTERN = re.compile(
    r"^\s*<caption>([\s\S]+?)</caption>(\s*[\n\r])([\s\S]+)$",
    re.IGNORECASE,
)

_FUNCTION_CODE_TYPE = re.compile(r"[Ff]unction")
_ANCHOR = re.compile(r"^#.+")
_FRAGMENT_OR_END = re.compile(r"(#.+|$)")

_SIGNATURE_KINDS = frozenset({"function", "class"})


def needs_signature(
    kind: Optional[str],
    type: Optional[TypeSpec] = None,
    meta: Optional[DocletMeta] = None,
) -> bool:
    """Return True when a doclet of this shape should display a call signature."""
    if kind in _SIGNATURE_KINDS:
        return True
    if kind == "typedef":
        names = type.names if type else []
        return any(name.lower() == "function" for name in names)
    if kind == "namespace":
        code_type = meta.code.type if meta and meta.code else None
        return bool(code_type and _FUNCTION_CODE_TYPE.search(code_type))
    return False


def doclet_needs_signature(doclet: Doclet) -> bool:
    return needs_signature(doclet.kind, doclet.type, doclet.meta)


def get_path_from_doclet(doclet: Doclet) -> Optional[str]:
    """Return ``path/filename`` for the doclet's source.

    None when there is no meta or no filename; a bare directory is never a
    source file.
    """
    meta = doclet.meta
    if meta is None or not meta.filename:
        return None
    if meta.path and meta.path != "null":
        return posixpath.join(meta.path, meta.filename)
    return meta.filename


def split_title(name: str, description: Optional[str]) -> Tuple[str, str]:
    """Split a description into ``(title, body)``.

    With two or more paragraphs the first one is the title; otherwise the
    doclet name is used and the description is returned whole.
    """
    text = description or ""
    paragraphs = _PARAGRAPH_BREAK.split(text)
    if len(paragraphs) > 1:
        return paragraphs[0], "\n\n".join(paragraphs[1:])
    return name, text


def parse_example(example: Any) -> Example:
    """Separate an optional ``<caption>`` header from example code."""
    if isinstance(example, str):
        match = _CAPTION_PATTERN.match(example)
        if match:
            return Example(caption=match.group(1), code=match.group(3))
    return Example(caption="", code=example)


def normalize_examples(examples: Iterable[Any]) -> List[Example]:
    return [example if isinstance(example, Example) else parse_example(example) for example in examples]


def hash_to_link(canonical_url: str, see_item: str) -> str:
    """Turn a bare ``#anchor`` into a link against the doclet's own page."""
    if not isinstance(see_item, str) or not _ANCHOR.match(see_item):
        return see_item
    url = _FRAGMENT_OR_END.sub(lambda _match: see_item, canonical_url, count=1)
    return f'<a href="{url}">{see_item}</a>'


def sort_key(doclet: Doclet) -> Tuple[str, str, str]:
    """Ordering for a publish pass: longname, then version, then since.

    Missing values sort first. Combined with a stable sort, equal keys keep
    their input order.
    """
    return (doclet.longname or "", doclet.version or "", doclet.since or "")


__all__ = [
    "doclet_needs_signature",
    "get_path_from_doclet",
    "hash_to_link",
    "needs_signature",
    "normalize_examples",
    "parse_example",
    "sort_key",
    "split_title",
]
