"""Render parsed doclets into Rd documentation pages."""

from .helpers import get_path_from_doclet, hash_to_link, needs_signature, parse_example, sort_key, split_title
from .models import Doclet, Example, SourceFile
from .publisher import DocletRenderer, PublishOptions, publish
from .store import DocletError, DocletStore, prune

__all__ = [
    "Doclet",
    "DocletError",
    "DocletRenderer",
    "DocletStore",
    "Example",
    "PublishOptions",
    "SourceFile",
    "get_path_from_doclet",
    "hash_to_link",
    "needs_signature",
    "parse_example",
    "prune",
    "publish",
    "sort_key",
    "split_title",
]
