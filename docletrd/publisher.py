"""Publish pass: one Rd page per doclet."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .helpers import (
    doclet_needs_signature,
    get_path_from_doclet,
    hash_to_link,
    normalize_examples,
    split_title,
)
from .links import LinkRegistry
from .logging import get_logger
from .models import Doclet, Param
from .paths import SourceFiles, shorten_source_paths
from .store import DocletStore, prune
from .templating import DEFAULT_TEMPLATE, TemplateRenderer

logger = get_logger("publisher")


@dataclass
class PublishOptions:
    """Inputs for a publish pass."""

    destination: Path
    template: Optional[Path] = None
    extension: str = ".Rd"
    encoding: str = "utf-8"
    link_extension: str = ".html"
    include_private: bool = False
    template_name: str = DEFAULT_TEMPLATE


@dataclass
class PublishContext:
    """State owned by a single publish call."""

    options: PublishOptions
    store: DocletStore
    renderer: TemplateRenderer
    links: LinkRegistry
    source_files: SourceFiles = field(default_factory=SourceFiles)
    written: list[Path] = field(default_factory=list)


class DocletRenderer:
    """Normalizes doclets and writes one rendered file per eligible doclet."""

    def __init__(self, context: PublishContext) -> None:
        self.context = context
        self.output_dir = Path(context.options.destination)

    def render_all(self, doclets: Iterable[Doclet]) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        for doclet in doclets:
            self.render_doclet(doclet)

    def render_doclet(self, doclet: Doclet) -> Optional[Path]:
        """Process one doclet; return the written path, or None for packages."""
        self._log_doclet(doclet)

        doclet.attribs = ""
        doclet.examples = normalize_examples(doclet.examples)
        if doclet.see:
            canonical = self.context.links.create_link(doclet)
            doclet.see = [hash_to_link(canonical, item) for item in doclet.see]

        outpath = None
        if doclet.kind != "package":
            outpath = self._write(doclet, self.build_context(doclet))

        self.context.source_files.add(get_path_from_doclet(doclet))
        return outpath

    def build_context(self, doclet: Doclet) -> Dict[str, Any]:
        title, description = split_title(doclet.name, doclet.description)
        return {
            "title": title,
            "filename": doclet.meta.filename if doclet.meta else None,
            "name": doclet.longname,
            "description": description,
            "params": _as_entries(doclet.params),
            "properties": _as_entries(doclet.properties),
            "examples": doclet.examples,
            "see": doclet.see,
            "signature": doclet_needs_signature(doclet),
            "kind": doclet.kind,
            "doclet": doclet,
        }

    def output_path(self, doclet: Doclet) -> Path:
        return self.output_dir / f"{doclet.name}{self.context.options.extension}"

    def _write(self, doclet: Doclet, render_context: Dict[str, Any]) -> Path:
        options = self.context.options
        text = self.context.renderer.render(options.template_name, render_context)
        outpath = self.output_path(doclet)
        logger.debug("outpath: %s", outpath)
        outpath.write_text(text, encoding=options.encoding)
        self.context.written.append(outpath)
        return outpath

    @staticmethod
    def _log_doclet(doclet: Doclet) -> None:
        logger.debug("DOCLET: %s %s %s", doclet.kind, doclet.name, doclet.longname)
        if doclet.meta is not None:
            logger.debug("path, filename: %s %s", doclet.meta.path, doclet.meta.filename)
        else:
            logger.debug("[no metadata]")
        for param in _as_entries(doclet.params):
            logger.debug("Param: %s %s %s", param.name, param.type_names, param.description)
        for prop in _as_entries(doclet.properties):
            logger.debug("Property: %s %s %s", prop.name, prop.type_names, prop.description)


def publish(store: DocletStore, options: PublishOptions, tutorials: Any = None) -> None:
    """Render every non-package doclet in ``store`` into ``options.destination``.

    I/O errors propagate; the pass stops at the first one.
    """
    template_dir = Path(options.template) / "tmpl" if options.template else None
    links = LinkRegistry(link_extension=options.link_extension)
    context = PublishContext(
        options=options,
        store=store,
        renderer=TemplateRenderer(template_dir),
        links=links,
    )

    # Claim special filenames before any doclet can take them. "index" is
    # also a valid longname, so it is not registered as a link.
    links.get_unique_filename("index")
    links.register_link("global", links.get_unique_filename("global"))
    links.set_tutorials(tutorials)

    prune(store, include_private=options.include_private)
    store.sort()

    DocletRenderer(context).render_all(store)
    shorten_source_paths(context.source_files)

    logger.info(
        "Wrote %d files to %s (%d doclets, %d source files)",
        len(context.written),
        options.destination,
        len(store),
        len(context.source_files),
    )


def _as_entries(value: Any) -> list[Param]:
    return [entry for entry in value if isinstance(entry, Param)] if isinstance(value, list) else []


__all__ = ["DocletRenderer", "PublishContext", "PublishOptions", "publish"]
