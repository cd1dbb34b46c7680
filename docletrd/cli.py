"""CLI entrypoints for docletrd commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from jinja2 import TemplateError

from .config import CONFIG_FILENAME, ConfigError, load_config
from .logging import configure_logging
from .publisher import PublishOptions, publish
from .store import DocletError, DocletStore


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Log every doclet processed (debug output).",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docletrd",
        description="Render parsed doclets into Rd documentation pages.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report warnings and errors.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write a full debug log to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    publish_parser = subparsers.add_parser(
        "publish",
        help="Write one Rd file per doclet in a JSON doclet dump.",
    )
    _add_verbose_option(publish_parser, suppress_default=True)
    publish_parser.add_argument(
        "input",
        type=Path,
        help="JSON array of doclets (for example the output of `jsdoc -X`).",
    )
    publish_parser.add_argument(
        "-d",
        "--destination",
        type=Path,
        default=Path("man"),
        help="Output directory for Rd files (defaults to ./man).",
    )
    publish_parser.add_argument(
        "-t",
        "--template",
        type=Path,
        default=None,
        help="Template directory; templates are looked up in its tmpl/ subdirectory.",
    )
    publish_parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("."),
        help=f"Path to {CONFIG_FILENAME} or the directory holding it.",
    )
    publish_parser.add_argument(
        "--private",
        action="store_true",
        default=None,
        help="Include doclets marked private.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docletrd commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = configure_logging(
        verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
    )

    if args.command == "publish":
        try:
            config = load_config(args.config)
            store = DocletStore.from_json(args.input)
        except (ConfigError, DocletError) as exc:
            parser.exit(1, f"{exc}\n")
        except OSError as exc:
            parser.exit(1, f"docletrd publish failed: {exc}\n")

        include_private = config.include_private if args.private is None else args.private
        options = PublishOptions(
            destination=args.destination,
            template=args.template or config.template_dir,
            extension=config.extension,
            encoding=config.encoding,
            link_extension=config.link_extension,
            include_private=include_private,
        )
        try:
            publish(store, options)
        except (OSError, TemplateError) as exc:
            logger.debug("publish aborted", exc_info=True)
            parser.exit(1, f"docletrd publish failed: {exc}\nRun with --verbose for more details.\n")
        print(f"Rd files written to {_relativize(args.destination)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
