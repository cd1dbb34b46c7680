"""CLI behaviour tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from docletrd.cli import _build_parser, main


def test_cli_accepts_verbose_before_and_after_command() -> None:
    parser = _build_parser()
    before = parser.parse_args(["--verbose", "publish", "doclets.json"])
    after = parser.parse_args(["publish", "doclets.json", "--verbose"])
    assert before.verbose is True
    assert after.verbose is True
    assert after.command == "publish"


def test_cli_publish_defaults() -> None:
    args = _build_parser().parse_args(["publish", "doclets.json"])
    assert args.input == Path("doclets.json")
    assert args.destination == Path("man")
    assert args.template is None
    assert args.private is None


def test_cli_publish_writes_files(doclet_builder, tmp_path: Path, capsys) -> None:
    doclet_builder.add("alpha")
    doclet_builder.add("hidden", access="private")
    dump = doclet_builder.write()
    out = tmp_path / "man"

    main(["publish", str(dump), "-d", str(out), "-c", str(tmp_path)])

    assert sorted(path.name for path in out.iterdir()) == ["alpha.Rd"]
    assert "Rd files written to" in capsys.readouterr().out


def test_cli_private_flag_overrides_config(doclet_builder, tmp_path: Path) -> None:
    doclet_builder.add("hidden", access="private")
    dump = doclet_builder.write()
    out = tmp_path / "man"

    main(["publish", str(dump), "-d", str(out), "-c", str(tmp_path), "--private"])

    assert (out / "hidden.Rd").exists()


def test_cli_uses_config_extension(doclet_builder, tmp_path: Path) -> None:
    (tmp_path / ".docletrd.yml").write_text("templates:\n  rd:\n    extension: .txt\n", encoding="utf-8")
    doclet_builder.add("alpha")
    dump = doclet_builder.write()
    out = tmp_path / "man"

    main(["publish", str(dump), "-d", str(out), "-c", str(tmp_path)])

    assert (out / "alpha.txt").exists()


def test_cli_reports_invalid_dump(tmp_path: Path, capsys) -> None:
    dump = tmp_path / "doclets.json"
    dump.write_text("{}", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["publish", str(dump), "-c", str(tmp_path)])

    assert excinfo.value.code == 1
    assert "JSON array" in capsys.readouterr().err


def test_cli_reports_non_utf8_dump(tmp_path: Path, capsys) -> None:
    dump = tmp_path / "doclets.json"
    dump.write_bytes(b'[{"name": "\xff"}]')

    with pytest.raises(SystemExit) as excinfo:
        main(["publish", str(dump), "-d", str(tmp_path / "man"), "-c", str(tmp_path)])

    assert excinfo.value.code == 1
    assert "Failed to parse doclets.json" in capsys.readouterr().err
    assert not (tmp_path / "man").exists()


def test_cli_reports_missing_input(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["publish", str(tmp_path / "absent.json"), "-c", str(tmp_path)])

    assert excinfo.value.code == 1
    assert "docletrd publish failed" in capsys.readouterr().err


def test_cli_reports_write_failures(doclet_builder, tmp_path: Path, capsys) -> None:
    doclet_builder.add("alpha")
    dump = doclet_builder.write()
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["publish", str(dump), "-d", str(blocker), "-c", str(tmp_path)])

    assert excinfo.value.code == 1
    assert "docletrd publish failed" in capsys.readouterr().err


def test_cli_verbose_enables_debug_logging(doclet_builder, tmp_path: Path) -> None:
    doclet_builder.add("alpha")
    dump = doclet_builder.write()

    main(["-v", "publish", str(dump), "-d", str(tmp_path / "man"), "-c", str(tmp_path)])

    assert logging.getLogger("docletrd").level == logging.DEBUG
