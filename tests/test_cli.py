"""Testy poddoc.cli — komendy html, deps, find, parse."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from poddoc.cli import build_parser, main

WIDGET = """<?php
/*=head1 NAME
Widget

=head1 DEPENDENCIES
=over
=item Gadget
=back
=cut*/
"""

GADGET = "<?php\n/*=head1 NAME\nGadget\n=cut*/\n"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("PODDOC_SEARCH_PATHS", "PODDOC_SYNTAXES", "PODDOC_NOCONTENTS", "PODDOC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "Widget.php").write_text(WIDGET, encoding="utf-8")
    (tmp_path / "src" / "Gadget.php").write_text(GADGET, encoding="utf-8")
    return tmp_path


def test_build_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_html_to_stdout(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["html", str(project / "src" / "Widget.php")])

    out = capsys.readouterr().out
    assert out.startswith("<h1>CONTENTS</h1>")
    assert "<ul><li>Gadget</li></ul>" in out


def test_html_nocontents_from_env(
    project: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PODDOC_NOCONTENTS", "")
    main(["html", str(project / "src" / "Widget.php")])

    assert capsys.readouterr().out.startswith('<h1 id="POD_NAME">NAME</h1>')


def test_html_to_file(project: Path) -> None:
    out_file = project / "widget.html"
    main(["html", str(project / "src" / "Widget.php"), "--nocontents", "--out", str(out_file)])

    assert out_file.read_text(encoding="utf-8").startswith('<h1 id="POD_NAME">')


def test_deps_json(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = project / "src"
    main(["deps", str(src / "Widget.php"), "--path", str(src), "--json"])

    data = json.loads(capsys.readouterr().out)
    assert data == [{"name": "Gadget", "path": str(src)}]


def test_deps_search_paths_from_env(
    project: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    src = project / "src"
    monkeypatch.setenv("PODDOC_SEARCH_PATHS", str(src))
    main(["deps", str(src / "Widget.php"), "--json"])

    assert json.loads(capsys.readouterr().out) == [{"name": "Gadget", "path": str(src)}]


def test_find_json(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["find", str(project), "src", "--json"])

    data = json.loads(capsys.readouterr().out)
    assert [(Path(d["path"]).name, d["classname"]) for d in data] == [
        ("Gadget.php", "Gadget"),
        ("Widget.php", "Widget"),
    ]


def test_parse_json(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["parse", str(project / "src" / "Gadget.php"), "--json"])

    data = json.loads(capsys.readouterr().out)
    assert data == [{"element": "head1", "title": "NAME", "content": ["Gadget\n"]}]


def test_parse_table_output(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["parse", str(project / "src" / "Widget.php")])

    out = capsys.readouterr().out
    assert "DEPENDENCIES" in out
    assert "Widget" in out


def test_missing_file_exits_with_error(project: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["html", str(project / "nope.php")])

    assert exc.value.code == 1


def test_unknown_syntax_in_env_is_fatal(project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PODDOC_SYNTAXES", "cobol")

    with pytest.raises(SystemExit) as exc:
        main(["parse", str(project / "src" / "Widget.php")])

    assert exc.value.code == 1
