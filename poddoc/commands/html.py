"""Komenda: poddoc html — renderowanie dokumentacji POD do fragmentu HTML."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console

from poddoc._docs import open_document

# stdout zarezerwowany na HTML
console = Console(stderr=True)


def run(args: argparse.Namespace) -> None:
    doc = open_document(args.file, args.registry, console)

    if not doc.instructions():
        console.print(f"[yellow]Brak dokumentacji POD w pliku:[/yellow] {doc.path}")
        return

    options: dict[str, bool] = {}
    if args.nocontents or args.settings.nocontents:
        options["nocontents"] = True

    html = doc.to_html(options)

    if args.out:
        out_path = Path(args.out)
        out_path.write_text(html, encoding="utf-8")
        console.print(f"[green]HTML:[/green] {out_path}  ({len(doc.instructions())} instrukcji)")
    else:
        sys.stdout.write(html + "\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "html",
        help="Renderuje dokumentację POD pliku do fragmentu HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyciąga POD z komentarzy pliku źródłowego i renderuje go jako fragment HTML
(bez <html>/<head>), domyślnie poprzedzony spisem treści.

Przykłady:
  poddoc html File/POD.php
  poddoc html File/POD.php --nocontents
  poddoc html lib/widget.js --out widget.html
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Ścieżka do pliku źródłowego.",
    )
    p.add_argument(
        "--nocontents",
        action="store_true",
        help="Pomiń spis treści na początku HTML.",
    )
    p.add_argument(
        "--out", "-o",
        metavar="PLIK.html",
        default=None,
        help="Zapisz HTML do pliku zamiast na stdout.",
    )
    p.set_defaults(func=run)
