"""Komenda: poddoc deps — przechodnie zależności z sekcji "Dependencies"."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text

from data_model.documents import Dependency
from poddoc._docs import open_document

console = Console()


def _to_json(deps: list[Dependency]) -> str:
    data = [
        {**asdict(d), "path": str(d.path) if d.path is not None else None}
        for d in deps
    ]
    return json.dumps(data, ensure_ascii=False, indent=2)


def run(args: argparse.Namespace) -> None:
    doc = open_document(args.file, args.registry, console)
    roots = [Path(p) for p in args.path] if args.path else args.settings.search_paths

    deps = doc.dependencies(roots)

    if args.json:
        sys.stdout.write(_to_json(deps) + "\n")
        return

    if not deps:
        console.print("[yellow]Brak zależności.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",     justify="right", no_wrap=True, style="dim")
    table.add_column("NAZWA", no_wrap=True, style="bold cyan")
    table.add_column("KATALOG", no_wrap=False, max_width=60)

    for i, dep in enumerate(deps, start=1):
        where = Text(str(dep.path)) if dep.path is not None else Text("nie znaleziono", style="red")
        table.add_row(str(i), Text(dep.name), where)

    unresolved = sum(1 for d in deps if d.path is None)
    console.print()
    console.print(table)
    console.print(f"  [dim]{len(deps)} zależności, nierozwiązanych: {unresolved}[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "deps",
        help="Rozwiązuje zależności z sekcji \"Dependencies\" (przechodnio).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Czyta sekcję "Dependencies" z POD pliku i szuka plików zależności
w podanych katalogach; zależności znalezionych plików są rozwiązywane
rekurencyjnie (każda nazwa najwyżej raz).

Przykłady:
  poddoc deps File/POD.php --path lib/ --path vendor/
  poddoc deps widget.js --json
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Ścieżka do pliku źródłowego.",
    )
    p.add_argument(
        "--path", "-p",
        action="append",
        metavar="KATALOG",
        default=None,
        help="Katalog wyszukiwania (można podać wielokrotnie; domyślnie PODDOC_SEARCH_PATHS).",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Wypisz wynik jako JSON.",
    )
    p.set_defaults(func=run)
