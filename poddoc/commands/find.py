"""Komenda: poddoc find — rekurencyjne wyszukiwanie plików z dokumentacją POD."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text

from pod.locator import find_pod

console = Console()


def run(args: argparse.Namespace) -> None:
    basedir = Path(args.basedir)
    if not basedir.is_dir():
        console.print(f"[red]Katalog nie istnieje:[/red] {basedir}")
        raise SystemExit(1)

    docs = find_pod(basedir, args.subdir, registry=args.registry)

    if args.json:
        data = [
            {
                "path":         str(doc.path),
                "classname":    doc.classname(),
                "instructions": len(doc.instructions()),
            }
            for doc in docs
        ]
        sys.stdout.write(json.dumps(data, ensure_ascii=False, indent=2) + "\n")
        return

    if not docs:
        console.print("[yellow]Nie znaleziono plików z dokumentacją POD.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("PLIK",   no_wrap=False, max_width=70)
    table.add_column("KLASA",  no_wrap=True, style="bold cyan")
    table.add_column("INSTR.", justify="right", no_wrap=True)

    for doc in docs:
        classname = doc.classname()
        name = Text(classname) if classname else Text("—", style="dim")
        table.add_row(Text(str(doc.path)), name, str(len(doc.instructions())))

    total = len(docs)
    console.print()
    console.print(table)
    _pl = "plik" if total == 1 else ("pliki" if 2 <= total % 10 <= 4 and total % 100 not in range(11, 15) else "plików")
    console.print(f"  [dim]{total} {_pl}[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "find",
        help="Wyszukuje rekurencyjnie pliki zawierające POD.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Przeszukuje katalog (opcjonalnie podkatalog względny) i listuje pliki,
w których znaleziono co najmniej jedną instrukcję POD. Pliki i katalogi
zaczynające się od '.' są pomijane.

Przykłady:
  poddoc find .
  poddoc find lib File/POD
  poddoc find src --json
        """,
    )
    p.add_argument(
        "basedir",
        metavar="KATALOG",
        help="Katalog bazowy.",
    )
    p.add_argument(
        "subdir",
        metavar="PODKATALOG",
        nargs="?",
        default="",
        help="Podkatalog względem katalogu bazowego (opcjonalnie).",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Wypisz wynik jako JSON.",
    )
    p.set_defaults(func=run)
