"""Komenda: poddoc parse — podgląd listy instrukcji POD pliku."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text

from poddoc._docs import open_document

console = Console()


def _preview(paragraph: str, max_len: int = 60) -> str:
    text = " ".join(paragraph.split())
    return text if len(text) <= max_len else text[:max_len] + "…"


def run(args: argparse.Namespace) -> None:
    doc = open_document(args.file, args.registry, console)
    instructions = doc.instructions()

    if args.json:
        data = [asdict(inst) for inst in instructions]
        sys.stdout.write(json.dumps(data, ensure_ascii=False, indent=2) + "\n")
        return

    if not instructions:
        console.print(f"[yellow]Brak dokumentacji POD w pliku:[/yellow] {doc.path}")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",       justify="right", no_wrap=True, style="dim")
    table.add_column("ELEMENT", no_wrap=True, style="bold cyan")
    table.add_column("TYTUŁ",   no_wrap=False, max_width=40)
    table.add_column("AKAPITY", justify="right", no_wrap=True)
    table.add_column("TREŚĆ",   no_wrap=False, max_width=60)

    for i, inst in enumerate(instructions, start=1):
        first = Text(_preview(inst.content[0])) if inst.content else Text("—", style="dim")
        table.add_row(str(i), inst.element, Text(inst.title), str(len(inst.content)), first)

    console.print()
    console.print(table)
    classname = doc.classname()
    if classname:
        console.print(Text.assemble(("  NAME: ", "dim"), (classname, "bold")))
    console.print(f"  [dim]{len(instructions)} instrukcji[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Wyświetla listę instrukcji POD pliku.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje plik źródłowy i wyświetla wyciągnięte instrukcje POD
(element, tytuł, liczba akapitów, początek treści).

Przykłady:
  poddoc parse File/POD.php
  poddoc parse File/POD.php --json
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Ścieżka do pliku źródłowego.",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Wypisz instrukcje jako JSON.",
    )
    p.set_defaults(func=run)
