"""Otwieranie dokumentu wskazanego w argumentach komendy."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from pod.document import PodDocument
from pod.syntax import SyntaxRegistry


def open_document(file_arg: str, registry: SyntaxRegistry, console: Console) -> PodDocument:
    """Zwraca PodDocument dla file_arg; brak pliku → komunikat i SystemExit(1)."""
    path = Path(file_arg)
    if not path.is_file():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)
    return PodDocument(path, registry=registry)
