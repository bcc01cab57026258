"""
data_model/documents.py — model instrukcji POD i zależności dokumentu.

Instruction odpowiada jednej instrukcji POD (np. "=head1 NAME"); lista
instrukcji w kolejności pliku tworzy InstructionList.
Dependency to jeden wpis z sekcji "Dependencies", rozwiązany (path) lub nie.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Instruction:
    element: str                  # tag, np. "head1", "over", "item", "back" lub dowolny
    title: str                    # reszta linii po tagu, przycięta (może być pusta)
    content: tuple[str, ...] = () # akapity; wiodący biały znak → blok preformatowany


@dataclass(slots=True)
class Dependency:
    name: str                     # tytuł "=item" bez białych znaków
    path: Path | None = None      # katalog wyszukiwania, w którym znaleziono plik


# Instrukcje w kolejności dokumentu.
InstructionList: TypeAlias = list[Instruction]
