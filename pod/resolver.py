"""
pod/resolver.py — rozwiązywanie zależności zadeklarowanych w sekcji "Dependencies".

Sekcja zależności to instrukcje pomiędzy nagłówkiem o tytule "Dependencies"
(wielkość liter bez znaczenia) a najbliższym "=back" lub kolejnym nagłówkiem.
Każdy "=item" w sekcji to jedna zależność.

Rekurencja idzie przez open_document(root, name).dependencies(...), z jednym
zbiorem odwiedzonych nazw (ignore) współdzielonym przez całe wywołanie.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from data_model.documents import Dependency, InstructionList

if TYPE_CHECKING:
    from pod.document import PodDocument

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s")

_SECTION_TITLE = "dependencies"
_NONE_SENTINEL = "none"


def is_heading(element: str) -> bool:
    return element.lower().startswith("head")


def normalise_name(title: str) -> str:
    """Usuwa wszystkie białe znaki z tytułu "=item"."""
    return _WHITESPACE_RE.sub("", title)


def declared_dependencies(instructions: InstructionList) -> list[str]:
    """Zwraca surowe (znormalizowane) nazwy z sekcji zależności, bez rekurencji."""
    names: list[str] = []
    in_dependencies = False
    for inst in instructions:
        if not in_dependencies and is_heading(inst.element) and inst.title.lower() == _SECTION_TITLE:
            in_dependencies = True
        elif in_dependencies and (inst.element == "back" or is_heading(inst.element)):
            in_dependencies = False
        elif in_dependencies and inst.element == "item":
            names.append(normalise_name(inst.title))
    return names


def resolve_dependencies(
    instructions: InstructionList,
    search_roots: Sequence[Path],
    open_document: Callable[[Path, str], PodDocument],
    ignore: set[str],
) -> list[Dependency]:
    """
    Zwraca przechodnią, spłaszczoną listę zależności w kolejności odkrycia.

    Args:
        instructions:  Instrukcje bieżącego dokumentu.
        search_roots:  Katalogi przeszukiwane w podanej kolejności.
        open_document: Fabryka dokumentu dla (katalog, nazwa).
        ignore:        Zbiór odwiedzonych nazw; modyfikowany w miejscu.

    Nazwa już odwiedzona albo "none" jest pomijana (bez rekurencji).
    Nazwa nierozwiązana trafia do wyniku bez path.
    """
    result: list[Dependency] = []

    for name in declared_dependencies(instructions):
        if name in ignore:
            logger.debug("Zależność %s już odwiedzona, pomijam", name)
            continue
        if name.lower() == _NONE_SENTINEL:
            continue
        ignore.add(name)

        dep = Dependency(name=name)
        result.append(dep)

        for root in search_roots:
            doc = open_document(root, name)
            if not doc.exists():
                continue
            if dep.path is None:
                dep.path = root
            # zależności przechodnie trafiają bezpośrednio za bieżący wpis
            result.extend(doc.dependencies(search_roots, ignore))

        if dep.path is None:
            logger.debug("Nie znaleziono pliku dla zależności %s", name)

    return result
