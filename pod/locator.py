"""pod/locator.py — rekurencyjne wyszukiwanie plików zawierających POD."""

from __future__ import annotations

import logging
from pathlib import Path

from pod.document import PodDocument
from pod.syntax import SyntaxRegistry, default_registry

logger = logging.getLogger(__name__)


def find_pod(
    basedir: str | Path,
    subdir: str | Path = "",
    registry: SyntaxRegistry | None = None,
) -> list[PodDocument]:
    """
    Przeszukuje basedir/subdir rekurencyjnie i zwraca dokumenty z niepustą
    listą instrukcji, posortowane rosnąco po ścieżce.

    Pomija wpisy zaczynające się od '.' (ukryte pliki i katalogi).
    """
    registry = registry or default_registry()
    found = _walk(Path(basedir) / subdir, registry)
    found.sort(key=lambda doc: str(doc.path))
    return found


def _walk(directory: Path, registry: SyntaxRegistry) -> list[PodDocument]:
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        logger.debug("Nie można odczytać katalogu %s: %s", directory, e)
        return []

    docs: list[PodDocument] = []
    for entry in entries:
        if entry.name.startswith("."):
            continue
        if entry.is_dir():
            docs.extend(_walk(entry, registry))
        elif entry.is_file():
            doc = PodDocument(entry, registry=registry)
            if doc.instructions():
                docs.append(doc)
    return docs
