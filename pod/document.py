"""
pod/document.py — dokument POD: jeden plik źródłowy i stan z niego wyprowadzony.

PodDocument trzyma cały stan pochodny (instrukcje, nazwa klasy, zależności,
przypisany adapter) w jednym rekordzie _DocumentState. Zmiana ścieżki
(set_path) podmienia rekord na nowy, więc wszystkie cache są wtedy puste.

Publiczne API:
  PodDocument(path, registry=None)
  PodDocument.for_class(root, classname, extension, registry=None)
  doc.instructions() / doc.classname() / doc.dependencies(roots) / doc.to_html()
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from data_model.documents import Dependency, InstructionList
from html_render.renderer import pod_to_html
from pod.parser import parse_file
from pod.resolver import is_heading, resolve_dependencies
from pod.syntax import CommentSyntax, SyntaxRegistry, default_registry

_NAME_TITLE = "name"


@dataclass(slots=True)
class _DocumentState:
    path: Path | None
    syntax: CommentSyntax | None = None
    instructions: InstructionList | None = None
    classname: str | None = None
    # klucz: krotka katalogów wyszukiwania
    dependencies: dict[tuple[Path, ...], list[Dependency]] = field(default_factory=dict)


class PodDocument:
    """Plik źródłowy z osadzoną dokumentacją POD."""

    def __init__(self, path: str | Path | None = None, registry: SyntaxRegistry | None = None) -> None:
        self.registry = registry or default_registry()
        self._state = _DocumentState(path=Path(path) if path else None)

    @classmethod
    def for_class(
        cls,
        root: str | Path,
        classname: str,
        extension: str,
        registry: SyntaxRegistry | None = None,
    ) -> PodDocument:
        """Dokument dla klasy `classname` w katalogu `root`, wg konwencji adaptera."""
        registry = registry or default_registry()
        syntax = registry.for_extension(extension)
        doc = cls(Path(root) / syntax.name_to_relative_path(classname), registry=registry)
        doc._state.syntax = syntax
        return doc

    def __repr__(self) -> str:
        return f"PodDocument({str(self._state.path)!r})"

    # -----------------------------------------------------------------------
    # Plik
    # -----------------------------------------------------------------------

    @property
    def path(self) -> Path | None:
        return self._state.path

    def set_path(self, path: str | Path) -> None:
        # nowy plik = nowy stan (ew. z innym adapterem)
        self._state = _DocumentState(path=Path(path))

    def exists(self) -> bool:
        return self._state.path is not None and self._state.path.is_file()

    def full_path(self) -> str:
        return str(self._state.path.absolute()) if self._state.path else ""

    def extension(self) -> str:
        return self._state.path.suffix.lstrip(".").lower() if self._state.path else ""

    # -----------------------------------------------------------------------
    # Adapter składni
    # -----------------------------------------------------------------------

    def syntax(self, refresh: bool = False) -> CommentSyntax:
        """Adapter dla bieżącego pliku (wg rozszerzenia); refresh wymusza ponowny wybór."""
        if refresh or self._state.syntax is None:
            self._state.syntax = self.registry.for_extension(self.extension())
        return self._state.syntax

    def set_syntax(self, extension: str) -> None:
        """Wymusza adapter dla podanego rozszerzenia (fallback: adapter domyślny)."""
        self._state.syntax = self.registry.for_extension(extension)
        self._state.instructions = None
        self._state.classname = None
        self._state.dependencies.clear()

    # -----------------------------------------------------------------------
    # Stan pochodny
    # -----------------------------------------------------------------------

    def parse(self) -> InstructionList:
        """Parsuje plik (zawsze od nowa) i zapisuje wynik w cache."""
        if self._state.path is None:
            self._state.instructions = []
        else:
            self._state.instructions = parse_file(self._state.path, self.syntax())
        return self._state.instructions

    def instructions(self) -> InstructionList:
        if self._state.instructions is None:
            self.parse()
        return self._state.instructions

    def classname(self) -> str | None:
        """Pierwszy akapit pod nagłówkiem "NAME" albo None."""
        if self._state.classname is None:
            for inst in self.instructions():
                if is_heading(inst.element) and inst.title.lower() == _NAME_TITLE:
                    if inst.content:
                        self._state.classname = inst.content[0].strip()
                    break
        return self._state.classname

    def dependencies(
        self,
        search_roots: Sequence[str | Path] = (),
        ignore: set[str] | None = None,
    ) -> list[Dependency]:
        """
        Przechodnia lista zależności z sekcji "Dependencies".

        Args:
            search_roots: Katalogi, w których szukane są pliki zależności.
            ignore:       Zbiór odwiedzonych nazw (współdzielony w rekurencji).
                          None → nowy, pusty zbiór i wynik zapisany w cache.
        """
        roots = tuple(Path(r) for r in search_roots)
        top_level = ignore is None
        if top_level and roots in self._state.dependencies:
            return list(self._state.dependencies[roots])

        extension = self.extension()

        def open_document(root: Path, name: str) -> PodDocument:
            return PodDocument.for_class(root, name, extension, registry=self.registry)

        deps = resolve_dependencies(
            self.instructions(),
            roots,
            open_document,
            set() if ignore is None else ignore,
        )
        if top_level:
            self._state.dependencies[roots] = deps
        return list(deps)

    def to_html(self, options: Mapping[str, Any] | None = None) -> str:
        """Renderuje dokumentację do fragmentu HTML (patrz html_render)."""
        return pod_to_html(self.instructions(), options)
