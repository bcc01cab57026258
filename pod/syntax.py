"""
pod/syntax.py — adaptery składni komentarzy dla poszczególnych języków.

Każdy adapter (CommentSyntax i podklasy) odpowiada za:
  - supported_extensions()   : rozszerzenia plików obsługiwane przez adapter
  - strip_comment_lead_in()  : usunięcie znacznika komentarza z początku linii
  - classify()               : rozpoznanie linii-instrukcji "=tag tytuł"
  - name_to_relative_path()  : nazwa klasy/modułu → względna ścieżka pliku

Sam CommentSyntax jest adapterem domyślnym (bez usuwania komentarzy).
SyntaxRegistry mapuje rozszerzenie (małymi literami) → adapter; budowany raz,
potem tylko do odczytu.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable
from pathlib import Path

# Linia-instrukcja: "=" + tag (znaki słowne) + opcjonalny tytuł.
_INSTRUCTION_RE = re.compile(r"^=(\w+)\s*(.*?)\s*$")


class NoSyntaxAdaptersError(RuntimeError):
    """Brak jakiegokolwiek adaptera składni (błąd konfiguracji)."""


class CommentSyntax:
    """Adapter domyślny; bazowa klasa dla adapterów konkretnych języków."""

    name = "default"
    extensions: tuple[str, ...] = ()

    def supported_extensions(self) -> set[str]:
        return {ext.lower() for ext in self.extensions}

    def classify(self, line: str) -> tuple[str, str] | None:
        """Zwraca (tag, tytuł) dla linii-instrukcji albo None."""
        m = _INSTRUCTION_RE.match(line)
        if m:
            return m.group(1), m.group(2).strip()
        return None

    def strip_comment_lead_in(self, line: str) -> str:
        return line

    def name_to_relative_path(self, identifier: str) -> str:
        return identifier

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class PhpSyntax(CommentSyntax):
    """PHP: komentarze '/*', '//' lub '#'; przestrzenie nazw z '\\'."""

    name = "php"
    extensions = ("php",)

    _LEAD_IN_RE = re.compile(r"^(/\*|//|#)")

    def strip_comment_lead_in(self, line: str) -> str:
        return self._LEAD_IN_RE.sub("", line, count=1)

    def name_to_relative_path(self, identifier: str) -> str:
        return identifier.replace("\\", "/") + ".php"


class JsSyntax(CommentSyntax):
    """JavaScript: komentarze '//' lub '/*'; moduły rozdzielane kropką."""

    name = "js"
    extensions = ("js",)

    _LEAD_IN_RE = re.compile(r"^(//|/\*)")

    def strip_comment_lead_in(self, line: str) -> str:
        return self._LEAD_IN_RE.sub("", line, count=1)

    def name_to_relative_path(self, identifier: str) -> str:
        return identifier.replace(".", "/") + ".js"


class PerlSyntax(CommentSyntax):
    """Perl: POD jest natywny (bez komentarzy); pakiety rozdzielane '::'."""

    name = "perl"
    extensions = ("pl", "pm")

    def name_to_relative_path(self, identifier: str) -> str:
        return identifier.replace("::", "/") + ".pm"


BUILTIN_SYNTAXES: dict[str, type[CommentSyntax]] = {
    "php":  PhpSyntax,
    "js":   JsSyntax,
    "perl": PerlSyntax,
}


class SyntaxRegistry:
    """Statyczny rejestr: rozszerzenie → adapter (plus adapter domyślny)."""

    def __init__(
        self,
        syntaxes: Iterable[CommentSyntax],
        default: CommentSyntax | None = None,
    ) -> None:
        self._by_ext: dict[str, CommentSyntax] = {}
        for syntax in syntaxes:
            for ext in syntax.supported_extensions():
                self._by_ext[ext] = syntax
        self.default = default
        if not self._by_ext and self.default is None:
            raise NoSyntaxAdaptersError("Nie znaleziono żadnego adaptera składni POD.")

    @classmethod
    def from_names(cls, names: Iterable[str] | None = None) -> SyntaxRegistry:
        """
        Buduje rejestr z wbudowanych adapterów.

        names=None → wszystkie adaptery z BUILTIN_SYNTAXES.
        Nieznana nazwa → ValueError.
        """
        selected = list(BUILTIN_SYNTAXES) if names is None else [n.strip().lower() for n in names if n.strip()]
        unknown = [n for n in selected if n not in BUILTIN_SYNTAXES]
        if unknown:
            raise ValueError(
                f"Nieznane adaptery składni: {', '.join(unknown)} "
                f"(dostępne: {', '.join(BUILTIN_SYNTAXES)})"
            )
        return cls((BUILTIN_SYNTAXES[n]() for n in selected), default=CommentSyntax())

    def for_extension(self, extension: str) -> CommentSyntax:
        syntax = self._by_ext.get(extension.lower().lstrip("."))
        if syntax is not None:
            return syntax
        if self.default is None:
            raise NoSyntaxAdaptersError(f"Brak adaptera dla rozszerzenia '{extension}'.")
        return self.default

    def for_path(self, path: str | Path) -> CommentSyntax:
        return self.for_extension(Path(path).suffix)

    def extensions(self) -> set[str]:
        return set(self._by_ext)


@functools.lru_cache(maxsize=1)
def default_registry() -> SyntaxRegistry:
    """Zwraca (i cache'uje) rejestr ze wszystkimi wbudowanymi adapterami."""
    return SyntaxRegistry.from_names()
