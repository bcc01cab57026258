"""
pod — ekstrakcja dokumentacji POD z komentarzy w kodzie źródłowym.

Publiczne API:
  PodDocument(path)                         dokument (instrukcje, classname, zależności, HTML)
  find_pod(basedir, subdir)                 → list[PodDocument]
  parse_lines(lines, syntax)                → list[Instruction]
  parse_file(path, syntax)                  → list[Instruction]
  SyntaxRegistry, CommentSyntax, ...        adaptery składni komentarzy
  NoSyntaxAdaptersError                     brak adapterów (błąd konfiguracji)
"""

from .syntax import (
    BUILTIN_SYNTAXES,
    CommentSyntax,
    JsSyntax,
    NoSyntaxAdaptersError,
    PerlSyntax,
    PhpSyntax,
    SyntaxRegistry,
    default_registry,
)
from .parser   import parse_file, parse_lines
from .resolver import declared_dependencies, resolve_dependencies
from .document import PodDocument
from .locator  import find_pod

__all__ = [
    "BUILTIN_SYNTAXES",
    "CommentSyntax",
    "JsSyntax",
    "NoSyntaxAdaptersError",
    "PerlSyntax",
    "PhpSyntax",
    "SyntaxRegistry",
    "default_registry",
    "parse_file",
    "parse_lines",
    "declared_dependencies",
    "resolve_dependencies",
    "PodDocument",
    "find_pod",
]
