"""
poddoc — narzędzie CLI do dokumentacji POD osadzonej w kodzie źródłowym.

Użycie:
  poddoc [--verbose] <komenda> [opcje]

Komendy:
  html    Renderuje dokumentację POD pliku do fragmentu HTML.
  deps    Rozwiązuje zależności z sekcji "Dependencies" (przechodnio).
  find    Wyszukuje rekurencyjnie pliki zawierające POD.
  parse   Wyświetla listę instrukcji POD pliku.

Zmienne środowiskowe (także z pliku .env):
  PODDOC_SEARCH_PATHS   domyślne katalogi wyszukiwania zależności (sep. os.pathsep)
  PODDOC_SYNTAXES       włączone adaptery składni, np. "php,js"
  PODDOC_NOCONTENTS     jeśli ustawiona, HTML bez spisu treści
  PODDOC_LOG_LEVEL      poziom logowania (DEBUG, INFO, WARNING, ...)
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

# Konsola Windows (cp1252) psuje polskie znaki w pomocy argparse i w tabelach.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from pod.syntax import NoSyntaxAdaptersError
from poddoc._config import load_settings
from poddoc.commands import html as cmd_html
from poddoc.commands import deps as cmd_deps
from poddoc.commands import find as cmd_find
from poddoc.commands import parse as cmd_parse

console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poddoc",
        description="poddoc — dokumentacja POD z komentarzy w kodzie źródłowym.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="poddoc 0.1.0"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Włącz logowanie diagnostyczne (DEBUG) na stderr.",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_html.add_parser(subparsers)
    cmd_deps.add_parser(subparsers)
    cmd_find.add_parser(subparsers)
    cmd_parse.add_parser(subparsers)

    return parser


def _setup_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        args.settings = settings
        args.registry = settings.registry()
    except (ValueError, NoSyntaxAdaptersError) as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    _setup_logging(logging.DEBUG if args.verbose else settings.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
