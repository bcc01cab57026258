"""Ustawienia poddoc — konfiguracja przez zmienne środowiskowe (opcjonalnie plik .env)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from pod.syntax import SyntaxRegistry

_ENV_SEARCH_PATHS = "PODDOC_SEARCH_PATHS"
_ENV_SYNTAXES     = "PODDOC_SYNTAXES"
_ENV_NOCONTENTS   = "PODDOC_NOCONTENTS"
_ENV_LOG_LEVEL    = "PODDOC_LOG_LEVEL"


@dataclass(slots=True)
class Settings:
    search_paths: list[Path] = field(default_factory=list)
    syntaxes: list[str] | None = None     # None → wszystkie wbudowane adaptery
    nocontents: bool = False
    log_level: int = logging.WARNING

    def registry(self) -> SyntaxRegistry:
        return SyntaxRegistry.from_names(self.syntaxes)


def _parse_level(name: str | None) -> int:
    if not name:
        return logging.WARNING
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Nieznany poziom logowania w {_ENV_LOG_LEVEL}: '{name}'")
    return level


def load_settings(dotenv: bool = True) -> Settings:
    """Czyta ustawienia ze środowiska; .env z bieżącego katalogu nie nadpisuje zmiennych."""
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    raw_paths = os.getenv(_ENV_SEARCH_PATHS, "")
    raw_syntaxes = os.getenv(_ENV_SYNTAXES)

    return Settings(
        search_paths = [Path(p) for p in raw_paths.split(os.pathsep) if p],
        syntaxes     = raw_syntaxes.split(",") if raw_syntaxes is not None else None,
        nocontents   = _ENV_NOCONTENTS in os.environ,
        log_level    = _parse_level(os.getenv(_ENV_LOG_LEVEL)),
    )
