"""
pod/parser.py — ekstrakcja instrukcji POD z komentarzy w kodzie źródłowym.

Architektura:
  plik → linie → syntax.strip_comment_lead_in() → syntax.classify()
  → automat (in_pod, new_paragraph) → lista Instruction

Kluczowe funkcje publiczne:
  parse_lines(lines, syntax) -> InstructionList
  parse_file(path, syntax)   -> InstructionList
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from data_model.documents import Instruction, InstructionList
from pod.syntax import CommentSyntax

logger = logging.getLogger(__name__)

_BLANK_RE = re.compile(r"^\s*$")

_CUT = "cut"


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def parse_lines(lines: Iterable[str], syntax: CommentSyntax) -> InstructionList:
    """
    Przechodzi linie jeden raz i zwraca listę instrukcji w kolejności pliku.

    Linie są przekazywane wraz z terminatorami; kolejne linie akapitu są
    sklejane bez separatora. Niezamknięty blok na końcu wejścia jest
    akceptowany bez błędu.
    """
    # (element, title, akapity); akapity zamrażane dopiero na końcu
    pending: list[tuple[str, str, list[str]]] = []
    in_pod = False
    new_paragraph = False

    for raw in lines:
        line = syntax.strip_comment_lead_in(raw)
        matched = syntax.classify(line)
        if matched:
            element, title = matched
            in_pod = element != _CUT
            if not in_pod:
                continue
            pending.append((element, title, []))
            new_paragraph = True
        elif in_pod and _BLANK_RE.match(line):
            new_paragraph = True
        elif in_pod and new_paragraph:
            pending[-1][2].append(line)
            new_paragraph = False
        elif in_pod:
            paragraphs = pending[-1][2]
            paragraphs[-1] += line

    return [Instruction(element, title, tuple(paras)) for element, title, paras in pending]


def parse_file(path: str | Path, syntax: CommentSyntax) -> InstructionList:
    """
    Parsuje plik źródłowy. Zwraca pustą listę, gdy ścieżka nie jest zwykłym
    plikiem lub nie da się go odczytać.
    """
    path = Path(path)
    if not path.is_file():
        logger.debug("Pomijam %s: to nie jest zwykły plik", path)
        return []
    try:
        with path.open(encoding="utf-8", errors="replace") as fh:
            return parse_lines(fh, syntax)
    except OSError as e:
        logger.debug("Nie można odczytać %s: %s", path, e)
        return []
