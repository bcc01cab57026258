"""html_render/renderer.py — renderowanie listy instrukcji POD do fragmentu HTML."""

from __future__ import annotations

import html
import re
from collections.abc import Mapping
from typing import Any

from data_model.documents import Instruction, InstructionList

_HEADING_RE = re.compile(r"^head(\d)$")

# Otwarte zakresy list: kontener → element
_LIST_TAGS = {"dl", "ul"}
_ITEM_TAGS = {"dd", "li"}

_CONTENTS_HEADER = "<h1>CONTENTS</h1>"
_ANCHOR_PREFIX = "POD_"


def _escape(text: str) -> str:
    return html.escape(text, quote=True)


def _anchor(title: str) -> str:
    return _ANCHOR_PREFIX + _escape(title)


def plan_list_flavours(instructions: InstructionList) -> list[str | None]:
    """
    Dla każdego "=over" wybiera rodzaj listy z wyprzedzeniem.

    "dl" gdy następna instrukcja to "=item" z niepustym tytułem i treścią,
    w pozostałych przypadkach "ul". Dla innych instrukcji None.
    """
    flavours: list[str | None] = []
    for i, inst in enumerate(instructions):
        if inst.element != "over":
            flavours.append(None)
            continue
        nxt = instructions[i + 1] if i + 1 < len(instructions) else None
        is_definition = nxt is not None and nxt.element == "item" and bool(nxt.title) and bool(nxt.content)
        flavours.append("dl" if is_definition else "ul")
    return flavours


def content_to_html(content: tuple[str, ...] | list[str]) -> str:
    """Akapit z wiodącym białym znakiem → <code>, pozostałe → <p> z <br>."""
    out: list[str] = []
    for para in content:
        text = para.rstrip("\r\n")
        if para[:1].isspace():
            out.append("<code>" + _escape(text) + "</code>")
        else:
            out.append("<p>" + _escape(text).replace("\n", "<br>") + "</p>")
    return "".join(out)


def render_contents_and_body(instructions: InstructionList) -> tuple[str, str]:
    """
    Zwraca (spis treści, treść) dla listy instrukcji.

    Zagnieżdżenie list odtwarzane jest na stosie otwartych tagów; zdejmowanie
    z pustego stosu nic nie robi, więc błędne "=item"/"=back" dają po prostu
    brakujące tagi zamykające.
    """
    flavours = plan_list_flavours(instructions)
    nesting: list[str] = []
    body: list[str] = []
    contents: list[str] = [_CONTENTS_HEADER]
    content_indent = 0

    def last_nested() -> str:
        return nesting[-1] if nesting else ""

    def close_if(tags: set[str]) -> None:
        if last_nested() in tags:
            body.append("</" + nesting.pop() + ">")

    for inst, flavour in zip(instructions, flavours):
        heading = _HEADING_RE.match(inst.element)
        if heading:
            level = int(heading.group(1))
            title = _escape(inst.title)
            body.append(f'<h{level} id="{_anchor(inst.title)}">{title}</h{level}>')
            while content_indent != level:
                if content_indent < level:
                    contents.append("<ul>\n")
                    content_indent += 1
                else:
                    contents.append("</ul>\n")
                    content_indent -= 1
            contents.append(f'<li><a href="#{_anchor(inst.title)}">{title}</a></li>')
        elif flavour is not None:
            nesting.append(flavour)
            body.append(f"<{flavour}>")
        elif inst.element == "back":
            close_if(_ITEM_TAGS)
            close_if(_LIST_TAGS)
        elif inst.element == "item":
            close_if(_ITEM_TAGS)
            if last_nested() == "dl":
                body.append("<dt>" + _escape(inst.title) + "</dt><dd>")
                nesting.append("dd")
            elif last_nested() == "ul":
                body.append("<li>" + _escape(inst.title))
                nesting.append("li")
        elif inst.element:
            body.append(inst.element + _escape(inst.title))

        if inst.content:
            body.append(content_to_html(inst.content))

    contents.extend("</ul>" for _ in range(content_indent))
    return "".join(contents), "".join(body)


def pod_to_html(instructions: InstructionList, options: Mapping[str, Any] | None = None) -> str:
    """
    Renderuje instrukcje do fragmentu HTML (bez <html>/<head>).

    options:
      nocontents: jeśli klucz istnieje (wartość bez znaczenia), spis treści
                   jest pomijany.
    """
    contents, body = render_contents_and_body(instructions)
    if options is not None and "nocontents" in options:
        return body
    return contents + body
