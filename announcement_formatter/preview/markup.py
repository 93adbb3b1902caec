# # Markup parser: rendered widget markup -> preview node tree.

"""
Supported markup subset
=======================

This is not an HTML parser. It recognises four constructs, one level deep::

    document   := container+ | line-text
    container  := "<div" attrs ">" inner "</div>"     (non-greedy)
    inner      := heading* emphasis* text?
    heading    := "<h1".."<h6" attrs ">" ... "</hN>"
    emphasis   := "<strong" attrs ">" ... "</strong>" | "<b" attrs ">" ... "</b>"
    line-text  := text ("<br>" text)*

Rules that follow from the grammar:

* A container ends at the first ``</div>`` after its opening tag. A ``<div>``
  nested inside another is therefore not its own node: its tags are stripped
  and its text is folded into the outer container's trailing text, and text
  after the inner ``</div>`` is dropped.
* Children are ordered headings first, then emphasis spans, then the trailing
  text, regardless of where they appear inside the container. Heading and
  emphasis text also appears again in the trailing text.
* ``{{name}}`` placeholders become filler text before matching, and
  ``{{#if ...}} ... {{/if}}`` spans are always removed, whatever the condition.
* Only the ``style="..."`` attribute of a container is read.
"""

from __future__ import annotations

import dataclasses
import enum
import html
import logging
import re
from typing import List

from ..themes import EMPHASIS_COLOR, ERROR_COLOR, HEADING_COLOR, MUTED_COLOR, TEXT_COLOR
from .nodes import Node, NodeKind, TextStyle
from .styles import parse_style

log = logging.getLogger(__name__)

FILLER = "Sample Text"

_CONDITIONAL = re.compile(r"\{\{#if[^}]*\}\}.*?\{\{/if\}\}", re.IGNORECASE | re.DOTALL)
_PLACEHOLDER = re.compile(r"\{\{[^}]*\}\}")
_CONTAINER = re.compile(r"<div\b([^>]*)>(.*?)</div>", re.IGNORECASE | re.DOTALL)
_STYLE_ATTR = re.compile(r"""(?<![\w-])style\s*=\s*(?:"([^"]*)"|'([^']*)')""", re.IGNORECASE)
_HEADING = re.compile(r"<h([1-6])\b[^>]*>(.*?)</h[1-6]>", re.IGNORECASE | re.DOTALL)
_EMPHASIS = re.compile(r"<(strong|b)\b[^>]*>(.*?)</(?:strong|b)>", re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r"<[^>]+>")
_LINE_BREAK = re.compile(r"<br\s*/?>", re.IGNORECASE)
_FILLER_RUN = re.compile(re.escape(FILLER) + r"\s*")

HEADING_FONT = TextStyle(bold=True, color=HEADING_COLOR, size=14)
EMPHASIS_FONT = TextStyle(bold=True, color=EMPHASIS_COLOR)
BODY_FONT = TextStyle(color=TEXT_COLOR, size=11)
MUTED_FONT = TextStyle(color=MUTED_COLOR)
ERROR_FONT = TextStyle(color=ERROR_COLOR)


class ParseOutcome(str, enum.Enum):
    PARSED = "parsed"
    FALLBACK_LINES = "fallback_lines"
    EMPTY = "empty"
    DEGRADED = "degraded"


@dataclasses.dataclass(frozen=True)
class ParseResult:
    node: Node
    outcome: ParseOutcome
    detail: str = ""


def strip_tags(markup: str) -> str:
    return _TAG.sub("", markup)


def _clean(fragment: str) -> str:
    return html.unescape(strip_tags(fragment)).strip()


def prepare(markup: str) -> str:
    out = _CONDITIONAL.sub("", markup)
    return _PLACEHOLDER.sub(FILLER, out)


def _container(attrs: str, inner: str) -> Node:
    style = None
    m = _STYLE_ATTR.search(attrs)
    if m:
        style = parse_style(m.group(1) if m.group(1) is not None else m.group(2))

    children: List[Node] = []
    for hm in _HEADING.finditer(inner):
        children.append(Node.leaf(NodeKind.HEADING, _clean(hm.group(2)), HEADING_FONT))
    for em in _EMPHASIS.finditer(inner):
        children.append(Node.leaf(NodeKind.EMPHASIS, _clean(em.group(2)), EMPHASIS_FONT))

    text = _FILLER_RUN.sub("", _clean(inner)).strip()
    if len(text) > 2:
        children.append(Node.leaf(NodeKind.TEXT, text, BODY_FONT))

    return Node.container(children, style=style)


def _lines(markup: str) -> List[Node]:
    out = []
    for line in _LINE_BREAK.split(markup):
        text = _clean(line)
        if len(text) > 1:
            out.append(Node.leaf(NodeKind.TEXT, text, BODY_FONT))
    return out


def convert_with_outcome(markup: str) -> ParseResult:
    if not markup:
        return ParseResult(Node.container([Node.leaf(NodeKind.TEXT, "No content", MUTED_FONT)]), ParseOutcome.EMPTY)

    try:
        text = prepare(markup)
        containers = [_container(m.group(1), m.group(2)) for m in _CONTAINER.finditer(text)]
        if containers:
            return ParseResult(Node.container(containers), ParseOutcome.PARSED)
        return ParseResult(Node.container(_lines(text)), ParseOutcome.FALLBACK_LINES)
    except Exception as e:
        log.exception("Markup conversion failed")
        err = Node.leaf(NodeKind.TEXT, f"Render error: {e}", ERROR_FONT)
        return ParseResult(Node.container([err]), ParseOutcome.DEGRADED, detail=str(e))


def convert(markup: str) -> Node:
    return convert_with_outcome(markup).node
