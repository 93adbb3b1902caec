from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from .models import UserMode
from .preview.nodes import CONTAINER_PADDING, Node, NodeKind, StyleRecord, Thickness
from .rendering.renderer import RenderOutcome, RenderResult
from .widgets.registry import WidgetRegistry

_OUTCOME_STYLE = {
    RenderOutcome.RENDERED: "ok",
    RenderOutcome.FALLBACK_TEMPLATE: "warn",
    RenderOutcome.OMITTED_UNKNOWN_DEFINITION: "err",
    RenderOutcome.DEGRADED: "err",
}


def render_widget_table(registry: WidgetRegistry, mode: UserMode, console: Console) -> None:
    groups = registry.group_by_category(mode)

    console.print(
        Panel.fit(
            f"[k]Widget library[/k]\n"
            f"[info]Mode[/info]: {mode.value}  "
            f"[info]Available[/info]: {sum(len(g) for g in groups.values())} of {len(registry)}",
            border_style="info",
        )
    )

    # Each column truncates instead of wrapping, so rows stay one line.
    t = Table(box=box.SIMPLE_HEAVY, show_lines=False, expand=False, padding=(0, 1))
    t.add_column("Category", no_wrap=True, overflow="ellipsis", max_width=16)
    t.add_column("Id", no_wrap=True, overflow="ellipsis", max_width=20)
    t.add_column("Name", no_wrap=True, overflow="ellipsis", max_width=24)
    t.add_column("Template", no_wrap=True, overflow="ellipsis", max_width=22)
    t.add_column("Fields", justify="right", max_width=6)
    t.add_column("Version", no_wrap=True, max_width=8)

    for category, defs in groups.items():
        for i, d in enumerate(defs):
            t.add_row(
                escape(category) if i == 0 else "",
                escape(d.id),
                escape(d.display_name),
                escape(d.template),
                str(len(d.fields)),
                escape(d.version),
            )

    console.print(t)


def render_outcomes(result: RenderResult, console: Console) -> None:
    t = Table(title="Render outcomes", box=box.SIMPLE_HEAVY, expand=False, padding=(0, 1))
    t.add_column("Widget", no_wrap=True, overflow="ellipsis", max_width=38)
    t.add_column("Definition", no_wrap=True, overflow="ellipsis", max_width=20)
    t.add_column("Outcome", no_wrap=True)
    t.add_column("Detail", overflow="ellipsis", max_width=40)

    for o in result.outcomes:
        style = _OUTCOME_STYLE.get(o.outcome, "dim")
        t.add_row(escape(o.widget_id), escape(o.definition_id), f"[{style}]{o.outcome.value}[/{style}]", escape(o.detail))

    console.print(t)


def _thickness(t: Optional[Thickness]) -> str:
    if t is None:
        return "-"
    if t.is_uniform:
        return f"{t.left:g}"
    return f"{t.left:g},{t.top:g},{t.right:g},{t.bottom:g}"


def _style_label(s: StyleRecord) -> str:
    parts = [f"bg={s.background or '-'}"]
    if s.border_color or s.border_thickness:
        parts.append(f"border={s.border_color or '-'}/{_thickness(s.border_thickness)}")
    parts.append(f"pad={_thickness(s.padding or CONTAINER_PADDING)}")
    parts.append(f"margin={_thickness(s.margin)}")
    if s.corner_radius is not None:
        parts.append(f"radius={s.corner_radius:g}")
    return " ".join(parts)


def _label(node: Node) -> str:
    if node.kind == NodeKind.CONTAINER:
        style = f" [dim]{escape(_style_label(node.style))}[/dim]" if node.style else ""
        return f"[k]container[/k]{style}"
    tag = {NodeKind.HEADING: "heading", NodeKind.EMPHASIS: "emphasis"}.get(node.kind, "dim")
    return f"[{tag}]{node.kind.value}[/{tag}] {escape(node.text or '')}"


def _add(tree: Tree, node: Node) -> None:
    for child in node.children:
        branch = tree.add(_label(child))
        _add(branch, child)


def render_node_tree(node: Node, console: Console) -> None:
    tree = Tree(_label(node))
    _add(tree, node)
    console.print(tree)
