# # Template renderer: document + registry + template store -> markup.

from __future__ import annotations

import dataclasses
import datetime as dt
import enum
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from ..context import RenderContext
from ..generators import html_fragments, html_page  # noqa: F401  # registers built-in generators
from ..generators.registry import get_generator
from ..models import AnnouncementDocument, DocumentWidget, WidgetDefinition
from ..templates.store import TemplateStore
from ..themes import CAP_THEME, PageTheme
from ..widgets.registry import WidgetRegistry
from .placeholders import strip_unmatched, substitute_fields, substitute_raw, token

log = logging.getLogger(__name__)

DEFAULT_WIDGET_TEMPLATE = """
        <div class="widget">
            <div class="widget-content">
                {{content}}
            </div>
        </div>"""


class RenderOutcome(str, enum.Enum):
    RENDERED = "rendered"
    FALLBACK_TEMPLATE = "fallback_template"
    OMITTED_UNKNOWN_DEFINITION = "omitted_unknown_definition"
    DEGRADED = "degraded"


@dataclasses.dataclass(frozen=True)
class WidgetOutcome:
    widget_id: str
    definition_id: str
    outcome: RenderOutcome
    html: str = ""
    detail: str = ""

    @property
    def emitted(self) -> bool:
        return self.outcome in (RenderOutcome.RENDERED, RenderOutcome.FALLBACK_TEMPLATE)


@dataclasses.dataclass(frozen=True)
class RenderResult:
    markup: str
    outcomes: Tuple[WidgetOutcome, ...] = ()

    @property
    def fragments(self) -> List[str]:
        return [o.html for o in self.outcomes if o.emitted]

    def by_outcome(self, outcome: RenderOutcome) -> List[WidgetOutcome]:
        return [o for o in self.outcomes if o.outcome == outcome]


def ordered_widgets(widgets: Sequence[DocumentWidget]) -> List[DocumentWidget]:
    # # sorted() is stable: equal orders keep list position
    return sorted(widgets, key=lambda w: w.order)


def fill_template(template: str, widget: DocumentWidget, defn: WidgetDefinition) -> str:
    out = substitute_fields(template, widget.fields)
    out = substitute_raw(out, defn.colors.placeholders())
    # # Must run last so only genuinely unmatched placeholders go
    return strip_unmatched(out)


class TemplateRenderer:
    def __init__(
        self,
        registry: WidgetRegistry,
        store: TemplateStore,
        generator: str = "html_page",
        clock: Optional[Callable[[], dt.datetime]] = None,
        theme: PageTheme = CAP_THEME,
    ):
        self.registry = registry
        self.store = store
        self.gen_cls = get_generator(generator)
        self.clock = clock or dt.datetime.now
        self.theme = theme

    def render_widget(self, widget: DocumentWidget) -> WidgetOutcome:
        defn = self.registry.get(widget.definition_id)
        if defn is None:
            log.warning("Widget %s references unknown definition %r; omitted", widget.id, widget.definition_id)
            return WidgetOutcome(
                widget_id=widget.id,
                definition_id=widget.definition_id,
                outcome=RenderOutcome.OMITTED_UNKNOWN_DEFINITION,
                detail=f"unknown definition {widget.definition_id!r}",
            )

        try:
            template = self.store.get_template_text(defn.template)
            outcome = RenderOutcome.RENDERED
            detail = ""
            if template is None:
                log.info("No template %r for widget %s; using default", defn.template, defn.id)
                template = DEFAULT_WIDGET_TEMPLATE
                outcome = RenderOutcome.FALLBACK_TEMPLATE
                detail = f"template {defn.template!r} not found"
            html = fill_template(template, widget, defn)
        except Exception as e:
            log.exception("Widget %s (%s) failed to render", widget.id, defn.id)
            return WidgetOutcome(
                widget_id=widget.id,
                definition_id=defn.id,
                outcome=RenderOutcome.DEGRADED,
                detail=str(e),
            )

        return WidgetOutcome(widget_id=widget.id, definition_id=defn.id, outcome=outcome, html=html, detail=detail)

    def render(self, document: AnnouncementDocument) -> RenderResult:
        outcomes = tuple(self.render_widget(w) for w in ordered_widgets(document.widgets))
        ctx = RenderContext(registry=self.registry, store=self.store, generated_at=self.clock(), theme=self.theme)
        try:
            markup = self.gen_cls(ctx).assemble(document, outcomes)
        except Exception:
            log.exception("Page assembly failed; emitting bare fragments")
            markup = "\n".join(o.html for o in outcomes if o.emitted)
        return RenderResult(markup=markup, outcomes=outcomes)


def render_definition_preview(defn: WidgetDefinition, template: str) -> str:
    # # Editor preview: defaults (or "[Label]") stand in for values; leftovers stay visible
    out = substitute_raw(template, defn.colors.placeholders())
    for f in defn.fields:
        if not f.id:
            continue
        value = f.default_value if f.default_value else f"[{f.label}]"
        out = out.replace(token(f.id), value)
    return out
