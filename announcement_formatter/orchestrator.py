# # Orchestrates: load widget library, pick template store, render document,
# # then write output.

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Callable, Optional

from .config import Config
from .models import AnnouncementDocument
from .preview.nodes import Node
from .preview.scheduler import PreviewScheduler, make_preview_job
from .rendering.renderer import RenderOutcome, RenderResult, TemplateRenderer
from .templates.http_store import HttpTemplateStore, TemplateServerConn
from .templates.store import FileTemplateStore, LayeredTemplateStore, MemoryTemplateStore, TemplateStore
from .widgets.builtin import BUILTIN_TEMPLATES, builtin_definitions
from .widgets.registry import LoadReport, WidgetRegistry

log = logging.getLogger(__name__)


@dataclasses.dataclass
class Library:
    registry: WidgetRegistry
    store: TemplateStore
    report: LoadReport
    builtin: bool = False


def make_store(cfg: Config) -> TemplateStore:
    if cfg.template_url:
        conn = TemplateServerConn(
            base_url=cfg.template_url,
            api_key=cfg.template_api_key,
            timeout_seconds=cfg.http_timeout_seconds,
        )
        return HttpTemplateStore(conn)
    return FileTemplateStore(Path(cfg.template_dir))


def load_library(cfg: Config) -> Library:
    registry = WidgetRegistry()
    report = registry.load_all(Path(cfg.widget_dir))
    store = make_store(cfg)

    # # Nothing usable on disk: fall back to the starter widgets
    if len(registry) == 0 and cfg.use_builtin_widgets:
        log.info("No widget definitions in %s; using built-in starter widgets", cfg.widget_dir)
        registry = WidgetRegistry(builtin_definitions())
        store = LayeredTemplateStore(store, MemoryTemplateStore(BUILTIN_TEMPLATES))
        return Library(registry=registry, store=store, report=report, builtin=True)

    return Library(registry=registry, store=store, report=report)


def run(cfg: Config, document: AnnouncementDocument, library: Optional[Library] = None) -> RenderResult:
    library = library or load_library(cfg)
    renderer = TemplateRenderer(library.registry, library.store, generator=cfg.generator)
    result = renderer.render(document)

    omitted = result.by_outcome(RenderOutcome.OMITTED_UNKNOWN_DEFINITION)
    if omitted:
        log.warning("%d widget(s) omitted: unknown definitions %s", len(omitted), sorted({o.definition_id for o in omitted}))

    if cfg.out_path:
        out = Path(cfg.out_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(result.markup, encoding="utf-8")
        log.info("Wrote %s (%d widget(s))", out, len(result.fragments))

    return result


def make_preview_scheduler(cfg: Config, library: Library, deliver: Callable[[int, Node], None]) -> PreviewScheduler:
    renderer = TemplateRenderer(library.registry, library.store, generator=cfg.generator)
    return PreviewScheduler(
        make_preview_job(renderer),
        deliver,
        debounce_seconds=max(0, cfg.preview_debounce_ms) / 1000.0,
    )
