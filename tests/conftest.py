from __future__ import annotations

import datetime as dt

import pytest

from announcement_formatter.models import DocumentWidget, FieldValue, WidgetDefinition, WidgetField
from announcement_formatter.templates.store import MemoryTemplateStore
from announcement_formatter.themes import WidgetColors
from announcement_formatter.widgets.registry import WidgetRegistry

FIXED_NOW = dt.datetime(2026, 1, 5, 9, 30)

CARD_TEMPLATE = (
    '<div style="background: {{color_background}}; border-left: 4px solid {{color_primary}}; padding: 12px;">'
    "<h2>{{title}}</h2><p>{{body}}</p></div>"
)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def make_definition():
    def _make(widget_id="card", template="card.html", fields=("title", "body"), **kw):
        return WidgetDefinition(
            id=widget_id,
            display_name=widget_id.title(),
            template=template,
            fields=tuple(WidgetField(id=f, label=f.title()) for f in fields),
            **kw,
        )
    return _make


@pytest.fixture
def make_instance():
    def _make(definition_id="card", order=0, **values):
        return DocumentWidget(
            definition_id=definition_id,
            order=order,
            fields=tuple(FieldValue(k, v) for k, v in values.items()),
        )
    return _make


@pytest.fixture
def registry(make_definition):
    return WidgetRegistry([
        make_definition("card", colors=WidgetColors(primary="#123456", background="#FAFAFA")),
        make_definition("line", template="line.html", fields=("name",)),
        make_definition("orphan", template="does-not-exist.html", fields=("content",)),
    ])


@pytest.fixture
def store():
    return MemoryTemplateStore({
        "card.html": CARD_TEMPLATE,
        "line.html": "<p>{{name}}</p>",
    })
