from __future__ import annotations

import datetime as dt

from announcement_formatter.editing import add_widget, move_widget, new_document, remove_widget, set_field_value
from announcement_formatter.models import DEFAULT_TITLE, AnnouncementDocument, DocumentWidget, WidgetDefinition, WidgetField

LATER = dt.datetime(2026, 2, 1, 12, 0)

MEETING = WidgetDefinition(
    id="meeting",
    fields=(
        WidgetField(id="title", label="Title", default_value="Staff Meeting"),
        WidgetField(id="details", label="Details"),
    ),
)


def _three(clock):
    doc = new_document(clock=clock)
    for _ in range(3):
        doc = add_widget(doc, MEETING, clock=clock)
    return doc


def test_new_document_defaults(clock):
    doc = new_document(clock=clock)

    assert doc.title == DEFAULT_TITLE
    assert doc.widgets == ()
    assert doc.created_at == doc.modified_at == clock()


def test_add_widget_seeds_defaults_and_appends(clock):
    doc = _three(clock)

    assert [w.order for w in doc.widgets] == [0, 1, 2]
    first = doc.widgets[0]
    assert first.definition_id == "meeting"
    assert first.value_of("title") == "Staff Meeting"
    assert first.value_of("details") == ""
    assert len({w.id for w in doc.widgets}) == 3


def test_remove_renumbers(clock):
    doc = _three(clock)
    middle = doc.widgets[1].id

    out = remove_widget(doc, middle, clock=lambda: LATER)

    assert [w.order for w in out.widgets] == [0, 1]
    assert middle not in [w.id for w in out.widgets]
    assert out.modified_at == LATER
    assert len(doc.widgets) == 3


def test_remove_unknown_is_a_no_op(clock):
    doc = _three(clock)

    assert remove_widget(doc, "missing") is doc


def test_move_up_down_and_clamp(clock):
    doc = _three(clock)
    a, b, c = (w.id for w in doc.widgets)

    moved = move_widget(doc, c, -1)
    assert [w.id for w in moved.widgets] == [a, c, b]
    assert [w.order for w in moved.widgets] == [0, 1, 2]

    assert move_widget(doc, a, -1) is doc
    assert [w.id for w in move_widget(doc, a, 10).widgets] == [b, c, a]


def test_set_field_value_updates_and_appends(clock):
    doc = _three(clock)
    wid = doc.widgets[0].id

    out = set_field_value(doc, wid, "title", "Picnic", clock=lambda: LATER)
    out = set_field_value(out, wid, "extra", "x", clock=lambda: LATER)

    w = out.widgets[0]
    assert w.value_of("title") == "Picnic"
    assert w.value_of("extra") == "x"
    assert w.modified_at == LATER
    assert doc.widgets[0].value_of("title") == "Staff Meeting"
    assert set_field_value(doc, "missing", "title", "x") is doc


def _doc(**orders):
    return AnnouncementDocument(widgets=tuple(DocumentWidget(definition_id="meeting", order=o, id=k) for k, o in orders.items()))


def test_remove_follows_display_order_with_tied_orders():
    doc = _doc(A=2, B=0, C=0)

    out = remove_widget(doc, "B")

    assert [w.id for w in out.widgets] == ["C", "A"]
    assert [w.order for w in out.widgets] == [0, 1]


def test_add_appends_after_sparse_orders(clock):
    doc = _doc(A=5, B=6)

    out = add_widget(doc, MEETING, clock=clock)

    assert [w.id for w in out.widgets][:2] == ["A", "B"]
    assert [w.order for w in out.widgets] == [0, 1, 2]
    assert out.widgets[2].definition_id == "meeting"


def test_add_to_tied_orders_keeps_display_order(clock):
    out = add_widget(_doc(A=2, B=0, C=0), MEETING, clock=clock)

    assert [w.id for w in out.widgets][:3] == ["B", "C", "A"]
    assert [w.order for w in out.widgets] == [0, 1, 2, 3]
