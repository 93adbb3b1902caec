from __future__ import annotations

import pytest

from announcement_formatter.models import AnnouncementDocument, FieldValue
from announcement_formatter.rendering.renderer import (
    RenderOutcome,
    TemplateRenderer,
    render_definition_preview,
)
from announcement_formatter.templates.store import MemoryTemplateStore


def _doc(*widgets, **kw):
    return AnnouncementDocument(widgets=tuple(widgets), **kw)


def test_orders_by_order_field_with_stable_ties(registry, store, make_instance, clock):
    renderer = TemplateRenderer(registry, store, generator="html_fragments", clock=clock)
    doc = _doc(
        make_instance("line", order=2, name="A"),
        make_instance("line", order=0, name="B"),
        make_instance("line", order=0, name="C"),
    )

    result = renderer.render(doc)

    assert result.markup == "<p>B</p>\n<p>C</p>\n<p>A</p>"
    assert [o.outcome for o in result.outcomes] == [RenderOutcome.RENDERED] * 3


def test_field_values_are_escaped(registry, store, make_instance, clock):
    renderer = TemplateRenderer(registry, store, generator="html_fragments", clock=clock)
    doc = _doc(make_instance("card", title="<script>alert(1)</script>", body="Tom & \"Jerry\" 'cat'"))

    markup = renderer.render(doc).markup

    assert "<script>" not in markup
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in markup
    assert "Tom &amp; &quot;Jerry&quot; &#39;cat&#39;" in markup


def test_color_placeholders_are_verbatim(registry, store, make_instance, clock):
    renderer = TemplateRenderer(registry, store, generator="html_fragments", clock=clock)

    markup = renderer.render(_doc(make_instance("card", title="t", body="b"))).markup

    assert "background: #FAFAFA;" in markup
    assert "solid #123456;" in markup


def test_unmatched_placeholders_are_removed(make_definition, make_instance, clock):
    from announcement_formatter.widgets.registry import WidgetRegistry

    registry = WidgetRegistry([make_definition("x", template="x.html", fields=("title",))])
    store = MemoryTemplateStore({"x.html": "{{title}}|{{missing}}|{{ color_primary }}|{{color_accent}}"})
    renderer = TemplateRenderer(registry, store, generator="html_fragments", clock=clock)

    markup = renderer.render(_doc(make_instance("x", title="T"))).markup

    assert markup == "T|||#FFCD00"
    assert "{{" not in markup


def test_field_without_counterpart_is_inert(registry, store, make_instance, clock):
    renderer = TemplateRenderer(registry, store, generator="html_fragments", clock=clock)

    markup = renderer.render(_doc(make_instance("line", name="Ann", unrelated="zzz"))).markup

    assert markup == "<p>Ann</p>"


def test_unknown_definition_is_omitted_with_outcome(registry, store, make_instance, clock):
    renderer = TemplateRenderer(registry, store, generator="html_fragments", clock=clock)

    result = renderer.render(_doc(make_instance("nope", content="lost")))

    assert result.markup == ""
    assert result.fragments == []
    assert len(result.outcomes) == 1
    assert result.outcomes[0].outcome == RenderOutcome.OMITTED_UNKNOWN_DEFINITION
    assert result.outcomes[0].definition_id == "nope"


def test_unknown_definition_page_has_no_widget_fragments(registry, store, make_instance, clock):
    renderer = TemplateRenderer(registry, store, clock=clock)

    result = renderer.render(_doc(make_instance("nope", content="lost")))

    assert "lost" not in result.markup
    assert "<!DOCTYPE html>" in result.markup


def test_missing_template_uses_default(registry, store, make_instance, clock):
    renderer = TemplateRenderer(registry, store, generator="html_fragments", clock=clock)

    result = renderer.render(_doc(make_instance("orphan", content="Hello & welcome")))

    outcome = result.outcomes[0]
    assert outcome.outcome == RenderOutcome.FALLBACK_TEMPLATE
    assert 'class="widget"' in outcome.html
    assert "Hello &amp; welcome" in outcome.html


def test_store_failure_degrades_single_widget(registry, make_instance, clock):
    class BrokenStore(MemoryTemplateStore):
        def get_template_text(self, template_ref):
            if template_ref == "card.html":
                raise RuntimeError("disk on fire")
            return "<p>{{name}}</p>"

    renderer = TemplateRenderer(registry, BrokenStore(), generator="html_fragments", clock=clock)
    doc = _doc(make_instance("card", order=0, title="x"), make_instance("line", order=1, name="ok"))

    result = renderer.render(doc)

    assert [o.outcome for o in result.outcomes] == [RenderOutcome.DEGRADED, RenderOutcome.RENDERED]
    assert "disk on fire" in result.outcomes[0].detail
    assert result.markup == "<p>ok</p>"


def test_render_is_idempotent(registry, store, make_instance, clock):
    renderer = TemplateRenderer(registry, store, clock=clock)
    doc = _doc(make_instance("card", title="One", body="Two"), make_instance("line", order=1, name="Three"))

    assert renderer.render(doc).markup == renderer.render(doc).markup


def test_page_boilerplate(registry, store, make_instance, clock):
    renderer = TemplateRenderer(registry, store, clock=clock)
    doc = _doc(make_instance("line", name="Body"), title="Fish & Chips", subtitle="<Squadron>")

    markup = renderer.render(doc).markup

    assert "<title>Fish &amp; Chips</title>" in markup
    assert "&lt;Squadron&gt;" in markup
    assert "Generated on January 05, 2026" in markup
    assert markup.index("<p>Body</p>") < markup.index("Generated on")


def test_unknown_generator_is_rejected(registry, store):
    with pytest.raises(KeyError):
        TemplateRenderer(registry, store, generator="pdf")


def test_first_value_wins_for_duplicate_field_names(registry, store, make_instance, clock):
    from announcement_formatter.models import DocumentWidget

    renderer = TemplateRenderer(registry, store, generator="html_fragments", clock=clock)
    w = DocumentWidget(definition_id="line", fields=(FieldValue("name", "first"), FieldValue("name", "second")))

    assert renderer.render(_doc(w)).markup == "<p>first</p>"


def test_definition_preview_uses_defaults_and_labels():
    from announcement_formatter.models import WidgetDefinition, WidgetField

    defn = WidgetDefinition(
        id="card",
        fields=(WidgetField(id="title", label="Title", default_value="Hello"), WidgetField(id="body", label="Body")),
    )

    out = render_definition_preview(defn, "<h2 style='color: {{color_primary}}'>{{title}}</h2>{{body}}{{other}}")

    assert out == "<h2 style='color: #001489'>Hello</h2>[Body]{{other}}"
