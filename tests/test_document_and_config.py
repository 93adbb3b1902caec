from __future__ import annotations

import json
import logging
import sys

import pytest

from announcement_formatter import cli
from announcement_formatter.config import Config, load_config
from announcement_formatter.document_input import document_from_dict, load_document
from announcement_formatter.models import DEFAULT_TITLE
from announcement_formatter.orchestrator import load_library, make_preview_scheduler, run
from announcement_formatter.rendering.renderer import RenderOutcome


def test_document_dict_and_list_field_forms():
    doc = document_from_dict({
        "title": "Weekly Bulletin",
        "widgets": [
            {"definitionId": "meeting", "fields": {"title": "Staff Meeting", "time": None}},
            {"widget": "alert", "order": 7, "id": "w-2", "fields": [{"name": "message", "value": "Storm"}, {"bad": 1}]},
            {"fields": {"orphan": "no definition id"}},
            "junk",
        ],
    })

    assert doc.title == "Weekly Bulletin"
    assert [w.definition_id for w in doc.widgets] == ["meeting", "alert"]
    first, second = doc.widgets
    assert first.order == 0
    assert first.value_of("title") == "Staff Meeting"
    assert first.value_of("time") == ""
    assert second.order == 7
    assert second.id == "w-2"
    assert second.value_of("message") == "Storm"


def test_document_defaults_and_rejects_non_objects():
    assert document_from_dict({}).title == DEFAULT_TITLE

    with pytest.raises(ValueError):
        document_from_dict(["not", "a", "document"])


def test_load_document_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_document(tmp_path / "nope.json")


def test_load_config_defaults_and_unknown_keys(tmp_path):
    assert load_config(tmp_path / "missing.json") == Config()

    path = tmp_path / "config.json"
    path.write_text(json.dumps({"generator": "html_fragments", "colour": "blue"}), encoding="utf-8")
    cfg = load_config(path)

    assert cfg.generator == "html_fragments"
    assert not hasattr(cfg, "colour")


def _cfg(tmp_path, **kw):
    return Config(
        widget_dir=str(tmp_path / "widgets"),
        template_dir=str(tmp_path / "templates"),
        out_path=str(tmp_path / "out" / "announcement.html"),
        **kw,
    )


def test_run_falls_back_to_builtin_widgets(tmp_path, caplog):
    cfg = _cfg(tmp_path)
    doc = document_from_dict({
        "title": "Monday Notes",
        "widgets": [
            {"definitionId": "meeting", "fields": {"title": "Quarterly Review", "location": "Room 4"}},
            {"definitionId": "retired-widget"},
        ],
    })

    library = load_library(cfg)
    with caplog.at_level(logging.WARNING):
        result = run(cfg, doc, library=library)

    assert library.builtin
    assert [o.outcome for o in result.outcomes] == [
        RenderOutcome.RENDERED,
        RenderOutcome.OMITTED_UNKNOWN_DEFINITION,
    ]
    assert "retired-widget" in caplog.text

    written = (tmp_path / "out" / "announcement.html").read_text(encoding="utf-8")
    assert written == result.markup
    assert "Quarterly Review" in written
    assert "Monday Notes" in written


def test_templates_on_disk_shadow_builtin_ones(tmp_path):
    (tmp_path / "templates").mkdir()
    (tmp_path / "templates" / "meeting.html").write_text("<section>{{title}}</section>", encoding="utf-8")
    cfg = _cfg(tmp_path, generator="html_fragments")
    doc = document_from_dict({"widgets": [{"definitionId": "meeting", "fields": {"title": "Local"}}]})

    result = run(cfg, doc)

    assert result.markup == "<section>Local</section>"


def test_no_builtin_widgets_leaves_library_empty(tmp_path):
    library = load_library(_cfg(tmp_path, use_builtin_widgets=False))

    assert not library.builtin
    assert len(library.registry) == 0


def test_cli_lists_widgets_and_exits(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(cli, "setup_logging", lambda **kw: None)
    monkeypatch.setattr(sys, "argv", [
        "announcement-formatter",
        "--config", str(tmp_path / "config.json"),
        "--widget-dir", str(tmp_path / "widgets"),
        "--template-dir", str(tmp_path / "templates"),
        "--console-width", "120",
        "--no-color",
        "--list-widgets",
    ])

    with pytest.raises(SystemExit) as exc:
        cli.main()

    assert exc.value.code == 0
    assert "meeting" in capsys.readouterr().out


def test_cli_renders_document(tmp_path, monkeypatch):
    doc_path = tmp_path / "doc.json"
    doc_path.write_text(json.dumps({"widgets": [{"definitionId": "alert", "fields": {"title": "Road closed"}}]}), encoding="utf-8")
    out = tmp_path / "out.html"
    monkeypatch.setattr(cli, "setup_logging", lambda **kw: None)
    monkeypatch.setattr(sys, "argv", [
        "announcement-formatter",
        "--config", str(tmp_path / "config.json"),
        "--widget-dir", str(tmp_path / "widgets"),
        "--template-dir", str(tmp_path / "templates"),
        "--document", str(doc_path),
        "--out", str(out),
        "--no-color",
    ])

    cli.main()

    assert "Road closed" in out.read_text(encoding="utf-8")


def test_preview_scheduler_uses_configured_debounce(tmp_path):
    cfg = _cfg(tmp_path, generator="html_fragments", preview_debounce_ms=40)
    doc = document_from_dict({"widgets": [{"definitionId": "meeting", "fields": {"title": "Quarterly Review"}}]})
    delivered = []

    with make_preview_scheduler(cfg, load_library(cfg), lambda tok, node: delivered.append(node)) as sched:
        assert sched.debounce_seconds == 0.04
        node = sched.request(doc).future.result(timeout=5)

    assert delivered == [node]
    assert "Quarterly Review" in node.texts()


def test_cli_preview_prints_node_tree(tmp_path, monkeypatch, capsys):
    doc_path = tmp_path / "doc.json"
    doc_path.write_text(json.dumps({"widgets": [{"definitionId": "alert", "fields": {"title": "Road closed"}}]}), encoding="utf-8")
    monkeypatch.setattr(cli, "setup_logging", lambda **kw: None)
    monkeypatch.setattr(sys, "argv", [
        "announcement-formatter",
        "--config", str(tmp_path / "config.json"),
        "--widget-dir", str(tmp_path / "widgets"),
        "--template-dir", str(tmp_path / "templates"),
        "--document", str(doc_path),
        "--out", str(tmp_path / "out.html"),
        "--generator", "html_fragments",
        "--console-width", "160",
        "--no-color",
        "--preview",
    ])

    cli.main()

    out = capsys.readouterr().out
    assert "container" in out
    assert "Road closed" in out
