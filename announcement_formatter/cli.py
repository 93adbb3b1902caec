# # CLI entrypoint: parse args, load config/document, run orchestrator.

from __future__ import annotations

import argparse
from pathlib import Path

from .config import load_config
from .console import ConsoleOptions, make_console
from .debug_views import render_node_tree, render_outcomes, render_widget_table
from .document_input import load_document
from .generators.registry import available_generators
from .logging_setup import setup_logging
from .models import UserMode
from .orchestrator import load_library, make_preview_scheduler, run


def main() -> None:
    p = argparse.ArgumentParser("announcement-formatter")

    # # Core IO
    p.add_argument("--config", default="config.json")
    p.add_argument("--document", default=None, help="Document JSON to render")
    p.add_argument("--out", default=None)
    p.add_argument("--generator", default=None, choices=available_generators())
    p.add_argument("--mode", default=None, choices=[m.value for m in UserMode])

    # # Library
    p.add_argument("--widget-dir", default=None)
    p.add_argument("--template-dir", default=None)
    p.add_argument("--template-url", default=None)
    p.add_argument("--no-builtin-widgets", action="store_true")

    # # CLI
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--log-file", default=None)
    p.add_argument("--console-width", type=int, default=None)
    p.add_argument("--no-color", action="store_true")
    p.add_argument("--list-widgets", action="store_true", help="Prints the widget library and exits")
    p.add_argument("--preview", action="store_true", help="Prints the preview node tree after rendering")

    args = p.parse_args()

    cfg = load_config(Path(args.config))

    setup_logging(
        level=args.log_level,
        log_file=args.log_file,
        console_width=args.console_width,
        no_color=args.no_color,
    )

    # # Overrides
    if args.out is not None:
        cfg.out_path = args.out
    if args.generator is not None:
        cfg.generator = args.generator
    if args.mode is not None:
        cfg.mode = args.mode
    if args.widget_dir is not None:
        cfg.widget_dir = args.widget_dir
    if args.template_dir is not None:
        cfg.template_dir = args.template_dir
    if args.template_url is not None:
        cfg.template_url = args.template_url
    if args.no_builtin_widgets:
        cfg.use_builtin_widgets = False

    console = make_console(ConsoleOptions(width=args.console_width, no_color=args.no_color))
    library = load_library(cfg)

    if args.list_widgets:
        mode = UserMode.parse(cfg.mode) or UserMode.BEGINNER
        render_widget_table(library.registry, mode, console)
        raise SystemExit(0)

    if args.document is None:
        p.error("--document is required unless --list-widgets is given")

    document = load_document(Path(args.document))
    result = run(cfg=cfg, document=document, library=library)
    render_outcomes(result, console)

    if args.preview:
        with make_preview_scheduler(cfg, library, lambda token, node: render_node_tree(node, console)) as sched:
            sched.request(document).future.result()
