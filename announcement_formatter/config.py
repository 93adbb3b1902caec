# # Config loader: JSON -> dataclass

from __future__ import annotations

import dataclasses
import json
from pathlib import Path


@dataclasses.dataclass
class Config:
    # # Library
    widget_dir: str = "./Assets/widgets"
    template_dir: str = "./Assets/templates"
    use_builtin_widgets: bool = True

    # # Remote templates (optional; overrides template_dir when set)
    template_url: str = ""
    template_api_key: str = ""
    http_timeout_seconds: int = 25

    # # Output
    generator: str = "html_page"
    out_path: str = "./out/announcement.html"
    mode: str = "beginner"

    # # Preview
    preview_debounce_ms: int = 150


def load_config(path: Path) -> Config:
    cfg = Config()
    if not path.exists():
        return cfg

    data = json.loads(path.read_text(encoding="utf-8"))
    for k, v in data.items():
        if hasattr(cfg, k):
            setattr(cfg, k, v)
    return cfg
