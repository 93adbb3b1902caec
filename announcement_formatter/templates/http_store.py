# # Remote template store: templates served by a small HTTP API.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import requests

from .store import TemplateStore, template_name

log = logging.getLogger(__name__)


@dataclass
class TemplateServerConn:
    base_url: str
    api_key: str = ""
    timeout_seconds: int = 25

    @property
    def base(self) -> str:
        return self.base_url.rstrip("/")


class HttpTemplateStore(TemplateStore):
    def __init__(self, conn: TemplateServerConn, session: Optional[requests.Session] = None):
        self.conn = conn
        self.session = session or requests.Session()

    def _url(self, name: str) -> str:
        return f"{self.conn.base}/templates/{quote(name)}"

    def _params(self):
        return {"api_key": self.conn.api_key} if self.conn.api_key else {}

    def get_template_text(self, template_ref: str) -> Optional[str]:
        if not template_ref:
            return None
        try:
            r = self.session.get(self._url(template_ref), params=self._params(), timeout=self.conn.timeout_seconds)
            if r.status_code == 404:
                return None
            r.raise_for_status()
        except requests.RequestException as e:
            # # Reads degrade to "absent" so rendering falls back to the default template
            log.warning("Template fetch failed for %s: %s", template_ref, e)
            return None
        return r.text

    def put_template_text(self, widget_id: str, text: str) -> None:
        r = self.session.put(
            self._url(template_name(widget_id)),
            params=self._params(),
            data=text.encode("utf-8"),
            headers={"Content-Type": "text/html; charset=utf-8"},
            timeout=self.conn.timeout_seconds,
        )
        r.raise_for_status()

    def delete(self, widget_id: str) -> bool:
        r = self.session.delete(self._url(template_name(widget_id)), params=self._params(), timeout=self.conn.timeout_seconds)
        if r.status_code == 404:
            return False
        r.raise_for_status()
        return True
