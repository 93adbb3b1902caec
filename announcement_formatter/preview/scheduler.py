# # Preview scheduling: latest request wins, superseded results are dropped.

from __future__ import annotations

import dataclasses
import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Generic, Optional, TypeVar

from ..models import AnnouncementDocument
from ..rendering.renderer import TemplateRenderer
from .markup import convert
from .nodes import Node

log = logging.getLogger(__name__)

S = TypeVar("S")
R = TypeVar("R")


@dataclasses.dataclass(frozen=True)
class PreviewTicket:
    token: int
    future: Future


class PreviewScheduler(Generic[S, R]):
    """
    Runs ``job(snapshot)`` on a worker pool and hands the result to
    ``deliver(token, result)`` only while ``token`` is still the newest request.

    Newer requests never wait on older ones; an older job that finishes late is
    discarded. The check-and-deliver step is atomic with respect to new
    requests, so ``deliver`` should be quick (e.g. post to the UI thread). It
    may call back into the scheduler (``is_current``, ``request``, ``cancel``).
    """

    def __init__(
        self,
        job: Callable[[S], R],
        deliver: Callable[[int, R], None],
        *,
        debounce_seconds: float = 0.0,
        executor: Optional[ThreadPoolExecutor] = None,
        max_workers: int = 2,
    ):
        self.job = job
        self.deliver = deliver
        self.debounce_seconds = debounce_seconds
        # # Reentrant: deliver runs under the lock and may call back in
        self._lock = threading.RLock()
        self._latest = 0
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="preview")

    @property
    def latest_token(self) -> int:
        with self._lock:
            return self._latest

    def is_current(self, token: int) -> bool:
        with self._lock:
            return token == self._latest

    def request(self, snapshot: S) -> PreviewTicket:
        with self._lock:
            self._latest += 1
            token = self._latest
        return PreviewTicket(token=token, future=self._executor.submit(self._run, token, snapshot))

    def cancel(self) -> None:
        # # Supersede everything in flight without starting new work
        with self._lock:
            self._latest += 1

    def _run(self, token: int, snapshot: S) -> Optional[R]:
        if self.debounce_seconds > 0:
            time.sleep(self.debounce_seconds)
        if not self.is_current(token):
            log.debug("Preview %d superseded before start", token)
            return None

        try:
            result = self.job(snapshot)
        except Exception:
            log.exception("Preview job %d failed", token)
            return None

        with self._lock:
            if token != self._latest:
                log.debug("Preview %d superseded; result discarded", token)
                return None
            self.deliver(token, result)
        return result

    def shutdown(self, wait: bool = True) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def __enter__(self) -> "PreviewScheduler[S, R]":
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown()


def make_preview_job(renderer: TemplateRenderer) -> Callable[[AnnouncementDocument], Node]:
    def job(document: AnnouncementDocument) -> Node:
        return convert(renderer.render(document).markup)
    return job
