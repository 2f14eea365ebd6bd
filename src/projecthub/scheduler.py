"""Fixed-delay background scheduler for reconciliation passes."""

from __future__ import annotations

import threading
from logging import getLogger
from typing import TYPE_CHECKING

from projecthub.domain.ports.fetching import ContributionFetchError

if TYPE_CHECKING:
    from collections.abc import Callable

    from projecthub.domain.reconciliation import ReconciliationResult

log = getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 120.0


class ReconciliationScheduler:
    """Run reconciliation passes on a daemon thread.

    The next pass is scheduled ``interval_seconds`` after the previous one
    finished. Each loop owns its stop event, and :meth:`start` waits for a loop
    that is still finishing a pass after :meth:`stop`, so at most one loop runs.
    :meth:`run_once` and :meth:`run_now` may also be called from other threads;
    such a pass can overlap a scheduled one.
    """

    def __init__(
        self,
        run_pass: Callable[[], ReconciliationResult],
        *,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        name: str = "reconciliation-scheduler",
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._run_pass = run_pass
        self.interval_seconds = interval_seconds
        self._name = name
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self.last_result: ReconciliationResult | None = None

    @property
    def running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive() and not self._stop_event.is_set()

    def run_now(self) -> ReconciliationResult:
        """Run a single pass and record its result; errors propagate."""

        result = self._run_pass()
        self.last_result = result
        return result

    def run_once(self) -> ReconciliationResult | None:
        """Run a single pass, returning ``None`` when it failed."""

        try:
            return self.run_now()
        except ContributionFetchError as exc:
            log.warning("Skipping reconciliation pass: %s", exc)
            return None
        except Exception:
            log.exception("Reconciliation pass failed")
            return None

    def start(self) -> None:
        previous = self._thread
        if previous is not None and previous.is_alive():
            if not self._stop_event.is_set():
                log.debug("Scheduler %s already running", self._name)
                return
            log.info("Waiting for the previous %s loop to finish its pass", self._name)
            previous.join()

        stop_event = threading.Event()
        self._stop_event = stop_event
        self._thread = threading.Thread(
            target=self._loop,
            args=(stop_event,),
            name=self._name,
            daemon=True,
        )
        self._thread.start()
        log.info("Started %s with interval=%ss", self._name, self.interval_seconds)

    def stop(self, timeout: float | None = None) -> None:
        self._stop_event.set()
        thread = self._thread
        if thread is None:
            return
        thread.join(timeout)
        if thread.is_alive():
            log.warning("%s still finishing a pass after stop; it will exit afterwards", self._name)
            return
        self._thread = None
        log.info("Stopped %s", self._name)

    def _loop(self, stop_event: threading.Event) -> None:
        while not stop_event.is_set():
            self.run_once()
            if stop_event.wait(self.interval_seconds):
                break
