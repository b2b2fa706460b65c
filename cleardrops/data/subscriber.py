"""
cleardrops/data/subscriber.py
─────────────────────────────
Live subscription to the most recent classified record.

State machine:

    Loading ──► HasData(reading) ◄──► Empty ◄──► Errored(message)

Loading is the initial state only. Every snapshot or transport error
replaces the current event wholesale; consumers receive each new event.
After close() nothing else is delivered, whatever the feed still sends.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union

from cleardrops.data.feed import Feed, FeedRegistration
from cleardrops.data.models import Reading
from cleardrops.data.normalizer import normalize_record
from config.settings import settings

logger = logging.getLogger(__name__)


class FeedState(str, Enum):
    LOADING = "loading"
    HAS_DATA = "has_data"
    EMPTY = "empty"
    ERRORED = "errored"


@dataclass(frozen=True)
class Loading:
    state: ClassVar[FeedState] = FeedState.LOADING


@dataclass(frozen=True)
class HasData:
    reading: Reading
    state: ClassVar[FeedState] = FeedState.HAS_DATA


@dataclass(frozen=True)
class Empty:
    state: ClassVar[FeedState] = FeedState.EMPTY


@dataclass(frozen=True)
class Errored:
    message: str
    state: ClassVar[FeedState] = FeedState.ERRORED


FeedEvent = Union[Loading, HasData, Empty, Errored]
Consumer = Callable[[FeedEvent], None]
ErrorHook = Callable[["LiveReadingSubscriber", str], None]


def extract_latest(snapshot: Any) -> Any | None:
    """
    Pull the single record out of a "latest one" snapshot.

    Mappings carry the record under an opaque push key; list snapshots
    (integer-like keys) may contain None holes. Returns None when empty.
    """
    if isinstance(snapshot, Mapping):
        values = [v for v in snapshot.values() if v is not None]
        return values[-1] if values else None
    if isinstance(snapshot, Sequence) and not isinstance(snapshot, (str, bytes)):
        values = [v for v in snapshot if v is not None]
        return values[-1] if values else None
    return None


class LiveReadingSubscriber:
    """
    Owns exactly one feed subscription and the "current" event.

    Args:
        feed: Source of snapshots (injected; tests pass an InMemoryFeed)
        path: Collection name on the feed
        order_by: Child key that orders records in time
        on_transport_error: Optional hook called after an Errored event;
            the place to plug a reconnection policy. None means no retry.
    """

    LIMIT = 1

    def __init__(
        self,
        feed: Feed,
        path: str = settings.FEED_PATH,
        order_by: str = settings.FEED_ORDER_BY,
        on_transport_error: ErrorHook | None = None,
    ) -> None:
        self._feed = feed
        self._path = path
        self._order_by = order_by
        self._on_transport_error = on_transport_error

        self._lock = threading.RLock()
        self._current: FeedEvent = Loading()
        self._version = 0
        self._consumers: list[Consumer] = []
        self._registration: FeedRegistration | None = None
        self._started = False
        self._closed = False

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def start(self) -> None:
        with self._lock:
            if self._started or self._closed:
                return
            self._started = True
        logger.info("Subscribing to latest record", extra={"feed_path": self._path})
        registration = self._feed.listen_latest(
            self._path,
            self._order_by,
            self.LIMIT,
            self._handle_snapshot,
            self._handle_error,
        )
        with self._lock:
            if self._closed:
                registration.close()
            else:
                self._registration = registration

    def close(self) -> None:
        """Release the feed subscription and drop every consumer."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            registration, self._registration = self._registration, None
            self._consumers.clear()
        if registration is not None:
            registration.close()
        logger.info("Subscription released", extra={"feed_path": self._path})

    @property
    def closed(self) -> bool:
        return self._closed

    # ── Consumers ─────────────────────────────────────────────────────────────

    def subscribe(self, consumer: Consumer) -> Callable[[], None]:
        """Register `consumer`, replay the current event to it, return an unsubscribe."""
        with self._lock:
            if self._closed:
                return lambda: None
            self._consumers.append(consumer)
            current = self._current
        consumer(current)

        def unsubscribe() -> None:
            with self._lock:
                if consumer in self._consumers:
                    self._consumers.remove(consumer)

        return unsubscribe

    @property
    def current(self) -> FeedEvent:
        with self._lock:
            return self._current

    @property
    def version(self) -> int:
        with self._lock:
            return self._version

    def snapshot(self) -> tuple[int, FeedEvent]:
        with self._lock:
            return self._version, self._current

    # ── Feed callbacks ────────────────────────────────────────────────────────

    def _handle_snapshot(self, snapshot: Any) -> None:
        record = extract_latest(snapshot)
        if record is None:
            self._publish(Empty())
        else:
            self._publish(HasData(normalize_record(record)))

    def _handle_error(self, exc: Exception) -> None:
        message = str(exc) or exc.__class__.__name__
        logger.warning("Feed transport error: %s", message, extra={"feed_path": self._path})
        if not self._publish(Errored(message)):
            return
        if self._on_transport_error is not None:
            self._on_transport_error(self, message)

    def _publish(self, event: FeedEvent) -> bool:
        with self._lock:
            if self._closed:
                return False
            self._current = event
            self._version += 1
            consumers = list(self._consumers)
            version = self._version
        logger.debug("Feed event", extra={"state": event.state.value, "version": version})
        for consumer in consumers:
            if self.closed:
                break
            try:
                consumer(event)
            except Exception:
                # runs on the feed's delivery thread
                logger.exception("Feed consumer failed", extra={"state": event.state.value})
        return True
