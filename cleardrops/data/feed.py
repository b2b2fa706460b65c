"""
cleardrops/data/feed.py
───────────────────────
Realtime feed sources for classified sensor records.

Provides:
  - Feed / FeedRegistration : the subscription protocol consumed by the subscriber
  - InMemoryFeed            : process-local feed (tests, demo mode)
  - DemoFeed                : InMemoryFeed that pushes simulated records periodically
  - FirebaseFeed            : Firebase Realtime Database via firebase-admin
  - get_firebase_app()      : init-once accessor for the shared Firebase app
  - build_feed()            : pick a feed from settings

A feed delivers snapshots of "the latest `limit` records ordered by
`order_by`": a keyed mapping, a list (the database returns one for
integer-like keys), or None when the collection is empty.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

import firebase_admin
import numpy as np
from firebase_admin import credentials, db
from firebase_admin.exceptions import FirebaseError

from cleardrops.data.simulator import generate_record
from config.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[Any], None]
ErrorCallback = Callable[[Exception], None]


class FeedTransportError(Exception):
    """The feed could not deliver data (network, auth, permissions)."""


class FeedRegistration(Protocol):
    def close(self) -> None: ...


class Feed(Protocol):
    def listen_latest(
        self,
        path: str,
        order_by: str,
        limit: int,
        on_snapshot: SnapshotCallback,
        on_error: ErrorCallback,
    ) -> FeedRegistration: ...


# ── In-memory feed ────────────────────────────────────────────────────────────

@dataclass(eq=False)
class _Listener:
    path: str
    order_by: str
    limit: int
    on_snapshot: SnapshotCallback
    on_error: ErrorCallback


class _InMemoryRegistration:
    def __init__(self, feed: InMemoryFeed, listener: _Listener) -> None:
        self._feed = feed
        self._listener = listener

    def close(self) -> None:
        self._feed._remove(self._listener)


def _sort_key(order_by: str):
    # Records without the ordering child sort first, as in the database
    def key(item: tuple[str, Any]) -> tuple[int, Any]:
        value = item[1].get(order_by) if isinstance(item[1], dict) else None
        return (0, 0) if value is None else (1, value)
    return key


class InMemoryFeed:
    """Keeps collections in memory and notifies listeners on every change."""

    def __init__(self, default_path: str = default_settings.FEED_PATH) -> None:
        self._default_path = default_path
        self._collections: dict[str, dict[str, Any]] = {}
        self._listeners: list[_Listener] = []
        self._lock = threading.RLock()

    def listen_latest(
        self,
        path: str,
        order_by: str,
        limit: int,
        on_snapshot: SnapshotCallback,
        on_error: ErrorCallback,
    ) -> FeedRegistration:
        listener = _Listener(path, order_by, limit, on_snapshot, on_error)
        with self._lock:
            self._listeners.append(listener)
            snapshot = self._latest(listener)
        # Like the database, the current value is delivered right away
        listener.on_snapshot(snapshot)
        return _InMemoryRegistration(self, listener)

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def push(self, key: str, record: Any, path: str | None = None) -> None:
        path = path or self._default_path
        with self._lock:
            self._collections.setdefault(path, {})[key] = record
        self._notify(path)

    def clear(self, path: str | None = None) -> None:
        path = path or self._default_path
        with self._lock:
            self._collections.pop(path, None)
        self._notify(path)

    def fail(self, message: str, path: str | None = None) -> None:
        """Simulate a transport failure on every listener of `path`."""
        path = path or self._default_path
        for listener in self._listeners_for(path):
            listener.on_error(FeedTransportError(message))

    def _latest(self, listener: _Listener) -> dict[str, Any] | None:
        records = self._collections.get(listener.path, {})
        if not records:
            return None
        ordered = sorted(records.items(), key=_sort_key(listener.order_by))
        return dict(ordered[-listener.limit:])

    def _listeners_for(self, path: str) -> list[_Listener]:
        with self._lock:
            return [lst for lst in self._listeners if lst.path == path]

    def _notify(self, path: str) -> None:
        for listener in self._listeners_for(path):
            with self._lock:
                snapshot = self._latest(listener)
            listener.on_snapshot(snapshot)

    def _remove(self, listener: _Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)


class DemoFeed(InMemoryFeed):
    """
    InMemoryFeed fed by the simulator: one record at start(), then one every
    `interval_s` seconds on a daemon thread until stop().
    """

    def __init__(
        self,
        interval_s: float = default_settings.DEMO_PUSH_INTERVAL_S,
        seed: int = default_settings.SIMULATION_SEED,
        default_path: str = default_settings.FEED_PATH,
    ) -> None:
        super().__init__(default_path=default_path)
        self._interval_s = interval_s
        self._rng = np.random.default_rng(seed)
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._counter = 0

    def push_simulated(self) -> None:
        record = generate_record(self._rng)
        self._counter += 1
        self.push(f"demo-{self._counter:06d}", record)

    def start(self) -> None:
        if self._thread is not None:
            return
        self.push_simulated()
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="demo-feed", daemon=True)
        self._thread.start()
        logger.info("Demo feed started (every %.1fs)", self._interval_s)

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=self._interval_s + 1.0)
            self._thread = None

    def _run(self) -> None:
        while not self._stop.wait(self._interval_s):
            self.push_simulated()


# ── Firebase Realtime Database ────────────────────────────────────────────────

_app_lock = threading.Lock()


def get_firebase_app(cfg: Settings = default_settings) -> firebase_admin.App:
    """Return the process-wide Firebase app, initializing it on first use."""
    with _app_lock:
        try:
            return firebase_admin.get_app()
        except ValueError:
            pass
        if cfg.FIREBASE_CREDENTIALS:
            cred = credentials.Certificate(cfg.FIREBASE_CREDENTIALS)
        else:
            cred = credentials.ApplicationDefault()
        logger.info("Initializing Firebase app", extra={"url": cfg.FIREBASE_DATABASE_URL})
        return firebase_admin.initialize_app(cred, {"databaseURL": cfg.FIREBASE_DATABASE_URL})


class FirebaseFeed:
    """
    Listens on the collection reference and re-reads the latest record
    (`order_by_child(order_by).limit_to_last(limit)`) on every change event.
    """

    def __init__(self, app: firebase_admin.App) -> None:
        self._app = app

    def listen_latest(
        self,
        path: str,
        order_by: str,
        limit: int,
        on_snapshot: SnapshotCallback,
        on_error: ErrorCallback,
    ) -> FeedRegistration:
        ref = db.reference(path, app=self._app)
        query = ref.order_by_child(order_by).limit_to_last(limit)

        def _on_event(event: db.Event) -> None:
            try:
                snapshot = query.get()
            except FirebaseError as exc:
                on_error(FeedTransportError(str(exc)))
                return
            on_snapshot(snapshot)

        try:
            return ref.listen(_on_event)
        except FirebaseError as exc:
            on_error(FeedTransportError(str(exc)))
            return _ClosedRegistration()


class _ClosedRegistration:
    def close(self) -> None:
        return None


def build_feed(cfg: Settings = default_settings) -> Feed:
    if cfg.FEED_MODE == "firebase":
        return FirebaseFeed(get_firebase_app(cfg))
    return DemoFeed(
        interval_s=cfg.DEMO_PUSH_INTERVAL_S,
        seed=cfg.SIMULATION_SEED,
        default_path=cfg.FEED_PATH,
    )
