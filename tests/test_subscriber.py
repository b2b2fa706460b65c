"""
tests/test_subscriber.py
─────────────────────────
Tests for the live reading subscriber state machine.
"""
from collections import OrderedDict

import pytest

from cleardrops.data.subscriber import (
    Empty,
    Errored,
    FeedState,
    HasData,
    Loading,
    LiveReadingSubscriber,
    extract_latest,
)
from config.water_quality import REASON_ALL_OK


class _RecordingFeed:
    """Feed double that captures the subscription and lets tests drive it."""

    def __init__(self):
        self.calls = []
        self.closed = 0
        self.on_snapshot = None
        self.on_error = None

    def listen_latest(self, path, order_by, limit, on_snapshot, on_error):
        self.calls.append((path, order_by, limit))
        self.on_snapshot = on_snapshot
        self.on_error = on_error
        return self

    def close(self):
        self.closed += 1


class TestExtractLatest:
    def test_opaque_key(self, suitable_record):
        assert extract_latest({"-NzX8q1": suitable_record}) is suitable_record

    def test_ordered_dict(self, suitable_record):
        assert extract_latest(OrderedDict([("k", suitable_record)])) is suitable_record

    def test_list_snapshot_with_holes(self, suitable_record):
        assert extract_latest([None, None, suitable_record]) is suitable_record

    @pytest.mark.parametrize("snapshot", [None, {}, [], [None], "text", 5])
    def test_empty_snapshots(self, snapshot):
        assert extract_latest(snapshot) is None


class TestLifecycle:
    def test_initial_state_is_loading(self, subscriber):
        assert isinstance(subscriber.current, Loading)
        assert subscriber.current.state is FeedState.LOADING
        assert subscriber.version == 0

    def test_subscription_parameters(self):
        feed = _RecordingFeed()
        sub = LiveReadingSubscriber(feed, path="sensor_data_classified", order_by="time")
        sub.start()
        assert feed.calls == [("sensor_data_classified", "time", 1)]

    def test_start_is_idempotent(self):
        feed = _RecordingFeed()
        sub = LiveReadingSubscriber(feed, path="p")
        sub.start()
        sub.start()
        assert len(feed.calls) == 1

    def test_close_releases_registration(self):
        feed = _RecordingFeed()
        sub = LiveReadingSubscriber(feed, path="p")
        sub.start()
        sub.close()
        sub.close()
        assert feed.closed == 1
        assert sub.closed

    def test_start_after_close_does_nothing(self):
        feed = _RecordingFeed()
        sub = LiveReadingSubscriber(feed, path="p")
        sub.close()
        sub.start()
        assert feed.calls == []


class TestEvents:
    def test_non_empty_snapshot_gives_reading(self, feed, subscriber, suitable_record):
        feed.push("-abc", suitable_record)
        subscriber.start()
        event = subscriber.current
        assert isinstance(event, HasData)
        assert event.reading.acidity == 7.0
        assert event.reading.classification_label == "1"

    def test_empty_feed_is_empty_not_errored(self, subscriber):
        subscriber.start()
        assert isinstance(subscriber.current, Empty)

    def test_empty_drops_stale_reading(self, feed, subscriber, suitable_record):
        feed.push("-abc", suitable_record)
        subscriber.start()
        feed.clear()
        assert isinstance(subscriber.current, Empty)
        assert not hasattr(subscriber.current, "reading")

    def test_later_event_supersedes(self, feed, subscriber, suitable_record, unsuitable_record):
        subscriber.start()
        feed.push("-a", suitable_record)
        feed.push("-b", unsuitable_record)
        reading = subscriber.current.reading
        assert reading.classification_label == "0"
        assert reading.temperature == 30.0

    def test_latest_by_time_not_insertion(self, feed, subscriber, suitable_record, unsuitable_record):
        subscriber.start()
        feed.push("-b", unsuitable_record)
        feed.push("-a", suitable_record)  # older time
        assert subscriber.current.reading.classification_label == "0"

    def test_transport_error(self, feed, subscriber):
        subscriber.start()
        feed.fail("Permission denied")
        event = subscriber.current
        assert isinstance(event, Errored)
        assert event.message == "Permission denied"

    def test_recovers_after_error(self, feed, subscriber, suitable_record):
        subscriber.start()
        feed.fail("offline")
        feed.push("-a", suitable_record)
        assert isinstance(subscriber.current, HasData)

    def test_version_increments_per_event(self, feed, subscriber, suitable_record):
        subscriber.start()
        assert subscriber.version == 1  # initial empty snapshot
        feed.push("-a", suitable_record)
        feed.fail("x")
        assert subscriber.version == 3

    def test_malformed_record_is_absorbed(self, feed, subscriber):
        subscriber.start()
        feed.push("-a", {"reading": "broken", "classification": None})
        event = subscriber.current
        assert isinstance(event, HasData)
        assert event.reading.temperature is None
        assert event.reading.classification_label == ""

    def test_each_event_is_a_new_reading(self, feed, subscriber, suitable_record):
        subscriber.start()
        feed.push("-a", suitable_record)
        first = subscriber.current.reading
        feed.push("-a", dict(suitable_record))
        assert subscriber.current.reading is not first


class TestConsumers:
    def test_replays_current_event(self, feed, subscriber, suitable_record):
        feed.push("-a", suitable_record)
        subscriber.start()
        received = []
        subscriber.subscribe(received.append)
        assert len(received) == 1
        assert isinstance(received[0], HasData)

    def test_receives_each_event(self, feed, subscriber, suitable_record):
        received = []
        subscriber.subscribe(received.append)
        subscriber.start()
        feed.push("-a", suitable_record)
        feed.fail("boom")
        assert [e.state for e in received] == [
            FeedState.LOADING,
            FeedState.EMPTY,
            FeedState.HAS_DATA,
            FeedState.ERRORED,
        ]

    def test_unsubscribe(self, feed, subscriber, suitable_record):
        received = []
        unsubscribe = subscriber.subscribe(received.append)
        subscriber.start()
        unsubscribe()
        feed.push("-a", suitable_record)
        assert len(received) == 2  # Loading replay + initial Empty

    def test_no_callbacks_after_teardown(self, feed, subscriber, suitable_record):
        received = []
        subscriber.subscribe(received.append)
        subscriber.start()
        count = len(received)
        version = subscriber.version

        subscriber.close()
        feed.push("-a", suitable_record)
        feed.fail("late error")

        assert len(received) == count
        assert subscriber.version == version
        assert feed.listener_count == 0

    def test_late_delivery_from_feed_thread_is_ignored(self, suitable_record):
        feed = _RecordingFeed()
        sub = LiveReadingSubscriber(feed, path="p")
        received = []
        sub.subscribe(received.append)
        sub.start()
        sub.close()
        # A feed that keeps calling back after close()
        feed.on_snapshot({"k": suitable_record})
        feed.on_error(RuntimeError("late"))
        assert [e.state for e in received] == [FeedState.LOADING]

    def test_close_during_delivery_stops_remaining_consumers(self, feed, subscriber, suitable_record):
        received = []
        subscriber.start()

        def closing_consumer(event):
            if isinstance(event, HasData):
                subscriber.close()

        subscriber.subscribe(closing_consumer)
        subscriber.subscribe(received.append)
        feed.push("-a", suitable_record)
        assert [e.state for e in received] == [FeedState.EMPTY]

    def test_failing_consumer_does_not_reach_feed(self, feed, subscriber, suitable_record, caplog):
        received = []
        subscriber.start()

        def broken_consumer(event):
            if isinstance(event, HasData):
                raise RuntimeError("render failed")

        subscriber.subscribe(broken_consumer)
        subscriber.subscribe(received.append)
        with caplog.at_level("ERROR", logger="cleardrops.data.subscriber"):
            feed.push("-a", suitable_record)
        assert isinstance(received[-1], HasData)
        assert "Feed consumer failed" in caplog.text

    def test_subscribe_after_close_is_noop(self, subscriber):
        subscriber.close()
        received = []
        unsubscribe = subscriber.subscribe(received.append)
        unsubscribe()
        assert received == []


class TestReconnectHook:
    def test_hook_called_with_message(self, feed):
        calls = []
        sub = LiveReadingSubscriber(
            feed, path="sensor_data_classified", on_transport_error=lambda s, msg: calls.append((s, msg))
        )
        sub.start()
        feed.fail("network down")
        assert calls == [(sub, "network down")]
        sub.close()

    def test_no_hook_means_single_errored_state(self, feed, subscriber):
        subscriber.start()
        feed.fail("network down")
        assert isinstance(subscriber.current, Errored)
        assert feed.listener_count == 1

    def test_empty_exception_message_uses_class_name(self):
        feed = _RecordingFeed()
        sub = LiveReadingSubscriber(feed, path="p")
        sub.start()
        feed.on_error(TimeoutError())
        assert sub.current.message == "TimeoutError"


class TestEndToEnd:
    def test_suitable_reading_explained(self, feed, subscriber, suitable_record):
        from cleardrops.analytics.justification import explain

        feed.push("-a", suitable_record)
        subscriber.start()
        assert explain(subscriber.current.reading) == [REASON_ALL_OK]
