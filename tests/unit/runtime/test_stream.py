"""Unit tests for deduplicated head polling."""

from __future__ import annotations

import pytest

from neon.raw import (
    AuthError,
    MalformedResponseError,
    NotFoundError,
    RateLimitError,
    SeenSet,
    ServerError,
    StreamEventType,
    TransportError,
)

PATH = "/r/python/comments"


def _head(payloads, *ids):
    return payloads.listing([payloads.comment(i) for i in ids], after="t1_" + ids[-1] if ids else None)


def _stop_after(clock, stream, polls):
    def on_sleep(count):
        if count >= polls:
            stream.stop()

    clock.on_sleep = on_sleep


class TestSeenSet:
    """Bounded FIFO set."""

    def test_evicts_oldest(self):
        seen = SeenSet(limit=2)
        for key in ("a", "b", "c"):
            seen.add(key)
        assert "a" not in seen
        assert list(seen) == ["b", "c"]

    def test_re_adding_does_not_reorder(self):
        seen = SeenSet(limit=2, initial=["a", "b"])
        seen.add("a")
        seen.add("c")
        assert list(seen) == ["b", "c"]

    def test_rejects_non_positive_limit(self):
        with pytest.raises(ValueError):
            SeenSet(limit=0)


class TestStreamDeduplication:
    """Only new head items are emitted, in server order."""

    @pytest.mark.asyncio
    async def test_emits_new_items_once(self, reddit, executor, clock, payloads):
        executor.add("GET", PATH, _head(payloads, "c3", "c2", "c1"), _head(payloads, "c4", "c3", "c2"))
        stream = reddit.stream(PATH)
        _stop_after(clock, stream, 2)

        items = [item.id async for item in stream]

        assert items == ["c3", "c2", "c1", "c4"]
        assert len(executor.calls) == 2
        assert clock.sleeps == [5.0, 5.0]

    @pytest.mark.asyncio
    async def test_several_new_items_keep_feed_order(self, reddit, executor, clock, payloads):
        executor.add(
            "GET",
            PATH,
            _head(payloads, "c2", "c1"),
            _head(payloads, "c5", "c4", "c3", "c2", "c1"),
        )
        stream = reddit.stream(PATH)
        _stop_after(clock, stream, 2)

        items = [item.id async for item in stream]

        assert items == ["c2", "c1", "c5", "c4", "c3"]

    @pytest.mark.asyncio
    async def test_polls_head_page_only(self, reddit, executor, clock, payloads):
        executor.add("GET", PATH, _head(payloads, "c1"))
        stream = reddit.stream(PATH, {"sort": "new"})
        _stop_after(clock, stream, 2)

        async for _ in stream:
            pass

        for call in executor.calls:
            assert "after" not in call.params
            assert call.params["limit"] == 100
            assert call.params["sort"] == "new"

    @pytest.mark.asyncio
    async def test_skip_existing(self, reddit, executor, clock, payloads):
        executor.add("GET", PATH, _head(payloads, "c2", "c1"), _head(payloads, "c3", "c2", "c1"))
        stream = reddit.stream(PATH, skip_existing=True)
        _stop_after(clock, stream, 2)

        items = [item.id async for item in stream]

        assert items == ["c3"]

    @pytest.mark.asyncio
    async def test_reverse_scans_oldest_first(self, reddit, executor, clock, payloads):
        executor.add("GET", PATH, _head(payloads, "c3", "c2", "c1"))
        stream = reddit.stream(PATH, reverse=True)
        _stop_after(clock, stream, 1)

        items = [item.id async for item in stream]

        assert items == ["c1", "c2", "c3"]

    @pytest.mark.asyncio
    async def test_resume_from(self, reddit, executor, clock, payloads):
        executor.add("GET", PATH, _head(payloads, "c3", "c2", "c1"))
        stream = reddit.stream(PATH, resume_from=["t1_c2", "t1_c1"])
        _stop_after(clock, stream, 1)

        items = [item.id async for item in stream]

        assert items == ["c3"]

    @pytest.mark.asyncio
    async def test_evicted_items_may_reappear(self, reddit, executor, clock, payloads):
        executor.add("GET", PATH, _head(payloads, "c3", "c2", "c1"))
        stream = reddit.stream(PATH, seen_limit=2)
        _stop_after(clock, stream, 2)

        items = [item.id async for item in stream]

        # with a seen-set smaller than the page every poll re-emits the page
        assert items == ["c3", "c2", "c1", "c3", "c2", "c1"]
        assert len(stream.seen) == 2

    @pytest.mark.asyncio
    async def test_custom_poll_interval(self, reddit, executor, clock, payloads):
        executor.add("GET", PATH, _head(payloads, "c1"))
        stream = reddit.stream(PATH, poll_interval=30.0)
        _stop_after(clock, stream, 1)

        async for _ in stream:
            pass

        assert clock.sleeps == [30.0]


class TestStreamStop:
    """stop() halts polling and discards in-flight results."""

    @pytest.mark.asyncio
    async def test_stop_discards_in_flight_poll(self, reddit, executor, payloads):
        stream = reddit.stream(PATH)

        def respond():
            stream.stop()
            return _head(payloads, "c1")

        executor.add("GET", PATH, respond)

        items = [item async for item in stream]

        assert items == []
        assert stream.stopped
        assert len(stream.seen) == 0

    @pytest.mark.asyncio
    async def test_stop_mid_page_leaves_rest_unseen(self, reddit, executor, payloads):
        executor.add("GET", PATH, _head(payloads, "c3", "c2", "c1"))
        stream = reddit.stream(PATH)
        emitted = []

        async for item in stream:
            emitted.append(item.id)
            stream.stop()

        assert emitted == ["c3"]
        assert list(stream.seen) == ["t1_c3"]
        assert len(executor.calls) == 1

    @pytest.mark.asyncio
    async def test_break_stops_polling(self, reddit, executor, payloads):
        executor.add("GET", PATH, _head(payloads, "c2", "c1"))
        stream = reddit.stream(PATH)

        async for item in stream:
            assert item.id == "c2"
            break

        assert len(executor.calls) == 1

    @pytest.mark.asyncio
    async def test_stop_before_iteration(self, reddit, executor):
        stream = reddit.stream(PATH)
        stream.stop()

        assert [item async for item in stream] == []
        assert executor.calls == []


class TestStreamErrors:
    """Transient errors are events; others end the stream."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [RateLimitError("slow down", retry_after=3), ServerError("502", status_code=502), TransportError("reset")],
    )
    async def test_transient_error_becomes_event(self, reddit, executor, clock, payloads, error):
        executor.add("GET", PATH, error, _head(payloads, "c1"))
        stream = reddit.stream(PATH)
        _stop_after(clock, stream, 2)

        events = [event async for event in stream.events()]

        assert [event.type for event in events] == [StreamEventType.ERROR, StreamEventType.ITEM]
        assert events[0].error is error
        assert events[0].poll_index == 0
        assert events[1].item.id == "c1"
        assert events[1].poll_index == 1

    @pytest.mark.asyncio
    async def test_plain_iteration_logs_and_continues(self, reddit, executor, clock, payloads, caplog):
        executor.add("GET", PATH, ServerError("503", status_code=503), _head(payloads, "c1"))
        stream = reddit.stream(PATH)
        _stop_after(clock, stream, 2)

        with caplog.at_level("WARNING", logger="neon.raw.runtime.telemetry"):
            items = [item.id async for item in stream]

        assert items == ["c1"]
        assert any(record.message == "stream_poll_error" for record in caplog.records)

    @pytest.mark.asyncio
    async def test_seen_state_survives_transient_error(self, reddit, executor, clock, payloads):
        executor.add(
            "GET",
            PATH,
            _head(payloads, "c1"),
            TransportError("timeout"),
            _head(payloads, "c2", "c1"),
        )
        stream = reddit.stream(PATH)
        _stop_after(clock, stream, 3)

        items = [item.id async for item in stream]

        assert items == ["c1", "c2"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [AuthError("expired"), NotFoundError("banned subreddit"), MalformedResponseError("bad kind")],
    )
    async def test_non_transient_error_raises(self, reddit, executor, payloads, error):
        executor.add("GET", PATH, error)
        stream = reddit.stream(PATH)

        with pytest.raises(type(error)):
            async for _ in stream:
                pass
