"""Unit tests for cursor-following collection."""

from __future__ import annotations

import pytest

from neon.raw import ForbiddenError, NotFoundError, Paginator, PrivilegedUser

PATH = "/r/python/new"


def _page(payloads, ids, after):
    return payloads.listing([payloads.submission(i) for i in ids], after=after)


class TestCollect:
    """Test Paginator.collect."""

    @pytest.mark.asyncio
    async def test_short_feed_is_exhausted(self, reddit, executor, payloads):
        executor.add("GET", PATH, _page(payloads, [f"s{i}" for i in range(7)], None))

        listing = await Paginator(reddit).collect(PATH, limit=25)

        assert len(listing) == 7
        assert listing.after is None
        assert len(executor.calls) == 1
        assert executor.calls[0].params["limit"] == 25

    @pytest.mark.asyncio
    async def test_follows_cursors_and_caps_page_size(self, reddit, executor, payloads):
        first = _page(payloads, [f"a{i}" for i in range(100)], "t3_a99")
        second = _page(payloads, [f"b{i}" for i in range(50)], "t3_b49")
        executor.add("GET", PATH, first, second)

        listing = await Paginator(reddit).collect(PATH, {"sort": "new"}, limit=150)

        assert len(listing) == 150
        assert listing.after == "t3_b49"
        limits = [call.params["limit"] for call in executor.calls]
        assert limits == [100, 50]
        assert executor.calls[0].params["after"] is None
        assert executor.calls[1].params["after"] == "t3_a99"
        assert all(call.params["sort"] == "new" for call in executor.calls)

    @pytest.mark.asyncio
    async def test_truncated_page_sets_cursor_to_last_kept(self, reddit, executor, payloads):
        # the server may send more than asked for
        executor.add("GET", PATH, _page(payloads, ["a", "b", "c", "d", "e"], "t3_e"))

        listing = await Paginator(reddit).collect(PATH, limit=3)

        assert [item.id for item in listing] == ["a", "b", "c"]
        assert listing.after == "t3_c"

    @pytest.mark.asyncio
    async def test_empty_page_stops(self, reddit, executor, payloads):
        executor.add("GET", PATH, _page(payloads, ["a"], "t3_a"), _page(payloads, [], "t3_a"))

        listing = await Paginator(reddit).collect(PATH, limit=10)

        assert len(listing) == 1
        assert len(executor.calls) == 2

    @pytest.mark.asyncio
    async def test_not_found_returns_partial(self, reddit, executor, payloads, caplog):
        executor.add("GET", PATH, _page(payloads, ["a", "b"], "t3_b"), NotFoundError("gone"))

        with caplog.at_level("WARNING", logger="neon.raw.runtime.telemetry"):
            listing = await Paginator(reddit).collect(PATH, limit=10)

        assert [item.id for item in listing] == ["a", "b"]
        assert listing.after == "t3_b"
        assert any(record.message == "pagination_truncated" for record in caplog.records)

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self, reddit, executor, payloads):
        executor.add("GET", PATH, _page(payloads, ["a"], "t3_a"), ForbiddenError("private"))

        with pytest.raises(ForbiddenError):
            await Paginator(reddit).collect(PATH, limit=10)

    @pytest.mark.asyncio
    async def test_resumes_from_caller_cursor(self, reddit, executor, payloads):
        executor.add("GET", PATH, _page(payloads, ["x"], None))

        await Paginator(reddit).collect(PATH, {"after": "t3_w"}, limit=5)

        assert executor.calls[0].params["after"] == "t3_w"

    @pytest.mark.asyncio
    async def test_rejects_non_positive_limit(self, reddit):
        with pytest.raises(ValueError):
            await Paginator(reddit).collect(PATH, limit=0)


class TestFetchPage:
    """fetch_page issues exactly one request."""

    @pytest.mark.asyncio
    async def test_single_request(self, reddit, executor, payloads):
        executor.add("GET", PATH, _page(payloads, ["a", "b"], "t3_b"))

        page = await Paginator(reddit).fetch_page(PATH, {"limit": 2})

        assert len(page) == 2
        assert page.after == "t3_b"
        assert len(executor.calls) == 1


class TestCollectUsers:
    """User lists follow cursors too."""

    @pytest.mark.asyncio
    async def test_collect_users(self, reddit, executor):
        path = "/r/python/about/banned"
        first = {"kind": "UserList", "data": {"children": [{"name": "a", "id": "t2_a"}], "after": "t2_a"}}
        second = {"kind": "UserList", "data": {"children": [{"name": "b", "id": "t2_b"}], "after": None}}
        executor.add("GET", path, first, second)

        users = await Paginator(reddit).collect_users(path, limit=5)

        assert [user.username for user in users] == ["a", "b"]
        assert all(isinstance(user, PrivilegedUser) for user in users)
        assert users.after is None
