"""Shared fakes and payload builders for unit tests."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from neon.raw import Reddit


@dataclass
class Call:
    path: str
    method: str
    params: dict[str, Any]
    body: Any
    files: Any


class FakeExecutor:
    """Scripted RequestExecutor.

    Responses are queued per (method, path). The last queued response of a
    route repeats; exceptions are raised instead of returned.
    """

    def __init__(self) -> None:
        self.calls: list[Call] = []
        self.closed = False
        self._routes: dict[tuple[str, str], list[Any]] = {}

    def add(self, method: str, path: str, *responses: Any) -> None:
        self._routes.setdefault((method, path), []).extend(responses)

    def calls_to(self, path: str, method: str | None = None) -> list[Call]:
        return [c for c in self.calls if c.path == path and (method is None or c.method == method)]

    async def execute(self, path, method="GET", params=None, body=None, files=None):
        self.calls.append(Call(path, method, dict(params or {}), body, files))
        queue = self._routes.get((method, path))
        if not queue:
            raise AssertionError(f"Unexpected request: {method} {path}")
        response = queue.pop(0) if len(queue) > 1 else queue[0]
        if callable(response):
            response = response()
        if isinstance(response, BaseException):
            raise response
        return copy.deepcopy(response)

    async def close(self) -> None:
        self.closed = True


class FakeClock:
    """Deterministic clock; sleep advances time instead of waiting."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, tzinfo=UTC)
        self.sleeps: list[float] = []
        self.on_sleep: Any = None

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.advance(seconds)
        if self.on_sleep is not None:
            self.on_sleep(len(self.sleeps))


class Payloads:
    """Builders for raw API payloads."""

    @staticmethod
    def envelope(kind: str, data: dict[str, Any]) -> dict[str, Any]:
        return {"kind": kind, "data": data}

    @staticmethod
    def listing(children: list[dict[str, Any]], after: str | None = None, before: str | None = None) -> dict[str, Any]:
        return {"kind": "Listing", "data": {"children": children, "after": after, "before": before}}

    @staticmethod
    def comment(comment_id: str = "c1", **overrides: Any) -> dict[str, Any]:
        data = {
            "id": comment_id,
            "name": f"t1_{comment_id}",
            "author": "alice",
            "body": "hello",
            "score": 3,
            "saved": False,
            "score_hidden": False,
            "archived": False,
            "gilded": 0,
            "banned_by": None,
            "link_id": "t3_s1",
            "parent_id": "t3_s1",
            "subreddit": "python",
            "subreddit_id": "t5_2qh0y",
            "created": 1700000000.0,
            "created_utc": 1700000000.0,
            "replies": "",
        }
        data.update(overrides)
        return {"kind": "t1", "data": data}

    @staticmethod
    def submission(submission_id: str = "s1", **overrides: Any) -> dict[str, Any]:
        data = {
            "id": submission_id,
            "name": f"t3_{submission_id}",
            "title": "A post",
            "author": "bob",
            "score": 10,
            "num_comments": 2,
            "over_18": False,
            "saved": False,
            "hidden": False,
            "locked": False,
            "subreddit": "python",
            "created_utc": 1700000000.0,
        }
        data.update(overrides)
        return {"kind": "t3", "data": data}

    @staticmethod
    def message(message_id: str = "m1", **overrides: Any) -> dict[str, Any]:
        data = {
            "id": message_id,
            "name": f"t4_{message_id}",
            "author": "carol",
            "dest": "alice",
            "subject": "hi",
            "body": "hello there",
            "new": True,
            "created_utc": 1700000000.0,
        }
        data.update(overrides)
        return {"kind": "t4", "data": data}

    @staticmethod
    def user(username: str = "alice", user_id: str = "u1", **overrides: Any) -> dict[str, Any]:
        data = {
            "id": user_id,
            "name": username,
            "link_karma": 5,
            "comment_karma": 7,
            "is_friend": False,
            "is_gold": True,
            "is_mod": False,
            "has_verified_email": True,
            "created_utc": 1600000000.0,
        }
        data.update(overrides)
        return {"kind": "t2", "data": data}

    @staticmethod
    def subreddit(display_name: str = "python", sub_id: str = "2qh0y", **overrides: Any) -> dict[str, Any]:
        data = {
            "id": sub_id,
            "name": f"t5_{sub_id}",
            "display_name": display_name,
            "title": "Python",
            "subscribers": 1000,
            "over18": False,
            "user_is_subscriber": False,
            "user_is_moderator": True,
        }
        data.update(overrides)
        return {"kind": "t5", "data": data}

    @staticmethod
    def token(access_token: str = "tok", expires_in: int = 3600, **extra: Any) -> dict[str, Any]:
        return {
            "access_token": access_token,
            "token_type": "bearer",
            "expires_in": expires_in,
            "scope": "*",
            **extra,
        }


@pytest.fixture
def payloads() -> type[Payloads]:
    return Payloads


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def reddit(executor: FakeExecutor, clock: FakeClock) -> Reddit:
    return Reddit(executor, clock=clock)
