"""Unit tests for User, Subreddit, Message and wiki objects."""

from __future__ import annotations

from neon.raw import User, WikiPage, WikiPageRevision
from neon.raw.models import hydrate


class TestUser:
    """Users expose the username and a t2 fullname."""

    def test_name_is_moved_to_username(self, payloads):
        user = hydrate(None, payloads.user("alice", "u1"))
        assert user.username == "alice"
        assert user.name == "t2_u1"
        assert user.fullname == "t2_u1"

    def test_is_suspended_defaults_false(self, payloads):
        assert hydrate(None, payloads.user()).is_suspended is False
        assert hydrate(None, payloads.user(is_suspended=True)).is_suspended is True

    def test_aliases(self, payloads):
        user = hydrate(None, payloads.user(is_friend=True, is_gold=True, is_mod=True, hide_from_robots=False))
        assert user.is_friend_of_me is True
        assert user.has_gold is True
        assert user.is_moderator is True
        assert user.has_verified_email_address is True
        assert user.is_hidden_from_robots is False

    def test_flat_me_payload(self):
        user = User.hydrate(None, {"id": "u1", "name": "alice", "link_karma": 1})
        assert user.username == "alice"
        assert user.link_karma == 1


class TestSubreddit:
    """Subreddit aliases."""

    def test_aliases(self, payloads):
        sub = hydrate(None, payloads.subreddit(over18=True, user_is_banned=False))
        assert sub.is_nsfw is True
        assert sub.subscriber_count == 1000
        assert sub.is_subscriber is False
        assert sub.is_moderator is True
        assert sub.is_banned is False


class TestMessage:
    """Message aliases."""

    def test_aliases(self, payloads):
        message = hydrate(None, payloads.message(new=True, dest="alice"))
        assert message.is_unread is True
        assert message.recipient == "alice"

    def test_thread_replies(self, payloads):
        thread = payloads.listing([payloads.message("m2")])
        message = hydrate(None, payloads.message(replies=thread))
        assert [m.id for m in message.replies] == ["m2"]


class TestWiki:
    """Wiki pages carry their name; revisions unwrap the nested author."""

    def test_page_from_response(self):
        data = {
            "kind": "wikipage",
            "data": {
                "content_md": "# Rules",
                "may_revise": True,
                "revision_date": 1700000000.0,
                "revision_by": {"kind": "t2", "data": {"name": "mod"}},
            },
        }
        page = WikiPage.from_response(None, data, "rules", "python")
        assert page.name == "rules"
        assert page.subreddit == "python"
        assert page.content_md == "# Rules"
        assert page.revised_by == "mod"
        assert page.revision_date.year == 2023

    def test_revision_accessors(self):
        revision = WikiPageRevision.hydrate(
            None,
            {
                "id": "rev1",
                "page": "rules",
                "reason": "",
                "timestamp": 1700000000.0,
                "author": {"kind": "t2", "data": {"name": "editor"}},
            },
        )
        assert revision.author == "editor"
        assert revision.reason is None
        assert revision.created_utc.year == 2023
        assert revision.created.tzinfo is None
