"""Placeholder for comments the server left out of a comment tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.exceptions import MalformedResponseError
from .base import Thing

if TYPE_CHECKING:
    from .comment import Comment


class MoreComments(Thing):
    """Collapsed part of a comment tree.

    Attributes:
        count: Number of comments behind this placeholder
        parent_id: Fullname of the parent comment or submission
        children: Base36 ids of the collapsed comments
    """

    count: int | None = None
    depth: int | None = None
    parent_id: str | None = None
    children: list[str] | None = None

    @property
    def is_comment(self) -> bool:
        return False

    @property
    def is_submission(self) -> bool:
        return False

    @property
    def is_more_comments(self) -> bool:
        return True

    async def expand(self, link_fullname: str, sort: str | None = None) -> list[Comment | MoreComments]:
        """Load the collapsed comments.

        Args:
            link_fullname: Fullname of the submission the tree belongs to
            sort: Comment sort order
        """
        from ..capability.actions import check_json_errors, client_of
        from .hydration import hydrate

        if not self.children:
            return []
        params = {
            "api_type": "json",
            "link_id": link_fullname,
            "children": ",".join(self.children),
            "sort": sort,
        }
        data = await client_of(self).request_data("/api/morechildren", "GET", params)
        check_json_errors(data)
        try:
            things = data["json"]["data"]["things"]
        except (KeyError, TypeError) as e:
            raise MalformedResponseError(f"Unexpected morechildren response: {data!r}") from e
        return [hydrate(self.client, thing) for thing in things or []]  # type: ignore[misc]
