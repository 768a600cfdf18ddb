"""Structured logging for requests, pagination and streams.

This module provides telemetry hooks for the runtime, emitting structured
logs with a short event name as the message and the details in ``extra``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request_completed(*, method: str, path: str, latency_ms: float) -> None:
    """Log one completed API call."""
    logger.debug(
        "request_completed",
        extra={"method": method, "path": path, "latency_ms": latency_ms},
    )


def log_page_fetched(
    *,
    path: str,
    page_index: int,
    items: int,
    after: str | None,
) -> None:
    """Log one fetched listing page.

    Args:
        path: Endpoint path
        page_index: Zero-based index of the page within a collection
        items: Number of children on the page
        after: Cursor returned with the page
    """
    logger.debug(
        "page_fetched",
        extra={"path": path, "page_index": page_index, "items": items, "after": after},
    )


def log_pagination_complete(
    *,
    path: str,
    pages: int,
    total_items: int,
    limit: int,
    exhausted: bool,
) -> None:
    """Log completion of a paginated collection.

    Args:
        path: Endpoint path
        pages: Number of pages fetched
        total_items: Items in the resulting Listing
        limit: Requested limit
        exhausted: Whether the feed ran out before the limit was reached
    """
    logger.info(
        "pagination_complete",
        extra={
            "path": path,
            "pages": pages,
            "total_items": total_items,
            "limit": limit,
            "exhausted": exhausted,
        },
    )


def log_pagination_truncated(*, path: str, total_items: int, error_message: str) -> None:
    """Log a collection cut short by a vanished page."""
    logger.warning(
        "pagination_truncated",
        extra={"path": path, "total_items": total_items, "error_message": error_message},
    )


def log_poll_completed(*, path: str, poll_index: int, fetched: int, emitted: int) -> None:
    """Log one stream poll."""
    logger.debug(
        "stream_poll_completed",
        extra={"path": path, "poll_index": poll_index, "fetched": fetched, "emitted": emitted},
    )


def log_poll_error(
    *,
    path: str,
    poll_index: int,
    error_type: str,
    error_message: str,
    transient: bool,
) -> None:
    """Log a failed stream poll.

    Args:
        path: Endpoint path
        poll_index: Zero-based index of the poll
        error_type: Exception class name
        error_message: Exception message
        transient: Whether the stream keeps polling after this error
    """
    log = logger.warning if transient else logger.error
    log(
        "stream_poll_error",
        extra={
            "path": path,
            "poll_index": poll_index,
            "error_type": error_type,
            "error_message": error_message,
            "transient": transient,
        },
    )
