#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from neon.raw import Reddit, StreamEventType


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print new items of a subreddit as they arrive")
    p.add_argument("subreddit", nargs="?", default="python")
    p.add_argument("queue", nargs="?", default="new", choices=["new", "comments", "log"])
    p.add_argument("duration", nargs="?", type=int, default=60, help="Seconds to run")
    p.add_argument("--interval", type=float, default=5.0, help="Seconds between polls")
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with Reddit.from_env() as reddit:
        sub = await reddit.subreddit(args.subreddit)
        stream = sub.stream(args.queue, poll_interval=args.interval, skip_existing=True)

        async def consume() -> None:
            async for event in stream.events():
                if event.type is StreamEventType.ERROR:
                    print(f"ERROR  poll={event.poll_index} {type(event.error).__name__}: {event.error}")
                    continue
                item = event.item
                text = getattr(item, "title", None) or getattr(item, "body", None) or ""
                print(f"{item.fullname:12} | poll={event.poll_index:<3} | {text[:60]}")

        task = asyncio.create_task(consume())
        try:
            await asyncio.sleep(args.duration)
        finally:
            stream.stop()
            await task


if __name__ == "__main__":
    asyncio.run(main())
