#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from neon.raw import Reddit


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List a subreddit's top submissions")
    p.add_argument("subreddit", nargs="?", default="python")
    p.add_argument("limit", nargs="?", type=int, default=150)
    p.add_argument("time_filter", nargs="?", default="week", choices=["hour", "day", "week", "month", "year", "all"])
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with Reddit.from_env() as reddit:
        sub = await reddit.subreddit(args.subreddit)
        listing = await sub.top(limit=args.limit, time_filter=args.time_filter)

        print("=" * 83)
        print(f"Subreddit  : r/{sub.display_name} ({sub.subscriber_count} subscribers)")
        print(f"Items      : {len(listing)}")
        print(f"Next after : {listing.after}")
        print("=" * 83)
        print(f"{'Fullname':12} | {'Score':>7} | {'Comments':>8} | Title")
        print("-" * 83)
        for s in listing:
            print(f"{s.fullname:12} | {s.score:>7} | {s.comment_count:>8} | {s.title[:45]}")
        print("=" * 83)


if __name__ == "__main__":
    asyncio.run(main())
