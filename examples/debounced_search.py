"""
debounced_search.py — Coalesce keystrokes into one lookup, with a deadline.

Simulates a user typing a query. Every keystroke asks for suggestions, but
only the last one in a burst actually hits the (fake) backend, and each
caller receives that shared result. Lookups for several prefixes then fan
out two at a time.

Usage:
    python examples/debounced_search.py
"""

import asyncio
import logging

from fnflow import concurrent_n, debounce_promise, timeout, wait

WORDS = ["asyncio", "async", "assert", "astuple", "atexit"]


async def fetch_suggestions(prefix: str) -> list[str]:
    await wait(0.05)
    return [word for word in WORDS if word.startswith(prefix)]


async def main() -> None:
    suggest = debounce_promise(fetch_suggestions, 0.1)

    pending = []
    for prefix in ("a", "as", "asy"):
        pending.append(suggest(prefix))
        await wait(0.03)

    results = await timeout(asyncio.gather(*pending), 1.0)
    print("every keystroke sees:", results[0])

    def lookup(prefix: str):
        async def run(limit: int) -> list[str]:
            return (await fetch_suggestions(prefix))[:limit]

        return run

    run = concurrent_n(2)(lookup("as"), lookup("at"), lookup("x"))
    print("fan-out:", await run(2))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
