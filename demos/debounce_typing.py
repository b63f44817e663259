"""Debounce demo: a typing burst produces a single search."""

import asyncio
from typing import Any

from core.config import DemoConfig
from demos.base import Demo
from infrastructure.debounce import debounce

KEYSTROKES = ["r", "re", "rea", "reac", "react"]
KEYSTROKE_GAP_MS = 100


class DebounceTypingBurst(Demo):
    name = "debounce_typing_burst"
    primitive = "debounce"
    title = "Search As You Type"
    description = (
        "Five keystrokes 100 ms apart into a search box debounced at 500 ms "
        "fire the search once, with the final text."
    )
    source = "search = debounce(run_search, 0.5); [search(t) for t in keystrokes]"

    async def execute(self, config: DemoConfig) -> Any:
        searches: list[str] = []
        done = asyncio.Event()

        def run_search(term: str) -> None:
            searches.append(term)
            done.set()

        search = debounce(run_search, config.typing_debounce.delay * config.time_scale)
        for term in KEYSTROKES:
            search(term)
            await asyncio.sleep(config.seconds(KEYSTROKE_GAP_MS))
        await done.wait()
        # Let any stray firing land before reporting.
        await asyncio.sleep(config.seconds(KEYSTROKE_GAP_MS))
        return {"keystrokes": len(KEYSTROKES), "searches": searches}
