"""
Purpose: Debounced place search for the pickup / drop input boxes.
What it does:
Each keystroke for a field cancels that field's pending lookup and schedules
a new one after a quiet period. The geocoder runs in a worker thread so the
event loop keeps handling input.

Ordering is "last scheduled wins": a lookup only delivers results if no newer
lookup was scheduled for its field and the text it searched is still what the
field holds. A slow older response can never overwrite a newer one.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Callable, Dict, List

from dotenv import load_dotenv

from routing.models import PlaceCandidate

load_dotenv()
SEARCH_DEBOUNCE_MS = int(os.getenv("SEARCH_DEBOUNCE_MS", "300"))

logger = logging.getLogger(__name__)

ResultsCallback = Callable[[str, str, List[PlaceCandidate]], None]


class SearchController:
    """
    Args:
        geocoder: anything with search(text) -> List[PlaceCandidate]
        on_results: called as on_results(field, text, candidates) on the loop
        delay_s: quiet period before a lookup is sent
    """
    def __init__(self, geocoder, on_results: ResultsCallback, delay_s: float = SEARCH_DEBOUNCE_MS / 1000.0):
        self.geocoder = geocoder
        self.on_results = on_results
        self.delay_s = delay_s

        self._pending: Dict[str, asyncio.Task] = {}
        self._generation: Dict[str, int] = {}
        self._current_text: Dict[str, str] = {}

    def on_input(self, field: str, text: str) -> asyncio.Task:
        """
        Register a keystroke. Must be called from a running event loop.
        """
        self._current_text[field] = text
        generation = self._generation.get(field, 0) + 1
        self._generation[field] = generation

        pending = self._pending.get(field)
        if pending is not None and not pending.done():
            pending.cancel()

        task = asyncio.get_running_loop().create_task(self._lookup(field, text, generation))
        self._pending[field] = task
        return task

    def _is_current(self, field: str, text: str, generation: int) -> bool:
        return self._generation.get(field) == generation and self._current_text.get(field) == text

    async def _lookup(self, field: str, text: str, generation: int) -> None:
        await asyncio.sleep(self.delay_s)

        candidates = await asyncio.to_thread(self.geocoder.search, text)

        if not self._is_current(field, text, generation):
            logger.debug("Dropping stale results for %s=%r", field, text)
            return
        self.on_results(field, text, candidates)

    def cancel_all(self) -> None:
        for task in self._pending.values():
            if not task.done():
                task.cancel()
        self._pending.clear()
