import asyncio
import time

from booking.search import SearchController
from routing.models import Coordinate, PlaceCandidate


class MockGeocoder:
    """Echoes the query back as a single candidate. Some queries are slow."""
    def __init__(self, slow_queries=(), slow_s=0.2):
        self.slow_queries = set(slow_queries)
        self.slow_s = slow_s
        self.queries = []

    def search(self, text):
        self.queries.append(text)
        if text in self.slow_queries:
            time.sleep(self.slow_s)
        return [PlaceCandidate(label=text, coordinate=Coordinate(10.775, 106.7))]


class Recorder:
    def __init__(self):
        self.delivered = []

    def __call__(self, field, text, candidates):
        self.delivered.append((field, text, [candidate.label for candidate in candidates]))


def test_rapid_keystrokes_send_one_lookup():
    geocoder = MockGeocoder()
    recorder = Recorder()

    async def scenario():
        controller = SearchController(geocoder, recorder, delay_s=0.05)
        controller.on_input("pickup", "Be")
        controller.on_input("pickup", "Ben")
        last = controller.on_input("pickup", "Ben Thanh")
        await last

    asyncio.run(scenario())

    assert geocoder.queries == ["Ben Thanh"]
    assert recorder.delivered == [("pickup", "Ben Thanh", ["Ben Thanh"])]


def test_fields_are_debounced_independently():
    geocoder = MockGeocoder()
    recorder = Recorder()

    async def scenario():
        controller = SearchController(geocoder, recorder, delay_s=0.02)
        pickup_task = controller.on_input("pickup", "Ben Thanh")
        drop_task = controller.on_input("drop", "Tan Son Nhat")
        await asyncio.gather(pickup_task, drop_task)

    asyncio.run(scenario())

    assert sorted(recorder.delivered) == [
        ("drop", "Tan Son Nhat", ["Tan Son Nhat"]),
        ("pickup", "Ben Thanh", ["Ben Thanh"]),
    ]


def test_slow_earlier_lookup_never_overwrites_newer_one():
    geocoder = MockGeocoder(slow_queries={"Ben"}, slow_s=0.2)
    recorder = Recorder()

    async def scenario():
        controller = SearchController(geocoder, recorder, delay_s=0.01)
        controller.on_input("pickup", "Ben")
        # let the first lookup reach the geocoder
        await asyncio.sleep(0.05)
        latest = controller.on_input("pickup", "Ben Thanh")
        await latest
        # give the slow thread time to finish
        await asyncio.sleep(0.3)

    asyncio.run(scenario())

    assert geocoder.queries == ["Ben", "Ben Thanh"]
    assert recorder.delivered == [("pickup", "Ben Thanh", ["Ben Thanh"])]


def test_cancel_all_drops_pending_lookups():
    geocoder = MockGeocoder()
    recorder = Recorder()

    async def scenario():
        controller = SearchController(geocoder, recorder, delay_s=0.05)
        controller.on_input("pickup", "Ben Thanh")
        controller.on_input("drop", "Tan Son Nhat")
        controller.cancel_all()
        await asyncio.sleep(0.1)

    asyncio.run(scenario())

    assert geocoder.queries == []
    assert recorder.delivered == []
