import pytest

from booking.errors import IncompleteSelectionError, RouteUnavailableError
from booking.inputs import BookingOptions
from booking.models import Role, SelectionState
from booking.session import BookingSession
from pricing.fare import estimate_fare
from routing.models import Coordinate, PlaceCandidate, RouteSummary
from routing.osrm_client import OSRMError
from routing.route_service import RouteService


class MockRouter:
    """Pretends every trip is 12.5 km / 30 min and records the calls."""
    def __init__(self, distance_m=12500.0, duration_s=1800.0):
        self.distance_m = distance_m
        self.duration_s = duration_s
        self.calls = []

    def fetch_route(self, pickup, drop):
        self.calls.append((pickup, drop))
        return RouteSummary(distance_m=self.distance_m, duration_s=self.duration_s)


class FailingRouter:
    def fetch_route(self, pickup, drop):
        raise OSRMError("OSRM error: NoRoute")


class MockOSRM:
    def compute_route(self, coordinates, include_geometry=False):
        return {"distance": 5000.0, "duration": 600.0, "geometry": [coordinates[0], coordinates[-1]]}


@pytest.fixture
def pickup():
    return Coordinate(10.772, 106.698)


@pytest.fixture
def drop():
    return Coordinate(10.818, 106.659)


@pytest.fixture
def session(pickup, drop):
    session = BookingSession(BookingOptions.from_raw("bike", "18", "6"))
    session.toggle_map_picking()
    session.click_map(pickup)
    session.click_map(drop)
    return session


def test_clicks_are_ignored_until_map_picking_is_on(pickup):
    session = BookingSession()
    assert session.click_map(pickup) is False
    assert session.state is SelectionState.EMPTY

    assert session.toggle_map_picking() is True
    assert session.click_map(pickup) is True
    assert session.state is SelectionState.PICKUP_ONLY
    assert session.selection.pickup.label == "10.772000, 106.698000"

    assert session.toggle_map_picking() is False


def test_book_prices_the_route(session, pickup, drop):
    router = MockRouter()
    summary = session.book(router)

    assert router.calls == [(pickup, drop)]
    assert summary.fare == 151800
    assert summary.distance_km == 12.5
    assert summary.duration_min == 30
    assert summary.vehicle == "bike"
    assert summary.vehicle_label == "Motorbike"
    assert (summary.hour_of_day, summary.traffic_level) == (18, 6)
    assert session.route is not None
    assert session.summary == summary


def test_book_without_both_points_changes_nothing(pickup):
    session = BookingSession()
    session.toggle_map_picking()
    session.click_map(pickup)
    before = session.selection

    router = MockRouter()
    with pytest.raises(IncompleteSelectionError):
        session.book(router)

    assert router.calls == []
    assert session.selection == before
    assert session.route is None


def test_routing_failure_keeps_selection_and_clears_route(session):
    session.book(MockRouter())
    before = session.selection

    with pytest.raises(RouteUnavailableError):
        session.book(FailingRouter())

    assert session.selection == before
    assert session.route is None
    assert session.summary is None


def test_swap_discards_route(session, pickup, drop):
    session.book(MockRouter())
    session.swap()

    assert session.route is None
    assert session.summary is None
    assert session.selection.pickup.coordinate == drop
    assert session.selection.drop.coordinate == pickup


def test_reset_clears_everything(session):
    session.book(MockRouter())
    session.reset()
    assert session.state is SelectionState.EMPTY
    assert session.route is None


def test_search_pick_sets_label(drop):
    session = BookingSession()
    candidate = PlaceCandidate(label="Chợ Bến Thành, Quận 1", coordinate=Coordinate(10.772, 106.698))
    session.pick_search_result("pickup", candidate)
    session.pick_search_result(Role.DROP, PlaceCandidate(label="Sân bay Tân Sơn Nhất", coordinate=drop))

    assert session.state is SelectionState.BOTH
    assert session.selection.pickup.label == "Chợ Bến Thành, Quận 1"


def test_update_options_uses_defaults_for_garbage(session):
    options = session.update_options(vehicle="car7", hour="abc", traffic="")
    assert options == BookingOptions(vehicle="car7", hour_of_day=8, traffic_level=3)

    summary = session.book(MockRouter(distance_m=3000))
    assert summary.fare == estimate_fare(3.0, "car7", 8, 3)


def test_unknown_vehicle_still_gets_a_quote(session):
    session.update_options(vehicle="tuk_tuk")
    summary = session.book(MockRouter(distance_m=5000))
    assert summary.fare == estimate_fare(5, "unknown", 18, 6)
    assert summary.vehicle_label == "Car"


def test_route_service_converts_osrm_output(session):
    summary = session.book(RouteService(MockOSRM()))
    assert summary.distance_km == 5.0
    assert summary.duration_min == 10.0
    assert len(session.route.geometry) == 2


def test_new_click_cycle_discards_route(session):
    session.book(MockRouter())
    session.click_map(Coordinate(10.850, 106.772))

    assert session.state is SelectionState.PICKUP_ONLY
    assert session.route is None
    assert session.summary is None


def test_search_pick_moving_an_endpoint_discards_route(session):
    session.book(MockRouter())
    session.pick_search_result(Role.DROP, PlaceCandidate(label="Thủ Đức", coordinate=Coordinate(10.850, 106.772)))

    assert session.state is SelectionState.BOTH
    assert session.route is None
    assert session.summary is None


def test_relabelling_the_same_point_keeps_route(session, drop):
    session.book(MockRouter())
    session.pick_search_result(Role.DROP, PlaceCandidate(label="Sân bay Tân Sơn Nhất", coordinate=drop))

    assert session.route is not None
    assert session.selection.drop.label == "Sân bay Tân Sơn Nhất"
