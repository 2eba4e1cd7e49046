import pytest

from booking.inputs import BookingOptions, parse_hour, parse_traffic_level, vehicle_label
from pricing.models import VehicleClass


@pytest.mark.parametrize("raw, expected", [
    ("18", 18),
    (" 7 ", 7),
    ("17:30", 17),
    (0, 0),
    (23.9, 23),
    ("", 8),
    (None, 8),
    ("evening", 8),
    ("24", 8),
    (-1, 8),
    (float("nan"), 8),
])
def test_parse_hour(raw, expected):
    assert parse_hour(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("6", 6),
    ("", 3),
    (None, 3),
    ("heavy", 3),
    # left for the estimator to clamp
    ("15", 15),
    ("-5", -5),
])
def test_parse_traffic_level(raw, expected):
    assert parse_traffic_level(raw) == expected


def test_booking_options_defaults():
    assert BookingOptions.from_raw() == BookingOptions(vehicle="bike", hour_of_day=8, traffic_level=3)
    assert BookingOptions.from_raw(VehicleClass.CAR4, "9", "1").vehicle == "car4"


def test_replace_keeps_unchanged_values():
    options = BookingOptions.from_raw("car7", "18", "2")
    assert options.replace(traffic="9") == BookingOptions(vehicle="car7", hour_of_day=18, traffic_level=9)


def test_vehicle_labels():
    assert vehicle_label("bike") == "Motorbike"
    assert vehicle_label("car_luxury") == "Luxury car"
    assert vehicle_label("hovercraft") == "Car"
