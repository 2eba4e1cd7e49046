import os
import time
from typing import List

import pandas as pd

from booking.errors import BookingError
from booking.inputs import BookingOptions
from booking.session import BookingSession
from routing.models import Coordinate
from routing.osrm_client import OSRMClient
from routing.route_service import RouteService


def load_trips(filepath="mock_trips_generated.csv", limit=30) -> pd.DataFrame:
    # Resolve the correct path depending on where the user runs the script from.
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    absolute_path = filepath if os.path.isabs(filepath) else os.path.join(base_dir, filepath)
    return pd.read_csv(absolute_path).head(limit)


def run_simulation(filepath="mock_trips_generated.csv", limit=30, output_file="booking_results.csv"):
    print("=== STARTING BOOKING SIMULATION ===")

    trips = load_trips(filepath, limit=limit)
    print(f"Loaded {len(trips)} trips.\n")

    router = RouteService(OSRMClient(profile="driving", timeout=10), include_geometry=False)

    results: List[dict] = []
    start_time = time.time()
    for _, row in trips.iterrows():
        session = BookingSession(BookingOptions.from_raw(row["vehicle"], row["hour"], row["traffic"]))
        session.toggle_map_picking()
        session.click_map(Coordinate(float(row["pickup_lat"]), float(row["pickup_lon"])))
        session.click_map(Coordinate(float(row["drop_lat"]), float(row["drop_lon"])))

        try:
            summary = session.book(router)
        except BookingError as exc:
            print(f"[FAILED] Trip {row['trip_id']} -> {exc}")
            results.append({"trip_id": row["trip_id"], "status": "failed", "error": str(exc)})
            continue

        print(f"[OK] Trip {row['trip_id']} -> {summary.fare:,} VND ({summary.distance_km:.2f} km, {summary.vehicle})")
        results.append({"trip_id": row["trip_id"], "status": "ok", **summary.as_dict()})

    quoted = sum(1 for result in results if result["status"] == "ok")
    pd.DataFrame(results).to_csv(output_file, index=False)

    print("\n=== SIMULATION COMPLETE ===")
    print(f"Trips Quoted: {quoted} / {len(results)} in {time.time() - start_time:.2f}s")
    print(f"Results written to '{output_file}'.")


if __name__ == "__main__":
    run_simulation()
