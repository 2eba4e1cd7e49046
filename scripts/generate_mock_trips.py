import pandas as pd
import numpy as np
import uuid

from pricing.models import VehicleClass

def generate_mock_trips(num_trips=200, output_file="mock_trips_generated.csv"):
    """
    Generates a dataset of booking requests to replay through the fare estimator.
    Pickups cluster around a handful of busy spots so the same origins show up
    at different hours and traffic levels.
    """
    # Center around Ho Chi Minh City (District 1)
    CENTER_LAT = 10.775
    CENTER_LON = 106.7

    # 1. Busy pickup spots within ~5km (roughly 0.05 degrees)
    hotspots = []
    for hotspot_index in range(15):
        hotspots.append({
            "name": f"Hotspot {hotspot_index+1}",
            "lat": CENTER_LAT + np.random.uniform(-0.05, 0.05),
            "lon": CENTER_LON + np.random.uniform(-0.05, 0.05),
        })

    vehicles = [vehicle.value for vehicle in VehicleClass]

    data = []
    # 2. Generate trips
    for trip_index in range(num_trips):
        hotspot = np.random.choice(hotspots)

        # Drop placed within ~2-10km of the pickup
        drop_lat = hotspot["lat"] + np.random.uniform(-0.08, 0.08)
        drop_lon = hotspot["lon"] + np.random.uniform(-0.08, 0.08)

        data.append({
            "trip_id": f"t_{str(trip_index+1).zfill(5)}",
            "request_id": str(uuid.uuid4())[:8],
            "pickup_name": hotspot["name"],
            "pickup_lat": np.round(hotspot["lat"], 6),
            "pickup_lon": np.round(hotspot["lon"], 6),
            "drop_lat": np.round(drop_lat, 6),
            "drop_lon": np.round(drop_lon, 6),
            "vehicle": np.random.choice(vehicles, p=[0.5, 0.15, 0.2, 0.1, 0.05]),
            "hour": np.random.randint(0, 24),
            "traffic": np.random.randint(0, 11),
        })

    # 3. Save to CSV
    df = pd.DataFrame(data)
    df.to_csv(output_file, index=False)
    print(f"✅ Generated {num_trips} trips and saved to '{output_file}'")

    print("\nVehicle mix:")
    for name, count in df["vehicle"].value_counts().items():
        print(f"  {name}: {count} trips")

if __name__ == "__main__":
    generate_mock_trips(num_trips=200)
