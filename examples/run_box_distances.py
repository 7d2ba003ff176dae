#!/usr/bin/env python3
"""Example script demonstrating the geometry primitives.

This script shows how to:
1. Build points and measure a trajectory
2. Load the detector box from the run configuration
3. Query wall distances for a shower-like start point and direction

Usage:
    python examples/run_box_distances.py
"""

from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from geoalgo.core.point import Point
from geoalgo.core.trajectory import Trajectory
from geoalgo.runconfig.service import get_containment_details, load_box


def main():
    """Run example queries."""
    project_root = Path(__file__).parent.parent
    config_path = project_root / "config" / "default_box.json"

    print("=" * 60)
    print("geoalgo - Example")
    print("=" * 60)

    # Points and trajectories
    print("\n1. Measuring a trajectory...")
    track = Trajectory([(10, 0, 100), (13, 4, 100), (13, 4, 105)])
    print(f"   - {len(track)} points, dimension {track.dim}")
    print(f"   - Length: {track.length():.2f}")
    print(f"   - Start-end distance: {track[0].distance(track[-1]):.2f}")

    # Box configuration
    print("\n2. Loading detector box...")
    box = load_box(config_path)
    print(f"   - Min corner: {box.min.tolist()}")
    print(f"   - Max corner: {box.max.tolist()}")

    # Wall distances
    print("\n3. Querying wall distances...")
    start = Point(128, 0, 500)
    direction = Point(0.2, 0.1, 1.0)

    print(f"   - Start point: {start}")
    print(f"   - Distance to nearest wall: {box.distance_to_nearest_wall(start):.2f}")
    forward = box.distance_to_wall_along_direction(start, direction)
    backward = box.distance_to_wall_along_direction(start, direction, forward=False)
    print(f"   - Distance to wall along direction: {forward:.2f}")
    print(f"   - Distance to wall against direction: {backward:.2f}")

    outside = Point(-10, 0, 500)
    print(f"   - Outside point {outside}: "
          f"{box.distance_to_box_from_outside(outside):.2f} from the box")

    # All quantities at once
    print("\n4. Containment summary...")
    details = get_containment_details(start, direction, config_path=config_path)
    for key, value in details.items():
        print(f"   - {key}: {value}")

    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
