# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV ground-track exporter.

Exports ground-track points as CSV with geodetic coordinates.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging

from earthview.ports.export import TrajectoryExporter
from earthview.domain.propagation import GroundTrackPoint

logger = logging.getLogger(__name__)

_HEADER = ['time', 'lon_deg', 'lat_deg', 'alt_km']


class TrajectoryCsvExporter(TrajectoryExporter):
    """Exports ground-track points to CSV."""

    def export(self, points: list[GroundTrackPoint], path: str) -> int:
        if not points:
            logger.warning("No ground-track points to export; writing header only")

        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)
            for point in points:
                writer.writerow([
                    point.time.isoformat(),
                    f'{point.position.lon_deg:.6f}',
                    f'{point.position.lat_deg:.6f}',
                    f'{point.position.alt:.3f}',
                ])

        return len(points)
