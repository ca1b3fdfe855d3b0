"""
Mock dashboard metrics.

Every call draws fresh numbers; nothing is stored. All values come from
rng.random() so tests can swap in a deterministic source.
"""

import math
import random

from models.dashboard import DashboardSnapshot


def _percent(rng, scale: float) -> str:
    return f"{rng.random() * scale:.1f}%"


def _coin_flip(rng) -> str:
    return "increase" if rng.random() > 0.5 else "decrease"


def get_snapshot(rng=random) -> DashboardSnapshot:
    crowd = 15000 + math.floor(rng.random() * 1000)
    crowd_change = _percent(rng, 10)
    crowd_change_type = _coin_flip(rng)

    bookings = 800 + math.floor(rng.random() * 100)
    bookings_change = _percent(rng, 5)
    bookings_change_type = _coin_flip(rng)

    incidents = 40 + math.floor(rng.random() * 15)
    incidents_change = _percent(rng, 15)

    return DashboardSnapshot(
        live_crowd_count=f"~{crowd:,}",
        crowd_change=crowd_change,
        crowd_change_type=crowd_change_type,
        bookings_today=str(bookings),
        bookings_change=bookings_change,
        bookings_change_type=bookings_change_type,
        incidents_today=str(incidents),
        incidents_change=incidents_change,
        # Incidents are always reported as rising on the mock dashboard
        incidents_change_type="increase",
    )
