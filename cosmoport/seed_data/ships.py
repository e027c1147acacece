"""
Seed data for ships.
A dozen demo ships spread across every ship type.  Ratings are not listed;
the seeder computes them.
"""

from datetime import date

SHIPS = [
    # ── Military ────────────────────────────────────────────────────────────
    {"name": "Orion III", "planet": "Mars", "ship_type": "MILITARY", "prod_date": date(2995, 3, 11), "is_used": True, "speed": 0.82, "crew_size": 617},
    {"name": "Daedalus", "planet": "Jupiter", "ship_type": "MILITARY", "prod_date": date(3001, 7, 2), "is_used": False, "speed": 0.94, "crew_size": 1409},
    {"name": "Eagle Transporter", "planet": "Earth", "ship_type": "MILITARY", "prod_date": date(2989, 1, 19), "is_used": True, "speed": 0.79, "crew_size": 4527},
    {"name": "Executor", "planet": "Pluto", "ship_type": "MILITARY", "prod_date": date(3010, 9, 30), "is_used": False, "speed": 0.04, "crew_size": 9999},
    # ── Merchant ────────────────────────────────────────────────────────────
    {"name": "Nostromo", "planet": "Saturn", "ship_type": "MERCHANT", "prod_date": date(2991, 6, 14), "is_used": True, "speed": 0.52, "crew_size": 7},
    {"name": "Serenity", "planet": "Earth", "ship_type": "MERCHANT", "prod_date": date(3012, 2, 5), "is_used": False, "speed": 0.23, "crew_size": 9},
    {"name": "Hyperion", "planet": "Venus", "ship_type": "MERCHANT", "prod_date": date(2881, 11, 23), "is_used": True, "speed": 0.34, "crew_size": 232},
    {"name": "Rocinante", "planet": "Mars", "ship_type": "MERCHANT", "prod_date": date(3015, 4, 8), "is_used": False, "speed": 0.65, "crew_size": 4},
    # ── Transport ───────────────────────────────────────────────────────────
    {"name": "Prometheus", "planet": "Neptune", "ship_type": "TRANSPORT", "prod_date": date(3018, 8, 17), "is_used": False, "speed": 0.5, "crew_size": 17},
    {"name": "Event Horizon", "planet": "Neptune", "ship_type": "TRANSPORT", "prod_date": date(2967, 10, 1), "is_used": True, "speed": 0.12, "crew_size": 18},
    {"name": "Arcadia", "planet": "Uranus", "ship_type": "TRANSPORT", "prod_date": date(2934, 5, 27), "is_used": False, "speed": 0.88, "crew_size": 1530},
    {"name": "Valley Forge", "planet": "Saturn", "ship_type": "TRANSPORT", "prod_date": date(2899, 12, 9), "is_used": True, "speed": 0.27, "crew_size": 96},
]
