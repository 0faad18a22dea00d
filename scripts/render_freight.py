#!/usr/bin/env python3
"""
Render a stored freight record from a JSON file.

Usage:
    python scripts/render_freight.py freight.json [price_rows.json]
"""

import json
import sys
from pathlib import Path

from freight_board.core import configure_logging, get_config
from freight_board.render import render_freight


def main() -> int:
    """Print the rendered view of a freight record."""
    if len(sys.argv) < 2:
        print(__doc__)
        return 2

    configure_logging()
    config = get_config()

    record = json.loads(Path(sys.argv[1]).read_text(encoding="utf-8"))
    price_rows = None
    if len(sys.argv) > 2:
        price_rows = json.loads(Path(sys.argv[2]).read_text(encoding="utf-8"))

    view = render_freight(
        record, price_rows=price_rows, display_config=config.get_display_config()
    )

    print("\n" + "=" * 80)
    print(f"FREIGHT {view.code}")
    print("=" * 80)
    print(f"Type: {view.type_label}")
    print(f"Status: {view.status_label}")
    print(f"Origin: {view.origin}")
    if view.pickup_date:
        print(f"Pickup: {view.pickup_date}")
    if view.delivery_date:
        print(f"Delivery: {view.delivery_date}")
    print()
    print("Destinations:")
    for item in view.destinations:
        suffix = f"  [{item.annotation}]" if item.annotation else ""
        print(f"  - {item.text}{suffix}")
        for detail in item.details:
            print(f"      {detail}")
    if view.stops:
        print("Stops:")
        for position, item in enumerate(view.stops, start=1):
            print(f"  {position}. {item.text}")
    print()
    sections = [
        ("Vehicles", view.vehicles),
        ("Bodies", view.bodies),
        ("Benefits", view.benefits),
        ("Scheduling rules", view.scheduling_rules),
    ]
    for title, items in sections:
        if items:
            print(f"{title}:")
            for item in items:
                suffix = f" ({item.annotation})" if item.annotation else ""
                print(f"  - {item.text}{suffix}")
    if view.price_rows:
        print("Price table:")
        for row in view.price_rows:
            print(f"  - {row.describe()}")
    for line in view.cargo + view.requirements:
        print(line)
    if view.toll:
        print(view.toll)
    if view.notes:
        print(f"\nNotes: {view.notes}")
    print("\n" + "=" * 80)
    return 0


if __name__ == "__main__":
    sys.exit(main())
