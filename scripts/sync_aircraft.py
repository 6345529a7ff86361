#!/usr/bin/env python3
"""
Maintenance summary for one aircraft

Syncs parts, AD/SB, STC and invoices from the backend into a
MaintenanceDataStore and prints what the screens would show.
TC-SAFE: informational only - consult an AME/AMO for any decision.

Run with: python scripts/sync_aircraft.py <aircraft_id> [--json]
"""

import argparse
import asyncio
import json
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from config import get_settings
from services.api import ApiClient
from stores.provider import MaintenanceDataProvider

load_dotenv()

logger = logging.getLogger(__name__)


def print_summary(store, aircraft_id: str):
    parts = store.get_parts_by_aircraft(aircraft_id)
    adsbs = store.get_adsbs_by_aircraft(aircraft_id)
    stcs = store.get_stcs_by_aircraft(aircraft_id)
    invoices = store.get_invoices_by_aircraft(aircraft_id)

    print("=" * 60)
    print(f"Aircraft {aircraft_id}")
    print("=" * 60)

    print(f"\nParts ({len(parts)})")
    for part in parts:
        print(f"  {part.part_number:<15} {part.name:<30} x{part.quantity}  {part.installed_date}")

    print(f"\nAD/SB ({len(adsbs)})")
    for adsb in adsbs:
        print(f"  [{adsb.kind.value}] {adsb.number:<20} {adsb.description}")

    print(f"\nSTC ({len(stcs)})")
    for stc in stcs:
        print(f"  {stc.number:<15} {stc.description}")

    print(f"\nInvoices ({len(invoices)})")
    total = 0.0
    for invoice in invoices:
        total += invoice.total_amount or 0
        print(f"  {invoice.date:<12} {invoice.supplier:<30} {invoice.total_amount:>10.2f}")
    print(f"  {'':<12} {'TOTAL':<30} {total:>10.2f}")


async def main():
    parser = argparse.ArgumentParser(
        description="Sync and print the maintenance records of an aircraft"
    )
    parser.add_argument("aircraft_id", help="Backend aircraft id")
    parser.add_argument("--api-url", default=None, help="Override API_URL")
    parser.add_argument("--json", action="store_true", help="Print records as JSON")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    async with ApiClient(base_url=args.api_url) as api:
        async with MaintenanceDataProvider(api=api) as store:
            results = await store.sync_all(args.aircraft_id)
            failed = [kind for kind, ok in results.items() if not ok]
            if failed:
                logger.warning(f"Could not sync: {', '.join(failed)}")

            if args.json:
                print(json.dumps({
                    "parts": [p.to_local() for p in store.get_parts_by_aircraft(args.aircraft_id)],
                    "adSbs": [a.to_local() for a in store.get_adsbs_by_aircraft(args.aircraft_id)],
                    "stcs": [s.to_local() for s in store.get_stcs_by_aircraft(args.aircraft_id)],
                    "invoices": [i.to_local() for i in store.get_invoices_by_aircraft(args.aircraft_id)],
                }, indent=2, default=str))
            else:
                print_summary(store, args.aircraft_id)

    return 1 if failed else 0


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
