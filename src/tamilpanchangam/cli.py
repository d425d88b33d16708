"""CLI entry point: fetch one Panchangam and print it as JSON.

    uv run tamilpanchangam --region Chennai --date 2024-06-15
"""

from __future__ import annotations

import argparse
import sys
from datetime import date
from typing import Optional

from dotenv import load_dotenv

from tamilpanchangam.config import configure_logging, load_settings
from tamilpanchangam.models import Query
from tamilpanchangam.panchangam import dumps, fetch_panchangam
from tamilpanchangam.regions import REGIONS, find_region
from tamilpanchangam.schema import PanchangamError


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a Tamil Thirukanitha Panchangam.")
    parser.add_argument("--region", default=None, help="District name (default: PANCHANGAM_DEFAULT_REGION)")
    parser.add_argument("--date", type=date.fromisoformat, default=None, help="YYYY-MM-DD (default: today)")
    parser.add_argument("--list-regions", action="store_true", help="Print known districts and exit")

    args = parser.parse_args(argv)

    if args.list_regions:
        for r in REGIONS:
            print(f"{r.name}\t{r.tamil_name}\t{r.lat:.4f}\t{r.lng:.4f}")
        return 0

    load_dotenv()
    settings = load_settings()
    configure_logging(settings.log_level)

    region = find_region(args.region, default=settings.default_region)
    query = Query(region=region, date=args.date or date.today())
    try:
        result = fetch_panchangam(query, settings=settings)
    except PanchangamError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(dumps(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
