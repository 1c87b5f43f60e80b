"""CLI entry point.

This script reads a CSV of companies, scrapes their YC profile pages, and
writes a JSON list to disk.

Examples:
    python run_scrape.py
    python run_scrape.py --csv resources/companies.csv --out out/scraped.json
    python run_scrape.py --concurrency 2 --timeout 30 --log-level DEBUG

The output is a list of dicts (serialized Pydantic models, camelCase keys).
"""

from __future__ import annotations

import argparse
import logging

from profile_engine.pipeline import DEFAULT_INPUT, DEFAULT_OUTPUT, run
from profile_engine.sources.ycombinator import YCombinatorSource


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Scrape YC company profiles listed in a CSV file.")
    p.add_argument("--csv", type=str, default=str(DEFAULT_INPUT), help="Input CSV with Company Name and YC URL columns.")
    p.add_argument("--out", type=str, default=str(DEFAULT_OUTPUT), help="Output JSON file path.")
    p.add_argument("--concurrency", type=int, default=5, help="Max companies scraped in parallel.")
    p.add_argument("--timeout", type=float, default=20.0, help="Per-request timeout in seconds.")
    p.add_argument("--log-level", type=str, default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...).")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s | %(levelname)s | %(message)s")

    source = YCombinatorSource(timeout_s=args.timeout, concurrency=args.concurrency)
    profiles = run(args.csv, args.out, source=source)

    print(f"Wrote {len(profiles)} profiles to: {args.out}")


if __name__ == "__main__":
    main()
