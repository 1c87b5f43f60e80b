"""Pipeline driver: CSV in, scraped profiles out as one JSON file."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .inputs import read_company_list
from .models import CompanyProfile
from .sources.base import ProfileSource
from .sources.ycombinator import YCombinatorSource

logger = logging.getLogger(__name__)

DEFAULT_INPUT = Path("resources") / "companies.csv"
DEFAULT_OUTPUT = Path("out") / "scraped.json"


def write_profiles(profiles: Sequence[CompanyProfile], output_path: Union[str, Path]) -> Path:
    """Write profiles as an indented JSON array, replacing any existing file."""
    out_path = Path(output_path).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)

    # json mode turns every field into plain JSON types; aliases give camelCase keys
    data = [p.model_dump(mode="json", by_alias=True) for p in profiles]
    out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return out_path


async def run_async(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    source: Optional[ProfileSource] = None,
) -> List[CompanyProfile]:
    companies = read_company_list(input_path)
    Path(output_path).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)

    source = source or YCombinatorSource()
    profiles = await source.fetch(companies)

    out_path = write_profiles(profiles, output_path)
    logger.info("Wrote %d profiles to %s", len(profiles), out_path)
    return profiles


def run(
    input_path: Union[str, Path] = DEFAULT_INPUT,
    output_path: Union[str, Path] = DEFAULT_OUTPUT,
    source: Optional[ProfileSource] = None,
) -> List[CompanyProfile]:
    """Read the company CSV, scrape every profile and write the JSON output.

    Malformed rows and failed fetches are logged and skipped; only a missing
    input file aborts the run (FileNotFoundError).
    """
    return asyncio.run(run_async(input_path, output_path, source))
