"""CSV input loading.

The input is a delimited file with a header row. Headers are canonicalized to
camelCase ("Company Name" -> companyName, "YC URL" -> ycUrl); only
``companyName`` and ``ycUrl`` are used, other columns are ignored.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from .errors import InputParseError
from .models import CompanyRef
from .utils import camel_case, clean_text

logger = logging.getLogger(__name__)


def parse_company_row(row: Dict[Optional[str], Optional[str]], line_no: int) -> CompanyRef:
    """Turn one DictReader row into a CompanyRef or raise InputParseError."""
    fields = {camel_case(k): v for k, v in row.items() if isinstance(k, str) and isinstance(v, str)}
    name = clean_text(fields.get("companyName"))
    url = clean_text(fields.get("ycUrl"))

    if not name:
        raise InputParseError(line_no, "missing company name")
    if not url:
        raise InputParseError(line_no, "missing YC URL")
    try:
        return CompanyRef(company_name=name, yc_url=url)
    except ValidationError as exc:
        raise InputParseError(line_no, f"invalid YC URL {url!r}") from exc


def read_company_list(csv_path: Union[str, Path]) -> List[CompanyRef]:
    """Read the company list; malformed rows are logged and skipped.

    A missing file raises FileNotFoundError.
    """
    companies: List[CompanyRef] = []

    with open(csv_path, "r", encoding="utf-8-sig", newline="") as file:
        sample = file.read(1024)
        file.seek(0)
        try:
            dialect = csv.Sniffer().sniff(sample, delimiters=",;\t|")
        except csv.Error:
            dialect = csv.excel

        reader = csv.DictReader(file, dialect=dialect)
        for row in reader:
            try:
                companies.append(parse_company_row(row, reader.line_num))
            except InputParseError as exc:
                logger.warning("Skipping input row: %s", exc)

    logger.info("Parsed %d companies from %s", len(companies), csv_path)
    return companies
