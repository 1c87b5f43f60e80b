"""Company profile engine package.

The package is structured like a small ingestion product:
- `models.py` defines the stable output schema (what the scraper owns).
- `sources/` contains the connector that fetches profile and launch pages.
- `extract.py` contains the pure, selector-driven field extractors.
- `assemble.py` merges extractor output into one record per company.
- `pipeline.py` wires CSV input, fetching and JSON output together.
"""
