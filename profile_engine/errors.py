"""Exception types raised inside the engine.

Field extractors never raise; a missing field is simply ``None`` or an empty
list. Errors below are caught at the smallest unit (one CSV row, one fetch) and
logged by the caller.
"""

from __future__ import annotations

from typing import Optional


class ProfileEngineError(Exception):
    """Base class for engine errors."""


class InputParseError(ProfileEngineError):
    """A row of the input CSV could not be turned into a CompanyRef."""

    def __init__(self, line_no: int, reason: str) -> None:
        self.line_no = line_no
        self.reason = reason
        super().__init__(f"line {line_no}: {reason}")


class FetchError(ProfileEngineError):
    """A page could not be fetched (transport error, timeout or non-2xx)."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None) -> None:
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"{url}: {reason}")
