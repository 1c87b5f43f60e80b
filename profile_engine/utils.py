"""Utility helpers shared across the engine."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional
from urllib.parse import urljoin, urlsplit


_WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+")
_NON_DIGIT_RE = re.compile(r"\D")


def camel_case(key: str) -> str:
    """Canonicalize a header like 'Company Name' or 'YC URL' to camelCase."""
    words = _WORD_RE.findall(key or "")
    if not words:
        return ""
    return words[0].lower() + "".join(w.capitalize() for w in words[1:])


def clean_text(text: Optional[str]) -> Optional[str]:
    """Strip whitespace; empty strings become None."""
    if text is None:
        return None
    text = text.strip()
    return text or None


def parse_count(text: Optional[str]) -> Optional[int]:
    """Parse an integer after dropping every non-digit ('42 people' -> 42)."""
    digits = _NON_DIGIT_RE.sub("", text or "")
    if not digits:
        return None
    try:
        return int(digits)
    except ValueError:
        # past the interpreter's int-string conversion limit
        return None


def base_url(url: str) -> str:
    """Return scheme + host of a URL ('https://a.com/x/y' -> 'https://a.com')."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}"


def absolute_url(ref: str, base: str) -> str:
    return urljoin(base, ref)


def uniq_preserve_order(items: Iterable[str]) -> List[str]:
    """Deduplicate while preserving first-seen order."""
    seen = set()
    out: List[str] = []
    for it in items:
        if not it or it in seen:
            continue
        seen.add(it)
        out.append(it)
    return out
