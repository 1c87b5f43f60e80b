"""Y Combinator company directory connector.

For each company we fetch the profile page, follow every "Read Launch" link to
its launch sub-page, and assemble one CompanyProfile.

Failure policy:
- A profile page that cannot be fetched (timeout, transport error, non-2xx
  after retries) is logged and the company is omitted from the output.
- A launch sub-page that cannot be fetched drops only that launch post.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

import httpx
from bs4 import BeautifulSoup

from .. import extract
from ..assemble import assemble_profile, build_launch_post
from ..errors import FetchError
from ..models import CompanyProfile, CompanyRef, LaunchPost
from ..utils import base_url
from .base import ProfileSource

logger = logging.getLogger(__name__)


class YCombinatorSource(ProfileSource):
    """Fetch YC profile pages with a bounded worker pool and assemble records."""

    name = "ycombinator"
    headers = {
        "User-Agent": "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120 Safari/537.36",
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }

    def __init__(
        self,
        timeout_s: float = 20.0,
        max_retries: int = 3,
        backoff_s: float = 2.0,
        concurrency: int = 5,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout = timeout_s
        self._max_retries = max_retries
        self._backoff_s = backoff_s
        self._concurrency = max(concurrency, 1)
        self._transport = transport

    async def _get(self, client: httpx.AsyncClient, url: str) -> str:
        """GET a page body, retrying 429s with exponential backoff."""
        retries = 0
        while True:
            try:
                resp = await client.get(url)
                resp.raise_for_status()
                return resp.text
            except httpx.HTTPStatusError as exc:
                status = exc.response.status_code
                if status == 429 and retries < self._max_retries:
                    sleep_s = self._backoff_s * (2**retries)
                    logger.info("Rate limited on %s; retrying in %.1fs", url, sleep_s)
                    await asyncio.sleep(sleep_s)
                    retries += 1
                    continue
                raise FetchError(url, f"HTTP {status}", status_code=status) from exc
            except httpx.TimeoutException as exc:
                raise FetchError(url, "timed out") from exc
            except httpx.HTTPError as exc:
                raise FetchError(url, str(exc) or type(exc).__name__) from exc

    async def scrape_launch_page(self, client: httpx.AsyncClient, stub: extract.LaunchStub) -> Optional[LaunchPost]:
        try:
            html = await self._get(client, stub.link)
        except FetchError as exc:
            logger.warning("Skipping launch post %r: %s", stub.title, exc)
            return None
        try:
            soup = BeautifulSoup(html, "lxml")
            return build_launch_post(stub, extract.parse_launch_page(soup, base_url(stub.link)))
        except Exception as exc:
            logger.warning("Skipping launch post %r: could not parse %s: %r", stub.title, stub.link, exc)
            return None

    async def scrape_company(self, client: httpx.AsyncClient, company: CompanyRef) -> Optional[CompanyProfile]:
        """Fetch and assemble one company; None when the profile page fails."""
        url = str(company.yc_url)
        try:
            html = await self._get(client, url)
        except FetchError as exc:
            logger.warning("Skipping %s: %s", company.company_name, exc)
            return None

        # Same policy as a failed fetch: one unparseable page drops only its company.
        try:
            soup = BeautifulSoup(html, "lxml")
            stubs = extract.get_launch_stubs(soup, base_url(url))
            launches = await asyncio.gather(*(self.scrape_launch_page(client, stub) for stub in stubs))
            profile = assemble_profile(soup, url, [post for post in launches if post is not None])
        except Exception as exc:
            logger.warning("Skipping %s: could not parse %s: %r", company.company_name, url, exc)
            return None

        logger.info("Scraped %s (%d jobs, %d founders, %d launch posts)",
                    profile.name or company.company_name, len(profile.jobs),
                    len(profile.founders), len(profile.launch_posts))
        return profile

    async def fetch(self, companies: Sequence[CompanyRef]) -> List[CompanyProfile]:
        """Scrape every company with at most `concurrency` in flight.

        Each worker returns its own record; results are collected after all
        workers finish, so nothing is appended from inside a handler.
        """
        semaphore = asyncio.Semaphore(self._concurrency)

        async with httpx.AsyncClient(
            timeout=self._timeout,
            follow_redirects=True,
            headers=self.headers,
            transport=self._transport,
        ) as client:

            async def bounded(company: CompanyRef) -> Optional[CompanyProfile]:
                async with semaphore:
                    return await self.scrape_company(client, company)

            results = await asyncio.gather(*(bounded(c) for c in companies))

        out = [r for r in results if r is not None]
        logger.info("Scraped %d of %d companies", len(out), len(companies))
        return out
