"""Field extractors.

Each extractor is a pure function over a parsed profile (or launch) page and
returns one field. Extractors never raise: a missing anchor element or empty
text degrades to ``None`` (scalars) or an empty list/dict (collections).

Selectors target the Y Combinator company directory markup. Keeping them in
one module makes layout changes a one-file fix.
"""

from __future__ import annotations

import logging
from datetime import timezone
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Tuple

from bs4 import BeautifulSoup, Tag
from dateutil import parser as date_parser

from .models import SOCIAL_PLATFORMS, Founder, JobPosting, NewsItem, SocialLinks
from .utils import absolute_url, clean_text, parse_count, uniq_preserve_order

logger = logging.getLogger(__name__)


YC_LOGO_MARKER = "Y Combinator Logo"

COMPANY_CARD = r".ycdc-card.space-y-1\.5.sm\:w-\[300px\]:not(.shrink-0)"
FOUNDER_CARD = r".ycdc-card.shrink-0.space-y-1\.5.sm\:w-\[300px\]"
FOUNDER_INFO = r".flex.flex-row.flex-col.items-start.gap-3.md\:flex-row"
FACT_ROW = "div.flex.flex-row.justify-between"


def _text(el: Optional[Tag]) -> Optional[str]:
    return clean_text(el.get_text()) if el is not None else None


def _attr(el: Optional[Tag], name: str) -> Optional[str]:
    if el is None:
        return None
    val = el.get(name)
    return clean_text(val) if isinstance(val, str) else None


def _fact(soup: BeautifulSoup, label: str) -> Optional[str]:
    """Value span next to a 'Label:' span in the company facts card."""
    return _text(soup.select_one(f'{FACT_ROW} span:-soup-contains("{label}") + span'))


def _resolve(ref: str, page_base_url: str) -> Optional[str]:
    """Absolute URL for a link or media reference; None when it cannot be parsed."""
    try:
        return absolute_url(ref, page_base_url)
    except ValueError:
        return None


def _strip_yc_marker(text: str) -> str:
    if YC_LOGO_MARKER in text:
        return text.split(YC_LOGO_MARKER, 1)[1].strip()
    return text


def _social_links(links: Iterable[Tag]) -> SocialLinks:
    """Map platform -> URL from icon links, keyed by the title's first word."""
    socials: SocialLinks = {}
    for a in links:
        title = _attr(a, "title")
        href = _attr(a, "href")
        if not title or not href:
            continue
        platform = title.split()[0].lower()
        if platform not in SOCIAL_PLATFORMS:
            logger.debug("Ignoring social link for unknown platform %r", platform)
            continue
        socials[platform] = href
    return socials


# ---------------------------------------------------------------------------
# Profile page: scalar fields
# ---------------------------------------------------------------------------


def get_name(soup: BeautifulSoup) -> Optional[str]:
    return _text(soup.select_one(".prose.max-w-full h1"))


def get_founded(soup: BeautifulSoup) -> Optional[str]:
    return _fact(soup, "Founded:")


def get_team_size(soup: BeautifulSoup) -> Optional[int]:
    return parse_count(_fact(soup, "Team Size:"))


def get_location(soup: BeautifulSoup) -> Optional[str]:
    return _fact(soup, "Location:")


def get_company_url(soup: BeautifulSoup) -> Optional[str]:
    return _attr(soup.select_one("div.group.flex.flex-row.items-center.px-3.leading-none.text-linkColor a"), "href")


def get_num_jobs(soup: BeautifulSoup) -> Optional[int]:
    return parse_count(_text(soup.select_one(".ycdc-badge.ml-0.font-bold.no-underline")))


def get_description(soup: BeautifulSoup) -> Optional[str]:
    return _text(soup.select_one("p.whitespace-pre-line"))


def get_short_description(soup: BeautifulSoup) -> Optional[str]:
    return _text(soup.select_one(r".prose.hidden.max-w-full.md\:block .text-xl"))


def get_company_logo(soup: BeautifulSoup) -> Optional[str]:
    return _attr(soup.select_one("div.h-32.w-32.shrink-0.clip-circle-32 img"), "src")


def get_banner_url(soup: BeautifulSoup) -> Optional[str]:
    return _attr(soup.select_one(f"{COMPANY_CARD} img"), "src")


def get_batch(soup: BeautifulSoup) -> Optional[str]:
    text = _text(soup.select_one(f'.ycdc-badge:-soup-contains("{YC_LOGO_MARKER}")'))
    if text is None:
        return None
    return clean_text(_strip_yc_marker(text))


# ---------------------------------------------------------------------------
# Profile page: collections
# ---------------------------------------------------------------------------


def get_company_socials(soup: BeautifulSoup) -> SocialLinks:
    card = soup.select_one(COMPANY_CARD)
    if card is None:
        return {}
    return _social_links(card.select(":scope > .space-x-2 a.inline-block.w-5.h-5.bg-contain"))


def get_images(soup: BeautifulSoup) -> List[str]:
    out: List[str] = []
    for img in soup.select("img"):
        src = _attr(img, "src")
        if src:
            out.append(src)
    return out


def get_badges(soup: BeautifulSoup) -> List[str]:
    out: List[str] = []
    for badge in soup.select(".align-center.flex.flex-row.flex-wrap.gap-y-2.gap-x-2 .ycdc-badge"):
        text = _text(badge)
        if text is None:
            continue
        text = clean_text(_strip_yc_marker(text))
        if text:
            out.append(text)
    return out


def _parse_news_date(text: Optional[str]) -> Optional[str]:
    """Normalize a human date ('Mar 16, 2023') to an ISO-8601 UTC timestamp."""
    if not text:
        return None
    try:
        dt = date_parser.parse(text)
    except (ValueError, OverflowError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def get_news(soup: BeautifulSoup) -> List[NewsItem]:
    """News links; items missing a title, link or parseable date are dropped."""
    out: List[NewsItem] = []
    for item in soup.select("#news div.ycdc-with-link-color"):
        anchor = item.select_one("a.prose.font-medium")
        title = _text(anchor)
        link = _attr(anchor, "href")
        date = _parse_news_date(_text(item.find_next_sibling()))
        if not (title and link and date):
            logger.debug("Dropping incomplete news item %r", title)
            continue
        out.append(NewsItem(title=title, link=link, date=date))
    return out


def get_jobs(soup: BeautifulSoup) -> List[JobPosting]:
    out: List[JobPosting] = []
    for job in soup.select(".flex.w-full.flex-row.justify-between.py-4"):
        details = [
            _text(job.select_one(f".justify-left .list-item:nth-child({i})"))
            for i in range(1, 5)
        ]
        out.append(
            JobPosting(
                role=_text(job.select_one(".ycdc-with-link-color.pr-4.text-lg.font-bold a")),
                location=details[0],
                salary=details[1],
                equity=details[2],
                eligibility=details[3],
            )
        )
    return out


# ---------------------------------------------------------------------------
# Founders
# ---------------------------------------------------------------------------


class FounderLayout(str, Enum):
    """Profile pages render founders in one of two shapes."""

    DETAILED = "detailed"  # card wrapped in a block that also holds a bio
    CARD = "card"  # bare cards, no bio


def detect_founder_layout(soup: BeautifulSoup) -> FounderLayout:
    if soup.select_one(FOUNDER_INFO) is not None:
        return FounderLayout.DETAILED
    return FounderLayout.CARD


def _founder_blocks(soup: BeautifulSoup, layout: FounderLayout) -> List[Tuple[Optional[Tag], Optional[Tag]]]:
    """(card, bio container) pairs for the given layout.

    A detailed block without a nested card still yields a founder with only a bio.
    """
    if layout is FounderLayout.CARD:
        return [(card, None) for card in soup.select(FOUNDER_CARD)]
    return [(info.select_one(FOUNDER_CARD), info) for info in soup.select(FOUNDER_INFO)]


def _founder_from_card(card: Optional[Tag], info: Optional[Tag]) -> Founder:
    description = _text(info.select_one(".prose.max-w-full")) if info is not None else None
    if card is None:
        logger.debug("Founder block without a card; keeping bio only")
        return Founder(description=description)

    position = None
    lines = card.select_one(".leading-snug")
    if lines is not None:
        children = lines.find_all(recursive=False)
        # The second line under the name is the founder's title.
        if len(children) > 1:
            position = _text(children[1])
    return Founder(
        name=_text(card.select_one(".font-bold")),
        image_url=_attr(card.select_one("img"), "src"),
        position=position,
        description=description,
        socials=_social_links(card.select("a.h-5.w-5.bg-contain")),
    )


def get_founders(soup: BeautifulSoup) -> List[Founder]:
    layout = detect_founder_layout(soup)
    return [_founder_from_card(card, info) for card, info in _founder_blocks(soup, layout)]


# ---------------------------------------------------------------------------
# Launch posts
# ---------------------------------------------------------------------------


class LaunchStub(NamedTuple):
    """A launch card on the profile page, before its sub-page is fetched."""

    title: str
    link: str
    description: str


class LaunchDetails(NamedTuple):
    """Fields scraped from a launch sub-page."""

    votes: int
    created_at: Optional[str]
    post: Optional[str]
    sources: List[str]


def get_launch_stubs(soup: BeautifulSoup, page_base_url: str) -> List[LaunchStub]:
    """Launch cards with a title, an absolute 'Read Launch' link and a description."""
    out: List[LaunchStub] = []
    for container in soup.select(".company-launch"):
        title = _text(container.select_one("h3"))
        href = _attr(container.select_one('a:-soup-contains("Read Launch")'), "href")
        description = _text(container.select_one(".prose.max-w-full.whitespace-pre-line"))
        if not (title and href and description):
            logger.debug("Dropping incomplete launch card %r", title)
            continue
        link = _resolve(href, page_base_url)
        if link is None:
            logger.debug("Dropping launch card %r with malformed link %r", title, href)
            continue
        out.append(LaunchStub(title=title, link=link, description=description))
    return out


def get_launch_body(soup: BeautifulSoup, page_base_url: str) -> Tuple[Optional[str], List[str]]:
    """Walk the launch body and return (post text, referenced media URLs).

    A child contributes its own text when it has any; otherwise its first image
    (or, failing that, embedded frame) source, made absolute.
    """
    container = soup.select_one("div.launch-container > div:not([class])")
    if container is None:
        return None, []

    fragments: List[str] = []
    media: List[str] = []
    for child in container.find_all(recursive=False):
        text = _text(child)
        if text:
            fragments.append(text)
            continue
        src = _attr(child.find("img"), "src") or _attr(child.find("iframe"), "src")
        src = _resolve(src, page_base_url) if src else None
        if src:
            media.append(src)
            fragments.append(src)

    return clean_text(" ".join(fragments)), uniq_preserve_order(media)


def get_votes(soup: BeautifulSoup) -> int:
    return parse_count(_text(soup.select_one(".vote-count-container div:last-child"))) or 0


def get_created_at(soup: BeautifulSoup) -> Optional[str]:
    return _attr(soup.select_one(".timeago"), "datetime")


def parse_launch_page(soup: BeautifulSoup, page_base_url: str) -> LaunchDetails:
    post, sources = get_launch_body(soup, page_base_url)
    return LaunchDetails(
        votes=get_votes(soup),
        created_at=get_created_at(soup),
        post=post,
        sources=sources,
    )
