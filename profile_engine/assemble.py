"""Record assembly: run every extractor on one page and merge the results."""

from __future__ import annotations

from typing import List, Sequence

from bs4 import BeautifulSoup

from . import extract
from .models import CompanyProfile, LaunchPost


def build_launch_post(stub: extract.LaunchStub, details: extract.LaunchDetails) -> LaunchPost:
    """Merge a launch card from the profile page with its sub-page fields."""
    return LaunchPost(
        title=stub.title,
        link=stub.link,
        description=stub.description,
        votes=details.votes,
        created_at=details.created_at,
        post=details.post,
        sources=details.sources,
    )


def assemble_profile(soup: BeautifulSoup, yc_url: str, launch_posts: Sequence[LaunchPost] = ()) -> CompanyProfile:
    """Build one CompanyProfile from a parsed profile page.

    Extractors degrade independently, so a missing field never blocks the rest
    of the record. ``launch_posts`` come from sub-pages the caller already
    fetched; the name is taken from the page rather than the input CSV.
    """
    posts: List[LaunchPost] = list(launch_posts)
    return CompanyProfile(
        name=extract.get_name(soup),
        yc_url=yc_url,
        short_description=extract.get_short_description(soup),
        description=extract.get_description(soup),
        logo=extract.get_company_logo(soup),
        banner=extract.get_banner_url(soup),
        founded=extract.get_founded(soup),
        team_size=extract.get_team_size(soup),
        location=extract.get_location(soup),
        url=extract.get_company_url(soup),
        yc_batch=extract.get_batch(soup),
        badges=extract.get_badges(soup),
        num_jobs=extract.get_num_jobs(soup),
        jobs=extract.get_jobs(soup),
        founders=extract.get_founders(soup),
        launch_posts=posts,
        social_media=extract.get_company_socials(soup),
        news=extract.get_news(soup),
        images=extract.get_images(soup),
    )
