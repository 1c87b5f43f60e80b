"""Data models for the profile engine.

The key idea: the scraper owns a *stable* output schema regardless of how the
upstream pages are laid out. Every optional field is always present in the
output, as ``null`` when the page does not carry it.

Output keys are camelCase to match the JSON consumers already read; models
accept either snake_case or camelCase when validating.

This file uses Pydantic v2.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, HttpUrl
from pydantic.alias_generators import to_camel


# Platforms we keep in social-link mappings. Keys are lower-cased first words
# of a link's title attribute ("Twitter account" -> "twitter").
SOCIAL_PLATFORMS = (
    "twitter",
    "linkedin",
    "facebook",
    "crunchbase",
    "github",
    "instagram",
    "youtube",
)

SocialLinks = Dict[str, str]


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class CompanyRef(_Record):
    """One row of the input list."""

    company_name: str
    yc_url: HttpUrl


class JobPosting(_Record):
    role: Optional[str] = None
    location: Optional[str] = None
    salary: Optional[str] = None
    equity: Optional[str] = None
    eligibility: Optional[str] = None


class Founder(_Record):
    """A founder, normalized from either founder-card layout."""

    name: Optional[str] = None
    image_url: Optional[str] = None
    position: Optional[str] = None
    description: Optional[str] = None
    socials: SocialLinks = Field(default_factory=dict)


class NewsItem(_Record):
    title: str
    link: str
    date: str = Field(..., description="ISO-8601 timestamp in UTC, e.g. 2023-03-16T00:00:00Z.")


class LaunchPost(_Record):
    """A product announcement, merged from the profile card and its sub-page."""

    title: str
    link: str
    description: str

    votes: int = 0
    created_at: Optional[str] = None
    post: Optional[str] = None
    sources: List[str] = Field(default_factory=list, description="Absolute media URLs referenced by the post body.")


class CompanyProfile(_Record):
    """The fully assembled record for one company."""

    name: Optional[str] = None
    yc_url: str

    short_description: Optional[str] = None
    description: Optional[str] = None
    logo: Optional[str] = None
    banner: Optional[str] = None

    founded: Optional[str] = None
    team_size: Optional[int] = None
    location: Optional[str] = None
    url: Optional[str] = None

    yc_batch: Optional[str] = None
    badges: List[str] = Field(default_factory=list)

    num_jobs: Optional[int] = None
    jobs: List[JobPosting] = Field(default_factory=list)
    founders: List[Founder] = Field(default_factory=list)
    launch_posts: List[LaunchPost] = Field(default_factory=list)
    social_media: SocialLinks = Field(default_factory=dict)
    news: List[NewsItem] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
