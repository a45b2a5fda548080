from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence, Union

WORDS_PER_MINUTE = 250

_MARKUP_RE = re.compile(r"<[^>]+>|[#*_`>\[\]()!]")


# -------------------------
# Locales
# -------------------------

@dataclass(frozen=True, slots=True)
class Locale:
    """
    A language variant of the site, identified by a short code ("en", "pt").
    """
    identifier: str

    def __str__(self) -> str:
        return self.identifier


@dataclass(frozen=True, slots=True)
class LocaleRegistry:
    """
    The closed set of locales a site is published in.

    Exactly one locale is the default; its paths carry no locale segment.
    `labels` maps a locale identifier to the label of the link that switches
    AWAY from that locale.
    """
    default: Locale
    alternatives: tuple[Locale, ...] = ()
    labels: Mapping[str, str] = field(default_factory=dict)

    @property
    def all(self) -> tuple[Locale, ...]:
        return (self.default, *self.alternatives)

    def get(self, identifier: str) -> Optional[Locale]:
        for loc in self.all:
            if loc.identifier == identifier:
                return loc
        return None

    def is_default(self, locale: Locale) -> bool:
        return locale == self.default


@dataclass(frozen=True, slots=True)
class SiteInfo:
    name: str
    url: str
    author: str = ""
    github_page: str = ""
    mastodon_page: str = ""
    mastodon_handle: str = ""
    feed_path: str = "/feed.rss"


# -------------------------
# Content objects
# -------------------------

@dataclass(frozen=True, slots=True)
class Article:
    """
    A single published piece of content.

    Created once by a content source at build time and never mutated.
    `path` is the site path the story page is published at.
    """
    path: str
    title: str
    text: str
    locale: Locale
    tags: tuple[str, ...] = ()
    type: Optional[str] = None
    description: str = ""
    image: Optional[str] = None
    image_description: str = ""
    author: Optional[str] = None
    date: Optional[datetime] = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    @property
    def has_tags(self) -> bool:
        return bool(self.tags)

    @property
    def tag_list(self) -> str:
        return ", ".join(self.tags)

    @property
    def word_count(self) -> int:
        return len(_MARKUP_RE.sub(" ", self.text).split())

    @property
    def reading_minutes(self) -> int:
        words = self.word_count
        if words == 0:
            return 0
        return max(1, math.ceil(words / WORDS_PER_MINUTE))


@dataclass(frozen=True, slots=True)
class IngestReport:
    scanned: int
    loaded: int
    skipped_hidden: int
    skipped_extension: int
    skipped_unpublished: int
    skipped_empty: int
    failed: int
    by_locale: Mapping[str, int] = field(default_factory=dict)


# -------------------------
# Page models (render-ready values)
# -------------------------

@dataclass(frozen=True, slots=True)
class ArticleLink:
    title: str
    path: str


@dataclass(frozen=True, slots=True)
class ArticleContent:
    """
    Everything needed to render an article in full.

    `tagged_with` and `reading_stats` are only present for tagged articles.
    """
    title: str
    path: str
    text: str
    image: Optional[str] = None
    image_description: str = ""
    tagged_with: Optional[str] = None
    reading_stats: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ArticleSummary:
    link: ArticleLink
    description: str = ""
    tagged_with: Optional[str] = None


@dataclass(frozen=True, slots=True)
class NavLink:
    label: str
    target: str


@dataclass(frozen=True, slots=True)
class Navigation:
    links: Sequence[NavLink]
    locale_switch: NavLink


@dataclass(frozen=True, slots=True)
class HomePage:
    locale: Locale
    path: str
    title: str
    more_label: str
    head: Optional[ArticleContent] = None
    remaining: Sequence[ArticleSummary] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class CategorySection:
    tag: str
    articles: Sequence[ArticleLink]


@dataclass(frozen=True, slots=True)
class CategoriesPage:
    locale: Locale
    path: str
    title: str
    sections: Sequence[CategorySection] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class ResumePage:
    locale: Locale
    path: str
    title: str
    resource: str
    body: str = ""


@dataclass(frozen=True, slots=True)
class StoryPage:
    locale: Locale
    path: str
    content: ArticleContent


@dataclass(frozen=True, slots=True)
class IndexPage:
    """
    Landing page that redirects the browser to the home page of its language.
    `redirects` maps a language identifier to that locale's home path.
    """
    path: str
    title: str
    fallback: str
    redirects: Mapping[str, str] = field(default_factory=dict)


Page = Union[HomePage, CategoriesPage, ResumePage, StoryPage, IndexPage]


@dataclass(frozen=True, slots=True)
class AssembledPage:
    """
    A page model plus the chrome it is rendered in.
    `navigation` is None for the language redirect index.
    """
    kind: str
    path: str
    page: Page
    navigation: Optional[Navigation] = None


@dataclass(frozen=True, slots=True)
class SiteBuild:
    site: SiteInfo
    head_meta: Mapping[str, str]
    pages: Sequence[AssembledPage] = field(default_factory=tuple)

    def page_at(self, path: str) -> Optional[AssembledPage]:
        for p in self.pages:
            if p.path == path:
                return p
        return None


# -------------------------
# Build tracing
# -------------------------

@dataclass(frozen=True, slots=True)
class BuildTrace:
    """
    A structured record of one page-model evaluation.
    Log this per page (JSONL) to see what a build produced.
    """
    trace_id: str
    page: str
    path: str
    locale: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    article_count: int = 0
    latency_ms: Optional[int] = None
    metadata: Mapping[str, Any] = field(default_factory=dict)
