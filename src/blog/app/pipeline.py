from __future__ import annotations

import time
import uuid
from typing import Callable, Optional

from blog.app.container import Container
from blog.domain.models import (
    AssembledPage,
    BuildTrace,
    CategoriesPage,
    HomePage,
    Locale,
    Page,
    SiteBuild,
    StoryPage,
)
from blog.pages import (
    categories_page,
    head_meta,
    home_page,
    index_page,
    navigation,
    resume_page,
    story_page,
)


def _article_count(page: Page) -> int:
    if isinstance(page, HomePage):
        return len(page.remaining) + (1 if page.head is not None else 0)
    if isinstance(page, CategoriesPage):
        return len({link.path for section in page.sections for link in section.articles})
    if isinstance(page, StoryPage):
        return 1
    return 0


def _assemble(
    kind: str,
    build: Callable[[], Page],
    c: Container,
    locale: Optional[Locale],
) -> AssembledPage:
    started = time.perf_counter()
    page = build()
    nav = navigation(locale, page.path, c.localizer, c.resolver, c.site) if locale is not None else None
    latency_ms = int((time.perf_counter() - started) * 1000)

    c.logger.log(
        BuildTrace(
            trace_id=uuid.uuid4().hex,
            page=kind,
            path=page.path,
            locale=locale.identifier if locale is not None else None,
            article_count=_article_count(page),
            latency_ms=latency_ms,
        )
    )
    return AssembledPage(kind=kind, path=page.path, page=page, navigation=nav)


def assemble_locale(c: Container, locale: Locale) -> list[AssembledPage]:
    """
    The static pages of one locale: Home, Categories and Resume.
    """
    return [
        _assemble("home", lambda: home_page(locale, c.store, c.localizer, c.resolver, limit=c.home_limit), c, locale),
        _assemble("categories", lambda: categories_page(locale, c.store, c.localizer, c.resolver), c, locale),
        _assemble("resume", lambda: resume_page(locale, c.localizer, c.resources, c.resolver), c, locale),
    ]


def assemble_site(c: Container, *, only_locale: Optional[Locale] = None) -> SiteBuild:
    """
    Evaluate every page model of the site.

    Page models only read from the container, so the order they run in does
    not matter; content has already been loaded when the container was built.
    """
    locales = [only_locale] if only_locale is not None else list(c.resolver.registry.all)

    pages: list[AssembledPage] = []
    if only_locale is None:
        pages.append(_assemble("index", lambda: index_page(c.localizer, c.resolver), c, None))

    for locale in locales:
        pages.extend(assemble_locale(c, locale))

    for article in c.store.all_items():
        if article.locale not in locales:
            continue
        pages.append(_assemble("story", lambda a=article: story_page(a, c.localizer), c, article.locale))

    return SiteBuild(site=c.site, head_meta=head_meta(c.site), pages=tuple(pages))
