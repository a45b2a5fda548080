from __future__ import annotations

from typing import Optional

from blog.content_store import ContentStore
from blog.domain.models import (
    Article,
    ArticleContent,
    ArticleLink,
    ArticleSummary,
    CategoriesPage,
    CategorySection,
    HomePage,
    IndexPage,
    Locale,
    NavLink,
    Navigation,
    ResumePage,
    SiteInfo,
    StoryPage,
)
from blog.domain.schema import RESUME_RESOURCE_TEMPLATE
from blog.localizer import Localizer
from blog.ports import ResourceSource
from blog.routing import LocaleResolver

HOME_LIMIT = 6

TAGGED_WITH_FORMAT = "Tagged with: %@"
READING_STATS_FORMAT = "%d words; %d minutes to read"


# -------------------------
# Article fragments
# -------------------------

def article_link(article: Article) -> ArticleLink:
    return ArticleLink(title=article.title, path=article.path)


def _tagged_with(article: Article, localizer: Localizer) -> Optional[str]:
    if not article.has_tags:
        return None
    return localizer.format(TAGGED_WITH_FORMAT, article.locale, article.tag_list)


def article_content(article: Article, localizer: Localizer) -> ArticleContent:
    """
    Full rendering of an article. The tag line and reading statistics are only
    shown for tagged articles.
    """
    reading_stats = None
    if article.has_tags:
        reading_stats = localizer.format(
            READING_STATS_FORMAT,
            article.locale,
            article.word_count,
            article.reading_minutes,
        )

    return ArticleContent(
        title=article.title,
        path=article.path,
        text=article.text,
        image=article.image,
        image_description=article.image_description,
        tagged_with=_tagged_with(article, localizer),
        reading_stats=reading_stats,
    )


def article_summary(article: Article, localizer: Localizer) -> ArticleSummary:
    return ArticleSummary(
        link=article_link(article),
        description=article.description,
        tagged_with=_tagged_with(article, localizer),
    )


# -------------------------
# Pages
# -------------------------

def home_page(
    locale: Locale,
    store: ContentStore,
    localizer: Localizer,
    resolver: LocaleResolver,
    *,
    limit: int = HOME_LIMIT,
) -> HomePage:
    head, rest = store.head_and_rest(locale, limit)
    return HomePage(
        locale=locale,
        path=resolver.page_path("Home", locale),
        title=localizer.string("Home", locale),
        more_label=localizer.string("More", locale),
        head=article_content(head, localizer) if head is not None else None,
        remaining=tuple(article_summary(a, localizer) for a in rest),
    )


def categories_page(
    locale: Locale,
    store: ContentStore,
    localizer: Localizer,
    resolver: LocaleResolver,
) -> CategoriesPage:
    sections = tuple(
        CategorySection(tag=tag, articles=tuple(article_link(a) for a in articles))
        for tag, articles in store.sorted_categories(locale)
    )
    return CategoriesPage(
        locale=locale,
        path=resolver.page_path("Categories", locale),
        title=localizer.string("Categories", locale),
        sections=sections,
    )


def resume_resource_name(locale: Locale) -> str:
    return RESUME_RESOURCE_TEMPLATE.format(locale=locale.identifier)


def resume_page(
    locale: Locale,
    localizer: Localizer,
    resources: ResourceSource,
    resolver: LocaleResolver,
) -> ResumePage:
    resource = resume_resource_name(locale)
    data = resources.data_for_resource(resource)
    body = ""
    if data is not None:
        try:
            body = data.decode("utf-8")
        except UnicodeDecodeError:
            body = ""

    return ResumePage(
        locale=locale,
        path=resolver.page_path("Resume", locale),
        title=localizer.string("Resume", locale),
        resource=resource,
        body=body,
    )


def story_page(article: Article, localizer: Localizer) -> StoryPage:
    return StoryPage(
        locale=article.locale,
        path=article.path,
        content=article_content(article, localizer),
    )


def index_page(localizer: Localizer, resolver: LocaleResolver) -> IndexPage:
    """
    Landing page at "/" that sends the browser to the home page of its language.
    """
    registry = resolver.registry
    return IndexPage(
        path="/",
        title=localizer.string("Home", registry.default),
        fallback=resolver.page_path("Home", registry.default),
        redirects={loc.identifier: resolver.page_path("Home", loc) for loc in registry.all},
    )


# -------------------------
# Chrome
# -------------------------

def navigation(
    locale: Locale,
    current_path: str,
    localizer: Localizer,
    resolver: LocaleResolver,
    site: SiteInfo,
) -> Navigation:
    def link(key: str, target: str) -> NavLink:
        return NavLink(label=localizer.string(key, locale), target=target)

    links = [
        link("Home", "/"),
        link("Categories", resolver.page_path("Categories", locale)),
        link("Resume", resolver.page_path("Resume", locale)),
    ]
    if site.github_page:
        links.append(link("GitHub", site.github_page))
    if site.mastodon_page:
        links.append(link("Mastodon", site.mastodon_page))
    links.append(link("Feed", site.feed_path))

    return Navigation(
        links=tuple(links),
        locale_switch=link(
            resolver.link_label(locale),
            resolver.path_for(current_path, locale, resolver.link_target(locale)),
        ),
    )


def head_meta(site: SiteInfo) -> dict[str, str]:
    meta = {"apple-mobile-web-app-title": site.name}
    if site.mastodon_handle:
        meta["fediverse:creator"] = site.mastodon_handle
    return meta
