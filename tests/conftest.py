from datetime import datetime

import pytest

from blog.adapters.strings.in_memory import InMemoryStringTables
from blog.content_store import ContentStore
from blog.domain.models import Article, Locale, LocaleRegistry, SiteInfo
from blog.localizer import Localizer
from blog.routing import LocaleResolver

EN = Locale("en")
PT = Locale("pt")

PT_STRINGS = {
    "Home": "Início",
    "Categories": "Categorias",
    "Resume": "Currículo",
    "More": "Mais",
    "Tagged with: %@": "Marcado com: %@",
    "%d words; %d minutes to read": "%d palavras; %d minutos de leitura",
}


def make_article(path, locale=EN, tags=(), text="one two three", **kw):
    return Article(
        path=path,
        title=kw.pop("title", path.rsplit("/", 1)[-1]),
        text=text,
        locale=locale,
        tags=tuple(tags),
        **kw,
    )


@pytest.fixture
def registry():
    return LocaleRegistry(
        default=EN,
        alternatives=(PT,),
        labels={"en": "Ver em Português", "pt": "See in English"},
    )


@pytest.fixture
def resolver(registry):
    return LocaleResolver(registry=registry)


@pytest.fixture
def articles():
    return [
        make_article("/story/first", EN, ["go"], date=datetime(2026, 2, 1)),
        make_article("/story/second", EN, ["go", "rust"], date=datetime(2026, 1, 1)),
        make_article("/pt/story/primeiro", PT, ["go"], date=datetime(2026, 1, 15)),
    ]


@pytest.fixture
def store(articles):
    return ContentStore(tuple(articles))


@pytest.fixture
def localizer():
    return Localizer(source=InMemoryStringTables(tables={"pt": PT_STRINGS}))


@pytest.fixture
def site():
    return SiteInfo(
        name="Test Blog",
        url="https://blog.example",
        github_page="https://github.com/someone",
        mastodon_page="https://mastodon.example/@someone",
        mastodon_handle="@someone@mastodon.example",
    )
