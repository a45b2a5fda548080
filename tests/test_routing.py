import pytest

from blog.routing import split_path
from blog.utils.slug import slugify
from conftest import EN, PT


def test_resolve_locale_reads_first_segment(resolver):
    assert resolver.resolve_locale("/pt/categories") == PT
    assert resolver.resolve_locale(["pt", "home"]) == PT
    assert resolver.resolve_locale("/categories") == EN


@pytest.mark.parametrize("path", ["", "/", [], "/fr/home", "/en/home", "/ptx", "//", "/categories/pt"])
def test_resolve_locale_falls_back_to_default(resolver, path):
    assert resolver.resolve_locale(path) == EN


def test_path_for_identity_when_locale_unchanged(resolver):
    assert resolver.path_for("/pt/categories", PT, PT) == "/pt/categories"
    assert resolver.path_for("/categories/", EN, EN) == "/categories/"
    assert resolver.path_for(["story", "a"], EN, EN) == "/story/a"
    assert resolver.path_for(["", "story", "a"], EN, EN) == "/story/a"


def test_path_for_switches_to_default(resolver):
    assert resolver.path_for("/pt/categories", PT, EN) == "/categories"


def test_path_for_switches_to_alternative(resolver):
    assert resolver.path_for("/categories", EN, PT) == "/pt/categories"
    assert resolver.path_for(["story", "hello"], EN, PT) == "/pt/story/hello"


def test_path_for_empty_remainder(resolver):
    assert resolver.path_for("/pt", PT, EN) == "/"
    assert resolver.path_for("/", EN, PT) == "/pt"
    assert resolver.path_for([], EN, PT) == "/pt"


@pytest.mark.parametrize("path", ["/", "/home", "/story/a/b", "/categories"])
def test_path_for_round_trips_through_resolve(resolver, path):
    to_pt = resolver.path_for(path, EN, PT)
    assert resolver.resolve_locale(to_pt) == PT
    back = resolver.path_for(to_pt, PT, EN)
    assert resolver.resolve_locale(back) == EN
    assert resolver.canonical_path(back) == resolver.canonical_path(path)


def test_canonical_path_strips_locale(resolver):
    assert resolver.canonical_path("/pt/story/x") == "/story/x"
    assert resolver.canonical_path("/story/x") == "/story/x"
    assert resolver.canonical_path("/pt") == "/"


def test_link_label_and_target_are_a_bijection(resolver):
    assert resolver.link_target(EN) == PT
    assert resolver.link_target(PT) == EN
    assert resolver.link_label(EN) == "Ver em Português"
    assert resolver.link_label(PT) == "See in English"


def test_page_path_prefixes_non_default_locale(resolver):
    assert resolver.page_path("Categories", EN) == "/categories"
    assert resolver.page_path("Categories", PT) == "/pt/categories"
    assert resolver.page_path("Home", PT) == "/pt/home"


def test_split_path_drops_empty_segments():
    assert split_path("//pt///home/") == ["pt", "home"]
    assert split_path(["", "pt", "home"]) == ["pt", "home"]


def test_slugify():
    assert slugify("Categories") == "categories"
    assert slugify("Olá Mundo!") == "ola-mundo"
    assert slugify("AboutMe") == "about-me"
    assert slugify("  --  ") == ""
