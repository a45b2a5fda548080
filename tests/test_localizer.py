import pytest

from blog.adapters.strings.in_memory import InMemoryStringTables
from blog.localizer import Localizer
from blog.utils.printf import format_printf
from conftest import EN, PT


def test_string_looks_up_table(localizer):
    assert localizer.string("Home", PT) == "Início"


def test_string_echoes_key_when_table_missing(localizer):
    assert localizer.string("Home", EN) == "Home"


def test_string_echoes_key_when_key_missing(localizer):
    assert localizer.string("Feed", PT) == "Feed"


def test_format_tagged_with_scenario(localizer):
    assert localizer.format("Tagged with: %@", EN, "go, rust") == "Tagged with: go, rust"
    assert localizer.format("Tagged with: %@", PT, "go, rust") == "Marcado com: go, rust"


def test_format_integers(localizer):
    assert localizer.format("%d words; %d minutes to read", EN, 500, 2) == "500 words; 2 minutes to read"
    assert localizer.format("%d words; %d minutes to read", PT, 500, 2) == "500 palavras; 2 minutos de leitura"


def test_tables_are_fetched_once_per_locale():
    calls = []

    class CountingSource:
        def lookup_table(self, locale):
            calls.append(locale.identifier)
            return {"Home": "Início"} if locale == PT else None

    loc = Localizer(source=CountingSource())
    loc.string("Home", PT)
    loc.string("More", PT)
    loc.string("Home", EN)
    loc.string("Home", EN)
    assert calls == ["pt", "en"]


def test_format_uses_translated_template_with_positional_args():
    loc = Localizer(source=InMemoryStringTables(tables={"pt": {"%@ by %@": "%2$@ escreveu %1$@"}}))
    assert loc.format("%@ by %@", PT, "Post", "Ana") == "Ana escreveu Post"
    assert loc.format("%@ by %@", EN, "Post", "Ana") == "Post by Ana"


@pytest.mark.parametrize(
    "template, args, expected",
    [
        ("%s and %@", ["a", "b"], "a and b"),
        ("%ld items", [3], "3 items"),
        ("%lld/%u", [4, 5], "4/5"),
        ("%.2f%%", [12.3456], "12.35%"),
        ("%5d|", [42], "   42|"),
        ("%-4s|", ["ab"], "ab  |"),
        ("%x", [255], "ff"),
        ("100%%", [], "100%"),
        ("%@", [7], "7"),
        ("no specifiers", ["unused"], "no specifiers"),
    ],
)
def test_format_printf(template, args, expected):
    assert format_printf(template, args) == expected


def test_format_printf_leaves_unmatched_specifiers():
    assert format_printf("%@ and %@", ["one"]) == "one and %@"
    assert format_printf("%3$@", ["a"]) == "%3$@"


def test_format_printf_type_mismatch_raises():
    with pytest.raises(TypeError):
        format_printf("%d", ["not a number"])
