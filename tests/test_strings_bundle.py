import pytest

from blog.adapters.resources.directory import DirectoryResourceSource
from blog.adapters.strings.strings_bundle import StringsBundleSource, parse_strings
from blog.domain.errors import ResourceError
from blog.localizer import Localizer
from conftest import EN, PT


def test_parse_strings_entries_and_comments():
    text = '''
    /* Navigation
       block comment */
    "Home" = "Início";
    // line comment
    "Tagged with: %@"="Marcado com: %@" ;
    "Link" = "https://example.com/a";
    '''
    assert parse_strings(text) == {
        "Home": "Início",
        "Tagged with: %@": "Marcado com: %@",
        "Link": "https://example.com/a",
    }


def test_parse_strings_escapes():
    text = r'"Say \"hi\"" = "Diga \"oi\"\n\U00e9";'
    assert parse_strings(text) == {'Say "hi"': 'Diga "oi"\né'}


def test_parse_strings_rejects_garbage():
    with pytest.raises(ResourceError):
        parse_strings('"Home" = "Início"')


def test_bundle_source_reads_lproj_table(tmp_path):
    lproj = tmp_path / "Localizable.bundle" / "pt.lproj"
    lproj.mkdir(parents=True)
    (lproj / "Localizable.strings").write_text('\ufeff"Home" = "Início";\n', encoding="utf-8")

    source = StringsBundleSource(bundle_dir=tmp_path / "Localizable.bundle")
    assert source.lookup_table(PT) == {"Home": "Início"}
    assert source.lookup_table(EN) is None


def test_localizer_over_missing_bundle_echoes_keys(tmp_path):
    loc = Localizer(source=StringsBundleSource(bundle_dir=tmp_path / "missing.bundle"))
    assert loc.string("Home", PT) == "Home"
    assert loc.format("Tagged with: %@", PT, "go") == "Tagged with: go"


def test_directory_resource_source(tmp_path):
    (tmp_path / "resume_en.md").write_bytes(b"# Resume\n")
    (tmp_path / "sub").mkdir()
    source = DirectoryResourceSource(root=tmp_path)

    assert source.data_for_resource("resume_en.md") == b"# Resume\n"
    assert source.data_for_resource("resume_pt.md") is None
    assert source.data_for_resource("sub") is None
    assert source.data_for_resource("../outside.md") is None


def test_bundle_source_reads_utf16_table(tmp_path):
    lproj = tmp_path / "Localizable.bundle" / "pt.lproj"
    lproj.mkdir(parents=True)
    (lproj / "Localizable.strings").write_bytes('"Home" = "Início";\n'.encode("utf-16"))

    loc = Localizer(source=StringsBundleSource(bundle_dir=tmp_path / "Localizable.bundle"))
    assert loc.string("Home", PT) == "Início"


def test_bundle_source_rejects_undecodable_table(tmp_path):
    lproj = tmp_path / "Localizable.bundle" / "pt.lproj"
    lproj.mkdir(parents=True)
    (lproj / "Localizable.strings").write_bytes(b'"Home" = "In\xedcio";\n')

    source = StringsBundleSource(bundle_dir=tmp_path / "Localizable.bundle")
    with pytest.raises(ResourceError):
        source.lookup_table(PT)
