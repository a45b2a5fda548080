import pytest

from blog.settings import load_settings
from conftest import EN, PT

SETTINGS = """
[paths]
content_dir = "Content"
resources_dir = "Resources"
strings_bundle = "Resources/Localizable.bundle"

[locales]
default = "en"
alternatives = ["pt"]

[locales.labels]
en = "Ver em Português"
pt = "See in English"
"""


def test_load_settings(tmp_path):
    path = tmp_path / "settings.toml"
    path.write_text(SETTINGS, encoding="utf-8")

    s = load_settings(path)

    assert s.paths.content_dir == (tmp_path / "Content").resolve()
    assert s.paths.strings_bundle == (tmp_path / "Resources" / "Localizable.bundle").resolve()
    assert s.paths.output_dir == (tmp_path / "artifacts").resolve()
    assert s.home.limit == 6

    registry = s.locales.registry()
    assert registry.default == EN
    assert registry.alternatives == (PT,)
    assert registry.labels["pt"] == "See in English"


def test_load_settings_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.toml")


def test_load_settings_missing_key(tmp_path):
    path = tmp_path / "settings.toml"
    path.write_text('[paths]\ncontent_dir = "c"\n', encoding="utf-8")
    with pytest.raises(KeyError, match="Missing config key"):
        load_settings(path)
