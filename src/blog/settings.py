from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from blog.domain.models import Locale, LocaleRegistry


@dataclass(frozen=True)
class Paths:
    content_dir: Path
    resources_dir: Path
    strings_bundle: Path
    output_dir: Path


@dataclass(frozen=True)
class Locales:
    default: str
    alternatives: tuple[str, ...]
    labels: dict[str, str] = field(default_factory=dict)

    def registry(self) -> LocaleRegistry:
        return LocaleRegistry(
            default=Locale(self.default),
            alternatives=tuple(Locale(a) for a in self.alternatives),
            labels=dict(self.labels),
        )


@dataclass(frozen=True)
class Home:
    limit: int


@dataclass(frozen=True)
class Settings:
    paths: Paths
    locales: Locales
    home: Home


def load_settings(path: str | Path = "settings.toml") -> Settings:
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")

    with path.open("rb") as f:
        raw = tomllib.load(f)

    base = path.resolve().parent

    def expand(p: str) -> Path:
        # Relative paths are taken from the directory holding the settings file
        return (base / Path(os.path.expandvars(os.path.expanduser(p)))).resolve()

    try:
        locales = Locales(
            default=str(raw["locales"]["default"]),
            alternatives=tuple(str(a) for a in raw["locales"].get("alternatives", [])),
            labels={str(k): str(v) for k, v in raw["locales"].get("labels", {}).items()},
        )
        return Settings(
            paths=Paths(
                content_dir=expand(raw["paths"]["content_dir"]),
                resources_dir=expand(raw["paths"]["resources_dir"]),
                strings_bundle=expand(raw["paths"]["strings_bundle"]),
                output_dir=expand(raw["paths"].get("output_dir", "artifacts")),
            ),
            locales=locales,
            home=Home(
                limit=int(raw.get("home", {}).get("limit", 6)),
            ),
        )
    except KeyError as e:
        raise KeyError(f"Missing config key: {e}") from e
