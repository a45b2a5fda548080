from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from blog.domain.models import Locale, LocaleRegistry
from blog.utils.slug import slugify

PathLike = Union[str, Sequence[str]]


def split_path(path: PathLike) -> list[str]:
    """
    "/pt/categories/" -> ["pt", "categories"]; segment sequences are copied as-is
    minus empty segments.
    """
    if isinstance(path, str):
        parts = path.split("/")
    else:
        parts = list(path)
    return [p for p in parts if p]


def join_path(segments: Sequence[str]) -> str:
    return "/" + "/".join(segments)


@dataclass(frozen=True, slots=True)
class LocaleResolver:
    """
    Maps URL paths to locales and rewrites paths between locales.

    Default-locale paths carry no locale segment; every other locale owns the
    first segment of its paths ("/pt/home"). Nothing here raises: unknown or
    missing segments resolve to the default locale.
    """
    registry: LocaleRegistry

    @property
    def default(self) -> Locale:
        return self.registry.default

    def resolve_locale(self, path: PathLike) -> Locale:
        segments = split_path(path)
        if not segments:
            return self.registry.default

        found = self.registry.get(segments[0])
        if found is None or self.registry.is_default(found):
            return self.registry.default
        return found

    def canonical_path(self, path: PathLike) -> str:
        segments = split_path(path)
        if segments and not self.registry.is_default(self.resolve_locale(segments)):
            segments = segments[1:]
        return join_path(segments)

    def path_for(self, current_path: PathLike, current_locale: Locale, target_locale: Locale) -> str:
        if target_locale == current_locale:
            if isinstance(current_path, str):
                return current_path
            return join_path(split_path(current_path))

        segments = split_path(current_path)
        if (
            not self.registry.is_default(current_locale)
            and segments
            and segments[0] == current_locale.identifier
        ):
            segments = segments[1:]

        if not self.registry.is_default(target_locale):
            segments = [target_locale.identifier, *segments]

        return join_path(segments)

    def link_target(self, locale: Locale) -> Locale:
        """
        The locale the language switch link of a `locale` page points to.
        """
        if self.registry.is_default(locale):
            if self.registry.alternatives:
                return self.registry.alternatives[0]
            return locale
        return self.registry.default

    def link_label(self, locale: Locale) -> str:
        return self.registry.labels.get(locale.identifier, self.link_target(locale).identifier)

    def page_path(self, page_name: str, locale: Locale) -> str:
        prefix = "" if self.registry.is_default(locale) else f"{locale.identifier}/"
        return "/" + prefix + slugify(page_name)
