from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from blog.domain.models import Article, Locale
from blog.ports import ContentSource


@dataclass(frozen=True, slots=True)
class ContentStore:
    """
    Read-only view over the articles of a build.

    Items keep the order the content source produced them in (newest first);
    every query preserves that order. Queries that match nothing return empty
    sequences.
    """
    _items: tuple[Article, ...] = ()

    @classmethod
    def from_source(cls, source: ContentSource) -> "ContentStore":
        return cls(tuple(source.load_all_items()))

    def all_items(self) -> tuple[Article, ...]:
        return self._items

    def items(self, locale: Locale, tag: Optional[str] = None) -> list[Article]:
        found = [a for a in self._items if a.locale == locale]
        if tag is None:
            return found
        return [a for a in found if tag in a.tags]

    def typed(self, type_: str, locale: Locale) -> list[Article]:
        return [a for a in self.items(locale) if a.type == type_]

    def categories(self, locale: Locale) -> dict[str, list[Article]]:
        """
        Every tag used in `locale` mapped to the articles carrying it.
        Key order carries no meaning; use sorted_categories() to iterate.
        """
        tags = {t for a in self.items(locale) for t in a.tags}
        return {tag: self.items(locale, tag) for tag in tags}

    def sorted_categories(self, locale: Locale) -> list[tuple[str, list[Article]]]:
        return sorted(self.categories(locale).items(), key=lambda kv: (kv[0].lower(), kv[0]))

    def head_and_rest(self, locale: Locale, limit: int) -> tuple[Optional[Article], list[Article]]:
        window = self.items(locale)[: max(0, limit)]
        if not window:
            return None, []
        return window[0], window[1:]

    def article_at(self, path: str) -> Optional[Article]:
        for a in self._items:
            if a.path == path:
                return a
        return None

    def count(self) -> int:
        return len(self._items)

