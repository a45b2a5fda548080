from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from blog.domain.models import Locale
from blog.ports import StringTableSource
from blog.utils.printf import format_printf


@dataclass(slots=True)
class Localizer:
    """
    Resolves UI strings for a locale.

    A missing table or key echoes the key back, so untranslated strings still
    render (in the source language of the key).
    """
    source: StringTableSource
    _tables: dict[str, Optional[Mapping[str, str]]] = field(default_factory=dict)

    def _table(self, locale: Locale) -> Optional[Mapping[str, str]]:
        if locale.identifier not in self._tables:
            self._tables[locale.identifier] = self.source.lookup_table(locale)
        return self._tables[locale.identifier]

    def string(self, key: str, locale: Locale) -> str:
        table = self._table(locale)
        if table is None:
            return key
        return table.get(key, key)

    def format(self, format_key: str, locale: Locale, *args: Any) -> str:
        return format_printf(self.string(format_key, locale), args)
