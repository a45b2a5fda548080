from __future__ import annotations

from typing import Mapping, Optional, Protocol

from blog.domain.models import Locale


class StringTableSource(Protocol):
    """
    Provides the key -> localized string table of a locale.

    Returns None when no localization asset exists for that locale.
    """

    def lookup_table(self, locale: Locale) -> Optional[Mapping[str, str]]:
        ...
