from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from blog.domain.models import Locale


@dataclass(frozen=True, slots=True)
class InMemoryStringTables:
    """
    String tables held in a dict keyed by locale identifier.
    """
    tables: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def lookup_table(self, locale: Locale) -> Optional[Mapping[str, str]]:
        return self.tables.get(locale.identifier)
