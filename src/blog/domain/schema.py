from __future__ import annotations

from typing import Final

# Any of these selects the article locale, first match wins
META_LOCALE_KEYS: Final[tuple[str, ...]] = ("lang", "language", "locale")

# Resource naming
STRINGS_TABLE_NAME: Final[str] = "Localizable.strings"
RESUME_RESOURCE_TEMPLATE: Final[str] = "resume_{locale}.md"
