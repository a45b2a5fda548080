from __future__ import annotations

import re
import unicodedata

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def slugify(text: str) -> str:
    """
    "Categories" -> "categories", "Olá Mundo!" -> "ola-mundo", "AboutMe" -> "about-me".
    """
    text = _CAMEL_RE.sub("-", text)
    folded = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM_RE.sub("-", folded.lower()).strip("-")
