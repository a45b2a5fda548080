from __future__ import annotations

from typing import Protocol, Sequence

from blog.domain.models import Article


class ContentSource(Protocol):
    """
    Produces every article of the site, newest first.
    """

    def load_all_items(self) -> Sequence[Article]:
        ...
