from __future__ import annotations

from typing import Protocol

from blog.domain.models import BuildTrace


class BuildLogger(Protocol):
    """
    Persists build traces (typically JSONL). Useful for checking what a build produced.
    """

    def log(self, trace: BuildTrace) -> None:
        ...
