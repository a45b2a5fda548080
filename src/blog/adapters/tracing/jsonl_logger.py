from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from blog.domain.models import BuildTrace
from blog.utils.json_sanitize import json_sanitize


@dataclass(slots=True)
class JsonlBuildLogger:
    """
    Appends one JSON row per BuildTrace to `path`.
    """
    path: Path
    written: int = 0

    def log(self, trace: BuildTrace) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        row = json_sanitize(trace)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(row, ensure_ascii=False))
            f.write("\n")
        self.written += 1


@dataclass(slots=True)
class MemoryBuildLogger:
    """Keeps traces in a list; used when no log file is configured."""
    traces: list[BuildTrace] = field(default_factory=list)

    def log(self, trace: BuildTrace) -> None:
        self.traces.append(trace)
