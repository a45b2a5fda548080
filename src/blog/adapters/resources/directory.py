from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True, slots=True)
class DirectoryResourceSource:
    """
    Serves resource files (e.g. resume_en.md) from a flat directory.
    Names that are missing, not files, or that escape the directory yield None.
    """
    root: Path

    def data_for_resource(self, name: str) -> Optional[bytes]:
        root = self.root.resolve()
        path = (root / name).resolve()
        if root not in path.parents or not path.is_file():
            return None
        try:
            return path.read_bytes()
        except OSError:
            return None
