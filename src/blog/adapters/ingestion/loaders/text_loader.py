from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True, slots=True)
class TextLoader:
    """
    Reads a content file from disk as text.

    - Tries utf-8 first, falls back to latin-1 with replacement characters.
    - Returns None for files larger than max_bytes or that cannot be read.
    """
    max_bytes: int = 1_000_000
    prefer_encoding: str = "utf-8"
    fallback_encoding: str = "latin-1"

    def load(self, path: Path) -> Optional[str]:
        try:
            if path.stat().st_size > self.max_bytes:
                return None
            data = path.read_bytes()
        except OSError:
            return None

        if b"\x00" in data:
            return None

        try:
            return data.decode(self.prefer_encoding, errors="strict")
        except UnicodeDecodeError:
            return data.decode(self.fallback_encoding, errors="replace")
