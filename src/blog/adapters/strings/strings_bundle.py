from __future__ import annotations

import codecs
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from blog.domain.errors import ResourceError
from blog.domain.models import Locale
from blog.domain.schema import STRINGS_TABLE_NAME

_QUOTED = r'"((?:[^"\\]|\\.)*)"'
_TOKEN_RE = re.compile(
    r"\s+|/\*.*?\*/|//[^\n]*|" + _QUOTED + r"\s*=\s*" + _QUOTED + r"\s*;",
    re.DOTALL,
)
_ESCAPE_RE = re.compile(r"\\(U[0-9a-fA-F]{4}|u[0-9a-fA-F]{4}|.)", re.DOTALL)
_SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\", "'": "'", "0": "\0"}


def _unescape(s: str) -> str:
    def repl(m: re.Match[str]) -> str:
        esc = m.group(1)
        if len(esc) == 5:
            return chr(int(esc[1:], 16))
        return _SIMPLE_ESCAPES.get(esc, esc)

    return _ESCAPE_RE.sub(repl, s)


def parse_strings(text: str) -> dict[str, str]:
    """
    Parse an Apple `.strings` table:

        /* Navigation */
        "Home" = "Início";
        "Tagged with: %@" = "Marcado com: %@";

    Raises ResourceError when something other than comments and entries is found.
    """
    table: dict[str, str] = {}
    pos = 0
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if m is None:
            raise ResourceError(f"Unexpected content in strings table: {text[pos:pos + 80]!r}")
        if m.group(1) is not None:
            table[_unescape(m.group(1))] = _unescape(m.group(2))
        pos = m.end()
    return table


def decode_strings(data: bytes) -> str:
    """
    Tables are saved either as UTF-8 or as UTF-16 with a byte order mark.
    Raises ResourceError when the bytes decode as neither.
    """
    if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        encoding = "utf-16"
    else:
        encoding = "utf-8-sig"
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise ResourceError(f"Strings table is not valid {encoding}: {e}") from e


@dataclass(frozen=True, slots=True)
class StringsBundleSource:
    """
    Reads `<bundle_dir>/<locale>.lproj/Localizable.strings`.

    A missing bundle directory or table yields None (the localizer then
    echoes keys). A table that exists but cannot be read raises ResourceError.
    """
    bundle_dir: Path
    table_name: str = STRINGS_TABLE_NAME
    max_bytes: int = 1_000_000

    def table_path(self, locale: Locale) -> Path:
        return self.bundle_dir / f"{locale.identifier}.lproj" / self.table_name

    def lookup_table(self, locale: Locale) -> Optional[Mapping[str, str]]:
        path = self.table_path(locale)
        if not path.is_file():
            return None
        try:
            if path.stat().st_size > self.max_bytes:
                raise ResourceError(f"Strings table too large: {path}")
            data = path.read_bytes()
        except OSError as e:
            raise ResourceError(f"Could not read strings table {path}: {e}") from e
        return parse_strings(decode_strings(data))
