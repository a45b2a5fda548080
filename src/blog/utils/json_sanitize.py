from __future__ import annotations

from dataclasses import is_dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Mapping

from blog.domain.models import Locale


def json_sanitize(x: Any) -> Any:
    """
    Convert page models and common non-JSON types into JSON-safe types.
    - Locale -> identifier string
    - dataclasses -> dicts (recursively sanitized)
    - datetime/date -> ISO string
    - Path -> str
    - set/tuple -> list
    - mappings/sequences -> recursively sanitized
    - unknown objects -> str(x)
    """
    if x is None or isinstance(x, (str, int, float, bool)):
        return x

    if isinstance(x, Locale):
        return x.identifier

    if is_dataclass(x) and not isinstance(x, type):
        return {f: json_sanitize(getattr(x, f)) for f in _field_names(x)}

    if isinstance(x, (datetime, date)):
        return x.isoformat()

    if isinstance(x, Path):
        return str(x)

    if isinstance(x, set):
        return [json_sanitize(v) for v in sorted(x, key=lambda v: str(v))]

    if isinstance(x, (tuple, list)):
        return [json_sanitize(v) for v in x]

    if isinstance(x, Mapping):
        return {str(k): json_sanitize(v) for k, v in x.items()}

    # Fallback: stringify unknown objects (YAML tags, custom classes, etc.)
    return str(x)


def _field_names(obj: Any) -> list[str]:
    # walk declared fields so nested Locale values survive
    return list(obj.__dataclass_fields__.keys())
