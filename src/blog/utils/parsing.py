from __future__ import annotations

from typing import Any, Dict, Tuple

import yaml


def split_frontmatter(raw_text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a markdown string into its YAML front-matter and body.

    Args:
        raw_text (str): The file contents, optionally starting with a '---' fenced YAML block.

    Returns:
        (tuple[dict[str, Any], str]): The front-matter as a dictionary and the body text.
    """
    # Normalize newlines and strip BOM if present
    s = raw_text.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")

    lines = s.split("\n")
    # Check for opening '---' on its own line. If not found, treat as no front-matter
    if not lines or lines[0].strip() != "---":
        return {}, s

    end_idx = None
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            end_idx = i
            break

    if end_idx is None:
        # No closing fence: treat as no front-matter
        return {}, s

    frontmatter_text = "\n".join(lines[1:end_idx]).strip()
    content = "\n".join(lines[end_idx + 1:]).lstrip("\n")

    try:
        frontmatter = yaml.safe_load(frontmatter_text) or {}
        if not isinstance(frontmatter, dict):
            frontmatter = {}
    except yaml.YAMLError:
        frontmatter = {}

    return frontmatter, content


def normalize_tags(value: Any) -> tuple[str, ...]:
    """
    Accepts `tags: [a, b]`, `tags: "a, b"` or `tags: a` and returns the
    non-empty tags in declaration order, without duplicates.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        parts = [p.strip() for p in value.split(",")]
    elif isinstance(value, (list, tuple)):
        parts = [str(x).strip() for x in value if x is not None]
    else:
        return ()

    out: list[str] = []
    for p in parts:
        if p and p not in out:
            out.append(p)
    return tuple(out)
