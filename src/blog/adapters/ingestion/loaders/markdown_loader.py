from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from blog.adapters.ingestion.loaders.text_loader import TextLoader
from blog.domain.models import Article, Locale, LocaleRegistry
from blog.domain.schema import META_LOCALE_KEYS
from blog.utils.parsing import normalize_tags, split_frontmatter
from blog.utils.slug import slugify

_H1_RE = re.compile(r"^#[ \t]+(.+?)[ \t]*#*[ \t]*$", re.MULTILINE)


class FrontMatter(BaseModel):
    """
    The article metadata block at the top of a markdown file.
    Unknown keys are kept so they reach Article.metadata.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: Optional[str] = None
    description: str = ""
    tags: tuple[str, ...] = ()
    type: Optional[str] = None
    image: Optional[str] = None
    image_description: str = Field(default="", alias="imageDescription")
    author: Optional[str] = None
    date: Optional[datetime] = None
    path: Optional[str] = None
    published: bool = True
    lang: Optional[str] = Field(default=None, validation_alias=AliasChoices(*META_LOCALE_KEYS))

    @field_validator("tags", mode="before")
    @classmethod
    def _tags(cls, v: Any) -> tuple[str, ...]:
        return normalize_tags(v)

    @field_validator("description", "image_description", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("title", "type", "author", "lang", mode="before")
    @classmethod
    def _optional_text(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        s = str(v).strip()
        return s or None

    @field_validator("date", mode="before")
    @classmethod
    def _date(cls, v: Any) -> Any:
        # YAML turns "2024-05-25" into a date, which pydantic will not widen
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime.combine(v, time.min)
        return v


def normalize_language(value: str) -> str:
    """'pt-BR' / 'pt_br' -> 'pt'."""
    return value.lower().replace("_", "-").split("-", 1)[0]


def extract_title(body: str) -> tuple[Optional[str], str]:
    """
    Pull the first level-1 heading out of the body.
    Returns (title, body_without_heading); (None, body) when there is none.
    """
    m = _H1_RE.search(body)
    if m is None:
        return None, body
    return m.group(1).strip(), (body[: m.start()] + body[m.end():]).strip("\n")


@dataclass(frozen=True, slots=True)
class MarkdownArticleLoader:
    """
    Turns one markdown file under content_root into an Article.

    - front-matter parsed as YAML and validated
    - title from front-matter, else the first '# heading', else the file name
    - locale from 'lang'/'language'/'locale', else a leading locale directory,
      else the default locale
    - path from front-matter, else the slugged relative file path; paths of
      non-default locales always start with the locale identifier
    - type from front-matter, else the first directory below the locale
    """
    content_root: Path
    registry: LocaleRegistry
    text_loader: TextLoader = field(default_factory=TextLoader)

    def load(self, path: Path) -> Optional[Article]:
        """
        Returns None for unreadable, empty or unpublished files.
        Raises pydantic.ValidationError for malformed front-matter.
        """
        parsed = self.read(path)
        if parsed is None:
            return None
        meta, body = parsed
        if not meta.published:
            return None
        return self.build(path, meta, body)

    def read(self, path: Path) -> Optional[tuple[FrontMatter, str]]:
        raw = self.text_loader.load(path)
        if raw is None:
            return None
        frontmatter, body = split_frontmatter(raw)
        return FrontMatter.model_validate(frontmatter), body

    def build(self, path: Path, meta: FrontMatter, body: str) -> Optional[Article]:
        title = meta.title
        if title is None:
            title, body = extract_title(body)
        if not body.strip():
            return None

        rel_dirs = list(path.resolve().relative_to(self.content_root.resolve()).parent.parts)
        locale = self._locale(meta.lang, rel_dirs)
        rel_dirs = self._strip_locale(rel_dirs)

        return Article(
            path=self._path(meta.path, rel_dirs, path.stem, locale),
            title=title or path.stem,
            text=body.strip("\n"),
            locale=locale,
            tags=meta.tags,
            type=meta.type or (rel_dirs[0] if rel_dirs else None),
            description=meta.description,
            image=meta.image,
            image_description=meta.image_description,
            author=meta.author,
            date=meta.date,
            metadata=meta.model_dump(),
        )

    def _locale(self, lang: Optional[str], rel_dirs: list[str]) -> Locale:
        if lang:
            found = self.registry.get(normalize_language(lang))
            if found is not None:
                return found
        if rel_dirs:
            found = self.registry.get(rel_dirs[0])
            if found is not None:
                return found
        return self.registry.default

    def _strip_locale(self, segments: list[str]) -> list[str]:
        # the article locale alone decides the locale prefix of its path
        if segments and self.registry.get(segments[0]) is not None:
            return segments[1:]
        return segments

    def _path(self, explicit: Optional[str], rel_dirs: list[str], stem: str, locale: Locale) -> str:
        if explicit:
            segments = self._strip_locale([s for s in explicit.split("/") if s])
        else:
            segments = [slugify(d) for d in rel_dirs] + [slugify(stem)]
            segments = [s for s in segments if s]

        if not self.registry.is_default(locale):
            segments = [locale.identifier, *segments]
        return "/" + "/".join(segments)
