from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from blog.adapters.ingestion.loaders.markdown_loader import MarkdownArticleLoader
from blog.domain.errors import ContentLoadError
from blog.domain.models import Article, IngestReport, LocaleRegistry


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def _newest_first(article: Article) -> tuple[bool, float, str]:
    # Undated articles go last; ties fall back to path order
    ts = -article.date.timestamp() if article.date is not None else 0.0
    return (article.date is None, ts, article.path)


@dataclass(slots=True)
class FilesystemContentSource:
    """
    Loads every markdown article below content_dir.

    Articles come back newest first. Files that cannot be turned into an
    article are skipped and counted in `report`.
    """
    content_dir: Path
    registry: LocaleRegistry
    allowed_extensions: set[str] = field(default_factory=lambda: {".md", ".markdown"})
    skip_hidden: bool = True
    loader: Optional[MarkdownArticleLoader] = None
    report: Optional[IngestReport] = None

    def load_all_items(self) -> list[Article]:
        root = self.content_dir.expanduser().resolve()
        if not root.is_dir():
            raise ContentLoadError(f"Content directory not found: {root}")

        loader = self.loader or MarkdownArticleLoader(content_root=root, registry=self.registry)

        scanned = 0
        skipped_hidden = skipped_extension = skipped_unpublished = skipped_empty = failed = 0
        by_locale: dict[str, int] = {}
        seen_paths: set[str] = set()

        articles: list[Article] = []
        # Stable, deterministic ordering
        files = sorted((p for p in root.rglob("*") if p.is_file()), key=lambda p: str(p))

        for path in files:
            scanned += 1

            if self.skip_hidden and _is_hidden(path, root):
                skipped_hidden += 1
                continue

            if path.suffix.lower() not in self.allowed_extensions:
                skipped_extension += 1
                continue

            try:
                parsed = loader.read(path)
                if parsed is None:
                    skipped_empty += 1
                    continue
                meta, body = parsed
                if not meta.published:
                    skipped_unpublished += 1
                    continue
                article = loader.build(path, meta, body)
            except (ValidationError, ValueError):
                failed += 1
                continue

            if article is None:
                skipped_empty += 1
                continue

            if article.path in seen_paths:
                raise ContentLoadError(f"Duplicate article path {article.path} ({path})")
            seen_paths.add(article.path)

            articles.append(article)
            by_locale[article.locale.identifier] = by_locale.get(article.locale.identifier, 0) + 1

        self.report = IngestReport(
            scanned=scanned,
            loaded=len(articles),
            skipped_hidden=skipped_hidden,
            skipped_extension=skipped_extension,
            skipped_unpublished=skipped_unpublished,
            skipped_empty=skipped_empty,
            failed=failed,
            by_locale=dict(by_locale),
        )
        return sorted(articles, key=_newest_first)

