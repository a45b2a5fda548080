from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from blog.adapters.ingestion.filesystem import FilesystemContentSource
from blog.adapters.resources.directory import DirectoryResourceSource
from blog.adapters.strings.strings_bundle import StringsBundleSource
from blog.adapters.tracing.jsonl_logger import JsonlBuildLogger, MemoryBuildLogger
from blog.content_store import ContentStore
from blog.domain.models import IngestReport, SiteInfo
from blog.localizer import Localizer
from blog.ports import BuildLogger, ResourceSource
from blog.routing import LocaleResolver
from blog.settings import Settings


@dataclass(frozen=True, slots=True)
class Container:
    """
    Lightweight dependency container.
    Everything a page model needs, built once per build and passed explicitly.
    """
    site: SiteInfo
    resolver: LocaleResolver
    store: ContentStore
    localizer: Localizer
    resources: ResourceSource
    logger: BuildLogger
    home_limit: int
    ingest_report: Optional[IngestReport] = None


def build_container(settings: Settings, site: SiteInfo, *, log_builds: bool = True) -> Container:
    registry = settings.locales.registry()

    # Content is loaded before any page model runs and never changes afterwards
    source = FilesystemContentSource(content_dir=settings.paths.content_dir, registry=registry)
    store = ContentStore.from_source(source)

    localizer = Localizer(source=StringsBundleSource(bundle_dir=settings.paths.strings_bundle))
    # Parse every table up front so a malformed bundle fails the build here
    for locale in registry.all:
        localizer.string("", locale)

    if log_builds:
        logger: BuildLogger = JsonlBuildLogger(path=settings.paths.output_dir / "logs" / "build.jsonl")
    else:
        logger = MemoryBuildLogger()

    return Container(
        site=site,
        resolver=LocaleResolver(registry=registry),
        store=store,
        localizer=localizer,
        resources=DirectoryResourceSource(root=settings.paths.resources_dir),
        logger=logger,
        home_limit=settings.home.limit,
        ingest_report=source.report,
    )
