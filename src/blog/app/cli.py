from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from rich import print as rprint
from rich import print_json

from blog.app.container import build_container
from blog.app.pipeline import assemble_site
from blog.debug import dump_ingest_report, dump_pages
from blog.domain.errors import BlogAppError, PublishError
from blog.domain.models import SiteInfo
from blog.settings import load_settings
from blog.utils.json_sanitize import json_sanitize


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Assemble the page models of the blog and dump them as JSON.")
    ap.add_argument("--settings", default="settings.toml", help="Settings file (default: settings.toml)")
    ap.add_argument("--out", default=None, help="Output directory (default: <output_dir>/pages)")
    ap.add_argument("--locale", default=None, help="Only assemble pages of this locale")
    ap.add_argument("--path", default=None, help="Print the page published at this path instead of dumping")
    ap.add_argument("--no-build-log", dest="build_log", action="store_false", help="Do not append to build.jsonl")
    return ap


def run(args: argparse.Namespace, site: SiteInfo) -> int:
    settings = load_settings(args.settings)
    c = build_container(settings, site, log_builds=args.build_log)

    only_locale = None
    if args.locale:
        only_locale = c.resolver.registry.get(args.locale)
        if only_locale is None:
            raise PublishError(f"Unknown locale: {args.locale}")

    build = assemble_site(c, only_locale=only_locale)

    if args.path:
        page = build.page_at(args.path)
        if page is None:
            raise PublishError(f"No page published at {args.path}")
        print_json(data=json_sanitize(page))
        return 0

    out_dir = Path(args.out) if args.out else settings.paths.output_dir / "pages"
    try:
        pages_path = dump_pages(build, out_dir)
        if c.ingest_report is not None:
            dump_ingest_report(c.ingest_report, out_dir)
    except OSError as e:
        raise PublishError(f"Could not write pages to {out_dir}: {e}") from e

    report = c.ingest_report
    rprint(f"[bold]Pages assembled:[/bold] {len(build.pages)}")
    if report is not None:
        rprint(f"  articles: {report.loaded} (skipped {report.scanned - report.loaded}, failed {report.failed})")
        for locale_id, n in sorted(report.by_locale.items()):
            rprint(f"    {locale_id}: {n}")
    rprint(f"  dump:     {pages_path}")
    return 0


def main(site: SiteInfo, argv: Optional[Sequence[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    try:
        return run(args, site)
    except (BlogAppError, FileNotFoundError, KeyError) as e:
        rprint(f"[red]Build failed:[/red] {e}")
        return 1
