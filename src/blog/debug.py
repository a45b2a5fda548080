import json
from datetime import datetime
from pathlib import Path

from blog.domain.models import IngestReport, SiteBuild
from blog.utils.json_sanitize import json_sanitize


def dump_pages(build: SiteBuild, out_dir: str | Path = "artifacts/pages") -> str:
    """
    Dumps every assembled page of a build to a timestamped JSON file.

    Args:
        build (SiteBuild): The assembled site.
        out_dir (str | Path, optional): Output directory. Defaults to "./artifacts/pages".

    Returns:
        Path of the written file.
    """
    Path(out_dir).mkdir(parents=True, exist_ok=True)
    time_string = datetime.now().strftime("%Y%m%d_%H%M%S")
    path = Path(out_dir) / f"{time_string}.json"
    payload = {
        "site": json_sanitize(build.site),
        "head_meta": dict(build.head_meta),
        "pages": [json_sanitize(p) for p in build.pages],
    }
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return str(path)


def dump_ingest_report(report: IngestReport, out_dir: str | Path = "artifacts/pages") -> str:
    """
    Persist the content load counters next to the page dumps.
    """
    Path(out_dir).mkdir(parents=True, exist_ok=True)
    path = Path(out_dir) / "ingest_report.json"
    path.write_text(json.dumps(json_sanitize(report), indent=2), encoding="utf-8")
    return str(path)
