import sys

from config import (
    AUTHOR_NAME,
    GITHUB_PAGE,
    MASTODON_HANDLE,
    MASTODON_PAGE,
    SETTINGS_PATH,
    SITE_HOSTNAME,
    SITE_NAME,
)
from blog.app.cli import main
from blog.domain.models import SiteInfo


if __name__ == "__main__":
    site = SiteInfo(
        name=SITE_NAME,
        url=SITE_HOSTNAME,
        author=AUTHOR_NAME,
        github_page=GITHUB_PAGE,
        mastodon_page=MASTODON_PAGE,
        mastodon_handle=MASTODON_HANDLE,
    )
    argv = sys.argv[1:]
    if "--settings" not in argv:
        argv = ["--settings", SETTINGS_PATH, *argv]
    sys.exit(main(site, argv))
