import os
from dotenv import load_dotenv

load_dotenv()

SETTINGS_PATH = os.getenv("BLOG_SETTINGS", "settings.toml")

# Site identity (kept out of the repository, set in .env)
SITE_NAME = os.getenv("SITE_NAME", "My Blog")
SITE_HOSTNAME = os.getenv("SITE_HOSTNAME", "https://example.com")
AUTHOR_NAME = os.getenv("AUTHOR_NAME", "")

# Social links (optional; empty hides the navigation entry)
GITHUB_PAGE = os.getenv("GITHUB_PAGE", "")
MASTODON_PAGE = os.getenv("MASTODON_PAGE", "")
MASTODON_HANDLE = os.getenv("MASTODON_HANDLE", "")
