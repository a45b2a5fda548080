from __future__ import annotations

from typing import Optional, Protocol


class ResourceSource(Protocol):
    """
    Raw access to named resource files bundled with the site.
    """

    def data_for_resource(self, name: str) -> Optional[bytes]:
        ...
