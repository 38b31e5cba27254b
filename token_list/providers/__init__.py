"""Network-backed loaders. Importing this package requires ``httpx``."""

from .uri import from_uri, from_uri_blocking

__all__ = [
    "from_uri",
    "from_uri_blocking",
]
