"""
Token lists (https://tokenlists.org/): data model, validation and loading.

The offline API is importable without any HTTP client installed. Remote
loading lives in ``token_list.providers`` and needs the ``http`` extra.
"""

from .errors import (
    TokenListError,
    TokenListNetworkError,
    TokenListParseError,
    TokenListValidationError,
)
from .services import (
    Violation,
    collect_violations,
    from_bytes,
    from_dict,
    from_path,
    json_schema,
    validate,
)
from .types import (
    ExtensionValue,
    TagInfo,
    TokenInfo,
    TokenList,
    Version,
    VersionUpgrade,
    is_version_update,
)

__version__ = "0.7.0"

__all__ = [
    "TokenListError",
    "TokenListNetworkError",
    "TokenListParseError",
    "TokenListValidationError",
    "Violation",
    "collect_violations",
    "from_bytes",
    "from_dict",
    "from_path",
    "json_schema",
    "validate",
    "ExtensionValue",
    "TagInfo",
    "TokenInfo",
    "TokenList",
    "Version",
    "VersionUpgrade",
    "is_version_update",
]
