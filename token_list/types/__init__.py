from .models import (
    ExtensionValue,
    TagInfo,
    TokenInfo,
    TokenList,
    Version,
    VersionUpgrade,
    is_version_update,
)

__all__ = [
    "ExtensionValue",
    "TagInfo",
    "TokenInfo",
    "TokenList",
    "Version",
    "VersionUpgrade",
    "is_version_update",
]
