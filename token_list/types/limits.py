"""Field bounds for token list documents.

Shared by the validation pass and the exported JSON Schema so the two can
never disagree.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class StringRule:
    min_length: int
    max_length: int
    pattern: Optional[str] = None

    @property
    def regex(self) -> Optional[re.Pattern[str]]:
        return re.compile(self.pattern) if self.pattern else None

    def json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"minLength": self.min_length, "maxLength": self.max_length}
        if self.pattern:
            schema["pattern"] = self.pattern
        return schema


@dataclass(frozen=True)
class IntRule:
    minimum: int
    maximum: Optional[int] = None

    def json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"minimum": self.minimum}
        if self.maximum is not None:
            schema["maximum"] = self.maximum
        return schema


@dataclass(frozen=True)
class SizeRule:
    min_items: int
    max_items: int


# TokenList
LIST_NAME = StringRule(1, 20)
KEYWORD = StringRule(1, 20, r"^[a-z0-9-]+$")
TAG_KEY = StringRule(1, 10, r"^[A-Za-z0-9]+$")
TOKENS = SizeRule(1, 10_000)
KEYWORDS = SizeRule(0, 20)
TAGS = SizeRule(0, 20)

# TagInfo
TAG_NAME = StringRule(1, 20)
TAG_DESCRIPTION = StringRule(1, 200)

# TokenInfo
TOKEN_NAME = StringRule(1, 40)
TOKEN_SYMBOL = StringRule(1, 20, r"^\S+$")
CHAIN_ID = IntRule(1)
DECIMALS = IntRule(0, 255)
EXTENSIONS = SizeRule(0, 10)
EXTENSION_KEY = StringRule(1, 40, r"^[\w]+$")
EXTENSION_VALUE = StringRule(1, 42)

# Version
VERSION_PART = IntRule(0)


__all__ = [
    "StringRule",
    "IntRule",
    "SizeRule",
    "LIST_NAME",
    "KEYWORD",
    "TAG_KEY",
    "TOKENS",
    "KEYWORDS",
    "TAGS",
    "TAG_NAME",
    "TAG_DESCRIPTION",
    "TOKEN_NAME",
    "TOKEN_SYMBOL",
    "CHAIN_ID",
    "DECIMALS",
    "EXTENSIONS",
    "EXTENSION_KEY",
    "EXTENSION_VALUE",
    "VERSION_PART",
]
