"""
Token List Models

pydantic models mirroring the Uniswap token list JSON schema
(https://uniswap.org/tokenlist.schema.json).

The models only enforce shape: required fields, JSON types and strict
integers. Length, range, pattern and cross-reference rules live in
``token_list.services.validation`` so every violation in a document can be
reported at once.
"""

from __future__ import annotations

import re
from enum import Enum
from functools import total_ordering
from types import MappingProxyType
from typing import Annotated, Any, ClassVar, Dict, FrozenSet, List, Mapping, Optional, Tuple, Union

from pydantic import (
    AfterValidator,
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    WrapSerializer,
    model_serializer,
)

from . import limits

# Scalar values allowed inside a token's ``extensions`` object
ExtensionValue = Union[StrictStr, StrictBool, StrictInt, StrictFloat, None]


def _freeze(value: Dict[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(value)


def _thaw(value: Mapping[str, Any], handler: SerializerFunctionWrapHandler) -> Any:
    return handler(dict(value))


# Mapping members are stored read-only so a validated document cannot drift
ExtensionMap = Annotated[
    Dict[StrictStr, ExtensionValue], AfterValidator(_freeze), WrapSerializer(_thaw)
]

_VERSION_RE = re.compile(r"^v?(\d+)\.(\d+)\.(\d+)$")


class VersionUpgrade(str, Enum):
    """Kind of version bump between two releases of a list."""
    NONE = "none"
    PATCH = "patch"    # metadata edits only
    MINOR = "minor"    # tokens added
    MAJOR = "major"    # tokens removed or repurposed


class _Document(BaseModel):
    """Common config for token list documents.

    Unknown keys are dropped so newer schema revisions still load, and
    optional members listed in ``_omit_if_empty`` are left out of serialized
    output when unset, matching how published lists are written.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    _omit_if_empty: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _drop_empty_members(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        if not self._omit_if_empty:
            return data
        return {
            key: value
            for key, value in data.items()
            if not (key in self._omit_if_empty and _is_empty(value))
        }


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, (list, tuple, dict)) and not value


@total_ordering
class Version(_Document):
    """Semantic version of a token list's content (not of the software)."""

    major: StrictInt = Field(json_schema_extra=limits.VERSION_PART.json_schema())
    minor: StrictInt = Field(json_schema_extra=limits.VERSION_PART.json_schema())
    patch: StrictInt = Field(json_schema_extra=limits.VERSION_PART.json_schema())

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse ``"1.2.3"`` (an optional leading ``v`` is accepted)."""
        match = _VERSION_RE.match(text.strip())
        if not match:
            raise ValueError(f"Invalid version string: {text!r}")
        major, minor, patch = (int(part) for part in match.groups())
        return cls(major=major, minor=minor, patch=patch)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def bump(self, upgrade: VersionUpgrade) -> Version:
        """Return the version that follows this one for the given upgrade."""
        if upgrade == VersionUpgrade.MAJOR:
            return Version(major=self.major + 1, minor=0, patch=0)
        if upgrade == VersionUpgrade.MINOR:
            return Version(major=self.major, minor=self.minor + 1, patch=0)
        if upgrade == VersionUpgrade.PATCH:
            return Version(major=self.major, minor=self.minor, patch=self.patch + 1)
        return self

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def is_version_update(base: Version, update: Version) -> bool:
    """True when ``update`` is strictly newer than ``base``."""
    return update > base


class TagInfo(_Document):
    """Definition of a tag; tokens refer to it by its key in ``TokenList.tags``."""

    name: StrictStr = Field(json_schema_extra=limits.TAG_NAME.json_schema())
    description: StrictStr = Field(json_schema_extra=limits.TAG_DESCRIPTION.json_schema())


TagMap = Annotated[Dict[StrictStr, TagInfo], AfterValidator(_freeze), WrapSerializer(_thaw)]


class TokenInfo(_Document):
    """Metadata for a single token in a token list."""

    _omit_if_empty: ClassVar[FrozenSet[str]] = frozenset(
        {"logo_uri", "logoURI", "tags", "extensions"}
    )

    chain_id: StrictInt = Field(alias="chainId", json_schema_extra=limits.CHAIN_ID.json_schema())
    address: StrictStr
    name: StrictStr = Field(json_schema_extra=limits.TOKEN_NAME.json_schema())
    decimals: StrictInt = Field(json_schema_extra=limits.DECIMALS.json_schema())
    symbol: StrictStr = Field(json_schema_extra=limits.TOKEN_SYMBOL.json_schema())
    logo_uri: Optional[StrictStr] = Field(default=None, alias="logoURI")
    tags: Tuple[StrictStr, ...] = Field(
        default=(),
        json_schema_extra={"uniqueItems": True, "items": {"type": "string", **limits.TAG_KEY.json_schema()}},
    )
    extensions: ExtensionMap = Field(
        default_factory=dict,
        validate_default=True,
        json_schema_extra={
            "maxProperties": limits.EXTENSIONS.max_items,
            "propertyNames": limits.EXTENSION_KEY.json_schema(),
            "additionalProperties": {
                "anyOf": [
                    {"type": "string", **limits.EXTENSION_VALUE.json_schema()},
                    {"type": "number"},
                    {"type": "boolean"},
                    {"type": "null"},
                ],
            },
        },
    )

    @property
    def key(self) -> Tuple[int, str]:
        """Identity of the token inside a list: chain id plus lowercased address."""
        return (self.chain_id, self.address.lower())

    def __hash__(self) -> int:
        return hash(self.key)


class TokenList(_Document):
    """A list of token metadata conforming to the token list schema."""

    _omit_if_empty: ClassVar[FrozenSet[str]] = frozenset(
        {"logo_uri", "logoURI", "keywords", "tags"}
    )

    name: StrictStr = Field(json_schema_extra=limits.LIST_NAME.json_schema())
    timestamp: AwareDatetime
    version: Version
    tokens: Tuple[TokenInfo, ...] = Field(
        json_schema_extra={
            "minItems": limits.TOKENS.min_items,
            "maxItems": limits.TOKENS.max_items,
        },
    )
    keywords: Tuple[StrictStr, ...] = Field(
        default=(),
        json_schema_extra={
            "maxItems": limits.KEYWORDS.max_items,
            "uniqueItems": True,
            "items": {"type": "string", **limits.KEYWORD.json_schema()},
        },
    )
    tags: TagMap = Field(
        default_factory=dict,
        validate_default=True,
        json_schema_extra={
            "maxProperties": limits.TAGS.max_items,
            "propertyNames": limits.TAG_KEY.json_schema(),
        },
    )
    logo_uri: Optional[StrictStr] = Field(default=None, alias="logoURI")

    def __hash__(self) -> int:
        return hash((self.name, self.timestamp, self.version, self.tokens))

    def find_token(self, chain_id: int, address: str) -> Optional[TokenInfo]:
        """Look up a token by chain id and address (address case is ignored)."""
        wanted = (chain_id, address.lower())
        for token in self.tokens:
            if token.key == wanted:
                return token
        return None

    def resolve_tags(self, token: TokenInfo) -> List[TagInfo]:
        """Return the ``TagInfo`` entries referenced by ``token``.

        Raises:
            KeyError: if the token references a tag key this list does not define.
        """
        return [self.tags[key] for key in token.tags]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON object form (camelCase keys, empty members omitted)."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)


__all__ = [
    "ExtensionValue",
    "VersionUpgrade",
    "Version",
    "TagInfo",
    "TokenInfo",
    "TokenList",
    "is_version_update",
]
