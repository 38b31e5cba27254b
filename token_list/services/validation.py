"""
Token List Validation

Domain rules a token list must satisfy beyond its JSON shape: string
lengths and patterns, numeric ranges, collection sizes, unique tokens and
tag references that resolve against the list's own tag definitions.

Every rule is evaluated and all violations are returned together, so one
report is enough to fix a document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import urlsplit

from ..config import Settings, settings as default_settings
from ..errors import TokenListValidationError
from ..types import limits
from ..types.models import TagInfo, TokenInfo, TokenList
from .address import is_checksummed_for_chain, is_valid_address_for_chain


@dataclass(frozen=True)
class Violation:
    """A single failed constraint."""
    path: str          # e.g. "tokens[3].name"
    constraint: str    # machine-readable code, e.g. "max_length"
    value: Any
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class _Collector:
    def __init__(self) -> None:
        self.violations: List[Violation] = []

    def add(self, path: str, constraint: str, value: Any, message: str) -> None:
        self.violations.append(Violation(path, constraint, value, message))

    def string(self, path: str, value: str, rule: limits.StringRule) -> None:
        if len(value) < rule.min_length:
            self.add(path, "min_length", value, f"must be at least {rule.min_length} character(s)")
        elif len(value) > rule.max_length:
            self.add(
                path, "max_length", value,
                f"must be at most {rule.max_length} characters (got {len(value)})",
            )
        regex = rule.regex
        if value and regex is not None and not regex.fullmatch(value):
            self.add(path, "pattern", value, f"{value!r} does not match {rule.pattern}")

    def integer(self, path: str, value: int, rule: limits.IntRule) -> None:
        if value < rule.minimum:
            self.add(path, "minimum", value, f"must be >= {rule.minimum} (got {value})")
        elif rule.maximum is not None and value > rule.maximum:
            self.add(path, "maximum", value, f"must be <= {rule.maximum} (got {value})")

    def size(self, path: str, count: int, rule: limits.SizeRule, *, noun: str = "items") -> None:
        low, high = ("min_items", "max_items") if noun == "items" else ("min_properties", "max_properties")
        if count < rule.min_items:
            self.add(path, low, count, f"must contain at least {rule.min_items} {noun} (got {count})")
        elif count > rule.max_items:
            self.add(path, high, count, f"must contain at most {rule.max_items} {noun} (got {count})")

    def unique(self, path: str, values: Tuple[str, ...]) -> None:
        seen = set()
        for idx, value in enumerate(values):
            if value in seen:
                self.add(f"{path}[{idx}]", "unique_items", value, f"duplicate entry {value!r}")
            seen.add(value)

    def uri(self, path: str, value: Optional[str]) -> None:
        if value is None:
            return
        try:
            parts = urlsplit(value)
        except ValueError:
            # e.g. an unterminated IPv6 host such as "http://[::1"
            parts = None
        if parts is None or not parts.scheme or not (parts.netloc or parts.path):
            self.add(path, "uri_format", value, f"{value!r} is not an absolute URI")


def _check_tag(check: _Collector, key: str, tag: TagInfo) -> None:
    path = f"tags.{key}"
    check.string(path, key, limits.TAG_KEY)
    check.string(f"{path}.name", tag.name, limits.TAG_NAME)
    check.string(f"{path}.description", tag.description, limits.TAG_DESCRIPTION)


def _check_token(
    check: _Collector,
    idx: int,
    token: TokenInfo,
    tags: Mapping[str, TagInfo],
    require_checksum: bool,
) -> None:
    path = f"tokens[{idx}]"

    check.integer(f"{path}.chainId", token.chain_id, limits.CHAIN_ID)
    if not is_valid_address_for_chain(token.address, token.chain_id):
        check.add(
            f"{path}.address", "address_format", token.address,
            f"{token.address!r} is not a well-formed address for chain {token.chain_id}",
        )
    elif require_checksum and not is_checksummed_for_chain(token.address, token.chain_id):
        check.add(
            f"{path}.address", "address_checksum", token.address,
            f"{token.address!r} is not EIP-55 checksummed",
        )

    check.string(f"{path}.name", token.name, limits.TOKEN_NAME)
    check.string(f"{path}.symbol", token.symbol, limits.TOKEN_SYMBOL)
    check.integer(f"{path}.decimals", token.decimals, limits.DECIMALS)
    check.uri(f"{path}.logoURI", token.logo_uri)

    check.unique(f"{path}.tags", token.tags)
    for tag_idx, key in enumerate(token.tags):
        if key not in tags:
            check.add(
                f"{path}.tags[{tag_idx}]", "unknown_tag", key,
                f"token {token.symbol!r} references tag {key!r} which is not defined in the list tags",
            )

    check.size(f"{path}.extensions", len(token.extensions), limits.EXTENSIONS, noun="properties")
    for key, value in token.extensions.items():
        check.string(f"{path}.extensions", key, limits.EXTENSION_KEY)
        if isinstance(value, str):
            check.string(f"{path}.extensions.{key}", value, limits.EXTENSION_VALUE)


def collect_violations(
    token_list: TokenList,
    *,
    settings: Optional[Settings] = None,
) -> List[Violation]:
    """Evaluate every rule against ``token_list`` and return all violations."""

    cfg = settings or default_settings
    check = _Collector()

    check.string("name", token_list.name, limits.LIST_NAME)
    check.integer("version.major", token_list.version.major, limits.VERSION_PART)
    check.integer("version.minor", token_list.version.minor, limits.VERSION_PART)
    check.integer("version.patch", token_list.version.patch, limits.VERSION_PART)
    check.uri("logoURI", token_list.logo_uri)

    check.size("keywords", len(token_list.keywords), limits.KEYWORDS)
    for idx, keyword in enumerate(token_list.keywords):
        check.string(f"keywords[{idx}]", keyword, limits.KEYWORD)
    check.unique("keywords", token_list.keywords)

    check.size("tags", len(token_list.tags), limits.TAGS, noun="properties")
    for key, tag in token_list.tags.items():
        _check_tag(check, key, tag)

    check.size("tokens", len(token_list.tokens), limits.TOKENS)
    first_seen: Dict[Tuple[int, str], int] = {}
    for idx, token in enumerate(token_list.tokens):
        _check_token(check, idx, token, token_list.tags, cfg.require_checksum_addresses)

        previous = first_seen.setdefault(token.key, idx)
        if previous != idx:
            check.add(
                f"tokens[{idx}]", "duplicate_token", token.address,
                f"duplicates tokens[{previous}] (chainId {token.chain_id}, address {token.address})",
            )

    return check.violations


def validate(token_list: TokenList, *, settings: Optional[Settings] = None) -> None:
    """Raise ``TokenListValidationError`` listing every violation, if any."""

    violations = collect_violations(token_list, settings=settings)
    if violations:
        raise TokenListValidationError(violations)


__all__ = [
    "Violation",
    "collect_violations",
    "validate",
]
