"""Offline load pipeline: bytes → JSON → TokenList → validation.

Nothing here performs network I/O; see ``token_list.providers.uri`` for
downloading a list.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..config import Settings
from ..errors import TokenListParseError, TokenListValidationError
from ..types.models import TokenList
from .validation import validate

logger = logging.getLogger(__name__)


def from_bytes(data: Union[bytes, bytearray, str], *, settings: Optional[Settings] = None) -> TokenList:
    """Parse and validate a UTF-8 JSON token list document."""

    if isinstance(data, (bytes, bytearray)):
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TokenListParseError(
                f"Token list is not valid UTF-8: {exc}",
                errors=[{"loc": (), "msg": str(exc), "type": "utf8_invalid"}],
            ) from exc
    else:
        text = data

    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        # RecursionError: nesting deeper than the interpreter stack allows
        raise TokenListParseError(
            f"Token list is not valid JSON: {exc}",
            errors=[{"loc": (), "msg": str(exc), "type": "json_invalid"}],
        ) from exc

    return from_dict(payload, settings=settings)


def from_dict(data: Mapping[str, Any], *, settings: Optional[Settings] = None) -> TokenList:
    """Build a TokenList from an already-decoded JSON object and validate it."""

    if not isinstance(data, Mapping):
        raise TokenListParseError(
            f"Token list must be a JSON object, got {type(data).__name__}",
            errors=[{"loc": (), "msg": "expected an object", "type": "dict_type"}],
        )

    try:
        token_list = TokenList.model_validate(dict(data))
    except ValidationError as exc:
        errors = [
            {"loc": tuple(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in exc.errors()
        ]
        raise TokenListParseError(
            f"Token list does not match the schema ({exc.error_count()} error(s)): {exc}",
            errors=errors,
        ) from exc

    try:
        validate(token_list, settings=settings)
    except TokenListValidationError as exc:
        logger.warning(
            "Rejected token list %r: %d violation(s)", token_list.name, len(exc.violations)
        )
        raise

    logger.debug(
        "Loaded token list %r v%s with %d token(s)",
        token_list.name,
        token_list.version,
        len(token_list.tokens),
    )
    return token_list


def from_path(path: Union[str, Path], *, settings: Optional[Settings] = None) -> TokenList:
    """Read a token list from a local file.

    ``OSError`` from reading the file propagates unchanged.
    """

    return from_bytes(Path(path).read_bytes(), settings=settings)


__all__ = [
    "from_bytes",
    "from_dict",
    "from_path",
]
