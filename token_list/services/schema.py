"""JSON Schema export for the token list data model."""

from __future__ import annotations

from typing import Any, Dict

from ..types.models import TokenList

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


def json_schema() -> Dict[str, Any]:
    """Return a JSON Schema describing a token list document.

    Field bounds enforced by the validation pass are included, so external
    validators accept and reject the same documents.
    """

    schema = TokenList.model_json_schema(by_alias=True)
    return {
        "$schema": JSON_SCHEMA_DIALECT,
        "title": "Token List",
        **{key: value for key, value in schema.items() if key != "title"},
    }


__all__ = ["JSON_SCHEMA_DIALECT", "json_schema"]
