import json
import logging

import pytest

from token_list import (
    TokenList,
    TokenListError,
    TokenListParseError,
    TokenListValidationError,
    from_bytes,
    from_dict,
    from_path,
)

CMC_DEFI = (
    b'{"name":"CMC DeFi","timestamp":"2021-01-01T00:00:00Z",'
    b'"version":{"major":1,"minor":0,"patch":0},'
    b'"tokens":[{"chainId":1,"address":"0x0000000000000000000000000000000000000001",'
    b'"name":"Test Token","symbol":"TST","decimals":18}]}'
)


def test_from_bytes_end_to_end():
    token_list = from_bytes(CMC_DEFI)

    assert isinstance(token_list, TokenList)
    assert token_list.name == "CMC DeFi"
    assert len(token_list.tokens) == 1
    assert token_list.tokens[0].symbol == "TST"
    assert str(token_list.version) == "1.0.0"


def test_from_bytes_accepts_text():
    assert from_bytes(CMC_DEFI.decode("utf-8")).name == "CMC DeFi"


def test_from_bytes_is_deterministic():
    assert from_bytes(CMC_DEFI) == from_bytes(CMC_DEFI)


def test_unknown_top_level_key_is_ignored():
    document = json.loads(CMC_DEFI)
    document["extraField"] = 1

    token_list = from_bytes(json.dumps(document).encode("utf-8"))

    assert token_list.name == "CMC DeFi"
    assert "extraField" not in token_list.to_dict()


def test_malformed_json_is_parse_error():
    with pytest.raises(TokenListParseError) as exc_info:
        from_bytes(b'{"name": "broken",')
    assert exc_info.value.errors[0]["type"] == "json_invalid"


def test_invalid_utf8_is_parse_error():
    with pytest.raises(TokenListParseError) as exc_info:
        from_bytes(b'{"name": "\xff\xfe"}')
    assert exc_info.value.errors[0]["type"] == "utf8_invalid"


def test_deeply_nested_json_is_parse_error():
    depth = 100_000
    data = b'{"name":' + b"[" * depth + b"]" * depth + b"}"

    with pytest.raises(TokenListParseError) as exc_info:
        from_bytes(data)
    assert exc_info.value.errors[0]["type"] == "json_invalid"


def test_malformed_logo_uri_is_validation_error():
    document = json.loads(CMC_DEFI)
    document["logoURI"] = "http://[::1"

    with pytest.raises(TokenListValidationError) as exc_info:
        from_bytes(json.dumps(document).encode("utf-8"))
    assert [v.constraint for v in exc_info.value.violations] == ["uri_format"]


def test_non_object_document_is_parse_error():
    with pytest.raises(TokenListParseError):
        from_bytes(b"[1, 2, 3]")


def test_shape_errors_carry_locations():
    document = json.loads(CMC_DEFI)
    del document["tokens"][0]["decimals"]
    document["version"]["major"] = "1"

    with pytest.raises(TokenListParseError) as exc_info:
        from_dict(document)

    locations = {err["loc"] for err in exc_info.value.errors}
    assert ("tokens", 0, "decimals") in locations
    assert ("version", "major") in locations


def test_constraint_violation_is_validation_error():
    document = json.loads(CMC_DEFI)
    document["tokens"][0]["decimals"] = 256

    with pytest.raises(TokenListValidationError) as exc_info:
        from_dict(document)

    assert exc_info.value.violations[0].path == "tokens[0].decimals"


def test_all_load_errors_share_a_base():
    with pytest.raises(TokenListError):
        from_bytes(b"not json")


def test_rejected_list_is_logged(caplog):
    document = json.loads(CMC_DEFI)
    document["tokens"][0]["tags"] = ["foo"]

    with caplog.at_level(logging.WARNING, logger="token_list.services.loader"):
        with pytest.raises(TokenListValidationError):
            from_dict(document)

    assert "CMC DeFi" in caplog.text


def test_from_path(tmp_path, full_document):
    path = tmp_path / "tokenlist.json"
    path.write_text(json.dumps(full_document), encoding="utf-8")

    token_list = from_path(path)

    assert token_list.name == "TELcoins"
    assert [token.chain_id for token in token_list.tokens] == [1, 137]


def test_from_path_missing_file(tmp_path):
    with pytest.raises(OSError):
        from_path(tmp_path / "missing.json")
