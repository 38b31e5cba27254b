import copy

import pytest

TELCOIN_ADDRESS = "0x467bccd9d29f223bce8043b84e8c8b282827790f"
LOGO = "https://raw.githubusercontent.com/telcoin/token-lists/master/assets/logo-telcoin-250x250.png"

MINIMAL_DOCUMENT = {
    "name": "TELcoins",
    "timestamp": "2021-07-05T20:25:22Z",
    "version": {"major": 0, "minor": 1, "patch": 0},
    "tokens": [
        {
            "name": "Telcoin",
            "symbol": "TEL",
            "address": TELCOIN_ADDRESS,
            "chainId": 1,
            "decimals": 2,
        }
    ],
}

FULL_DOCUMENT = {
    "name": "TELcoins",
    "timestamp": "2021-07-05T20:25:22Z",
    "version": {"major": 0, "minor": 1, "patch": 0},
    "logoURI": LOGO,
    "keywords": ["defi", "telcoin"],
    "tags": {
        "telcoin": {
            "name": "telcoin",
            "description": "Part of the Telcoin ecosystem.",
        }
    },
    "tokens": [
        {
            "name": "Telcoin",
            "symbol": "TEL",
            "address": TELCOIN_ADDRESS,
            "chainId": 1,
            "decimals": 2,
            "logoURI": LOGO,
            "tags": ["telcoin"],
            "extensions": {
                "is_mapped_to_matic": True,
                "matic_address": "0xdf7837de1f2fa4631d716cf2502f8b230f1dcc32",
                "matic_chain_id": 137,
                "bridge_fee": 0.25,
                "deprecated_id": None,
            },
        },
        {
            "name": "Telcoin (PoS)",
            "symbol": "TEL",
            "address": "0xdf7837de1f2fa4631d716cf2502f8b230f1dcc32",
            "chainId": 137,
            "decimals": 2,
            "tags": ["telcoin"],
        },
    ],
}


@pytest.fixture
def minimal_document():
    return copy.deepcopy(MINIMAL_DOCUMENT)


@pytest.fixture
def full_document():
    return copy.deepcopy(FULL_DOCUMENT)
