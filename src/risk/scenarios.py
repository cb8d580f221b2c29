"""Demo swap scenarios for the CLI runner, plus JSON scenario loading.

A scenario is a dict with ``name``, ``fromToken``, ``toToken`` (TokenInfo
payloads), ``amount``, ``slippage`` and optional ``protocol`` / ``gasPrice``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from src.risk.models import SwapParameters, TokenInfo

ETH = {
    "address": "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE",
    "symbol": "ETH",
    "name": "Ethereum",
    "decimals": 18,
    "marketCap": 200_000_000_000,
    "volume24h": 5_000_000_000,
    "priceChange24h": 2.5,
    "liquidity": 1_000_000_000,
    "holders": 1_000_000,
    "isVerified": True,
    "auditStatus": "AUDITED",
}

DEMO_SCENARIOS: list[dict[str, Any]] = [
    {
        "name": "safe-eth-usdc",
        "title": "Safe ETH to USDC Swap",
        "fromToken": ETH,
        "toToken": {
            "address": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
            "symbol": "USDC",
            "name": "USD Coin",
            "decimals": 6,
            "marketCap": 25_000_000_000,
            "volume24h": 2_000_000_000,
            "priceChange24h": 0.1,
            "liquidity": 500_000_000,
            "holders": 500_000,
            "isVerified": True,
            "auditStatus": "AUDITED",
        },
        "amount": "1000",
        "slippage": 1,
        "protocol": "Uniswap V3",
    },
    {
        "name": "risky-unknown-token",
        "title": "Risky Unknown Token Swap",
        "fromToken": ETH,
        "toToken": {
            "address": "0x1234567890123456789012345678901234567890",
            "symbol": "UNKNOWN",
            "name": "Unknown Token",
            "decimals": 18,
            "marketCap": 100_000,
            "volume24h": 50_000,
            "priceChange24h": 45.5,
            "liquidity": 50_000,
            "holders": 50,
            "isVerified": False,
            "auditStatus": "UNAUDITED",
        },
        "amount": "10000",
        "slippage": 5,
        "protocol": "Uniswap V3",
    },
    {
        "name": "large-high-slippage",
        "title": "Large Swap with High Slippage",
        "fromToken": ETH,
        "toToken": {
            "address": "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984",
            "symbol": "UNI",
            "name": "Uniswap",
            "decimals": 18,
            "marketCap": 5_000_000_000,
            "volume24h": 100_000_000,
            "priceChange24h": 15.5,
            "liquidity": 20_000_000,
            "holders": 100_000,
            "isVerified": True,
            "auditStatus": "AUDITED",
        },
        "amount": "50000",
        "slippage": 10,
        "protocol": "Uniswap V3",
    },
]


def build_inputs(scenario: dict[str, Any]) -> tuple[SwapParameters, TokenInfo, TokenInfo]:
    """Turn a scenario dict into assessor inputs."""
    from_token = TokenInfo.from_dict(scenario["fromToken"])
    to_token = TokenInfo.from_dict(scenario["toToken"])
    params = SwapParameters.from_dict(
        {
            "fromToken": from_token.address,
            "toToken": to_token.address,
            "amount": scenario.get("amount"),
            "slippageTolerance": scenario.get("slippage", scenario.get("slippageTolerance", 0)),
            "gasPrice": scenario.get("gasPrice"),
            "protocol": scenario.get("protocol"),
        }
    )
    return params, from_token, to_token


def load_scenarios(path: Path) -> list[dict[str, Any]]:
    """Load scenarios from a JSON file holding one scenario or a list."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a scenario object or a list of scenarios")
    for i, item in enumerate(data):
        for key in ("fromToken", "toToken", "amount"):
            if key not in item:
                raise ValueError(f"{path}: scenario #{i} is missing '{key}'")
        item.setdefault("name", f"scenario-{i + 1}")
    return data


def find_scenario(name: str) -> dict[str, Any] | None:
    for scenario in DEMO_SCENARIOS:
        if scenario["name"] == name:
            return scenario
    return None
