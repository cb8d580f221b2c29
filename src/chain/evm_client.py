"""EVM JSON-RPC client: owner() probe and network gas price."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import httpx
from loguru import logger

OWNER_SELECTOR = "0x8da5cb5b"  # keccak("owner()")[:4]
ZERO_ADDRESS = "0x" + "0" * 40
WEI_PER_GWEI = Decimal(10**9)


class EvmRpcClient:
    """Async JSON-RPC client for an Ethereum-compatible node.

    Single attempt per call. Every failure is logged and returned as None so
    the caller can skip the dependent check.
    """

    def __init__(self, rpc_url: str, timeout: float = 5.0) -> None:
        self._rpc_url = rpc_url
        self._client = httpx.AsyncClient(timeout=timeout)
        self._request_id = 0

    async def close(self) -> None:
        await self._client.aclose()

    async def read_owner(self, address: str) -> str | None:
        """Call ``owner()`` on a contract. None if absent, zero, or failed."""
        result = await self._rpc(
            "eth_call",
            [{"to": address, "data": OWNER_SELECTOR}, "latest"],
        )
        if result is None:
            return None
        owner = _decode_address(result)
        if owner is None or owner == ZERO_ADDRESS:
            return None
        return owner

    async def current_gas_price_gwei(self) -> Decimal | None:
        """Current network gas price in gwei (``eth_gasPrice``)."""
        result = await self._rpc("eth_gasPrice", [])
        if result is None:
            return None
        try:
            wei = int(result, 16)
        except (TypeError, ValueError):
            logger.debug(f"[RPC] Malformed eth_gasPrice result: {result!r}")
            return None
        return Decimal(wei) / WEI_PER_GWEI

    async def _rpc(self, method: str, params: list[Any]) -> Any | None:
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params,
        }
        try:
            resp = await self._client.post(self._rpc_url, json=payload)
        except httpx.HTTPError as e:
            logger.warning(f"[RPC] {method} failed: {type(e).__name__}: {e}")
            return None

        if resp.status_code != 200:
            logger.debug(f"[RPC] {method} HTTP {resp.status_code}")
            return None

        try:
            data = resp.json()
        except ValueError:
            logger.debug(f"[RPC] {method} returned non-JSON body")
            return None

        if not isinstance(data, dict):
            logger.debug(f"[RPC] {method} returned non-object body")
            return None

        if "error" in data:
            # eth_call reverts land here when the contract has no owner()
            logger.debug(f"[RPC] {method} RPC error: {data['error']}")
            return None

        return data.get("result")


def _decode_address(result: Any) -> str | None:
    """Decode an ABI-encoded address (last 20 bytes of a 32-byte word)."""
    if not isinstance(result, str) or not result.startswith("0x"):
        return None
    raw = result[2:]
    if len(raw) < 64:
        # Empty "0x" means the call hit a contract without owner()
        return None
    try:
        int(raw[:64], 16)
    except ValueError:
        return None
    return "0x" + raw[24:64].lower()
