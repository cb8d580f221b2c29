"""Chain read capability consumed by the risk assessor."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol


class ChainReader(Protocol):
    """The two on-chain reads the assessor needs.

    Implementations return None for "unknown" (function absent, zero owner,
    network or RPC failure) instead of raising.
    """

    async def read_owner(self, address: str) -> str | None: ...

    async def current_gas_price_gwei(self) -> Decimal | None: ...
