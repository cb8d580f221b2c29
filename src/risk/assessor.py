"""Swap risk assessor: runs the eight checks and aggregates the result.

Evaluation order (and therefore factor order in the output) is fixed:
liquidity → slippage → contract → volatility → MEV → gas → token → protocol.

The only I/O is two optional chain reads (contract owner, gas price). They
run concurrently before the pure checks, each under its own timeout; a read
that fails or times out skips only the check that needed it.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from decimal import Decimal
from typing import TypeVar

from loguru import logger

from src.chain.base import ChainReader
from src.risk.checks import (
    check_contract,
    check_gas,
    check_liquidity,
    check_mev,
    check_protocol,
    check_slippage,
    check_token,
    check_volatility,
    needs_owner_probe,
)
from src.risk.models import (
    InvalidSwapInput,
    RiskAssessment,
    RiskFactor,
    SwapParameters,
    TokenInfo,
)
from src.risk.recommendations import generate_recommendations
from src.risk.scoring import classify_risk, compute_risk_score

T = TypeVar("T")


class RiskAssessor:
    """Scores a proposed swap.

    ``chain`` is optional: without it the owner probe and gas check are
    skipped, everything else still runs. The caller owns the reader's
    lifecycle.
    """

    def __init__(
        self,
        chain: ChainReader | None = None,
        *,
        read_timeout_sec: float = 5.0,
    ) -> None:
        self._chain = chain
        self._read_timeout_sec = read_timeout_sec

    async def assess_swap_risk(
        self,
        params: SwapParameters,
        from_token: TokenInfo,
        to_token: TokenInfo,
    ) -> RiskAssessment:
        """Assess a swap. Raises InvalidSwapInput only for missing required input."""
        _validate(params, from_token, to_token)

        owner, current_gwei = await asyncio.gather(
            self._probe_owner(to_token),
            self._read_gas_price(params),
        )

        candidates: list[RiskFactor | None] = [
            check_liquidity(params, from_token, to_token),
            check_slippage(params, to_token),
            check_contract(to_token, owner),
            check_volatility(from_token, to_token),
            check_mev(params),
            check_gas(params, current_gwei),
            check_token(to_token),
            check_protocol(params.protocol),
        ]
        factors = [f for f in candidates if f is not None]

        score = compute_risk_score(factors)
        overall = classify_risk(score)
        recommendations = generate_recommendations(factors, overall)

        logger.info(
            f"[RISK] {from_token.symbol or params.from_token} → "
            f"{to_token.symbol or params.to_token} amount={params.amount}: "
            f"{overall.value} ({score}/100), "
            f"factors={[f.type.value for f in factors]}"
        )

        return RiskAssessment(
            overall_risk=overall,
            risk_score=score,
            risk_factors=factors,
            recommendations=recommendations,
        )

    async def _probe_owner(self, token: TokenInfo) -> str | None:
        if self._chain is None or not needs_owner_probe(token) or not token.address:
            return None
        return await self._guarded_read(
            f"owner() probe for {token.address}",
            self._chain.read_owner(token.address),
        )

    async def _read_gas_price(self, params: SwapParameters) -> Decimal | None:
        if self._chain is None or not params.gas_price:
            return None
        return await self._guarded_read(
            "gas price oracle",
            self._chain.current_gas_price_gwei(),
        )

    async def _guarded_read(self, label: str, read: Awaitable[T]) -> T | None:
        """Await a chain read; timeout or error means 'unknown'."""
        try:
            return await asyncio.wait_for(read, timeout=self._read_timeout_sec)
        except asyncio.TimeoutError:
            logger.warning(f"[RISK] {label} timed out after {self._read_timeout_sec}s, skipping")
            return None
        except Exception as e:
            logger.warning(f"[RISK] {label} failed, skipping: {type(e).__name__}: {e}")
            return None


def _validate(
    params: SwapParameters | None,
    from_token: TokenInfo | None,
    to_token: TokenInfo | None,
) -> None:
    if params is None:
        raise InvalidSwapInput("swap parameters are required")
    if from_token is None:
        raise InvalidSwapInput("fromToken info is required")
    if to_token is None:
        raise InvalidSwapInput("toToken info is required")
    if params.amount is None or not str(params.amount).strip():
        raise InvalidSwapInput("swap amount is required")
