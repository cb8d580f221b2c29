"""Shared test fixtures."""

from decimal import Decimal

import pytest

from src.risk.models import AuditStatus, SwapParameters, TokenInfo


@pytest.fixture
def eth_token() -> TokenInfo:
    """Deep, verified, audited source token."""
    return TokenInfo(
        address="0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE",
        symbol="ETH",
        name="Ethereum",
        decimals=18,
        market_cap=Decimal("200000000000"),
        volume_24h=Decimal("5000000000"),
        price_change_24h=Decimal("2.5"),
        liquidity=Decimal("1000000000"),
        holders=1_000_000,
        is_verified=True,
        audit_status=AuditStatus.AUDITED,
    )


@pytest.fixture
def usdc_token() -> TokenInfo:
    """Deep, verified, audited destination token."""
    return TokenInfo(
        address="0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
        symbol="USDC",
        name="USD Coin",
        decimals=6,
        market_cap=Decimal("25000000000"),
        volume_24h=Decimal("2000000000"),
        price_change_24h=Decimal("0.1"),
        liquidity=Decimal("500000000"),
        holders=500_000,
        is_verified=True,
        audit_status=AuditStatus.AUDITED,
    )


@pytest.fixture
def safe_params(eth_token: TokenInfo, usdc_token: TokenInfo) -> SwapParameters:
    return SwapParameters(
        from_token=eth_token.address,
        to_token=usdc_token.address,
        amount="1000",
        slippage_tolerance=1,
    )
