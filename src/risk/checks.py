"""Individual swap risk checks.

Each check returns at most one RiskFactor (first matching rule wins) or None.
Checks never look at each other's results. The two checks that depend on
chain reads (contract owner, gas price) receive the read result as an
argument so every function here stays pure.

Missing token enrichment is treated as zero/false, never as an error.
"""

from __future__ import annotations

from decimal import Decimal

from src.risk.models import (
    AuditStatus,
    RiskFactor,
    RiskFactorType,
    RiskLevel,
    SwapParameters,
    TokenInfo,
    parse_decimal,
)

# Liquidity
LIQUIDITY_SHARE_HIGH = Decimal("0.1")  # swap > 10% of source-side liquidity
MIN_DEST_LIQUIDITY_USD = Decimal(100_000)

# Slippage
SLIPPAGE_HIGH_PCT = Decimal(5)
SLIPPAGE_TIGHT_PCT = Decimal(2)
SLIPPAGE_LIQUIDITY_SHARE = Decimal("0.05")

# Volatility (absolute 24h price change, percent)
VOLATILITY_HIGH_PCT = Decimal(20)
VOLATILITY_MEDIUM_PCT = Decimal(10)

# MEV
MEV_AMOUNT_USD = Decimal(10_000)

# Gas
GAS_LOW_RATIO = Decimal("0.8")
GAS_HIGH_RATIO = Decimal(2)

# Token distribution
MIN_HOLDERS = 100
MIN_MARKET_CAP_USD = Decimal(100_000)

RISKY_PROTOCOLS = frozenset({"unknown", "new_protocol", "experimental"})


def _fmt(value: Decimal) -> str:
    return f"{value:,}"


def check_liquidity(
    params: SwapParameters, from_token: TokenInfo, to_token: TokenInfo
) -> RiskFactor | None:
    """Swap size vs source liquidity, then destination depth.

    The two rules read different sides of the pair on purpose: outbound
    capacity for the size rule, inbound depth for the floor rule.
    """
    amount = params.amount_value
    from_liquidity = from_token.liquidity or Decimal(0)
    to_liquidity = to_token.liquidity or Decimal(0)

    if amount > from_liquidity * LIQUIDITY_SHARE_HIGH:
        return RiskFactor(
            type=RiskFactorType.LIQUIDITY_RISK,
            severity=RiskLevel.HIGH,
            description=(
                f"Swap amount (${_fmt(amount)}) exceeds 10% of available "
                f"{from_token.symbol or 'source'} liquidity (${_fmt(from_liquidity)})"
            ),
            impact="High slippage and potential failed transaction",
        )

    if to_liquidity < MIN_DEST_LIQUIDITY_USD:
        return RiskFactor(
            type=RiskFactorType.LIQUIDITY_RISK,
            severity=RiskLevel.MEDIUM,
            description=(
                f"Low liquidity for destination token {to_token.symbol} "
                f"(${_fmt(to_liquidity)} < ${_fmt(MIN_DEST_LIQUIDITY_USD)})"
            ),
            impact="Potential price manipulation and high slippage",
        )

    return None


def check_slippage(params: SwapParameters, to_token: TokenInfo) -> RiskFactor | None:
    slippage = params.slippage_value
    amount = params.amount_value
    liquidity = to_token.liquidity or Decimal(0)

    if slippage > SLIPPAGE_HIGH_PCT:
        return RiskFactor(
            type=RiskFactorType.SLIPPAGE_RISK,
            severity=RiskLevel.HIGH,
            description=f"High slippage tolerance ({_fmt(slippage)}% > {SLIPPAGE_HIGH_PCT}%)",
            impact="Potential for significant price impact and MEV attacks",
        )

    if amount > liquidity * SLIPPAGE_LIQUIDITY_SHARE and slippage < SLIPPAGE_TIGHT_PCT:
        return RiskFactor(
            type=RiskFactorType.SLIPPAGE_RISK,
            severity=RiskLevel.MEDIUM,
            description=(
                f"Large swap (${_fmt(amount)}, over 5% of ${_fmt(liquidity)} liquidity) "
                f"with low slippage tolerance ({_fmt(slippage)}%) may fail"
            ),
            impact="Transaction likely to revert due to price movement",
        )

    return None


def needs_owner_probe(token: TokenInfo) -> bool:
    """Owner probe only runs for verified tokens not flagged as unaudited."""
    return bool(token.is_verified) and token.audit_status != AuditStatus.UNAUDITED


def check_contract(token: TokenInfo, owner: str | None = None) -> RiskFactor | None:
    """Verification, then audit status, then privileged owner.

    ``owner`` is the result of the on-chain ``owner()`` probe; None covers
    both "no owner" and "could not determine".
    """
    if not token.is_verified:
        return RiskFactor(
            type=RiskFactorType.CONTRACT_RISK,
            severity=RiskLevel.HIGH,
            description=f"Token contract {token.symbol} ({token.address}) is not verified",
            impact="Unable to verify contract safety and potential for malicious code",
        )

    if token.audit_status == AuditStatus.UNAUDITED:
        return RiskFactor(
            type=RiskFactorType.CONTRACT_RISK,
            severity=RiskLevel.MEDIUM,
            description=f"Token {token.symbol} has not been audited",
            impact="Potential security vulnerabilities in smart contract",
        )

    if owner:
        return RiskFactor(
            type=RiskFactorType.CONTRACT_RISK,
            severity=RiskLevel.CRITICAL,
            description=f"Token {token.symbol} has an owner ({owner}) with privileged access",
            impact="Owner can potentially manipulate token supply or pause transfers",
        )

    return None


def check_volatility(from_token: TokenInfo, to_token: TokenInfo) -> RiskFactor | None:
    from_vol = abs(from_token.price_change_24h or Decimal(0))
    to_vol = abs(to_token.price_change_24h or Decimal(0))
    detail = (
        f"{from_token.symbol} ({_fmt(from_vol)}%), {to_token.symbol} ({_fmt(to_vol)}%)"
    )

    if from_vol > VOLATILITY_HIGH_PCT or to_vol > VOLATILITY_HIGH_PCT:
        return RiskFactor(
            type=RiskFactorType.VOLATILITY_RISK,
            severity=RiskLevel.HIGH,
            description=f"High volatility detected: {detail}",
            impact="Price may change significantly during transaction execution",
        )

    if from_vol > VOLATILITY_MEDIUM_PCT or to_vol > VOLATILITY_MEDIUM_PCT:
        return RiskFactor(
            type=RiskFactorType.VOLATILITY_RISK,
            severity=RiskLevel.MEDIUM,
            description=f"Moderate volatility detected: {detail}",
            impact="Consider adjusting slippage tolerance",
        )

    return None


def check_mev(params: SwapParameters) -> RiskFactor | None:
    amount = params.amount_value
    if amount > MEV_AMOUNT_USD:
        return RiskFactor(
            type=RiskFactorType.MEV_RISK,
            severity=RiskLevel.MEDIUM,
            description=f"Large swap amount (${_fmt(amount)}) may attract MEV bots",
            impact="Potential for front-running and sandwich attacks",
        )
    return None


def check_gas(params: SwapParameters, current_gwei: Decimal | None) -> RiskFactor | None:
    """Compare the offered gas price with the network price (both gwei).

    Skipped when the swap has no gas price or the oracle read failed.
    """
    if not params.gas_price or current_gwei is None:
        return None

    gas_price = parse_decimal(params.gas_price)

    if gas_price < current_gwei * GAS_LOW_RATIO:
        return RiskFactor(
            type=RiskFactorType.GAS_RISK,
            severity=RiskLevel.MEDIUM,
            description=(
                f"Gas price ({_fmt(gas_price)} gwei) may be too low for current "
                f"network conditions ({_fmt(current_gwei)} gwei)"
            ),
            impact="Transaction may take long time to confirm or fail",
        )

    if gas_price > current_gwei * GAS_HIGH_RATIO:
        return RiskFactor(
            type=RiskFactorType.GAS_RISK,
            severity=RiskLevel.LOW,
            description=(
                f"Gas price ({_fmt(gas_price)} gwei) is more than double the "
                f"current network price ({_fmt(current_gwei)} gwei)"
            ),
            impact="Overpaying for transaction fees",
        )

    return None


def check_token(token: TokenInfo) -> RiskFactor | None:
    if token.holders is not None and token.holders < MIN_HOLDERS:
        return RiskFactor(
            type=RiskFactorType.TOKEN_RISK,
            severity=RiskLevel.HIGH,
            description=f"Token {token.symbol} has very few holders ({token.holders})",
            impact="High concentration risk and potential for manipulation",
        )

    if token.market_cap is not None and token.market_cap < MIN_MARKET_CAP_USD:
        return RiskFactor(
            type=RiskFactorType.TOKEN_RISK,
            severity=RiskLevel.MEDIUM,
            description=(
                f"Token {token.symbol} has very low market cap (${_fmt(token.market_cap)})"
            ),
            impact="High volatility and potential for significant price swings",
        )

    return None


def check_protocol(protocol: str | None) -> RiskFactor | None:
    if protocol and protocol.strip().lower() in RISKY_PROTOCOLS:
        return RiskFactor(
            type=RiskFactorType.PROTOCOL_RISK,
            severity=RiskLevel.HIGH,
            description=f"Using relatively unknown or experimental protocol: {protocol}",
            impact="Protocol may have undiscovered vulnerabilities or bugs",
        )
    return None
