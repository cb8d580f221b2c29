"""Data models for swap risk assessment.

Inputs (``SwapParameters``, ``TokenInfo``) arrive from the web frontend in
camelCase; ``from_dict`` also accepts snake_case so the CLI and tests can
use either. Optional token enrichment is frequently missing from upstream
feeds, so every optional field defaults to None and the checks apply their
own zero/false defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from loguru import logger


class RiskLevel(str, Enum):
    """Severity of a single factor and overall classification of a swap."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class RiskFactorType(str, Enum):
    """Kinds of risk, in evaluation order."""

    LIQUIDITY_RISK = "LIQUIDITY_RISK"
    SLIPPAGE_RISK = "SLIPPAGE_RISK"
    CONTRACT_RISK = "CONTRACT_RISK"
    VOLATILITY_RISK = "VOLATILITY_RISK"
    MEV_RISK = "MEV_RISK"
    GAS_RISK = "GAS_RISK"
    TOKEN_RISK = "TOKEN_RISK"
    PROTOCOL_RISK = "PROTOCOL_RISK"


class AuditStatus(str, Enum):
    AUDITED = "AUDITED"
    UNAUDITED = "UNAUDITED"
    UNKNOWN = "UNKNOWN"


class InvalidSwapInput(ValueError):
    """Required swap input is missing. Distinct from degraded (missing optional) data."""


def parse_decimal(value: Any) -> Decimal:
    """Parse a numeric string/number, treating anything unparseable as 0."""
    if value is None or value == "":
        return Decimal(0)
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        logger.debug(f"[RISK] Unparseable numeric value {value!r}, using 0")
        return Decimal(0)
    if not result.is_finite():
        logger.debug(f"[RISK] Non-finite numeric value {value!r}, using 0")
        return Decimal(0)
    return result


def _pick(data: dict, *keys: str) -> Any:
    """Return the first present (non-None) value among camelCase/snake_case aliases."""
    for key in keys:
        val = data.get(key)
        if val is not None:
            return val
    return None


def _opt_decimal(val: Any) -> Decimal | None:
    return None if val is None else parse_decimal(val)


def _opt_int(val: Any) -> int | None:
    if val is None:
        return None
    try:
        return int(val)
    except (TypeError, ValueError):
        return None


def _parse_bool(val: Any) -> bool | None:
    """Parse a JSON bool or a "true"/"1" string; any other string is False."""
    if val is None or val == "":
        return None
    if isinstance(val, bool):
        return val
    return str(val).strip().lower() in ("true", "1")


def _parse_audit(val: Any) -> AuditStatus | None:
    if val is None:
        return None
    try:
        return AuditStatus(str(val).upper())
    except ValueError:
        return AuditStatus.UNKNOWN


@dataclass(frozen=True)
class SwapParameters:
    """A proposed swap. ``amount`` is USD-equivalent, slippage in percent (1 = 1%)."""

    from_token: str
    to_token: str
    amount: str
    slippage_tolerance: Decimal | float | str = 0
    gas_price: str | None = None  # gwei
    protocol: str | None = None

    @property
    def amount_value(self) -> Decimal:
        return parse_decimal(self.amount)

    @property
    def slippage_value(self) -> Decimal:
        return parse_decimal(self.slippage_tolerance)

    @classmethod
    def from_dict(cls, data: dict) -> SwapParameters:
        gas_price = _pick(data, "gasPrice", "gas_price")
        amount = _pick(data, "amount")
        return cls(
            from_token=_pick(data, "fromToken", "from_token") or "",
            to_token=_pick(data, "toToken", "to_token") or "",
            amount=str(amount) if amount is not None else "",
            slippage_tolerance=_pick(data, "slippageTolerance", "slippage_tolerance") or 0,
            gas_price=str(gas_price) if gas_price is not None else None,
            protocol=_pick(data, "protocol"),
        )


@dataclass(frozen=True)
class TokenInfo:
    """Metadata for one side of a swap. All enrichment fields are optional."""

    address: str
    symbol: str = ""
    name: str = ""
    decimals: int = 18
    total_supply: str | None = None
    market_cap: Decimal | None = None
    volume_24h: Decimal | None = None
    price_change_24h: Decimal | None = None  # signed percent
    liquidity: Decimal | None = None  # USD depth
    holders: int | None = None
    is_verified: bool | None = None
    audit_status: AuditStatus | None = None

    @classmethod
    def from_dict(cls, data: dict) -> TokenInfo:
        total_supply = _pick(data, "totalSupply", "total_supply")
        decimals = _opt_int(_pick(data, "decimals"))
        return cls(
            address=_pick(data, "address") or "",
            symbol=_pick(data, "symbol") or "",
            name=_pick(data, "name") or "",
            decimals=decimals if decimals is not None else 18,
            total_supply=str(total_supply) if total_supply is not None else None,
            market_cap=_opt_decimal(_pick(data, "marketCap", "market_cap")),
            volume_24h=_opt_decimal(_pick(data, "volume24h", "volume_24h")),
            price_change_24h=_opt_decimal(_pick(data, "priceChange24h", "price_change_24h")),
            liquidity=_opt_decimal(_pick(data, "liquidity")),
            holders=_opt_int(_pick(data, "holders")),
            is_verified=_parse_bool(_pick(data, "isVerified", "is_verified")),
            audit_status=_parse_audit(_pick(data, "auditStatus", "audit_status")),
        )


@dataclass(frozen=True)
class RiskFactor:
    """One detected concern. ``description`` carries the numbers that triggered it."""

    type: RiskFactorType
    severity: RiskLevel
    description: str
    impact: str

    def to_dict(self) -> dict[str, str]:
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "description": self.description,
            "impact": self.impact,
        }


@dataclass
class RiskAssessment:
    """Result of a swap assessment. Factors are in evaluation order."""

    overall_risk: RiskLevel
    risk_score: int  # 0-100
    risk_factors: list[RiskFactor] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "overallRisk": self.overall_risk.value,
            "riskScore": self.risk_score,
            "riskFactors": [f.to_dict() for f in self.risk_factors],
            "recommendations": list(self.recommendations),
        }
