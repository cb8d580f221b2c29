"""Advice attached to an assessment: a preamble for HIGH/CRITICAL, then one line per factor."""

from __future__ import annotations

from collections.abc import Sequence

from src.risk.models import RiskFactor, RiskFactorType, RiskLevel

CRITICAL_PREAMBLE = "⚠️ CRITICAL RISK: Consider canceling this transaction"
HIGH_PREAMBLE = "⚠️ HIGH RISK: Proceed with extreme caution"

FACTOR_ADVICE: dict[RiskFactorType, str] = {
    RiskFactorType.LIQUIDITY_RISK: "💧 Consider reducing swap amount or using a different DEX",
    RiskFactorType.SLIPPAGE_RISK: "📊 Adjust slippage tolerance based on market conditions",
    RiskFactorType.CONTRACT_RISK: "🔒 Verify contract address and check audit status",
    RiskFactorType.VOLATILITY_RISK: "📈 Monitor price movements and consider waiting for stability",
    RiskFactorType.MEV_RISK: "🤖 Consider using MEV-protected transactions or private mempool",
    RiskFactorType.GAS_RISK: "⛽ Adjust gas price based on current network conditions",
    RiskFactorType.TOKEN_RISK: "🎯 Research token fundamentals and community before trading",
    RiskFactorType.PROTOCOL_RISK: "🏗️ Use well-established protocols with proven track records",
}


def generate_recommendations(
    factors: Sequence[RiskFactor], overall_risk: RiskLevel
) -> list[str]:
    """Build the recommendation list. No fired factors means no recommendations."""
    recommendations: list[str] = []

    if overall_risk == RiskLevel.CRITICAL:
        recommendations.append(CRITICAL_PREAMBLE)
    elif overall_risk == RiskLevel.HIGH:
        recommendations.append(HIGH_PREAMBLE)

    for factor in factors:
        advice = FACTOR_ADVICE.get(factor.type)
        if advice:
            recommendations.append(advice)

    return recommendations
