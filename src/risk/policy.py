"""What a consumer does with an assessment: warn, block, explain."""

from __future__ import annotations

from src.risk.models import RiskAssessment, RiskLevel

RISK_ICONS: dict[RiskLevel, str] = {
    RiskLevel.LOW: "✅",
    RiskLevel.MEDIUM: "⚠️",
    RiskLevel.HIGH: "🚨",
    RiskLevel.CRITICAL: "💥",
}
UNKNOWN_ICON = "❓"

SAFE_EXPLANATION = "No specific risk factors detected. This transaction appears safe."


def should_show_warning(assessment: RiskAssessment) -> bool:
    return assessment.overall_risk in (RiskLevel.HIGH, RiskLevel.CRITICAL)


def should_block_transaction(assessment: RiskAssessment) -> bool:
    return assessment.overall_risk == RiskLevel.CRITICAL


def risk_icon(level: RiskLevel | str) -> str:
    try:
        return RISK_ICONS[RiskLevel(level)]
    except ValueError:
        return UNKNOWN_ICON


def explain_assessment(assessment: RiskAssessment) -> str:
    """Human-readable breakdown, one bullet per factor."""
    if not assessment.risk_factors:
        return SAFE_EXPLANATION

    bullets = "\n".join(
        f"• {f.severity.value} {f.type.value.replace('_', ' ')}: {f.description}"
        for f in assessment.risk_factors
    )
    return (
        f"Risk factors contributing to {assessment.overall_risk.value} risk level:\n\n"
        f"{bullets}"
    )


def format_summary(assessment: RiskAssessment) -> str:
    return (
        f"{risk_icon(assessment.overall_risk)} Risk Assessment: "
        f"{assessment.overall_risk.value} ({assessment.risk_score}/100)"
    )
