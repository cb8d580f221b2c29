"""Tests for consumer policy helpers: warn/block decisions and rendering."""

import pytest

from src.risk.models import RiskAssessment, RiskFactor, RiskFactorType, RiskLevel
from src.risk.policy import (
    SAFE_EXPLANATION,
    explain_assessment,
    format_summary,
    risk_icon,
    should_block_transaction,
    should_show_warning,
)


def _assessment(level: RiskLevel, score: int = 0, factors=None) -> RiskAssessment:
    return RiskAssessment(overall_risk=level, risk_score=score, risk_factors=factors or [])


@pytest.mark.parametrize(
    "level,warn,block",
    [
        (RiskLevel.LOW, False, False),
        (RiskLevel.MEDIUM, False, False),
        (RiskLevel.HIGH, True, False),
        (RiskLevel.CRITICAL, True, True),
    ],
)
def test_warn_and_block(level, warn, block):
    a = _assessment(level)
    assert should_show_warning(a) is warn
    assert should_block_transaction(a) is block


def test_icons():
    assert risk_icon(RiskLevel.LOW) == "✅"
    assert risk_icon("CRITICAL") == "💥"
    assert risk_icon("BOGUS") == "❓"


def test_explain_safe():
    assert explain_assessment(_assessment(RiskLevel.LOW)) == SAFE_EXPLANATION


def test_explain_lists_each_factor():
    factors = [
        RiskFactor(
            type=RiskFactorType.LIQUIDITY_RISK,
            severity=RiskLevel.HIGH,
            description="too big",
            impact="slippage",
        ),
        RiskFactor(
            type=RiskFactorType.MEV_RISK,
            severity=RiskLevel.MEDIUM,
            description="bots",
            impact="sandwich",
        ),
    ]
    text = explain_assessment(_assessment(RiskLevel.CRITICAL, 75, factors))
    assert text.startswith("Risk factors contributing to CRITICAL risk level:")
    assert "• HIGH LIQUIDITY RISK: too big" in text
    assert "• MEDIUM MEV RISK: bots" in text
    assert text.index("LIQUIDITY") < text.index("MEV")


def test_format_summary():
    assert format_summary(_assessment(RiskLevel.HIGH, 50)) == "🚨 Risk Assessment: HIGH (50/100)"
