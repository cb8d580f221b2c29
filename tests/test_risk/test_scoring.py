"""Tests for score aggregation, classification and recommendations."""

import itertools

import pytest

from src.risk.models import RiskFactor, RiskFactorType, RiskLevel
from src.risk.recommendations import (
    CRITICAL_PREAMBLE,
    FACTOR_ADVICE,
    HIGH_PREAMBLE,
    generate_recommendations,
)
from src.risk.scoring import classify_risk, compute_risk_score, severity_score


def _factor(kind: RiskFactorType, severity: RiskLevel) -> RiskFactor:
    return RiskFactor(type=kind, severity=severity, description="d", impact="i")


class TestSeverityScores:
    def test_score_per_severity(self):
        assert severity_score(RiskLevel.LOW) == 10
        assert severity_score(RiskLevel.MEDIUM) == 25
        assert severity_score(RiskLevel.HIGH) == 50
        assert severity_score(RiskLevel.CRITICAL) == 75

    def test_empty_is_zero(self):
        assert compute_risk_score([]) == 0

    def test_sum(self):
        factors = [
            _factor(RiskFactorType.MEV_RISK, RiskLevel.MEDIUM),
            _factor(RiskFactorType.GAS_RISK, RiskLevel.LOW),
        ]
        assert compute_risk_score(factors) == 35

    def test_capped_at_100(self):
        factors = [
            _factor(RiskFactorType.CONTRACT_RISK, RiskLevel.CRITICAL),
            _factor(RiskFactorType.LIQUIDITY_RISK, RiskLevel.HIGH),
            _factor(RiskFactorType.TOKEN_RISK, RiskLevel.HIGH),
        ]
        assert compute_risk_score(factors) == 100


class TestClassification:
    @pytest.mark.parametrize(
        "score,expected",
        [
            (0, RiskLevel.LOW),
            (10, RiskLevel.LOW),
            (24, RiskLevel.LOW),
            (25, RiskLevel.MEDIUM),
            (49, RiskLevel.MEDIUM),
            (50, RiskLevel.HIGH),
            (74, RiskLevel.HIGH),
            (75, RiskLevel.CRITICAL),
            (100, RiskLevel.CRITICAL),
        ],
    )
    def test_boundaries(self, score, expected):
        assert classify_risk(score) == expected


def test_score_bounded_and_monotonic():
    """Adding a factor never lowers the score; score stays within 0..100."""
    kinds = list(RiskFactorType)
    levels = list(RiskLevel)
    for severities in itertools.product(levels, repeat=3):
        factors: list[RiskFactor] = []
        prev = compute_risk_score(factors)
        for kind, sev in zip(kinds, severities):
            factors.append(_factor(kind, sev))
            score = compute_risk_score(factors)
            assert 0 <= score <= 100
            assert score >= prev
            prev = score


def test_level_order_follows_score():
    order = [RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH, RiskLevel.CRITICAL]
    levels = [classify_risk(s) for s in range(101)]
    ranks = [order.index(level) for level in levels]
    assert ranks == sorted(ranks)


class TestRecommendations:
    def test_no_factors_no_recommendations(self):
        assert generate_recommendations([], RiskLevel.LOW) == []

    def test_one_advice_per_factor_in_order(self):
        factors = [
            _factor(RiskFactorType.LIQUIDITY_RISK, RiskLevel.MEDIUM),
        ]
        recs = generate_recommendations(factors, RiskLevel.MEDIUM)
        assert recs == [FACTOR_ADVICE[RiskFactorType.LIQUIDITY_RISK]]

    def test_high_preamble_first(self):
        factors = [
            _factor(RiskFactorType.SLIPPAGE_RISK, RiskLevel.HIGH),
        ]
        recs = generate_recommendations(factors, RiskLevel.HIGH)
        assert recs[0] == HIGH_PREAMBLE
        assert "HIGH RISK" in recs[0]
        assert recs[1] == FACTOR_ADVICE[RiskFactorType.SLIPPAGE_RISK]

    def test_critical_preamble_only(self):
        factors = [
            _factor(RiskFactorType.CONTRACT_RISK, RiskLevel.CRITICAL),
            _factor(RiskFactorType.MEV_RISK, RiskLevel.MEDIUM),
        ]
        recs = generate_recommendations(factors, RiskLevel.CRITICAL)
        assert recs == [
            CRITICAL_PREAMBLE,
            FACTOR_ADVICE[RiskFactorType.CONTRACT_RISK],
            FACTOR_ADVICE[RiskFactorType.MEV_RISK],
        ]
        assert HIGH_PREAMBLE not in recs

    def test_every_factor_type_has_advice(self):
        assert set(FACTOR_ADVICE) == set(RiskFactorType)
        assert len(set(FACTOR_ADVICE.values())) == len(FACTOR_ADVICE)
