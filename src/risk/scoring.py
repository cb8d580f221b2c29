"""Aggregate fired factors into a 0-100 risk score and a risk level."""

from __future__ import annotations

from collections.abc import Iterable

from src.risk.models import RiskFactor, RiskLevel

SEVERITY_SCORES: dict[RiskLevel, int] = {
    RiskLevel.LOW: 10,
    RiskLevel.MEDIUM: 25,
    RiskLevel.HIGH: 50,
    RiskLevel.CRITICAL: 75,
}

MAX_SCORE = 100

# Checked top-down, first match wins
LEVEL_THRESHOLDS: tuple[tuple[int, RiskLevel], ...] = (
    (75, RiskLevel.CRITICAL),
    (50, RiskLevel.HIGH),
    (25, RiskLevel.MEDIUM),
)


def severity_score(severity: RiskLevel) -> int:
    return SEVERITY_SCORES.get(severity, 0)


def compute_risk_score(factors: Iterable[RiskFactor]) -> int:
    """Sum of per-factor scores, capped at 100."""
    total = sum(severity_score(f.severity) for f in factors)
    return min(total, MAX_SCORE)


def classify_risk(score: int) -> RiskLevel:
    for threshold, level in LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return RiskLevel.LOW
