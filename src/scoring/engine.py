"""Token score aggregation: fold RULES over a neutral baseline of 50."""

from collections.abc import Sequence

from src.scoring.models import Grade, ScoreReport, TokenMetrics
from src.scoring.rules import RULES, Rule

BASELINE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

# Descending, inclusive lower bounds
GRADE_THRESHOLDS: tuple[tuple[int, Grade], ...] = (
    (80, Grade.A),
    (60, Grade.B),
    (40, Grade.C),
    (20, Grade.D),
)


def grade_for(score: int) -> Grade:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return Grade.F


def score(metrics: TokenMetrics, rules: Sequence[Rule] = RULES) -> ScoreReport:
    """Score a token from 0 to 100 and grade it A-F.

    Pure function: same metrics always give the same report.
    """
    total = BASELINE_SCORE
    risks: list[str] = []
    positives: list[str] = []

    for rule in rules:
        outcome = rule(metrics)
        total += outcome.delta
        if outcome.risk:
            risks.append(outcome.risk)
        if outcome.positive:
            positives.append(outcome.positive)

    total = max(MIN_SCORE, min(MAX_SCORE, total))

    return ScoreReport(
        score=total,
        grade=grade_for(total),
        risks=tuple(risks),
        positives=tuple(positives),
    )
