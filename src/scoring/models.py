"""Scoring domain types: normalized metrics in, report out."""

from dataclasses import dataclass, field
from enum import Enum


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


@dataclass(frozen=True)
class TokenMetrics:
    """Canonical per-token inputs in fixed units (USD, minutes)."""

    symbol: str = ""
    name: str = ""
    age_minutes: float = 0.0  # negative on clock skew, treat as brand new
    market_cap_usd: float = 0.0
    liquidity_usd: float = 0.0
    reply_count: int = 0
    has_social_link: bool = False
    bonding_curve_complete: bool = False
    is_flagged_unsafe: bool = False
    reached_peak_status: bool = False

    @property
    def holders(self) -> int:
        """Holder-count proxy for display. Never zero for an existing token."""
        return max(1, self.reply_count)


@dataclass(frozen=True)
class RuleOutcome:
    """Result of one scoring rule."""

    delta: int = 0
    risk: str | None = None
    positive: str | None = None


NO_CHANGE = RuleOutcome()


@dataclass(frozen=True)
class ScoreReport:
    score: int
    grade: Grade
    risks: tuple[str, ...] = field(default_factory=tuple)
    positives: tuple[str, ...] = field(default_factory=tuple)
