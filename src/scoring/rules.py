"""Scoring rules for Pump.fun tokens.

Every rule is a pure function of TokenMetrics returning a RuleOutcome.
Rules never look at each other, so each band can be tested alone.
RULES fixes the evaluation order, which only affects message order.
"""

from collections.abc import Callable

from src.scoring.models import NO_CHANGE, RuleOutcome, TokenMetrics

Rule = Callable[[TokenMetrics], RuleOutcome]

# Market cap bands (USD)
MCAP_LOW = 5_000
MCAP_HEALTHY = 20_000
MCAP_STRONG = 100_000

# Liquidity bands (USD)
LIQUIDITY_LOW = 1_000
LIQUIDITY_GOOD = 5_000


def age_rule(m: TokenMetrics) -> RuleOutcome:
    """Young tokens are penalized, survivors past 1h rewarded. 30-60 min is neutral."""
    if m.age_minutes < 5:
        return RuleOutcome(-15, risk="Token is very new (< 5 minutes)")
    if m.age_minutes < 30:
        return RuleOutcome(-5, risk="Token is less than 30 minutes old")
    if m.age_minutes > 60:
        return RuleOutcome(10, positive="Token has survived for over 1 hour")
    return NO_CHANGE


def market_cap_rule(m: TokenMetrics) -> RuleOutcome:
    mcap = m.market_cap_usd
    if mcap < MCAP_LOW:
        return RuleOutcome(-10, risk="Very low market cap (< $5k)")
    if mcap < MCAP_HEALTHY:
        return RuleOutcome(5, positive="Growing market cap ($5k-$20k range)")
    if mcap < MCAP_STRONG:
        return RuleOutcome(15, positive="Healthy market cap ($20k-$100k)")
    return RuleOutcome(20, positive="Strong market cap (> $100k)")


def liquidity_rule(m: TokenMetrics) -> RuleOutcome:
    if m.liquidity_usd < LIQUIDITY_LOW:
        return RuleOutcome(-10, risk="Very low liquidity")
    if m.liquidity_usd >= LIQUIDITY_GOOD:
        return RuleOutcome(10, positive="Good liquidity available")
    return NO_CHANGE


def community_rule(m: TokenMetrics) -> RuleOutcome:
    """Reply count as engagement proxy. 3-10 replies is neutral."""
    if m.reply_count > 50:
        return RuleOutcome(10, positive="Active community engagement")
    if m.reply_count > 10:
        return RuleOutcome(5, positive="Some community interest")
    if m.reply_count < 3:
        return RuleOutcome(-5, risk="Very low community engagement")
    return NO_CHANGE


def social_rule(m: TokenMetrics) -> RuleOutcome:
    if m.has_social_link:
        return RuleOutcome(10, positive="Has social media presence")
    return RuleOutcome(-5, risk="No social media links")


def bonding_curve_rule(m: TokenMetrics) -> RuleOutcome:
    if m.bonding_curve_complete:
        return RuleOutcome(15, positive="Bonding curve completed - migrated to Raydium")
    return NO_CHANGE


def nsfw_rule(m: TokenMetrics) -> RuleOutcome:
    if m.is_flagged_unsafe:
        return RuleOutcome(-10, risk="Flagged as NSFW content")
    return NO_CHANGE


def king_of_the_hill_rule(m: TokenMetrics) -> RuleOutcome:
    if m.reached_peak_status:
        return RuleOutcome(10, positive="Reached King of the Hill status")
    return NO_CHANGE


RULES: tuple[Rule, ...] = (
    age_rule,
    market_cap_rule,
    liquidity_rule,
    community_rule,
    social_rule,
    bonding_curve_rule,
    nsfw_rule,
    king_of_the_hill_rule,
)
