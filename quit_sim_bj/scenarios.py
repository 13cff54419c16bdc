"""Scenario comparison across quit ages, strategies and claim ages."""

import math
from dataclasses import dataclass
from datetime import date

from quit_sim_bj.ages import age_from_birth, claim_age_options, flexible_retirement_range
from quit_sim_bj.params import DEFAULT_POLICY, PolicyParams, Profile
from quit_sim_bj.simulation import ContributionStrategy, RetirementResult, compute_retirement

# 对比表: 当前方案之外再看晚3年、晚5年辞职
QUIT_AGE_OFFSETS = (3, 5)


@dataclass(frozen=True)
class QuitAgeComparison:
    results: list[RetirementResult]
    best: RetirementResult

    @property
    def ages(self) -> list[float]:
        return [r.quit_age for r in self.results]


@dataclass(frozen=True)
class StrategyComparison:
    pay_through: RetirementResult
    stop_at_minimum: RetirementResult

    @property
    def better(self) -> ContributionStrategy:
        if self.pay_through.net_gain > self.stop_at_minimum.net_gain:
            return ContributionStrategy.PAY_THROUGH
        return ContributionStrategy.STOP_AT_MINIMUM

    @property
    def difference(self) -> float:
        return abs(self.pay_through.net_gain - self.stop_at_minimum.net_gain)


def candidate_quit_ages(age_now: float, current_age: float, claim_age: float) -> list[float]:
    """Quit ages to compare: now, the chosen age, and later offsets capped at claim_age.

    Deduplicated, limited to [age_now, claim_age], ascending.
    """
    raw = [math.ceil(age_now), current_age]
    raw += [min(current_age + offset, claim_age) for offset in QUIT_AGE_OFFSETS]
    ages: list[float] = []
    for age in raw:
        if age not in ages and age_now <= age <= claim_age:
            ages.append(age)
    return sorted(ages)


def compare_quit_ages(
    profile: Profile,
    current_age: float,
    strategy: ContributionStrategy = ContributionStrategy.PAY_THROUGH,
    claim_age: float | None = None,
    policy: PolicyParams = DEFAULT_POLICY,
    today: date | None = None,
) -> QuitAgeComparison | None:
    """Run the projection for each candidate quit age and pick the best net gain.

    Returns None when no candidate falls inside [age_now, claim_age].
    """
    if claim_age is None:
        claim_age = flexible_retirement_range(profile.gender, profile.birth_year).legal_age
    age_now = age_from_birth(profile.birth_year, profile.birth_month, today)
    ages = candidate_quit_ages(age_now, current_age, claim_age)
    if not ages:
        return None
    results = [
        compute_retirement(profile, age, strategy, claim_age, policy, today)
        for age in ages
    ]
    best = results[0]
    for r in results[1:]:
        if r.net_gain > best.net_gain:
            best = r
    return QuitAgeComparison(results=results, best=best)


def compare_strategies(
    profile: Profile,
    quit_age: float,
    claim_age: float | None = None,
    policy: PolicyParams = DEFAULT_POLICY,
    today: date | None = None,
) -> StrategyComparison:
    return StrategyComparison(
        pay_through=compute_retirement(
            profile, quit_age, ContributionStrategy.PAY_THROUGH, claim_age, policy, today,
        ),
        stop_at_minimum=compute_retirement(
            profile, quit_age, ContributionStrategy.STOP_AT_MINIMUM, claim_age, policy, today,
        ),
    )


def compare_claim_ages(
    profile: Profile,
    quit_age: float,
    strategy: ContributionStrategy = ContributionStrategy.PAY_THROUGH,
    policy: PolicyParams = DEFAULT_POLICY,
    today: date | None = None,
) -> dict[str, RetirementResult]:
    """Projection for early / legal / delayed claiming, keyed by option label."""
    flex_range = flexible_retirement_range(profile.gender, profile.birth_year)
    return {
        label: compute_retirement(profile, quit_age, strategy, age, policy, today)
        for label, age in claim_age_options(flex_range)
    }
