"""Beijing early-quit pension simulation package."""

from quit_sim_bj.params import (
    Gender,
    Hukou,
    Profile,
    PolicyParams,
    DEFAULT_POLICY,
    validate_profile,
    validate_scenario,
)
from quit_sim_bj.ages import (
    FlexRange,
    age_from_birth,
    legal_retirement_age,
    original_retirement_age,
    flexible_retirement_range,
    claim_age_options,
    retire_year,
)
from quit_sim_bj.divisor import PENSION_DIVISOR_TABLE, pension_divisor
from quit_sim_bj.subsidy import Subsidy4050, calc_4050_subsidy
from quit_sim_bj.simulation import (
    ContributionStrategy,
    StopPlan,
    RetirementResult,
    compute_retirement,
    purchasing_power,
)
from quit_sim_bj.scenarios import (
    QuitAgeComparison,
    StrategyComparison,
    candidate_quit_ages,
    compare_quit_ages,
    compare_strategies,
    compare_claim_ages,
)
from quit_sim_bj.advice import AdviceItem, build_advice
from quit_sim_bj.timeline import Milestone, Segment, Timeline, build_timeline

__all__ = [
    "Gender",
    "Hukou",
    "Profile",
    "PolicyParams",
    "DEFAULT_POLICY",
    "validate_profile",
    "validate_scenario",
    "FlexRange",
    "age_from_birth",
    "legal_retirement_age",
    "original_retirement_age",
    "flexible_retirement_range",
    "claim_age_options",
    "retire_year",
    "PENSION_DIVISOR_TABLE",
    "pension_divisor",
    "Subsidy4050",
    "calc_4050_subsidy",
    "ContributionStrategy",
    "StopPlan",
    "RetirementResult",
    "compute_retirement",
    "purchasing_power",
    "QuitAgeComparison",
    "StrategyComparison",
    "candidate_quit_ages",
    "compare_quit_ages",
    "compare_strategies",
    "compare_claim_ages",
    "AdviceItem",
    "build_advice",
    "Milestone",
    "Segment",
    "Timeline",
    "build_timeline",
]
