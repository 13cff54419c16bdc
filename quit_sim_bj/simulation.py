"""Core retirement projection engine."""

import dataclasses
from dataclasses import dataclass
from datetime import date
from enum import Enum

from quit_sim_bj.ages import FlexRange, age_from_birth, flexible_retirement_range, retire_year
from quit_sim_bj.divisor import pension_divisor
from quit_sim_bj.params import DEFAULT_POLICY, Gender, Hukou, PolicyParams, Profile
from quit_sim_bj.subsidy import Subsidy4050, calc_4050_subsidy


class ContributionStrategy(str, Enum):
    """How contributions continue after quitting."""

    PAY_THROUGH = "full"      # 缴到领取年龄
    STOP_AT_MINIMUM = "min"   # 缴满最低年限即停

    @property
    def label(self) -> str:
        return "缴到退休" if self is ContributionStrategy.PAY_THROUGH else "缴满即停"


@dataclass(frozen=True)
class StopPlan:
    """Stop-paying point under STOP_AT_MINIMUM."""

    stop_pay_age: float
    years_waiting: float


@dataclass(frozen=True)
class RetirementResult:
    age_now: int
    legal_age: float
    quit_age: float
    gender: Gender
    hukou: Hukou
    pay_method: str
    flex_monthly: float
    years_working: float
    years_flex_pay: float
    pension_flex_cost: float
    total_flex_cost: float
    total_years: float
    final_balance: float
    personal_pension: float
    base_pension: float
    monthly_pension: float
    real_pension: float
    payback_years: float
    pension_ok: bool
    pension_shortfall: float
    min_pension_years_required: float
    retire_year: int
    medical_ok: bool
    medical_shortfall: float
    need_medical_years: float
    medical_extra_cost: float
    medical_monthly: float
    total_received: float
    net_gain: float
    avg_yearly_to_account: float
    yearly_to_account_flex: float
    balance_now: float
    strategy: ContributionStrategy
    stop_plan: StopPlan | None
    actual_claim_age: float
    flex_range: FlexRange
    subsidy_4050: Subsidy4050

    @property
    def stop_at_min_years(self) -> bool:
        return self.strategy is ContributionStrategy.STOP_AT_MINIMUM

    @property
    def stop_pay_age(self) -> float | None:
        return self.stop_plan.stop_pay_age if self.stop_plan else None

    @property
    def years_waiting(self) -> float:
        return self.stop_plan.years_waiting if self.stop_plan else 0.0

    def to_dict(self) -> dict:
        """Flatten to a plain dict (nested records become dicts)."""
        d = dataclasses.asdict(self)
        d["gender"] = self.gender.value
        d["hukou"] = self.hukou.value
        d["strategy"] = self.strategy.value
        d["stop_pay_age"] = self.stop_pay_age
        d["years_waiting"] = self.years_waiting
        return d


def purchasing_power(amount: float, years: float, inflation: float) -> float:
    """Present value of a future nominal amount."""
    return amount / (1 + inflation) ** years


def _plan_self_pay(
    strategy: ContributionStrategy,
    quit_age: float,
    claim_age: float,
    years_at_quit: float,
    policy: PolicyParams,
) -> tuple[float, StopPlan | None]:
    """Return (years of self-payment, stop plan) for the chosen strategy."""
    available = max(claim_age - quit_age, 0)
    if strategy is ContributionStrategy.STOP_AT_MINIMUM:
        years_needed = max(policy.min_pension_years - years_at_quit, 0)
        years_flex_pay = min(years_needed, available)
        stop_pay_age = quit_age + years_flex_pay
        return years_flex_pay, StopPlan(
            stop_pay_age=stop_pay_age,
            years_waiting=max(claim_age - stop_pay_age, 0),
        )
    return available, None


def compute_retirement(
    profile: Profile,
    quit_age: float,
    strategy: ContributionStrategy = ContributionStrategy.PAY_THROUGH,
    claim_age: float | None = None,
    policy: PolicyParams = DEFAULT_POLICY,
    today: date | None = None,
) -> RetirementResult:
    """Project pension outcome of quitting at quit_age and claiming at claim_age.

    claim_age=None uses the statutory retirement age.
    Requires profile.years_paid_now > 0 (checked by validate_profile, not here).
    """
    strategy = ContributionStrategy(strategy)
    gender = Gender(profile.gender)
    hukou = Hukou(profile.hukou)

    flex_monthly = policy.flex_monthly(hukou)
    monthly_to_account = policy.monthly_to_account()

    age_now = age_from_birth(profile.birth_year, profile.birth_month, today)
    flex_range = flexible_retirement_range(gender, profile.birth_year)
    actual_claim_age = claim_age if claim_age is not None else flex_range.legal_age

    # 在职阶段: 按历史平均速度累积个人账户
    years_working = max(quit_age - age_now, 0)
    avg_yearly_to_account = profile.balance_now / profile.years_paid_now
    years_at_quit = profile.years_paid_now + years_working
    balance_at_quit = profile.balance_now + avg_yearly_to_account * years_working

    years_flex_pay, stop_plan = _plan_self_pay(
        strategy, quit_age, actual_claim_age, years_at_quit, policy,
    )

    yearly_to_account_flex = monthly_to_account * 12
    pension_flex_cost = flex_monthly * 12 * years_flex_pay

    subsidy = calc_4050_subsidy(
        gender, quit_age, actual_claim_age, flex_monthly, hukou, policy,
    )

    total_years = years_at_quit + years_flex_pay
    final_balance = balance_at_quit + yearly_to_account_flex * years_flex_pay

    # 月养老金 = 个人账户养老金 + 基础养老金
    personal_pension = final_balance / pension_divisor(actual_claim_age)
    base_pension = (
        policy.avg_social_wage * total_years
        * policy.base_pension_rate * policy.base_pension_factor
    )
    monthly_pension = personal_pension + base_pension

    min_years = policy.min_pension_years
    pension_ok = total_years >= min_years
    pension_shortfall = 0 if pension_ok else min_years - total_years

    need_medical_years = policy.medical_years(gender)
    medical_ok = total_years >= need_medical_years
    medical_shortfall = 0 if medical_ok else need_medical_years - total_years
    medical_extra_cost = 0 if medical_ok else medical_shortfall * 12 * policy.medical_buyin_monthly

    total_flex_cost = pension_flex_cost + medical_extra_cost
    payback_years = total_flex_cost / (monthly_pension * 12) if total_flex_cost > 0 else 0

    real_pension = purchasing_power(
        monthly_pension, actual_claim_age - age_now, policy.inflation_rate,
    )

    years_receiving = policy.life_expectancy - actual_claim_age
    total_received = monthly_pension * 12 * years_receiving
    net_gain = total_received - total_flex_cost

    return RetirementResult(
        age_now=age_now,
        legal_age=flex_range.legal_age,
        quit_age=quit_age,
        gender=gender,
        hukou=hukou,
        pay_method=policy.pay_method(hukou),
        flex_monthly=flex_monthly,
        years_working=years_working,
        years_flex_pay=years_flex_pay,
        pension_flex_cost=pension_flex_cost,
        total_flex_cost=total_flex_cost,
        total_years=total_years,
        final_balance=final_balance,
        personal_pension=personal_pension,
        base_pension=base_pension,
        monthly_pension=monthly_pension,
        real_pension=real_pension,
        payback_years=payback_years,
        pension_ok=pension_ok,
        pension_shortfall=pension_shortfall,
        min_pension_years_required=min_years,
        retire_year=retire_year(profile.birth_year, actual_claim_age),
        medical_ok=medical_ok,
        medical_shortfall=medical_shortfall,
        need_medical_years=need_medical_years,
        medical_extra_cost=medical_extra_cost,
        medical_monthly=policy.medical_buyin_monthly,
        total_received=total_received,
        net_gain=net_gain,
        avg_yearly_to_account=avg_yearly_to_account,
        yearly_to_account_flex=yearly_to_account_flex,
        balance_now=profile.balance_now,
        strategy=strategy,
        stop_plan=stop_plan,
        actual_claim_age=actual_claim_age,
        flex_range=flex_range,
        subsidy_4050=subsidy,
    )
