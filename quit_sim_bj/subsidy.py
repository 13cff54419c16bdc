"""4050 flexible employment social insurance subsidy."""

from dataclasses import dataclass

from quit_sim_bj.params import DEFAULT_POLICY, Gender, Hukou, PolicyParams


@dataclass(frozen=True)
class Subsidy4050:
    eligible: bool
    subsidy_years: float
    subsidy_amount: float
    subsidy_rate: float
    reason: str | None = None
    years_to_retire: float | None = None


_INELIGIBLE = Subsidy4050(eligible=False, subsidy_years=0, subsidy_amount=0, subsidy_rate=0)


def calc_4050_subsidy(
    gender: Gender,
    quit_age: float,
    claim_age: float,
    flex_monthly: float,
    hukou: Hukou,
    policy: PolicyParams = DEFAULT_POLICY,
) -> Subsidy4050:
    """Evaluate the 4050 subsidy for someone quitting at quit_age.

    - 非北京户籍: not eligible, no reason given
    - 女40岁/男50岁以下: not eligible
    - 距领取≤5年: whole gap subsidised; otherwise 3 years
    Amount = flex_monthly × 12 × subsidy_years × rate.
    """
    if hukou != Hukou.YES:
        return _INELIGIBLE

    threshold = policy.subsidy_age(gender)
    if quit_age < threshold:
        return Subsidy4050(
            eligible=False, subsidy_years=0, subsidy_amount=0, subsidy_rate=0,
            reason=f"需年满{threshold}岁",
        )

    years_to_retire = claim_age - quit_age
    if years_to_retire <= policy.subsidy_full_gap_years:
        subsidy_years = years_to_retire
    else:
        subsidy_years = policy.subsidy_capped_years
    subsidy_years = max(0, subsidy_years)

    return Subsidy4050(
        eligible=True,
        subsidy_years=subsidy_years,
        subsidy_amount=flex_monthly * 12 * subsidy_years * policy.subsidy_rate,
        subsidy_rate=policy.subsidy_rate,
        years_to_retire=years_to_retire,
    )
