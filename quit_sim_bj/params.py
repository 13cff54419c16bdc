"""Profile, policy parameters and input validation."""

from dataclasses import dataclass
from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Hukou(str, Enum):
    """北京户籍"""

    YES = "yes"
    NO = "no"


# 输入校验范围（表单出生年份为当前年-60 ~ 当前年-25）
MIN_BIRTH_YEAR = 1940
MAX_BIRTH_YEAR = 2010


@dataclass(frozen=True)
class Profile:
    birth_year: int
    birth_month: int
    gender: Gender
    hukou: Hukou
    years_paid_now: float  # 已缴养老保险年限
    balance_now: float     # 个人账户余额（元）

    @property
    def is_female(self) -> bool:
        return self.gender == Gender.FEMALE

    @property
    def is_local(self) -> bool:
        return self.hukou == Hukou.YES


@dataclass(frozen=True)
class PolicyParams:
    """Beijing social insurance policy constants (元, 年).

    Update here when the annual contribution base changes.
    """

    # 缴费基数
    min_wage_base: float = 6326          # 最低缴费基数（元/月）
    account_rate: float = 0.08           # 个人账户计入比例
    flex_monthly_local: float = 1800     # 灵活就业自缴（元/月）
    flex_monthly_nonlocal: float = 2800  # 公司代缴（元/月）

    # 基础养老金
    avg_social_wage: float = 14000       # 社平工资（元/月）
    base_pension_rate: float = 0.01      # 每缴费1年计发1%
    base_pension_factor: float = 0.9

    # 年限门槛
    min_pension_years: float = 20
    medical_years_female: float = 20
    medical_years_male: float = 25
    medical_buyin_monthly: float = 500   # 医保补缴（元/月）

    # 4050补贴
    subsidy_rate: float = 0.6
    subsidy_age_female: int = 40
    subsidy_age_male: int = 50
    subsidy_full_gap_years: float = 5    # 距退休≤5年: 全额补贴
    subsidy_capped_years: float = 3      # 否则只补3年

    # 经济假设
    inflation_rate: float = 0.03
    life_expectancy: float = 80

    def flex_monthly(self, hukou: Hukou) -> float:
        return self.flex_monthly_local if hukou == Hukou.YES else self.flex_monthly_nonlocal

    def pay_method(self, hukou: Hukou) -> str:
        return "灵活就业" if hukou == Hukou.YES else "公司代缴"

    def monthly_to_account(self) -> float:
        return self.min_wage_base * self.account_rate

    def medical_years(self, gender: Gender) -> float:
        return self.medical_years_female if gender == Gender.FEMALE else self.medical_years_male

    def subsidy_age(self, gender: Gender) -> int:
        return self.subsidy_age_female if gender == Gender.FEMALE else self.subsidy_age_male


DEFAULT_POLICY = PolicyParams()


def validate_profile(profile: Profile) -> list[str]:
    """Validate a profile before projection. Returns list of error messages."""
    errors = []
    if not MIN_BIRTH_YEAR <= profile.birth_year <= MAX_BIRTH_YEAR:
        errors.append(f"出生年份{profile.birth_year}超出范围（{MIN_BIRTH_YEAR}-{MAX_BIRTH_YEAR}）")
    if not 1 <= profile.birth_month <= 12:
        errors.append(f"出生月份{profile.birth_month}无效（1-12）")
    if profile.years_paid_now <= 0:
        errors.append(f"已缴年限必须大于0（当前: {profile.years_paid_now}）")
    if profile.balance_now <= 0:
        errors.append(f"个人账户余额必须大于0（当前: {profile.balance_now}）")
    return errors


def validate_scenario(quit_age: float, claim_age: float | None = None) -> list[str]:
    """Validate scenario ages. Returns list of error messages."""
    errors = []
    if quit_age <= 0:
        errors.append(f"辞职年龄必须大于0（当前: {quit_age}）")
    if claim_age is not None and claim_age <= 0:
        errors.append(f"领取年龄必须大于0（当前: {claim_age}）")
    return errors
