"""Age helpers and statutory retirement age schedule."""

import math
from dataclasses import dataclass
from datetime import date

from quit_sim_bj.params import Gender

# 渐进式延迟退休: (基准年龄, 基准出生年, 每年延迟, 上限)
_RETIREMENT_SCHEDULE: dict[Gender, tuple[float, int, float, float]] = {
    Gender.FEMALE: (50, 1975, 0.2, 55),
    Gender.MALE: (60, 1965, 0.15, 63),
}

MAX_FLEX_AGE = 65       # 弹性退休上限
FLEX_WINDOW_YEARS = 3   # 可提前/延后年数


def age_from_birth(year: int, month: int, today: date | None = None) -> int:
    """Current age in whole years (month precision)."""
    if today is None:
        today = date.today()
    age = today.year - year
    if today.month < month:
        age -= 1
    return age


def legal_retirement_age(gender: Gender, birth_year: int) -> float:
    """Statutory retirement age after the phased increase, clamped to policy bounds."""
    base, base_year, step, cap = _RETIREMENT_SCHEDULE[Gender(gender)]
    age = base + (birth_year - base_year) * step
    return min(max(age, base), cap)


def original_retirement_age(gender: Gender) -> float:
    """Pre-reform retirement age (lower bound for flexible claiming)."""
    return _RETIREMENT_SCHEDULE[Gender(gender)][0]


@dataclass(frozen=True)
class FlexRange:
    legal_age: float
    original_age: float
    earliest: float
    latest: float


def flexible_retirement_range(gender: Gender, birth_year: int) -> FlexRange:
    legal_age = legal_retirement_age(gender, birth_year)
    original_age = original_retirement_age(gender)
    return FlexRange(
        legal_age=legal_age,
        original_age=original_age,
        earliest=max(legal_age - FLEX_WINDOW_YEARS, original_age),
        latest=min(legal_age + FLEX_WINDOW_YEARS, MAX_FLEX_AGE),
    )


def claim_age_options(flex_range: FlexRange) -> list[tuple[str, float]]:
    """Claim ages offered for selection: early / legal / delay."""
    return [
        ("early", flex_range.earliest),
        ("legal", flex_range.legal_age),
        ("delay", flex_range.latest),
    ]


def retire_year(birth_year: int, claim_age: float) -> int:
    """Calendar year in which the pension is first claimed."""
    return birth_year + math.ceil(claim_age)
