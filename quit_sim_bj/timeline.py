"""Life timeline from now to pension claim."""

from dataclasses import dataclass
from datetime import date

from quit_sim_bj.simulation import RetirementResult

MIN_SEGMENT_YEARS = 0.1  # 短于此的阶段不显示


@dataclass(frozen=True)
class Segment:
    kind: str  # "working" | "flex_pay" | "waiting"
    label: str
    start_age: float
    end_age: float
    years: float
    share: float  # 占全程比例 (0-1)


@dataclass(frozen=True)
class Milestone:
    kind: str  # "now" | "quit" | "stop_pay" | "claim"
    label: str
    age: float
    year: int


@dataclass(frozen=True)
class Timeline:
    segments: list[Segment]
    milestones: list[Milestone]
    total_years: float


def build_timeline(result: RetirementResult, today: date | None = None) -> Timeline:
    """Split now → claim into working / self-pay / waiting phases with calendar milestones."""
    if today is None:
        today = date.today()
    now_year = today.year
    age_now = result.age_now
    total = result.years_working + result.years_flex_pay + result.years_waiting

    phases = [
        ("working", "在职", result.years_working),
        ("flex_pay", f"{result.pay_method}自缴", result.years_flex_pay),
        ("waiting", "停缴等待", result.years_waiting),
    ]
    segments = []
    start = age_now
    for kind, label, years in phases:
        if years > MIN_SEGMENT_YEARS:
            segments.append(Segment(
                kind=kind, label=label,
                start_age=start, end_age=start + years, years=years,
                share=years / total if total > 0 else 0.0,
            ))
        start += years

    milestones = [Milestone("now", "现在", age_now, now_year)]
    if result.years_working > MIN_SEGMENT_YEARS:
        milestones.append(Milestone(
            "quit", "辞职", result.quit_age, now_year + round(result.quit_age - age_now),
        ))
    if result.stop_pay_age is not None and result.years_waiting > MIN_SEGMENT_YEARS:
        milestones.append(Milestone(
            "stop_pay", "停缴", result.stop_pay_age,
            now_year + round(result.stop_pay_age - age_now),
        ))
    milestones.append(Milestone("claim", "领取", result.actual_claim_age, result.retire_year))

    return Timeline(segments=segments, milestones=milestones, total_years=total)
