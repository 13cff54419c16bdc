"""Rule-based advice derived from scenario comparisons."""

import math
from dataclasses import dataclass
from datetime import date

from quit_sim_bj.ages import age_from_birth
from quit_sim_bj.params import DEFAULT_POLICY, PolicyParams, Profile
from quit_sim_bj.scenarios import compare_strategies
from quit_sim_bj.simulation import ContributionStrategy, compute_retirement

PENSION_DIFF_THRESHOLD = 100      # 元/月: 月养老金差小于此不单独提示
STRATEGY_DIFF_THRESHOLD = 10000   # 元: 策略净收益差小于此不提示


@dataclass(frozen=True)
class AdviceItem:
    kind: str  # "default" | "success" | "warning"
    title: str
    description: str


def _wan(amount: float) -> str:
    return f"¥{amount / 10000:.1f}万"


def build_advice(
    profile: Profile,
    current_age: float,
    strategy: ContributionStrategy = ContributionStrategy.PAY_THROUGH,
    claim_age: float | None = None,
    policy: PolicyParams = DEFAULT_POLICY,
    today: date | None = None,
) -> list[AdviceItem]:
    """Advice for quitting at current_age versus quitting immediately."""
    strategy = ContributionStrategy(strategy)
    age_now = age_from_birth(profile.birth_year, profile.birth_month, today)
    current = compute_retirement(profile, current_age, strategy, claim_age, policy, today)
    advice: list[AdviceItem] = []

    # 1. 自由时间的价格: 立刻辞职 vs 工作到 current_age
    immediate_age = math.ceil(age_now)
    if immediate_age < current_age:
        immediate = compute_retirement(profile, immediate_age, strategy, claim_age, policy, today)
        free_years = current_age - immediate_age
        money_diff = current.net_gain - immediate.net_gain
        pension_diff = current.monthly_pension - immediate.monthly_pension
        if money_diff > 0:
            yearly_value = money_diff / free_years
            advice.append(AdviceItem(
                "default",
                "你的自由时间值多少钱？",
                f"继续工作到 {current_age:g} 岁，比现在辞职多赚 {_wan(money_diff)}。"
                f"换算下来，每多工作1年 ≈ 多赚 {_wan(yearly_value)}。"
                f"如果你觉得一年自由值 {yearly_value / 10000:.1f} 万以上，现在就辞！",
            ))
            if pension_diff > PENSION_DIFF_THRESHOLD:
                advice.append(AdviceItem(
                    "default",
                    f"月养老金差 ¥{round(pension_diff)}",
                    f"现在辞职：月领 ¥{round(immediate.monthly_pension)}。"
                    f"{current_age:g}岁辞职：月领 ¥{round(current.monthly_pension)}。"
                    f"多工作 {free_years:g} 年换来每月多 ¥{round(pension_diff)}，你觉得值吗？",
                ))
        else:
            advice.append(AdviceItem(
                "success",
                "恭喜！现在辞职最划算",
                f"立刻辞职不仅能早享受 {free_years:g} 年自由，还能多赚 {_wan(-money_diff)}！"
                "工作越久反而越亏，建议早走。",
            ))

    # 2. 缴费策略
    comparison = compare_strategies(profile, current_age, claim_age, policy, today)
    if comparison.difference > STRATEGY_DIFF_THRESHOLD:
        chosen = comparison.better is strategy
        if comparison.better is ContributionStrategy.PAY_THROUGH:
            title = "你选的缴费策略正确" if chosen else '换成"缴到退休"更划算'
            description = f"缴到领取年龄比缴满即停多赚 {_wan(comparison.difference)}"
        else:
            title = "你选的缴费策略正确" if chosen else '换成"缴满即停"更划算'
            description = (
                f"缴满{policy.min_pension_years:g}年即停比一直缴多赚 {_wan(comparison.difference)}"
            )
        advice.append(AdviceItem("success" if chosen else "default", title, description))

    # 3. 风险提示
    if not current.pension_ok:
        advice.append(AdviceItem(
            "warning",
            "注意：养老保险年限不足",
            f"还差 {current.pension_shortfall:.1f} 年才能领养老金，需要继续缴费",
        ))
    if not current.medical_ok:
        advice.append(AdviceItem(
            "warning",
            f"医保需补缴 {current.medical_shortfall:.1f} 年",
            f"约 {_wan(current.medical_extra_cost)}，已计入总成本",
        ))

    if not advice:
        advice.append(AdviceItem(
            "default",
            "试试调整辞职年龄看看变化",
            "输入不同年龄，对比不同方案的收益差异",
        ))
    return advice
