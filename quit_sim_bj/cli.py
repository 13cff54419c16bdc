"""CLI entry point for a single quit-age projection report."""

import sys

from quit_sim_bj.advice import build_advice
from quit_sim_bj.config import build_profile, parse_args
from quit_sim_bj.params import PolicyParams, Profile, validate_profile, validate_scenario
from quit_sim_bj.scenarios import compare_claim_ages, compare_quit_ages
from quit_sim_bj.simulation import ContributionStrategy, RetirementResult, compute_retirement
from quit_sim_bj.timeline import build_timeline

CLAIM_LABELS = {"early": "提前领取", "legal": "法定年龄", "delay": "延迟领取"}
ADVICE_MARKS = {"default": "・", "success": "◎", "warning": "⚠"}


def _wan(amount: float) -> str:
    return f"{amount / 10000:.1f}万"


def _print_header(profile: Profile, r: RetirementResult):
    gender = "女" if profile.is_female else "男"
    hukou = "北京户籍" if profile.is_local else "非北京户籍"
    fr = r.flex_range
    print("=" * 80)
    print(f"北京辞职养老测算（{profile.birth_year}年{profile.birth_month}月生・{gender}・{hukou}）")
    print(f"  现在: {r.age_now}岁 / 已缴: {profile.years_paid_now:g}年 / 个人账户: ¥{profile.balance_now:,.0f}")
    print(f"  法定退休: {fr.legal_age:.1f}岁（原{fr.original_age:g}岁）/ 弹性区间: {fr.earliest:.1f}〜{fr.latest:.1f}岁")
    print(f"  辞职: {r.quit_age:g}岁 / 领取: {r.actual_claim_age:.1f}岁（{r.retire_year}年）/ 策略: {r.strategy.label}")
    print("=" * 80)
    print()


def _print_result(r: RetirementResult, policy: PolicyParams):
    print("【缴费】")
    print(f"  在职继续缴: {r.years_working:.1f}年")
    print(f"  {r.pay_method}: ¥{r.flex_monthly:,.0f}/月 × {r.years_flex_pay:.1f}年 = ¥{r.pension_flex_cost:,.0f}")
    if r.stop_plan is not None:
        print(f"  {r.stop_pay_age:.1f}岁停缴，等待 {r.years_waiting:.1f}年")
    print(f"  累计缴费: {r.total_years:.1f}年")
    print()

    print("【养老金】")
    print(f"  个人账户: ¥{r.final_balance:,.0f} → ¥{r.personal_pension:,.0f}/月")
    print(f"  基础养老金: ¥{r.base_pension:,.0f}/月")
    print(f"  月养老金: ¥{r.monthly_pension:,.0f}（今天购买力 ¥{r.real_pension:,.0f}）")
    if r.pension_ok:
        print(f"  养老保险: 满{r.min_pension_years_required:g}年 ✓")
    else:
        print(f"  养老保险: 还差 {r.pension_shortfall:.1f}年 ✗")
    if r.medical_ok:
        print(f"  医保: 满{r.need_medical_years:g}年 ✓")
    else:
        print(f"  医保: 还差 {r.medical_shortfall:.1f}年，补缴 ¥{r.medical_extra_cost:,.0f}（¥{r.medical_monthly:g}/月）")
    print()

    print("【收支】")
    print(f"  自费总投入: ¥{r.total_flex_cost:,.0f}")
    if r.payback_years > 0:
        print(f"  回本: {r.payback_years:.1f}年")
    print(f"  领到{policy.life_expectancy:g}岁累计: ¥{r.total_received:,.0f}")
    print(f"  净收益: ¥{r.net_gain:,.0f}（{_wan(r.net_gain)}）")
    s = r.subsidy_4050
    if s.eligible:
        print(f"  4050补贴: {s.subsidy_years:.1f}年 × {s.subsidy_rate:.0%} ≈ ¥{s.subsidy_amount:,.0f}")
    elif s.reason:
        print(f"  4050补贴: 不符合（{s.reason}）")
    print()


def _print_timeline(r: RetirementResult):
    timeline = build_timeline(r)
    print("【时间线】")
    for seg in timeline.segments:
        print(f"  {seg.start_age:>5.1f} → {seg.end_age:>5.1f}岁  {seg.label:<10} {seg.years:>5.1f}年 ({seg.share:.0%})")
    parts = [f"{m.year}年 {m.label}({m.age:.1f}岁)" for m in timeline.milestones]
    print("  " + " → ".join(parts))
    print()


def _print_comparisons(
    profile: Profile, quit_age: float, strategy: ContributionStrategy,
    claim_age: float, policy: PolicyParams,
):
    comparison = compare_quit_ages(profile, quit_age, strategy, claim_age, policy)
    if comparison is not None:
        print("【辞职年龄对比】")
        print("-" * 80)
        print(f"{'辞职年龄':<10} {'自费投入':>12} {'月养老金':>12} {'净收益(80岁)':>14}")
        print("-" * 80)
        for r in comparison.results:
            marks = []
            if r.quit_age == quit_age:
                marks.append("当前")
            if r is comparison.best:
                marks.append("最优")
            print(
                f"{r.quit_age:>6g}岁    "
                f"{_wan(r.total_flex_cost):>12} "
                f"{'¥' + format(round(r.monthly_pension), ','):>12} "
                f"{_wan(r.net_gain):>14}  {' '.join(marks)}"
            )
        print()

    print("【领取年龄对比】")
    print("-" * 80)
    for label, r in compare_claim_ages(profile, quit_age, strategy, policy).items():
        print(
            f"{CLAIM_LABELS[label]:<8} {r.actual_claim_age:>5.1f}岁  "
            f"月领 ¥{r.monthly_pension:>8,.0f}  净收益 {_wan(r.net_gain):>10}"
        )
    print()


def main():
    r, policy, _ = parse_args("北京辞职养老测算")
    try:
        profile = build_profile(r)
        strategy = ContributionStrategy(r["strategy"])
    except ValueError as e:
        print(f"输入错误: {e}", file=sys.stderr)
        raise SystemExit(1)

    quit_age = r["quit_age"]
    claim_age = r["claim_age"]
    errors = validate_profile(profile) + validate_scenario(quit_age, claim_age)
    if errors:
        for e in errors:
            print(f"输入错误: {e}", file=sys.stderr)
        raise SystemExit(1)

    result = compute_retirement(profile, quit_age, strategy, claim_age, policy)
    _print_header(profile, result)
    _print_result(result, policy)
    _print_timeline(result)
    _print_comparisons(profile, quit_age, strategy, result.actual_claim_age, policy)

    print("【建议】")
    for item in build_advice(profile, quit_age, strategy, claim_age, policy):
        print(f"  {ADVICE_MARKS[item.kind]} {item.title}")
        print(f"    {item.description}")


if __name__ == "__main__":
    main()
