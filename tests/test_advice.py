"""Tests for rule-based advice."""

from datetime import date

from quit_sim_bj.advice import build_advice
from quit_sim_bj.params import Gender, Hukou, Profile
from quit_sim_bj.simulation import ContributionStrategy

TODAY = date(2026, 10, 18)

FEMALE_LOCAL = Profile(
    birth_year=1988, birth_month=6, gender=Gender.FEMALE, hukou=Hukou.YES,
    years_paid_now=10, balance_now=80000,
)


class TestFreeTimeValue:
    def setup_method(self):
        self.advice = build_advice(
            FEMALE_LOCAL, 45, ContributionStrategy.PAY_THROUGH, today=TODAY,
        )

    def test_working_longer_pays_more(self):
        """38岁立刻辞职 vs 45岁辞职: 净收益差为正"""
        assert self.advice[0].title == "你的自由时间值多少钱？"
        assert self.advice[0].kind == "default"
        assert "45 岁" in self.advice[0].description

    def test_small_pension_diff_not_reported(self):
        """月养老金差 < 100元 → 不单独提示"""
        assert not any(a.title.startswith("月养老金差") for a in self.advice)

    def test_chosen_strategy_confirmed(self):
        assert self.advice[1].title == "你选的缴费策略正确"
        assert self.advice[1].kind == "success"

    def test_no_warnings(self):
        assert all(a.kind != "warning" for a in self.advice)


class TestStrategySwitch:
    def test_suggests_pay_through(self):
        advice = build_advice(
            FEMALE_LOCAL, 45, ContributionStrategy.STOP_AT_MINIMUM, today=TODAY,
        )
        titles = [a.title for a in advice]
        assert '换成"缴到退休"更划算' in titles


class TestWarnings:
    def test_pension_and_medical_shortfall(self):
        profile = Profile(
            birth_year=1970, birth_month=3, gender=Gender.MALE, hukou=Hukou.YES,
            years_paid_now=15, balance_now=150000,
        )
        advice = build_advice(profile, 58, today=TODAY)
        warnings = [a for a in advice if a.kind == "warning"]
        assert [a.title for a in warnings] == [
            "注意：养老保险年限不足",
            "医保需补缴 5.2 年",
        ]
        assert "0.2 年" in warnings[0].description or "0.3 年" in warnings[0].description


class TestFallback:
    def test_hint_when_nothing_to_compare(self):
        """已过领取年龄, 两种策略无差别, 年限充足 → 提示调整年龄"""
        profile = Profile(
            birth_year=1970, birth_month=3, gender=Gender.FEMALE, hukou=Hukou.YES,
            years_paid_now=25, balance_now=200000,
        )
        advice = build_advice(profile, 56, today=TODAY)
        assert len(advice) == 1
        assert advice[0].title == "试试调整辞职年龄看看变化"
