"""Tests for Profile, PolicyParams and input validation."""

import dataclasses

import pytest
from quit_sim_bj.params import (
    Gender,
    Hukou,
    PolicyParams,
    Profile,
    validate_profile,
    validate_scenario,
)

VALID = Profile(
    birth_year=1988, birth_month=6, gender=Gender.FEMALE, hukou=Hukou.YES,
    years_paid_now=10, balance_now=80000,
)


class TestPolicyParams:
    def setup_method(self):
        self.policy = PolicyParams()

    def test_flex_monthly_by_hukou(self):
        assert self.policy.flex_monthly(Hukou.YES) == 1800
        assert self.policy.flex_monthly(Hukou.NO) == 2800

    def test_pay_method(self):
        assert self.policy.pay_method(Hukou.YES) == "灵活就业"
        assert self.policy.pay_method(Hukou.NO) == "公司代缴"

    def test_monthly_to_account(self):
        """6326 × 8%"""
        assert self.policy.monthly_to_account() == pytest.approx(506.08)

    def test_medical_years(self):
        assert self.policy.medical_years(Gender.FEMALE) == 20
        assert self.policy.medical_years(Gender.MALE) == 25

    def test_subsidy_age(self):
        assert self.policy.subsidy_age(Gender.FEMALE) == 40
        assert self.policy.subsidy_age(Gender.MALE) == 50

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            self.policy.min_wage_base = 7000


class TestEnums:
    def test_parse_values(self):
        assert Gender("female") is Gender.FEMALE
        assert Hukou("no") is Hukou.NO

    def test_unknown_value_raises(self):
        with pytest.raises(ValueError):
            Gender("x")
        with pytest.raises(ValueError):
            Hukou("maybe")


class TestValidateProfile:
    def test_valid(self):
        assert validate_profile(VALID) == []

    def test_zero_years_paid(self):
        errors = validate_profile(dataclasses.replace(VALID, years_paid_now=0))
        assert len(errors) == 1
        assert "已缴年限" in errors[0]

    def test_negative_balance(self):
        errors = validate_profile(dataclasses.replace(VALID, balance_now=-1))
        assert len(errors) == 1
        assert "余额" in errors[0]

    def test_bad_month(self):
        errors = validate_profile(dataclasses.replace(VALID, birth_month=13))
        assert len(errors) == 1
        assert "月份" in errors[0]

    def test_bad_year(self):
        errors = validate_profile(dataclasses.replace(VALID, birth_year=1800))
        assert len(errors) == 1
        assert "出生年份" in errors[0]

    def test_multiple_errors(self):
        bad = dataclasses.replace(VALID, years_paid_now=0, balance_now=0, birth_month=0)
        assert len(validate_profile(bad)) == 3


class TestValidateScenario:
    def test_valid(self):
        assert validate_scenario(45) == []
        assert validate_scenario(45, 52.6) == []

    def test_non_positive_quit_age(self):
        assert len(validate_scenario(0)) == 1

    def test_non_positive_claim_age(self):
        assert len(validate_scenario(45, -1)) == 1
