"""Tests for config loading and CLI > config > default resolution."""

from pathlib import Path

import pytest
from quit_sim_bj.config import (
    DEFAULTS,
    build_policy,
    build_profile,
    create_parser,
    load_config,
    resolve,
)
from quit_sim_bj.params import DEFAULT_POLICY, Gender, Hukou


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_missing_file(self, tmp_path):
        assert load_config(tmp_path / "nope.toml") == {}

    def test_basic_values(self, tmp_path):
        path = _write(tmp_path, 'birth_year = 1975\ngender = "male"\nquit_age = 55\n')
        config = load_config(path)
        assert config["birth_year"] == 1975
        assert config["gender"] == "male"
        assert config["quit_age"] == 55

    def test_legacy_stop_at_min_years(self, tmp_path):
        path = _write(tmp_path, "stop_at_min_years = true\n")
        config = load_config(path)
        assert config["strategy"] == "min"
        assert "stop_at_min_years" not in config

    def test_strategy_wins_over_legacy_key(self, tmp_path):
        path = _write(tmp_path, 'strategy = "full"\nstop_at_min_years = true\n')
        assert load_config(path)["strategy"] == "full"

    def test_bool_hukou(self, tmp_path):
        path = _write(tmp_path, "hukou = false\n")
        assert load_config(path)["hukou"] == "no"

    def test_malformed_toml_exits(self, tmp_path, capsys):
        path = _write(tmp_path, "birth_year = = 1\n")
        with pytest.raises(SystemExit):
            load_config(path)
        assert "配置文件读取失败" in capsys.readouterr().err


class TestResolve:
    def setup_method(self):
        self.parser = create_parser("test")

    def test_defaults(self):
        r = resolve(self.parser.parse_args([]), {})
        assert r == DEFAULTS

    def test_config_over_default(self):
        r = resolve(self.parser.parse_args([]), {"quit_age": 50})
        assert r["quit_age"] == 50

    def test_cli_over_config(self):
        args = self.parser.parse_args(["--quit-age", "48", "--strategy", "min"])
        r = resolve(args, {"quit_age": 50, "strategy": "full"})
        assert r["quit_age"] == 48
        assert r["strategy"] == "min"

    def test_invalid_choice_rejected(self):
        with pytest.raises(SystemExit):
            self.parser.parse_args(["--gender", "other"])


class TestBuildProfile:
    def test_from_defaults(self):
        profile = build_profile(dict(DEFAULTS))
        assert profile.birth_year == 1988
        assert profile.gender is Gender.FEMALE
        assert profile.hukou is Hukou.YES
        assert profile.years_paid_now == 10
        assert profile.balance_now == 80000

    def test_unknown_gender_raises(self):
        r = dict(DEFAULTS, gender="other")
        with pytest.raises(ValueError):
            build_profile(r)


class TestBuildPolicy:
    def test_no_policy_table(self):
        assert build_policy({}) == DEFAULT_POLICY

    def test_override(self):
        policy = build_policy({"policy": {"min_wage_base": 7162, "avg_social_wage": 15000}})
        assert policy.min_wage_base == 7162
        assert policy.avg_social_wage == 15000
        assert policy.flex_monthly_local == DEFAULT_POLICY.flex_monthly_local

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError, match="min_wage"):
            build_policy({"policy": {"min_wage": 7000}})
