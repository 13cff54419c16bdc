"""TOML config loader with CLI > config > default resolution."""

import argparse
import dataclasses
import sys
import tomllib
from pathlib import Path
from typing import Callable

from quit_sim_bj.params import DEFAULT_POLICY, Gender, Hukou, PolicyParams, Profile

DEFAULT_CONFIG_PATH = Path("config.toml")

DEFAULTS = {
    "birth_year": 1988,
    "birth_month": 6,
    "gender": "female",
    "hukou": "yes",
    "years_paid": 10.0,
    "balance": 80000.0,
    "quit_age": 45.0,
    "claim_age": None,  # None = 法定退休年龄
    "strategy": "full",
}


def load_config(path: Path | None = None) -> dict:
    """Load TOML config file. Returns empty dict if file doesn't exist."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        print(f"配置文件读取失败: {path}: {e}", file=sys.stderr)
        raise SystemExit(1)
    # Legacy key: stop_at_min_years = true → strategy = "min"
    if "stop_at_min_years" in raw:
        v = raw.pop("stop_at_min_years")
        raw.setdefault("strategy", "min" if v else "full")
    # Normalize hukou: TOML bool → "yes"/"no"
    if isinstance(raw.get("hukou"), bool):
        raw["hukou"] = "yes" if raw["hukou"] else "no"
    return raw


def build_policy(config: dict, base: PolicyParams = DEFAULT_POLICY) -> PolicyParams:
    """Apply the [policy] table of a config onto PolicyParams."""
    overrides = config.get("policy", {})
    known = {f.name for f in dataclasses.fields(PolicyParams)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ValueError(f"未知的政策参数: {', '.join(unknown)}")
    return dataclasses.replace(base, **overrides)


def create_parser(description: str) -> argparse.ArgumentParser:
    """Create argparse parser with shared profile/scenario flags."""
    d = DEFAULTS
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", type=Path, default=None, help="配置文件路径 (default: config.toml)")
    parser.add_argument("--birth-year", type=int, default=None, help=f"出生年份 (default: {d['birth_year']})")
    parser.add_argument("--birth-month", type=int, default=None, help=f"出生月份 1-12 (default: {d['birth_month']})")
    parser.add_argument("--gender", type=str, default=None, choices=[g.value for g in Gender], help=f"性别 (default: {d['gender']})")
    parser.add_argument("--hukou", type=str, default=None, choices=[h.value for h in Hukou], help=f"是否北京户籍 (default: {d['hukou']})")
    parser.add_argument("--years-paid", type=float, default=None, help=f"已缴养老保险年限 (default: {d['years_paid']})")
    parser.add_argument("--balance", type=float, default=None, help=f"个人账户余额・元 (default: {d['balance']:.0f})")
    parser.add_argument("--quit-age", type=float, default=None, help=f"计划辞职年龄 (default: {d['quit_age']})")
    parser.add_argument("--claim-age", type=float, default=None, help="领取养老金年龄 (default: 法定退休年龄)")
    parser.add_argument("--strategy", type=str, default=None, choices=["full", "min"], help="缴费策略: full=缴到退休, min=缴满即停 (default: full)")
    return parser


def resolve(args: argparse.Namespace, config: dict) -> dict:
    """Resolve values with priority: CLI flag > config.toml > hardcoded default."""
    resolved = {}
    for key, default in DEFAULTS.items():
        cli_val = getattr(args, key, None)
        resolved[key] = cli_val if cli_val is not None else config.get(key, default)
    return resolved


def build_profile(r: dict) -> Profile:
    """Build Profile from resolved config dict. Raises ValueError on unknown gender/hukou."""
    return Profile(
        birth_year=int(r["birth_year"]),
        birth_month=int(r["birth_month"]),
        gender=Gender(r["gender"]),
        hukou=Hukou(r["hukou"]),
        years_paid_now=float(r["years_paid"]),
        balance_now=float(r["balance"]),
    )


def parse_args(
    description: str,
    add_args_fn: Callable[[argparse.ArgumentParser], None] | None = None,
) -> tuple[dict, PolicyParams, argparse.Namespace]:
    """Parse CLI args, load config, resolve values.

    Returns (resolved_dict, policy, namespace).
    namespace: raw argparse.Namespace (for extra CLI args added via add_args_fn).
    """
    parser = create_parser(description)
    if add_args_fn:
        add_args_fn(parser)
    args = parser.parse_args()
    config = load_config(args.config)
    r = resolve(args, config)
    try:
        policy = build_policy(config)
    except (TypeError, ValueError) as e:
        print(f"配置文件错误: {e}", file=sys.stderr)
        raise SystemExit(1)
    return r, policy, args
