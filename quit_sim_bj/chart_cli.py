"""CLI entry point for chart generation."""

import sys
from pathlib import Path

from quit_sim_bj.charts import plot_quit_age_comparison, plot_timeline
from quit_sim_bj.config import build_profile, parse_args
from quit_sim_bj.params import validate_profile, validate_scenario
from quit_sim_bj.scenarios import compare_quit_ages
from quit_sim_bj.simulation import ContributionStrategy, compute_retirement
from quit_sim_bj.timeline import build_timeline


def _add_chart_args(parser):
    parser.add_argument(
        "--output", type=Path, default=Path("reports/charts"),
        help="输出目录 (default: reports/charts)",
    )
    parser.add_argument(
        "--name", type=str, default="",
        help="输出文件名后缀（例: 45 → timeline-45.png）",
    )


def main():
    r, policy, args = parse_args("北京辞职养老测算 图表生成", _add_chart_args)
    try:
        profile = build_profile(r)
        strategy = ContributionStrategy(r["strategy"])
    except ValueError as e:
        print(f"输入错误: {e}", file=sys.stderr)
        raise SystemExit(1)

    quit_age = r["quit_age"]
    errors = validate_profile(profile) + validate_scenario(quit_age, r["claim_age"])
    if errors:
        for e in errors:
            print(f"输入错误: {e}", file=sys.stderr)
        raise SystemExit(1)

    print(f"测算（{quit_age:g}岁辞职，{strategy.label}）...", file=sys.stderr)
    result = compute_retirement(profile, quit_age, strategy, r["claim_age"], policy)

    path = plot_timeline(build_timeline(result), args.output, name=args.name)
    print(f"  → {path}", file=sys.stderr)

    comparison = compare_quit_ages(profile, quit_age, strategy, result.actual_claim_age, policy)
    if comparison is not None:
        path = plot_quit_age_comparison(comparison, args.output, name=args.name)
        print(f"  → {path}", file=sys.stderr)
    else:
        print("  对比: 没有可比较的辞职年龄", file=sys.stderr)

    print("完成", file=sys.stderr)


if __name__ == "__main__":
    main()
