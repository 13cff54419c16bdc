"""Chart generation for retirement projection results."""

import platform
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

from quit_sim_bj.scenarios import QuitAgeComparison
from quit_sim_bj.timeline import Timeline

SEGMENT_COLORS = {
    "working": "#1f77b4",   # blue
    "flex_pay": "#ff7f0e",  # orange
    "waiting": "#7f7f7f",   # gray
}

COLOR_COST = "#d62728"
COLOR_GAIN = "#2ca02c"
COLOR_PENSION = "#9467bd"


def _setup_chinese_font():
    """Configure matplotlib to use a CJK font."""
    system = platform.system()
    if system == "Darwin":
        font_family = "PingFang SC"
    elif system == "Linux":
        font_family = "Noto Sans CJK SC"
    else:
        font_family = "Microsoft YaHei"
    plt.rcParams["font.family"] = font_family
    plt.rcParams["axes.unicode_minus"] = False


def _format_wan_axis(ax: plt.Axes):
    ax.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"{x / 10000:,.0f}万" if x != 0 else "0")
    )


def _save(fig: plt.Figure, output_path: Path, stem: str, name: str) -> Path:
    output_path.mkdir(parents=True, exist_ok=True)
    suffix = f"-{name}" if name else ""
    filepath = output_path / f"{stem}{suffix}.png"
    fig.tight_layout()
    fig.savefig(filepath, dpi=150)
    plt.close(fig)
    return filepath


def plot_timeline(timeline: Timeline, output_path: Path, name: str = "") -> Path:
    """Generate a horizontal bar of working / self-pay / waiting phases.

    Args:
        timeline: build_timeline() result.
        output_path: directory to save the PNG.
        name: optional suffix for the output filename (e.g. "45" → "timeline-45.png").

    Returns:
        Path to the generated PNG file.
    """
    _setup_chinese_font()

    fig, ax = plt.subplots(figsize=(12, 3))
    for seg in timeline.segments:
        color = SEGMENT_COLORS.get(seg.kind, "#7f7f7f")
        ax.barh(0, seg.years, left=seg.start_age, color=color, height=0.5,
                label=f"{seg.label} {seg.years:.1f}年")
        ax.text(seg.start_age + seg.years / 2, 0, f"{seg.share:.0%}",
                ha="center", va="center", color="white", fontsize=11)

    for m in timeline.milestones:
        ax.axvline(m.age, color="#444444", linewidth=0.8, linestyle=":")
        ax.annotate(
            f"{m.label}\n{m.year}年",
            xy=(m.age, 0.32), ha="center", va="bottom", fontsize=10,
        )

    ax.set_yticks([])
    ax.set_ylim(-0.5, 0.9)
    ax.set_xlabel("年龄")
    ax.set_title("从现在到领取养老金")
    ax.legend(loc="lower right", fontsize=9)
    return _save(fig, output_path, "timeline", name)


def plot_quit_age_comparison(
    comparison: QuitAgeComparison, output_path: Path, name: str = "",
) -> Path:
    """Generate grouped bars of self-funded cost and net gain per quit age,
    with monthly pension on a secondary axis."""
    _setup_chinese_font()

    fig, ax = plt.subplots(figsize=(10, 6))
    labels = [f"{r.quit_age:g}岁" for r in comparison.results]
    xs = list(range(len(comparison.results)))
    width = 0.38

    costs = [r.total_flex_cost for r in comparison.results]
    gains = [r.net_gain for r in comparison.results]
    ax.bar([x - width / 2 for x in xs], costs, width, label="自费投入", color=COLOR_COST)
    ax.bar([x + width / 2 for x in xs], gains, width, label="净收益", color=COLOR_GAIN)
    ax.set_xticks(xs)
    ax.set_xticklabels(labels)
    ax.set_xlabel("辞职年龄")
    ax.set_ylabel("金额（元）")
    ax.axhline(0, color="#333333", linewidth=0.8)
    _format_wan_axis(ax)
    ax.grid(True, axis="y", alpha=0.3)

    best_x = comparison.results.index(comparison.best)
    ax.annotate("最优", xy=(best_x + width / 2, comparison.best.net_gain),
                ha="center", va="bottom", fontsize=11, color=COLOR_GAIN)

    ax2 = ax.twinx()
    ax2.plot(xs, [r.monthly_pension for r in comparison.results],
             color=COLOR_PENSION, marker="o", linewidth=2, label="月养老金")
    ax2.set_ylabel("月养老金（元）")

    handles, names = ax.get_legend_handles_labels()
    handles2, names2 = ax2.get_legend_handles_labels()
    ax.legend(handles + handles2, names + names2, loc="upper left")
    ax.set_title("不同辞职年龄的投入与收益")
    return _save(fig, output_path, "quit-age-comparison", name)
