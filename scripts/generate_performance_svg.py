#!/usr/bin/env python3
"""
Generate a log-log performance comparison SVG from the timings written by
`sequential_counting.py --json` or `mpi_counting.py --json`. No external
dependencies required.

Usage:
    python scripts/generate_performance_svg.py docs/timings.json docs/img/performance_comparison.svg
"""

import argparse
import json
import math
from pathlib import Path
from typing import Dict, List, Tuple

Series = List[Tuple[int, float]]

PALETTE = ["#d62728", "#1f77b4", "#2ca02c", "#ff7f0e", "#9467bd", "#8c564b"]


def log10(x: float) -> float:
    if x <= 0:
        raise ValueError("Values must be positive for log10 axis")
    return math.log10(x)


def load_rows(path: Path) -> Dict[str, Series]:
    """Group benchmark rows by algorithm into (n, seconds) series sorted by n."""
    data: Dict[str, Series] = {}
    for row in json.loads(path.read_text()):
        data.setdefault(row["algorithm"], []).append((int(row["n"]), float(row["seconds"])))
    for series in data.values():
        series.sort()
    return data


def render_svg(data: Dict[str, Series], title: str = "Counting Sort Performance (log-log)") -> str:
    if not data or not any(data.values()):
        raise ValueError("No timings to plot")
    colors = {name: PALETTE[i % len(PALETTE)] for i, name in enumerate(data)}

    # Axis ranges on log-log scale; zero timings are clamped to a microsecond
    points = [(n, max(t, 1e-6)) for series in data.values() for n, t in series]
    x_min = log10(min(n for n, _ in points))
    x_max = log10(max(n for n, _ in points))
    if x_max == x_min:
        x_max += 1
    y_min = min(log10(t) for _, t in points)
    y_max = max(log10(t) for _, t in points)
    y_pad = 0.2
    y_min -= y_pad
    y_max += y_pad

    width, height = 900, 560
    margin_left, margin_bottom, margin_top, margin_right = 120, 80, 60, 40

    def scale_x(n: float) -> float:
        return margin_left + (log10(n) - x_min) / (x_max - x_min) * (width - margin_left - margin_right)

    def scale_y(t: float) -> float:
        t = max(t, 1e-6)
        return height - margin_bottom - (log10(t) - y_min) / (y_max - y_min) * (height - margin_bottom - margin_top)

    parts = []
    parts.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">')
    parts.append('<style>text { font-family: sans-serif; font-size: 13px; }</style>')

    # Axes
    x0, y0 = margin_left, height - margin_bottom
    x1, y1 = width - margin_right, height - margin_bottom
    parts.append(f'<line x1="{x0}" y1="{y0}" x2="{x1}" y2="{y1}" stroke="black" stroke-width="1.5" />')
    parts.append(f'<line x1="{x0}" y1="{margin_top}" x2="{x0}" y2="{y0}" stroke="black" stroke-width="1.5" />')

    # X ticks (the measured input sizes)
    for n in sorted({n for n, _ in points}):
        x = scale_x(n)
        parts.append(f'<line x1="{x}" y1="{y0}" x2="{x}" y2="{y0 + 6}" stroke="black" />')
        parts.append(f'<text x="{x}" y="{y0 + 24}" text-anchor="middle">{n:,}</text>')

    # Y ticks (times, logarithmic)
    for exponent in range(math.floor(y_min), math.ceil(y_max) + 1):
        t = 10.0 ** exponent
        if log10(t) < y_min or log10(t) > y_max:
            continue
        y = scale_y(t)
        parts.append(f'<line x1="{x0 - 6}" y1="{y}" x2="{x0}" y2="{y}" stroke="black" />')
        parts.append(f'<text x="{x0 - 10}" y="{y + 4}" text-anchor="end">{t:g}s</text>')

    parts.append(f'<text x="{width/2}" y="{margin_top - 20}" text-anchor="middle" font-size="18">{title}</text>')
    parts.append(f'<text x="{(x0 + x1)/2}" y="{height - 20}" text-anchor="middle">Input size (n)</text>')
    parts.append(f'<text x="25" y="{(margin_top + y0)/2}" text-anchor="middle" transform="rotate(-90 25 {(margin_top + y0)/2})">Time (seconds, log scale)</text>')

    for name, series in data.items():
        color = colors[name]
        coords = [f"{scale_x(n):.2f},{scale_y(t):.2f}" for n, t in series]
        parts.append(f'<polyline fill="none" stroke="{color}" stroke-width="2" points="{" ".join(coords)}" />')
        for n, t in series:
            parts.append(
                f'<circle cx="{scale_x(n):.2f}" cy="{scale_y(t):.2f}" r="4" fill="{color}" stroke="white" stroke-width="1.5">'
                f'<title>{name}: n={n:,}, t={t:.3f}s</title></circle>'
            )

    # Legend
    legend_x, legend_y = width - margin_right - 240, margin_top + 10
    line_height = 22
    parts.append(f'<rect x="{legend_x - 10}" y="{legend_y - 14}" width="230" height="{len(data)*line_height + 10}" fill="#f8f8f8" stroke="#ccc" />')
    for i, (name, color) in enumerate(colors.items()):
        y = legend_y + i * line_height
        parts.append(f'<line x1="{legend_x}" y1="{y}" x2="{legend_x + 24}" y2="{y}" stroke="{color}" stroke-width="3" />')
        parts.append(f'<circle cx="{legend_x + 12}" cy="{y}" r="4" fill="{color}" stroke="white" stroke-width="1.5" />')
        parts.append(f'<text x="{legend_x + 36}" y="{y + 5}" >{name}</text>')

    parts.append("</svg>")
    return "\n".join(parts)


def main() -> None:
    parser = argparse.ArgumentParser(description="Plot counting sort timings as SVG")
    parser.add_argument("timings", type=Path, help="JSON file written with --json.")
    parser.add_argument("output", type=Path, nargs="?", default=Path("docs/img/performance_comparison.svg"))
    args = parser.parse_args()

    out_path = args.output
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(render_svg(load_rows(args.timings)))
    print(f"Wrote {out_path} from {args.timings}.")


if __name__ == "__main__":
    main()
