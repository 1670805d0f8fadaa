#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd
import matplotlib
# Default to a non-interactive backend unless the caller picked one
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

# Okabe–Ito colors (color-blind friendly)
COLORS = {"binary": "#0072B2", "binary_ref": "#E69F00", "puzzle": "#009E73"}
MARKERS = {"binary": "o", "binary_ref": "^", "puzzle": "s"}


def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)


def load_results(paths: List[Path]) -> pd.DataFrame:
    frames = []
    for p in paths:
        df = pd.read_csv(p)
        need = {"space", "path_len", "time_sec", "expanded", "duplicates", "found", "termination"}
        if not need.issubset(df.columns):
            raise ValueError(f"{p}: missing columns {sorted(need - set(df.columns))}")
        frames.append(df)
    if not frames:
        return pd.DataFrame()
    return pd.concat(frames, ignore_index=True)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Per-space runtime/expansion summary across all runs."""
    return (df.groupby("space", as_index=False)
              .agg(runs=("time_sec", "count"),
                   found=("found", "mean"),
                   time_mean=("time_sec", "mean"),
                   time_median=("time_sec", "median"),
                   exp_mean=("expanded", "mean"),
                   dup_mean=("duplicates", "mean"))
              .sort_values("space")
              .reset_index(drop=True))


def agg_curves(df: pd.DataFrame, space: str) -> pd.DataFrame:
    part = df[(df["space"] == space) & (df["termination"] == "ok")]
    if part.empty:
        return pd.DataFrame(columns=["path_len", "time_mean", "time_sem", "exp_mean", "exp_sem", "n"])
    g = (part.groupby("path_len", as_index=False)
             .agg(time_mean=("time_sec", "mean"),
                  time_sem =("time_sec", sem),
                  exp_mean =("expanded", "mean"),
                  exp_sem  =("expanded", sem),
                  n=("time_sec", "count")))
    return g.sort_values("path_len").reset_index(drop=True)


def plot_curves(df: pd.DataFrame, out: Path) -> Path:
    fig, (ax_t, ax_e) = plt.subplots(1, 2, figsize=(10.5, 4.2))
    for space in sorted(df["space"].unique()):
        g = agg_curves(df, space)
        if g.empty:
            continue
        style = dict(label=space, color=COLORS.get(space), marker=MARKERS.get(space, "o"),
                     lw=2, capsize=3)
        ax_t.errorbar(g["path_len"], g["time_mean"], yerr=g["time_sem"], **style)
        ax_e.errorbar(g["path_len"], g["exp_mean"], yerr=g["exp_sem"], **style)

    ax_t.set_ylabel("Time (s)")
    ax_e.set_ylabel("Expanded states")
    for ax in (ax_t, ax_e):
        ax.set_xlabel("Path length")
        ax.grid(True, alpha=0.25, ls=":")

    handles, labels = ax_t.get_legend_handles_labels()
    if handles:
        fig.legend(handles, labels, loc="upper center", ncol=len(labels), frameon=False)
    fig.suptitle("DFS runtime and expansions by solution length", y=0.995)
    fig.tight_layout(rect=[0, 0, 1, 0.92])

    out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out, dpi=150)
    plt.close(fig)
    return out


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Summarize and plot runner CSVs")
    ap.add_argument("--inputs", type=Path, nargs="+", required=True)
    ap.add_argument("--out_dir", type=Path, default=Path("report/figs"))
    args = ap.parse_args(argv)

    df = load_results(args.inputs)
    if df.empty:
        print("No rows to plot")
        return 1

    print(summarize(df).to_string(index=False))
    out = plot_curves(df, args.out_dir / "time_by_path_len.png")
    print("Saved", out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
