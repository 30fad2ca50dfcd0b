#!/usr/bin/env python3
"""
Plot a named distribution shape next to its empirical re-estimation.
"""
import argparse

import numpy as np
import matplotlib.pyplot as plt

from dist_lib.config import load_settings
from dist_lib.distribution import Distribution
from dist_lib.logging import get_logger

SHAPES = ["uniform", "dirac", "exponential", "linear", "zeta", "two-step"]

USAGE_EXAMPLES = """
examples:
  # Zipf-like key popularity over 100 keys
  python plot_distribution.py zeta --width 100 --exponent 1.0 --shift 1.0

  # Exponential decay, reproducible, saved to a file
  python plot_distribution.py exponential --width 50 --lam 0.9 --seed 1 --save exp.png

  # 12.5 equally likely outcomes out of 20
  python plot_distribution.py two-step --width 20 --spread 12.5
"""


def build_distribution(args, rng=None):
    """Create the distribution selected on the command line."""
    if args.shape == "uniform":
        return Distribution.uniform(args.width, rng=rng)
    if args.shape == "dirac":
        return Distribution.dirac(args.width, rng=rng)
    if args.shape == "exponential":
        return Distribution.exponential(args.lam, args.width, rng=rng)
    if args.shape == "linear":
        return Distribution.linear(int(args.spread), args.width, rng=rng)
    if args.shape == "zeta":
        return Distribution.zeta(args.exponent, args.shift, args.width, rng=rng)
    return Distribution.two_step(args.spread, args.width, rng=rng)


def plot_distribution(distribution, sample_size, title, save_path=None):
    """Plot the analytic probabilities and the empirical (unordered) frequencies.

    Args:
        distribution: Distribution to plot
        sample_size: Number of samples drawn for the empirical estimate
        title: Plot title
        save_path: Path to save the plot (optional)
    """
    outcomes = np.arange(1, distribution.width + 1)
    frequencies = distribution.unordered_empiric(sample_size)

    fig, (ax_pmf, ax_cdf) = plt.subplots(1, 2, figsize=(14, 6))

    bar_width = 0.4
    ax_pmf.bar(outcomes - bar_width / 2, distribution.probabilities, width=bar_width,
               label='probability', color='steelblue')
    ax_pmf.bar(outcomes + bar_width / 2, frequencies, width=bar_width,
               label=f'empiric (n={sample_size})', color='orange', alpha=0.8)
    ax_pmf.set_xlabel('Outcome', fontsize=12)
    ax_pmf.set_ylabel('Probability', fontsize=12)
    ax_pmf.legend(fontsize=10)
    ax_pmf.grid(True, alpha=0.3)

    ax_cdf.step(outcomes, distribution.aggregated, where='post', label='cumulative', linewidth=2)
    ax_cdf.step(outcomes, np.cumsum(frequencies), where='post', label='empiric cumulative',
                linewidth=2, linestyle='--')
    ax_cdf.set_xlabel('Outcome', fontsize=12)
    ax_cdf.set_ylim(0, 1.05)
    ax_cdf.legend(fontsize=10, loc='lower right')
    ax_cdf.grid(True, alpha=0.3)

    fig.suptitle(title, fontsize=14)

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')
        print(f"Plot saved to {save_path}")

    plt.show()


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Plot a discrete distribution shape and its empirical estimate',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=USAGE_EXAMPLES
    )
    parser.add_argument('shape', choices=SHAPES, help='Distribution shape')
    parser.add_argument('--width', type=int, default=20,
                        help='Number of outcomes (default: 20)')
    parser.add_argument('--lam', type=float, default=0.8,
                        help='Decay factor for exponential (default: 0.8)')
    parser.add_argument('--spread', type=float, default=5.0,
                        help='Spread for linear and two-step (default: 5)')
    parser.add_argument('--exponent', type=float, default=1.0,
                        help='Exponent for zeta (default: 1.0)')
    parser.add_argument('--shift', type=float, default=1.0,
                        help='Shift for zeta (default: 1.0)')
    parser.add_argument('--samples', type=int, default=10000,
                        help='Sample size of the empirical estimate (default: 10000)')
    parser.add_argument('--seed', type=int,
                        help='Random seed (default: DIST_LIB_SEED, if set)')
    parser.add_argument('--save', help='Path to save the plot (optional)')
    return parser.parse_args()


def main():
    args = parse_args()
    settings = load_settings()
    logger = get_logger()

    try:
        rng = np.random.default_rng(args.seed) if args.seed is not None else settings.make_rng()
        distribution = build_distribution(args, rng=rng)
    except ValueError as e:
        logger.error({"event": "invalid_arguments", "shape": args.shape, "error": str(e)})
        raise SystemExit(f"Error: {e}")

    print(f"Distribution: {args.shape}, width {distribution.width}")
    print(f"Most likely outcome: 1 (p={distribution.get(1):.4f})")
    print(f"Mean outcome: {distribution.expectation(float):.2f}")

    plot_distribution(distribution, args.samples, f"{args.shape} distribution (width {distribution.width})",
                      args.save)


if __name__ == "__main__":
    main()
